import dataclasses
import logging
import typing

import aiohttp

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 4096


def split_text(text: str, max_length: int = MAX_MESSAGE_LENGTH) -> list[str]:
    """Split text into chunks no longer than `max_length`, cutting on line boundaries where possible."""
    chunks: list[str] = []
    current = ""
    for line in text.splitlines(keepends=True):
        while len(line) > max_length:
            if current:
                chunks.append(current)
                current = ""
            chunks.append(line[:max_length])
            line = line[max_length:]

        if len(current) + len(line) > max_length:
            chunks.append(current)
            current = ""
        current += line

    if current:
        chunks.append(current)

    return [chunk.rstrip("\n") for chunk in chunks]


@dataclasses.dataclass(frozen=True)
class SendMessageRequest:
    chat_id: str
    text: str
    parse_mode: str = "HTML"
    disable_web_page_preview: bool = True

    @property
    def method(self) -> str:
        return "POST"

    @property
    def path(self) -> str:
        return "/sendMessage"

    @property
    def payload(self) -> dict[str, typing.Any]:
        return {
            "chat_id": self.chat_id,
            "text": self.text,
            "parse_mode": self.parse_mode,
            "disable_web_page_preview": self.disable_web_page_preview,
        }


@dataclasses.dataclass(frozen=True)
class RestTelegramClient:
    aiohttp_client: aiohttp.ClientSession
    token: str

    class BaseError(Exception): ...

    class SendMessageError(BaseError): ...

    @classmethod
    def from_token(cls, token: str, timeout: int = 30) -> typing.Self:
        aiohttp_client = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=timeout))
        return cls(aiohttp_client=aiohttp_client, token=token)

    async def dispose(self) -> None:
        await self.aiohttp_client.close()

    def _prepare_url(self, path: str) -> str:
        return f"https://api.telegram.org/bot{self.token}{path}"

    async def send_message(self, request: SendMessageRequest) -> None:
        logger.debug("Sending message to chat(%s) of length(%d)", request.chat_id, len(request.text))
        try:
            async with self.aiohttp_client.request(
                method=request.method,
                url=self._prepare_url(request.path),
                json=request.payload,
            ) as response:
                response.raise_for_status()
        except (aiohttp.ClientError, TimeoutError) as e:
            logger.error("Failed to send message to chat(%s): %s", request.chat_id, e)
            raise self.SendMessageError(f"Failed to send message: {e}") from e


__all__ = [
    "MAX_MESSAGE_LENGTH",
    "RestTelegramClient",
    "SendMessageRequest",
    "split_text",
]

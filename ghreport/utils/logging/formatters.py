import logging
import re

_SECRETS: dict[str, str] = dict()  # value: replace_value
_pattern: re.Pattern[str] | None = None


def register_secret(value: str, replace_value: str) -> None:
    global _pattern

    if value == "":
        return

    _SECRETS[value] = replace_value
    # Longest first, so a secret containing another one is masked as a whole
    _pattern = re.compile("|".join(re.escape(secret) for secret in sorted(_SECRETS, key=len, reverse=True)))


def mask_secrets(message: str) -> str:
    if _pattern is None:
        return message

    return _pattern.sub(lambda match: f"***{_SECRETS[match.group(0)]}***", message)


class SecretMaskingFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        return mask_secrets(super().format(record))


__all__ = [
    "SecretMaskingFormatter",
    "mask_secrets",
    "register_secret",
]

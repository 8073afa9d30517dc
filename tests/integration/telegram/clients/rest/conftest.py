import typing

import pytest
import pytest_asyncio

import ghreport.telegram.clients as telegram_clients
import tests.settings as test_settings


@pytest_asyncio.fixture(name="telegram_client")
async def telegram_client_fixture(
    settings: test_settings.Settings,
) -> typing.AsyncGenerator[telegram_clients.RestTelegramClient, None]:
    if not settings.telegram_token or not settings.telegram_chat_id:
        pytest.skip("GHREPORT_TEST_TELEGRAM_TOKEN and GHREPORT_TEST_TELEGRAM_CHAT_ID are not set")

    client = telegram_clients.RestTelegramClient.from_token(token=settings.telegram_token)
    try:
        yield client
    finally:
        await client.dispose()

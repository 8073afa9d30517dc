import pydantic_settings

import ghreport.utils.pydantic as pydantic_utils


class Settings(pydantic_utils.BaseSettings):
    github_token: str | None = None
    github_organization: str = "python"

    telegram_token: str | None = None
    telegram_chat_id: str | None = None

    model_config = pydantic_settings.SettingsConfigDict(env_prefix="GHREPORT_TEST_")


__all__ = [
    "Settings",
]

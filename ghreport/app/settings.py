import os
import warnings

import pydantic
import pydantic_settings

import ghreport.github.clients as github_clients
import ghreport.report.formatting as report_formatting
import ghreport.report.models as report_models
import ghreport.report.report as report_report
import ghreport.utils.logging as logging_utils


class AppSettings(pydantic_settings.BaseSettings):
    env: str = "production"
    debug: bool = False

    @property
    def is_development(self) -> bool:
        return self.env == "development"

    @property
    def is_debug(self) -> bool:
        if not self.is_development:
            warnings.warn("APP_DEBUG is True in non-development environment", UserWarning)

        return self.debug


class LoggingSettings(pydantic_settings.BaseSettings):
    level: logging_utils.LogLevel = "INFO"
    format: str = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


class GithubSettings(pydantic_settings.BaseSettings):
    token: str
    url: str = github_clients.GITHUB_GRAPHQL_URL
    request_timeout: int = 30


class ReportSettings(pydantic_settings.BaseSettings):
    organization: str
    duration_days: int = pydantic.Field(default=report_report.DEFAULT_DURATION_DAYS, ge=0)
    listing_policy: report_models.RepositoryListingPolicy = report_models.RepositoryListingPolicy.BOUNDED_RECENT
    highlights: int = pydantic.Field(default=report_formatting.DEFAULT_HIGHLIGHTS, ge=1)


class TelegramSettings(pydantic_settings.BaseSettings):
    token: str
    chat_id: str
    max_title_length: int = 100


class Settings(pydantic_settings.BaseSettings):
    app: AppSettings = pydantic.Field(default_factory=AppSettings)
    logs: LoggingSettings = pydantic.Field(default_factory=LoggingSettings)
    github: GithubSettings
    report: ReportSettings
    telegram: TelegramSettings | None = None

    model_config = pydantic_settings.SettingsConfigDict(
        env_prefix="GHREPORT_",
        env_nested_delimiter="__",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[pydantic_settings.BaseSettings],
        init_settings: pydantic_settings.PydanticBaseSettingsSource,
        env_settings: pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: pydantic_settings.PydanticBaseSettingsSource,
        file_secret_settings: pydantic_settings.PydanticBaseSettingsSource,
    ) -> tuple[pydantic_settings.PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            pydantic_settings.YamlConfigSettingsSource(
                settings_cls,
                yaml_file=os.environ.get("GHREPORT_SETTINGS_YAML", None),
            ),
        )


__all__ = [
    "AppSettings",
    "GithubSettings",
    "LoggingSettings",
    "ReportSettings",
    "Settings",
    "TelegramSettings",
]

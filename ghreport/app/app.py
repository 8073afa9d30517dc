import dataclasses
import logging
import typing

import ghreport.app.errors as app_errors
import ghreport.app.settings as app_settings
import ghreport.report as report
import ghreport.telegram.clients as telegram_clients
import ghreport.utils.logging as logging_utils

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class TelegramDelivery:
    client: telegram_clients.RestTelegramClient
    chat_id: str
    max_title_length: int = 100


@dataclasses.dataclass(frozen=True)
class Application:
    activity_report: report.ActivityReport
    highlights: int
    telegram: TelegramDelivery | None = None
    printer: typing.Callable[[str], None] = print

    @classmethod
    def from_settings(cls, settings: app_settings.Settings) -> typing.Self:
        log_level = "DEBUG" if settings.app.is_debug else settings.logs.level
        logging_config = logging_utils.create_config(
            log_level=log_level,
            log_format=settings.logs.format,
            loggers={
                "gql": logging_utils.LoggerConfig(
                    propagate=False,
                    level="WARNING",
                ),
            },
        )
        logging_utils.initialize(config=logging_config)
        logger.info("Logging has been initialized with config: %s", logging_config)

        logging_utils.register_secret(value=settings.github.token, replace_value="GITHUB TOKEN")

        logger.info("Initializing application")

        activity_report = report.ActivityReport(
            organization=settings.report.organization,
            token=settings.github.token,
            duration_days=settings.report.duration_days,
            listing_policy=settings.report.listing_policy,
            log_sink=logger.info,
            github_url=settings.github.url,
            request_timeout=settings.github.request_timeout,
        )

        telegram = None
        if settings.telegram is not None:
            logging_utils.register_secret(value=settings.telegram.token, replace_value="TELEGRAM TOKEN")
            telegram = TelegramDelivery(
                client=telegram_clients.RestTelegramClient.from_token(token=settings.telegram.token),
                chat_id=settings.telegram.chat_id,
                max_title_length=settings.telegram.max_title_length,
            )
            logger.info("Telegram delivery has been initialized")
        else:
            logger.info("Telegram is not configured, report will be printed")

        logger.info("Initializing application finished")

        return cls(
            activity_report=activity_report,
            highlights=settings.report.highlights,
            telegram=telegram,
        )

    @property
    def header(self) -> str:
        return (
            f"Here is your GitHub report for {self.activity_report.organization} "
            f"(last {self.activity_report.duration_days} days)"
        )

    async def _deliver(self, sections: list[report.Section]) -> None:
        if self.telegram is None:
            self.printer(report.render_text(sections, header=self.header))
            return

        text = report.render_html(
            sections,
            header=self.header,
            max_title_length=self.telegram.max_title_length,
        )
        for chunk in telegram_clients.split_text(text):
            await self.telegram.client.send_message(
                request=telegram_clients.SendMessageRequest(
                    chat_id=self.telegram.chat_id,
                    text=chunk,
                ),
            )

    async def start(self) -> None:
        logger.info("Application is starting")
        try:
            await self.activity_report.run()
        except report.ReportError as run_error:
            logger.error("Report generation has failed: %s", run_error.message)
            raise app_errors.ReportRunError("Report generation has failed, see logs above") from run_error

        sections = report.build_summary(self.activity_report, highlights=self.highlights)
        try:
            await self._deliver(sections)
        except telegram_clients.RestTelegramClient.BaseError as delivery_error:
            logger.error("Report delivery has failed")
            raise app_errors.DeliveryError("Report delivery has failed, see logs above") from delivery_error

        logger.info("Report generated for %s", self.activity_report.organization)

    async def dispose(self) -> None:
        logger.info("Application is shutting down...")
        if self.telegram is not None:
            try:
                await self.telegram.client.dispose()
            except Exception as dispose_error:
                logger.error("Application has shut down with errors")
                raise app_errors.DisposeError("Application has shut down with errors") from dispose_error

        logger.info("Application has successfully shut down")


__all__ = [
    "Application",
    "TelegramDelivery",
]

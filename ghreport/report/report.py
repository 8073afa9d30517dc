import datetime
import logging

import ghreport.github.clients as github_clients
import ghreport.github.models as github_models
import ghreport.github.protocols as github_protocols
import ghreport.report.classifier as report_classifier
import ghreport.report.errors as report_errors
import ghreport.report.models as report_models
import ghreport.utils.logging as logging_utils

logger = logging.getLogger(__name__)

DEFAULT_DURATION_DAYS = 7
EXHAUSTIVE_LISTING_PAGE_SIZE = 50
BOUNDED_RECENT_LISTING_SIZE = 10
ACTIVITY_PAGE_SIZE = 50


class ActivityReport:
    """
    Pull request activity of an organization over the last `duration_days` days.

    `run` lists the organization repositories according to `listing_policy`,
    fetches them one after another and classifies their pull requests into
    `result`. Any failing request aborts the whole run, `result` must not be
    relied on after a failure. Each run starts from empty buckets.
    """

    def __init__(
        self,
        organization: github_models.OrganizationName,
        token: str,
        duration_days: int = DEFAULT_DURATION_DAYS,
        listing_policy: report_models.RepositoryListingPolicy = report_models.RepositoryListingPolicy.BOUNDED_RECENT,
        log_sink: logging_utils.LogSink = logging_utils.null_sink,
        github_client: github_protocols.GithubReportClientProtocol | None = None,
        github_url: str = github_clients.GITHUB_GRAPHQL_URL,
        request_timeout: int = 30,
    ):
        if duration_days < 0:
            raise ValueError(f"Report duration must be non-negative, got {duration_days}")

        self.organization = organization
        self.token = token
        self.duration_days = duration_days
        self.listing_policy = listing_policy
        self.log_sink = log_sink

        self.report_date: datetime.datetime | None = None
        self.result = report_models.ReportResult()
        self.state = report_models.ReportState.IDLE

        self._github_client = github_client or github_clients.GqlGithubClient(
            token=token,
            url=github_url,
            timeout=request_timeout,
            log_sink=log_sink,
        )

    @property
    def since(self) -> datetime.datetime | None:
        if self.report_date is None:
            return None

        return self.report_date - datetime.timedelta(days=self.duration_days)

    def _log(self, message: str) -> None:
        logging_utils.emit(self.log_sink, message)

    async def _list_repositories(self) -> list[github_models.RepositoryName]:
        if self.listing_policy == report_models.RepositoryListingPolicy.EXHAUSTIVE:
            return await self._github_client.list_repositories(
                self.organization,
                size=EXHAUSTIVE_LISTING_PAGE_SIZE,
            )

        return await self._github_client.list_recent_repositories(
            self.organization,
            size=BOUNDED_RECENT_LISTING_SIZE,
        )

    async def run(self, now: datetime.datetime | None = None) -> report_models.ReportResult:
        self.report_date = github_models.as_utc(now or datetime.datetime.now(tz=datetime.UTC))
        since = self.since
        assert since is not None
        self.result.clear()

        logger.info(
            "Generating report for organization(%s) since(%s) with listing policy(%s)",
            self.organization,
            since.isoformat(),
            self.listing_policy.value,
        )

        self.state = report_models.ReportState.LISTING
        try:
            repositories = await self._list_repositories()
        except github_clients.GqlGithubClient.BaseError as e:
            self.state = report_models.ReportState.FAILED
            error = report_errors.RepositoryListingError(self.organization)
            self._log(f"{error.message}: {e}")
            raise error from e

        logger.info("Listed %d repositories of organization(%s)", len(repositories), self.organization)

        for repository in repositories:
            self.state = report_models.ReportState.FETCHING
            try:
                activity = await self._github_client.get_repository_activity(
                    self.organization,
                    repository,
                    since,
                    size=ACTIVITY_PAGE_SIZE,
                )
            except github_clients.GqlGithubClient.BaseError as e:
                self.state = report_models.ReportState.FAILED
                error = report_errors.RepositoryFetchError(repository)
                self._log(f"{error.message}: {e}")
                raise error from e

            self.state = report_models.ReportState.CLASSIFYING
            report_classifier.classify_repository(activity, since, self.result)

        counts = self.result.counts
        self._log(f"Nb merged pr:{counts.merged}")
        self._log(f"Nb open pr with activity:{counts.open_with_activity}")
        self._log(f"Nb open pr without activity:{counts.open_without_activity}")

        self.state = report_models.ReportState.DONE
        return self.result


__all__ = [
    "ACTIVITY_PAGE_SIZE",
    "ActivityReport",
    "BOUNDED_RECENT_LISTING_SIZE",
    "DEFAULT_DURATION_DAYS",
    "EXHAUSTIVE_LISTING_PAGE_SIZE",
]

import dataclasses
import datetime
import logging

import ghreport.github.models as github_models
import ghreport.report.models as report_models

logger = logging.getLogger(__name__)


def is_merged_since(pull_request: github_models.PullRequest, since: datetime.datetime) -> bool:
    merged = pull_request.merged
    return merged is not None and merged > since


def has_activity(pull_request: github_models.PullRequest) -> bool:
    return pull_request.timeline_count > 0


def classify_repository(
    activity: github_models.RepositoryActivity,
    since: datetime.datetime,
    result: report_models.ReportResult,
) -> None:
    """
    Append the pull requests of one repository to the matching report buckets.

    Merged pull requests outside the window are dropped here, the fetch layer
    returns the latest merged pull requests regardless of their merge date.
    """
    for pull_request in activity.merged_pull_requests:
        if is_merged_since(pull_request, since):
            result.merged_prs.append(dataclasses.replace(pull_request, repository=activity.name))

    for pull_request in activity.open_pull_requests:
        pull_request = dataclasses.replace(pull_request, repository=activity.name)
        if has_activity(pull_request):
            result.open_prs_with_activity.append(pull_request)
        else:
            result.open_prs_without_activity.append(pull_request)

    logger.debug(
        "Classified repository(%s): merged(%d) open(%d) commits(%d)",
        activity.name,
        len(activity.merged_pull_requests),
        len(activity.open_pull_requests),
        len(activity.commits),
    )


__all__ = [
    "classify_repository",
    "has_activity",
    "is_merged_since",
]

import datetime
import typing

import ghreport.github.models as github_models

# Unparsable creation dates rank as the oldest possible pull requests
UNKNOWN_TIMESTAMP = datetime.datetime.min.replace(tzinfo=datetime.UTC)


def by_activity(pull_requests: typing.Iterable[github_models.PullRequest]) -> list[github_models.PullRequest]:
    return sorted(pull_requests, key=lambda pull_request: pull_request.timeline_count, reverse=True)


def by_age(pull_requests: typing.Iterable[github_models.PullRequest]) -> list[github_models.PullRequest]:
    return sorted(pull_requests, key=lambda pull_request: pull_request.created or UNKNOWN_TIMESTAMP)


__all__ = [
    "UNKNOWN_TIMESTAMP",
    "by_activity",
    "by_age",
]

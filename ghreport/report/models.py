import dataclasses
import enum

import ghreport.github.models as github_models


class ReportState(str, enum.Enum):
    IDLE = "idle"
    LISTING = "listing"
    FETCHING = "fetching"
    CLASSIFYING = "classifying"
    DONE = "done"
    FAILED = "failed"


class RepositoryListingPolicy(str, enum.Enum):
    # Single page of the most recent repositories, caps API cost at the expense of completeness
    BOUNDED_RECENT = "bounded_recent"
    EXHAUSTIVE = "exhaustive"


@dataclasses.dataclass(frozen=True)
class ReportCounts:
    merged: int
    open_with_activity: int
    open_without_activity: int


@dataclasses.dataclass
class ReportResult:
    merged_prs: list[github_models.PullRequest] = dataclasses.field(default_factory=list[github_models.PullRequest])
    open_prs_with_activity: list[github_models.PullRequest] = dataclasses.field(
        default_factory=list[github_models.PullRequest]
    )
    open_prs_without_activity: list[github_models.PullRequest] = dataclasses.field(
        default_factory=list[github_models.PullRequest]
    )

    @property
    def counts(self) -> ReportCounts:
        return ReportCounts(
            merged=len(self.merged_prs),
            open_with_activity=len(self.open_prs_with_activity),
            open_without_activity=len(self.open_prs_without_activity),
        )

    def clear(self) -> None:
        self.merged_prs.clear()
        self.open_prs_with_activity.clear()
        self.open_prs_without_activity.clear()


__all__ = [
    "ReportCounts",
    "ReportResult",
    "ReportState",
    "RepositoryListingPolicy",
]

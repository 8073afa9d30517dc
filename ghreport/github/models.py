import dataclasses
import datetime
import enum
import typing

OrganizationName: typing.TypeAlias = str
RepositoryName: typing.TypeAlias = str
Cursor: typing.TypeAlias = str

ItemT = typing.TypeVar("ItemT")

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def format_timestamp(value: datetime.datetime) -> str:
    return value.astimezone(datetime.UTC).strftime(TIMESTAMP_FORMAT)


def as_utc(value: datetime.datetime) -> datetime.datetime:
    """Return an aware UTC datetime, naive values are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.UTC)

    return value.astimezone(datetime.UTC)


def parse_timestamp(value: str | None) -> datetime.datetime | None:
    """
    Parse a GitHub timestamp in the fixed `TIMESTAMP_FORMAT` form.

    Missing or malformed values yield None instead of raising: a broken
    timestamp must never abort a report, callers decide where None ranks.
    """
    if not value:
        return None

    try:
        return datetime.datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=datetime.UTC)
    except ValueError:
        return None


class PullRequestState(str, enum.Enum):
    OPEN = "OPEN"
    MERGED = "MERGED"
    CLOSED = "CLOSED"


@dataclasses.dataclass(frozen=True)
class PullRequest:
    number: int
    title: str
    created_at: str
    state: PullRequestState
    merged_at: str | None = None
    repository: RepositoryName = ""
    participant_count: int = 0
    timeline_count: int = 0

    @property
    def created(self) -> datetime.datetime | None:
        return parse_timestamp(self.created_at)

    @property
    def merged(self) -> datetime.datetime | None:
        return parse_timestamp(self.merged_at)

    def url(self, organization: OrganizationName) -> str:
        return f"https://github.com/{organization}/{self.repository}/pull/{self.number}"


@dataclasses.dataclass(frozen=True)
class Commit:
    oid: str
    committed_date: str
    message: str
    ref: str
    author: str | None = None


@dataclasses.dataclass(frozen=True)
class RateLimit:
    limit: int
    cost: int
    remaining: int
    reset_at: str


@dataclasses.dataclass(frozen=True)
class PageInfo:
    has_next_page: bool
    end_cursor: Cursor | None = None


@dataclasses.dataclass(frozen=True)
class Page(typing.Generic[ItemT]):
    items: list[ItemT]
    page_info: PageInfo
    rate_limit: RateLimit | None = None


@dataclasses.dataclass(frozen=True)
class RepositoryActivity:
    name: RepositoryName
    merged_pull_requests: list[PullRequest]
    open_pull_requests: list[PullRequest]
    commits: list[Commit] = dataclasses.field(default_factory=list[Commit])
    rate_limit: RateLimit | None = None


__all__ = [
    "Commit",
    "Cursor",
    "OrganizationName",
    "Page",
    "PageInfo",
    "PullRequest",
    "PullRequestState",
    "RateLimit",
    "RepositoryActivity",
    "RepositoryName",
    "TIMESTAMP_FORMAT",
    "as_utc",
    "format_timestamp",
    "parse_timestamp",
]

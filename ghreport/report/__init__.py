from .classifier import classify_repository
from .errors import ReportError, RepositoryFetchError, RepositoryListingError
from .formatting import Section, build_summary, render_html, render_text
from .models import ReportCounts, ReportResult, ReportState, RepositoryListingPolicy
from .report import ActivityReport
from .sorting import by_activity, by_age

__all__ = [
    "ActivityReport",
    "ReportCounts",
    "ReportError",
    "ReportResult",
    "ReportState",
    "RepositoryFetchError",
    "RepositoryListingError",
    "RepositoryListingPolicy",
    "Section",
    "build_summary",
    "by_activity",
    "by_age",
    "classify_repository",
    "render_html",
    "render_text",
]

import dataclasses
import datetime
import html

import ghreport.github.models as github_models
import ghreport.report.report as report_report
import ghreport.report.sorting as report_sorting

DEFAULT_HIGHLIGHTS = 5

MERGED_COLOR = "#36a64f"
ACTIVE_COLOR = "#356ecc"
INACTIVE_COLOR = "#e89237"


def trim_string(s: str, max_length: int) -> str:
    return s[:max_length] + "..." if len(s) > max_length else s


def days_since(timestamp: datetime.datetime | None, now: datetime.datetime) -> int | None:
    if timestamp is None:
        return None

    return (now - timestamp) // datetime.timedelta(days=1)


def _format_days(days: int | None) -> str:
    return "unknown" if days is None else str(days)


@dataclasses.dataclass(frozen=True)
class Line:
    pull_request: github_models.PullRequest
    url: str
    details: str


@dataclasses.dataclass(frozen=True)
class Section:
    title: str
    color: str
    lines: list[Line]


def _merged_section(report: report_report.ActivityReport, now: datetime.datetime) -> Section:
    pull_requests = report.result.merged_prs
    return Section(
        title=f"{len(pull_requests)} Merged PRs!",
        color=MERGED_COLOR,
        lines=[
            Line(
                pull_request=pull_request,
                url=pull_request.url(report.organization),
                details=f"merged {_format_days(days_since(pull_request.merged, now))} days ago",
            )
            for pull_request in pull_requests
        ],
    )


def _active_section(report: report_report.ActivityReport, highlights: int) -> Section:
    pull_requests = report.result.open_prs_with_activity
    if highlights == 0 or len(pull_requests) < highlights:
        title = f"{len(pull_requests)} open PRs with an activity:"
    else:
        title = f"{len(pull_requests)} open PRs with an activity. Here is the {highlights} most active ones:"

    return Section(
        title=title,
        color=ACTIVE_COLOR,
        lines=[
            Line(
                pull_request=pull_request,
                url=pull_request.url(report.organization),
                details=f"{pull_request.timeline_count} events, {pull_request.participant_count} participants",
            )
            for pull_request in report_sorting.by_activity(pull_requests)[:highlights]
        ],
    )


def _inactive_section(report: report_report.ActivityReport, now: datetime.datetime, highlights: int) -> Section:
    pull_requests = report.result.open_prs_without_activity
    if highlights == 0 or len(pull_requests) < highlights:
        title = f"{len(pull_requests)} open PRs without any activity last week:"
    else:
        title = f"{len(pull_requests)} open PRs without any activity last week. Here is the {highlights} oldest:"

    return Section(
        title=title,
        color=INACTIVE_COLOR,
        lines=[
            Line(
                pull_request=pull_request,
                url=pull_request.url(report.organization),
                details=f"open {_format_days(days_since(pull_request.created, now))} days ago",
            )
            for pull_request in report_sorting.by_age(pull_requests)[:highlights]
        ],
    )


def build_summary(
    report: report_report.ActivityReport,
    now: datetime.datetime | None = None,
    highlights: int = DEFAULT_HIGHLIGHTS,
) -> list[Section]:
    now = github_models.as_utc(now or report.report_date or datetime.datetime.now(tz=datetime.UTC))
    return [
        _merged_section(report, now),
        _active_section(report, highlights),
        _inactive_section(report, now, highlights),
    ]


def render_html(sections: list[Section], header: str = "", max_title_length: int = 100) -> str:
    """Render sections with the HTML subset accepted by Telegram messages."""
    parts: list[str] = []
    if header:
        parts.append(f"<b>{html.escape(header)}</b>")

    for section in sections:
        parts.append(f"\n<b>{html.escape(section.title)}</b>")
        for line in section.lines:
            title = html.escape(trim_string(line.pull_request.title, max_title_length))
            repository = html.escape(line.pull_request.repository)
            parts.append(f'- <a href="{html.escape(line.url)}">{title}</a>\n\t({repository}) {line.details}')

    return "\n".join(parts).strip()


def render_text(sections: list[Section], header: str = "") -> str:
    parts: list[str] = []
    if header:
        parts.append(header)

    for section in sections:
        parts.append(f"\n{section.title}")
        for line in section.lines:
            parts.append(f"- {line.pull_request.title} ({line.pull_request.repository}) {line.details}")

    return "\n".join(parts).strip()


__all__ = [
    "DEFAULT_HIGHLIGHTS",
    "Line",
    "Section",
    "build_summary",
    "days_since",
    "render_html",
    "render_text",
    "trim_string",
]

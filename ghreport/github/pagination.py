import logging
import typing

import ghreport.github.models as github_models

logger = logging.getLogger(__name__)

ItemT = typing.TypeVar("ItemT")

PageFetcher: typing.TypeAlias = typing.Callable[[github_models.Cursor | None], typing.Awaitable[github_models.Page[ItemT]]]


class MissingCursorError(Exception):
    def __init__(self, page_number: int) -> None:
        super().__init__(f"Page {page_number} reports a next page without an end cursor")
        self.page_number = page_number


async def collect_pages(
    fetch_page: PageFetcher[ItemT],
    start_cursor: github_models.Cursor | None = None,
) -> list[ItemT]:
    """
    Walk a cursor-paginated connection and return the items of all pages in page order.

    Errors raised by `fetch_page` propagate unchanged and discard every page fetched so far.
    """
    items: list[ItemT] = []
    cursor = start_cursor
    page_number = 1

    while True:
        page = await fetch_page(cursor)
        items.extend(page.items)
        logger.debug("Fetched page(%d) with %d items", page_number, len(page.items))

        if not page.page_info.has_next_page:
            break

        if page.page_info.end_cursor is None:
            raise MissingCursorError(page_number)

        cursor = page.page_info.end_cursor
        page_number += 1

    return items


__all__ = [
    "MissingCursorError",
    "PageFetcher",
    "collect_pages",
]

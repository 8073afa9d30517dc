import pytest

import ghreport.github.models as github_models
import ghreport.github.pagination as github_pagination


def _pages(count: int, size: int) -> dict[str | None, github_models.Page[str]]:
    pages: dict[str | None, github_models.Page[str]] = {}
    cursor: str | None = None
    for page_number in range(count):
        is_last = page_number == count - 1
        end_cursor = None if is_last else f"cursor-{page_number}"
        pages[cursor] = github_models.Page(
            items=[f"item-{page_number}-{index}" for index in range(size)],
            page_info=github_models.PageInfo(has_next_page=not is_last, end_cursor=end_cursor),
        )
        cursor = end_cursor

    return pages


@pytest.mark.asyncio
@pytest.mark.parametrize(("count", "size"), [(1, 0), (1, 3), (4, 2), (10, 5)])
async def test_collect_pages(count: int, size: int):
    pages = _pages(count, size)
    requested_cursors: list[str | None] = []

    async def fetch_page(cursor: str | None) -> github_models.Page[str]:
        requested_cursors.append(cursor)
        return pages[cursor]

    items = await github_pagination.collect_pages(fetch_page)

    assert len(items) == count * size
    assert items == [f"item-{page}-{index}" for page in range(count) for index in range(size)]
    assert requested_cursors == list(pages.keys())


@pytest.mark.asyncio
async def test_collect_pages_start_cursor():
    requested_cursors: list[str | None] = []

    async def fetch_page(cursor: str | None) -> github_models.Page[str]:
        requested_cursors.append(cursor)
        return github_models.Page(items=["item"], page_info=github_models.PageInfo(has_next_page=False))

    assert await github_pagination.collect_pages(fetch_page, start_cursor="start") == ["item"]
    assert requested_cursors == ["start"]


@pytest.mark.asyncio
async def test_collect_pages_error_discards_pages():
    class PageError(Exception): ...

    async def fetch_page(cursor: str | None) -> github_models.Page[str]:
        if cursor is None:
            return github_models.Page(
                items=["first"],
                page_info=github_models.PageInfo(has_next_page=True, end_cursor="next"),
            )
        raise PageError

    with pytest.raises(PageError):
        await github_pagination.collect_pages(fetch_page)


@pytest.mark.asyncio
async def test_collect_pages_missing_cursor():
    async def fetch_page(cursor: str | None) -> github_models.Page[str]:
        return github_models.Page(items=["item"], page_info=github_models.PageInfo(has_next_page=True))

    with pytest.raises(github_pagination.MissingCursorError) as exc_info:
        await github_pagination.collect_pages(fetch_page)

    assert exc_info.value.page_number == 1

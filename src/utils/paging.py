"""
Pagination helpers.

Pages are numbered from 1; record indices from 0. A "rainbow" is the short
run of page numbers shown in a page bar around the current page, e.g.
`< 3 4 [5] 6 7 >`.
"""

from typing import List, Optional, Tuple

from src.config.settings import get_settings
from src.utils.errors import InvalidArgumentError


def _require_positive(value: int, name: str) -> None:
    if value < 1:
        raise InvalidArgumentError(f"{name} must be >= 1, got: {value}")


def page_to_start_end(page: int, size: Optional[int] = None) -> Tuple[int, int]:
    """
    Convert a 1-based page number to a half-open record index range.

    page_to_start_end(2, 10) == (10, 20)

    Args:
        page: Page number, starting at 1.
        size: Records per page. Defaults to PagingSettings.page_size.

    Returns:
        (start, end) such that records[start:end] is the page.

    Raises:
        InvalidArgumentError: If page or size is below 1.
    """
    if size is None:
        size = get_settings().paging.page_size
    _require_positive(page, "page")
    _require_positive(size, "size")
    return (page - 1) * size, page * size


def total_pages(total: int, size: Optional[int] = None) -> int:
    """
    Number of pages needed for `total` records (ceiling division).

    total_pages(10, 3) == 4, total_pages(0, 10) == 0

    Raises:
        InvalidArgumentError: If total is negative or size is below 1.
    """
    if size is None:
        size = get_settings().paging.page_size
    if total < 0:
        raise InvalidArgumentError(f"total must be >= 0, got: {total}")
    _require_positive(size, "size")
    return -(-total // size)


def page_rainbow(
    page_no: int,
    total_page: int,
    display_count: Optional[int] = None,
) -> List[int]:
    """
    Page numbers to show in a page bar centred on the current page.

    **Functionally**:
    - When every page fits (total_page <= display_count), returns 1..total_page.
    - Near the start, the window is pinned to 1..display_count.
    - Near the end, it is pinned to the last display_count pages.
    - Otherwise the current page sits in the middle; with an even
      display_count the extra slot goes to the right:
      page_rainbow(5, 20, 6) == [3, 4, 5, 6, 7, 8].

    Args:
        page_no: Current page (1-based).
        total_page: Number of pages (0 yields []).
        display_count: Window size. Defaults to PagingSettings.display_count.

    Raises:
        InvalidArgumentError: If page_no or display_count is below 1, or
            total_page is negative.
    """
    if display_count is None:
        display_count = get_settings().paging.display_count
    _require_positive(page_no, "page_no")
    _require_positive(display_count, "display_count")
    if total_page < 0:
        raise InvalidArgumentError(f"total_page must be >= 0, got: {total_page}")

    if total_page <= display_count:
        return list(range(1, total_page + 1))

    is_even = display_count % 2 == 0
    left = display_count // 2
    right = left + 1 if is_even else left

    if page_no <= left:
        first = 1
    elif page_no > total_page - right:
        first = total_page - display_count + 1
    else:
        first = page_no - left + (1 if is_even else 0)
    return list(range(first, first + display_count))

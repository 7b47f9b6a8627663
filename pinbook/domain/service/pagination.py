"""Page window planning shared by listing and search queries."""

from pinbook.domain.error import InvalidPageError
from pinbook.domain.model.page import PageWindow


def normalize_page(raw: str | int | None) -> int:
    """Turn a raw page parameter into a positive page number.

    Missing, unparseable and non-positive values all mean the first page.
    """
    if raw is None:
        return 1
    try:
        page = int(raw)
    except (TypeError, ValueError):
        return 1
    return page if page > 0 else 1


def plan_page(page: int, total: int, page_size: int) -> PageWindow:
    """Compute the window for a 1-based page.

    ``is_last`` uses floor division: it is only true when ``page`` equals
    ``total // page_size``. When ``total`` is not a multiple of ``page_size``
    the final, partly filled page is therefore not flagged as last.

    Args:
        page: Requested page, already normalised to >= 1
        total: Number of items matching the query
        page_size: Items per page

    Returns:
        The page window

    Raises:
        InvalidPageError: If page or page_size is below 1, or total is negative
    """
    if page < 1:
        raise InvalidPageError(f"Page must be >= 1, got {page}")
    if page_size < 1:
        raise InvalidPageError(f"Page size must be >= 1, got {page_size}")
    if total < 0:
        raise InvalidPageError(f"Total must be >= 0, got {total}")

    return PageWindow(
        page=page,
        skip=(page - 1) * page_size,
        limit=page_size,
        is_first=page == 1,
        is_last=page == total // page_size,
    )

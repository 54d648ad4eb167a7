"""Pagination and substring-filter helpers."""
from sqlalchemy import Select
from sqlalchemy.orm import InstrumentedAttribute


def clamp_page(page: int | None, page_size: int | None, default_size: int, max_size: int) -> tuple[int, int]:
    """Normalize page/page size query values."""
    page = page if page and page > 0 else 1
    if not page_size or page_size < 1:
        page_size = default_size
    return page, min(page_size, max_size)


def contains_pattern(term: str) -> str:
    """LIKE pattern matching ``term`` anywhere, with wildcards escaped."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def where_contains(stmt: Select, column: InstrumentedAttribute, term: str | None) -> Select:
    """Add a case-insensitive substring filter when ``term`` is non-blank."""
    if term is None or not term.strip():
        return stmt
    return stmt.where(column.ilike(contains_pattern(term.strip()), escape="\\"))

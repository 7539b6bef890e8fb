from typing import Optional

from stuff_manager.domain.exceptions import ValidationError

PAGE_SIZE = 10
DEFAULT_PAGE = 1

INVALID_PAGE_MESSAGE = "Page number must be greater than 0"
UNPARSABLE_PAGE_MESSAGE = "Page number must be a valid integer"


def validate_page(page: int) -> int:
    if page < 1:
        raise ValidationError(INVALID_PAGE_MESSAGE)
    return page


def parse_page(raw: Optional[str]) -> int:
    """Turn the raw ``page`` query value into a validated 1-based page number.

    A missing value means the first page. Anything that is not an integer is
    rejected the same way as a page below 1.
    """
    if raw is None:
        return DEFAULT_PAGE
    try:
        page = int(raw.strip())
    except ValueError:
        raise ValidationError(UNPARSABLE_PAGE_MESSAGE)
    return validate_page(page)


def page_offset(page: int, page_size: int = PAGE_SIZE) -> int:
    return (validate_page(page) - 1) * page_size

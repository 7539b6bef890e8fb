"""Client-side state for the stuff list and the reducer that drives it.

State is immutable; every change goes through :func:`reduce_stuff` with one of
the action types below. Fetch results are tagged with the page they were
requested for, and results for any page other than ``current_page`` are
dropped so a slow, superseded response cannot overwrite a newer page.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple, Union

from stuff_manager.domain.models.page import DEFAULT_PAGE, PAGE_SIZE
from stuff_manager.domain.models.stuff import Stuff

DEFAULT_FETCH_ERROR = "Failed to fetch stuff"


@dataclass(frozen=True)
class StuffState:
    items: Tuple[Stuff, ...] = ()
    current_page: int = DEFAULT_PAGE
    loading: bool = False
    error: Optional[str] = None


@dataclass(frozen=True)
class PageChanged:
    page: int


@dataclass(frozen=True)
class FetchStarted:
    page: int


@dataclass(frozen=True)
class FetchSucceeded:
    page: int
    items: Tuple[Stuff, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class FetchFailed:
    page: int
    message: Optional[str] = None


@dataclass(frozen=True)
class ErrorCleared:
    pass


StuffAction = Union[PageChanged, FetchStarted, FetchSucceeded, FetchFailed, ErrorCleared]


def reduce_stuff(state: StuffState, action: StuffAction) -> StuffState:
    if isinstance(action, PageChanged):
        return replace(state, current_page=action.page)

    if isinstance(action, ErrorCleared):
        return replace(state, error=None)

    if isinstance(action, (FetchStarted, FetchSucceeded, FetchFailed)) and action.page != state.current_page:
        # result for a page other than current_page
        return state

    if isinstance(action, FetchStarted):
        return replace(state, loading=True, error=None)
    if isinstance(action, FetchSucceeded):
        return replace(state, items=tuple(action.items), loading=False)
    if isinstance(action, FetchFailed):
        return replace(state, items=(), loading=False, error=action.message or DEFAULT_FETCH_ERROR)

    raise TypeError(f"Unknown stuff action: {action!r}")


def select_items(state: StuffState) -> Tuple[Stuff, ...]:
    return state.items


def select_current_page(state: StuffState) -> int:
    return state.current_page


def select_loading(state: StuffState) -> bool:
    return state.loading


def select_error(state: StuffState) -> Optional[str]:
    return state.error


def can_go_previous(state: StuffState) -> bool:
    return state.current_page > 1


def can_go_next(state: StuffState) -> bool:
    # The API never reports a total, so a short page is the only end marker.
    return len(state.items) >= PAGE_SIZE

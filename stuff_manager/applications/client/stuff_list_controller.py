import asyncio
from typing import Optional

from stuff_manager.applications.client.stuff_state import (
    FetchFailed,
    FetchStarted,
    FetchSucceeded,
    PageChanged,
    StuffState,
    can_go_next,
    can_go_previous,
)
from stuff_manager.applications.client.stuff_store import StuffStore
from stuff_manager.domain.exceptions import StuffFetchError
from stuff_manager.domain.ports.services.logger import LoggerPort
from stuff_manager.domain.ports.services.stuff_api_client import StuffApiClientPort


class StuffListController:
    """Drives the stuff list: navigation, fetch tasks and state updates.

    Each navigation starts one asyncio task tagged with its target page. A
    newer navigation cancels the previous task, and the reducer drops any
    result whose page no longer matches ``current_page``.
    """

    def __init__(
        self,
        api_client: StuffApiClientPort,
        store: Optional[StuffStore] = None,
        logger: Optional[LoggerPort] = None,
    ):
        self.api_client = api_client
        self.store = store or StuffStore()
        self.logger = logger
        self._task: Optional[asyncio.Task] = None

    @property
    def state(self) -> StuffState:
        return self.store.state

    def mount(self) -> asyncio.Task:
        return self.load_page(self.state.current_page)

    def load_page(self, page: int) -> asyncio.Task:
        if self._task is not None and not self._task.done():
            self._task.cancel()

        self.store.dispatch(PageChanged(page))
        self.store.dispatch(FetchStarted(page))
        self._task = asyncio.get_running_loop().create_task(self._fetch(page), name=f"fetch-stuff-page-{page}")
        return self._task

    def next_page(self) -> Optional[asyncio.Task]:
        if not can_go_next(self.state):
            return None
        return self.load_page(self.state.current_page + 1)

    def previous_page(self) -> Optional[asyncio.Task]:
        if not can_go_previous(self.state):
            return None
        return self.load_page(self.state.current_page - 1)

    async def wait(self) -> StuffState:
        """Wait until the most recent fetch settles, following superseding navigations."""
        task = self._task
        while task is not None:
            await asyncio.wait({task})
            if task is self._task:
                if not task.cancelled() and task.exception() is not None:
                    raise task.exception()
                break
            task = self._task
        return self.state

    async def _fetch(self, page: int) -> None:
        try:
            items = await self.api_client.fetch_page(page)
        except StuffFetchError as e:
            if self.logger is not None:
                self.logger.warning(f"Fetching stuff page {page} failed: {e}")
            self.store.dispatch(FetchFailed(page, e.message))
            return
        self.store.dispatch(FetchSucceeded(page, tuple(items)))

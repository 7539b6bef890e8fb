from abc import ABC, abstractmethod
from typing import List

from stuff_manager.domain.models.stuff import Stuff


class StuffApiClientPort(ABC):
    @abstractmethod
    async def fetch_page(self, page: int) -> List[Stuff]:
        """Fetch one page from ``GET /stuff``; raises ``StuffFetchError`` on any failure."""
        pass

from abc import ABC, abstractmethod
from typing import List, Sequence

from stuff_manager.domain.models.stuff import Stuff


class StuffRepository(ABC):
    @abstractmethod
    async def get_page(self, offset: int = 0, limit: int = 10) -> List[Stuff]:
        """Return up to ``limit`` records after skipping ``offset``, by ascending id."""
        pass

    @abstractmethod
    async def add_many(self, items: Sequence[Stuff]) -> List[Stuff]:
        pass

from typing import List, Optional

from stuff_manager.applications.interfaces.dtos.stuff import StuffPublic
from stuff_manager.domain.models.page import PAGE_SIZE, page_offset, validate_page
from stuff_manager.domain.ports.repositories.stuff_repository import StuffRepository
from stuff_manager.domain.ports.services.logger import LoggerPort


class GetStuffPageUseCase:
    """Pagination service: one fixed-size page of stuff in ascending id order.

    Pages past the end come back empty. A page below 1 raises
    ``ValidationError`` before the repository is touched.
    """

    def __init__(self, stuff_repository: StuffRepository, logger: Optional[LoggerPort] = None):
        self.stuff_repository = stuff_repository
        self.logger = logger

    async def execute(self, page: int) -> List[StuffPublic]:
        validate_page(page)
        offset = page_offset(page, PAGE_SIZE)

        items = await self.stuff_repository.get_page(offset=offset, limit=PAGE_SIZE)
        if self.logger is not None:
            self.logger.debug(f"Fetched {len(items)} stuff items for page {page} (offset={offset})")

        return [
            StuffPublic(id=item.id, name=item.name, description=item.description)
            for item in items
            if item.id is not None
        ]

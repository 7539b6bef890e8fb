from http import HTTPStatus
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from stuff_manager.applications.interfaces.dtos.stuff import StuffPublic
from stuff_manager.applications.use_cases.stuff.get_stuff_page import GetStuffPageUseCase
from stuff_manager.domain.exceptions import ValidationError
from stuff_manager.domain.models.page import parse_page
from stuff_manager.domain.ports.repositories.stuff_repository import StuffRepository
from stuff_manager.domain.ports.services.logger import LoggerPort
from stuff_manager.infrastructure.config.dependencies import get_logger, get_stuff_repository
from stuff_manager.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

router = APIRouter(prefix="/stuff", tags=["stuff"])

StuffRepositoryDep = Annotated[StuffRepository, Depends(get_stuff_repository)]


@router.get(
    "",
    response_model=List[StuffPublic],
    responses={400: {"description": "Page is not an integer greater than 0"}},
)
async def read_stuff(
    stuff_repository: StuffRepositoryDep,
    use_case_logger: Annotated[LoggerPort, Depends(get_logger)],
    page: Annotated[Optional[str], Query(description="1-based page number, 10 items per page")] = None,
):
    """Return one page of stuff ordered by id; pages past the end are empty."""
    try:
        page_number = parse_page(page)
        use_case = GetStuffPageUseCase(stuff_repository, logger=use_case_logger)
        return await use_case.execute(page_number)
    except ValidationError as e:
        logger.warning(f"Bad request for stuff page {page!r}: {e}")
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=str(e))
    except HTTPException:
        raise
    except Exception:
        logger.exception("Unhandled error reading stuff page")
        raise HTTPException(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail="Internal server error")

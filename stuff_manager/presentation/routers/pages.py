from http import HTTPStatus
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse

from stuff_manager.applications.client.stuff_list_controller import StuffListController
from stuff_manager.domain.exceptions import ValidationError
from stuff_manager.domain.models.page import parse_page
from stuff_manager.domain.ports.services.logger import LoggerPort
from stuff_manager.domain.ports.services.stuff_api_client import StuffApiClientPort
from stuff_manager.infrastructure.config.dependencies import get_logger, get_stuff_api_client
from stuff_manager.presentation.views.stuff_list_view import render_stuff_list

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def stuff_list_page(
    api_client: Annotated[StuffApiClientPort, Depends(get_stuff_api_client)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
    page: Annotated[Optional[str], Query()] = None,
):
    try:
        page_number = parse_page(page)
    except ValidationError as e:
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=str(e))

    controller = StuffListController(api_client, logger=logger)
    controller.load_page(page_number)
    state = await controller.wait()
    return HTMLResponse(render_stuff_list(state))

from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI

from stuff_manager.applications.interfaces.dtos.stuff import HealthStatus
from stuff_manager.infrastructure.logging.logger import setup_logging
from stuff_manager.infrastructure.persistence.database import dispose_engine, get_engine, set_engine
from stuff_manager.presentation.routers import pages, stuff

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = get_engine()
    set_engine(engine)
    try:
        yield
    finally:
        await dispose_engine()


app = FastAPI(title="Stuff Manager", lifespan=lifespan)

app.include_router(stuff.router)
app.include_router(pages.router)


@app.get("/health", status_code=HTTPStatus.OK, response_model=HealthStatus)
async def health_check():
    return {"status": "healthy", "service": "stuff-manager"}

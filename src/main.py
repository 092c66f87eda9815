import logging

from fastapi import FastAPI

from src.api.routes.routes import router
from src.application.selection_store import SelectionStore
from src.infrastructure.settings import APP_TITLE, LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title=APP_TITLE)

app.include_router(router)
logger = logging.getLogger(__name__)


@app.on_event("startup")
def on_startup() -> None:
    # One user, one in-memory session per process.
    app.state.selection_store = SelectionStore()
    logger.info(
        "Seat catalog ready with %s seats.",
        len(app.state.selection_store.seats),
    )

from contextlib import asynccontextmanager
from typing import Any

from fastapi import Body, FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .ids import IdFactory, uuid_id
from .logging_setup import configure_logging, get_logger
from .logic import ValidationError, validate_new_transaction
from .settings import Settings, get_settings
from .store import Ledger, ensure_exists

logger = get_logger(__name__)


def _error(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(
    settings: Settings | None = None, *, id_factory: IdFactory = uuid_id
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging()
    ledger = Ledger.open(settings.data_file, id_factory=id_factory)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        ensure_exists(settings.data_file)
        logger.info("Running at http://%s:%d", settings.host, settings.port)
        yield

    app = FastAPI(title="Expense Tracker", lifespan=lifespan)
    app.state.settings = settings
    app.state.ledger = ledger

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request, exc):
        return _error("invalid JSON body")

    @app.get("/api/transactions")
    def list_transactions():
        return [record.to_dict() for record in ledger.records()]

    @app.post("/api/transactions")
    def create_transaction(payload: Any = Body(default=None)):
        try:
            fields = validate_new_transaction(payload)
        except ValidationError as exc:
            logger.debug("rejected transaction: %s", exc)
            return _error(str(exc))
        return ledger.add(**fields).to_dict()

    @app.get("/", include_in_schema=False)
    def index():
        if not settings.index_path.is_file():
            raise HTTPException(status_code=404, detail="Not Found")
        return FileResponse(settings.index_path)

    if settings.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.static_dir), name="static")
    else:
        logger.warning(
            "static directory %s not found; serving API only", settings.static_dir
        )

    return app

from contextlib import asynccontextmanager
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from portal.core.config import Settings, get_settings
from portal.core.errors import FieldValidationError, RecordNotFound
from portal.core.logging_config import configure_logging
from portal.features.admin.routes import router as admin_router
from portal.features.lookup.routes import router as lookup_router
from portal.services.upload_storage import PUBLIC_PREFIX, UploadStorage

logger = logging.getLogger(__name__)


def _json_error(message: str, status: int, details: Optional[Dict[str, str]] = None):
    payload: Dict[str, Any] = {"error": message}
    if details:
        payload["details"] = details
    return JSONResponse(status_code=status, content=payload)


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        UploadStorage(settings.upload_root).ensure_directories()
        logger.info("%s ready, serving uploads from %s", settings.project_name, settings.upload_root)
        yield

    application = FastAPI(title=settings.project_name, lifespan=lifespan)
    application.dependency_overrides[get_settings] = lambda: settings

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.exception_handler(FieldValidationError)
    async def field_validation_handler(request: Request, exc: FieldValidationError):
        return _json_error(exc.message, 400, exc.details)

    @application.exception_handler(RecordNotFound)
    async def record_not_found_handler(request: Request, exc: RecordNotFound):
        return _json_error("Record not found", 404)

    @application.get("/health", tags=["Admin"])
    def health():
        return {"status": "ok"}

    application.include_router(lookup_router, tags=["Lookup"], prefix="/api")
    application.include_router(admin_router, tags=["Admin"], prefix="/api/admin")
    application.mount(
        PUBLIC_PREFIX,
        StaticFiles(directory=settings.upload_root, check_dir=False),
        name="uploads",
    )
    return application


application = create_application()

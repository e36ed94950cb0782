# leetsearch/main.py
import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .catalog import catalog_router
from .catalog.errors import TransportError, ValidationError
from .catalog.leetcode_service import LeetCodeClient
from .config import Settings, load_settings
from .cors import OriginPolicyMiddleware


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()

    app = FastAPI(
        title="LeetCode problem search",
        description=(
            "Proxy that searches the LeetCode problem catalog by keyword "
            "and returns a simplified list of matching problems."
        ),
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.catalog_client = LeetCodeClient(settings)

    app.add_middleware(OriginPolicyMiddleware, allowed_origins=settings.allowed_origins)
    app.include_router(catalog_router)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})

    @app.exception_handler(TransportError)
    async def transport_error_handler(request: Request, exc: TransportError):
        logger.error("Error fetching problems: %s", exc)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})

    return app


def run() -> None:
    app = create_app()
    settings = app.state.settings
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Server running at http://localhost:%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()

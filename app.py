from __future__ import annotations

import logging
import sys

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dotenv import load_dotenv

from kvstore import KeyNotFoundError, KVStore, Storer
from settings import Settings, get_settings

logger = logging.getLogger(__name__)


async def key_not_found_handler(request: Request, exc: KeyNotFoundError) -> JSONResponse:
    logger.info("KV NOT FOUND: %s %s", request.method, request.url.path)
    return JSONResponse({"detail": str(exc)}, status_code=404)


def create_app(store: Storer[str, str] | None = None, settings: Settings | None = None) -> FastAPI:
    load_dotenv("local.env")

    from endpoints.kv_endpoints import router as kv_router

    if settings is None:
        settings = get_settings()
    if store is None:
        store = KVStore[str, str](strict_missing_keys=settings.strict_missing_keys)

    app = FastAPI(title="kv-http-store")
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.add_exception_handler(KeyNotFoundError, key_not_found_handler)
    app.include_router(kv_router)

    return app


app = create_app()


def main() -> None:
    import uvicorn

    # Serve the module-level app; it already loaded local.env and its settings.
    settings: Settings = app.state.settings
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    logger.info("HTTP server is running on %s:%s", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

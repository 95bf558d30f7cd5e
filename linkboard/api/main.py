import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from linkboard.api.deps import Settings, build_session, get_settings, read_rules
from linkboard.api.routes import links

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Load rules (fail-fast), build the page session, wait for readiness."""
        resolved = settings or get_settings()

        try:
            rules = read_rules(resolved)
        except Exception as e:
            logger.critical(f"Rules load failed: {e}")
            sys.exit(1)

        session = build_session(rules, resolved)
        app.state.session = session
        logger.info(f"Rules loaded from {resolved.rules_path} (store: {rules.store.backend})")

        await session.engine.start()
        yield

    app = FastAPI(
        title="Linkboard API",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.include_router(links.router, prefix="/api/links", tags=["Links"])

    @app.get("/health")
    def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "service": "linkboard"}

    return app


app = create_app()

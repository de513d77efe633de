"""
Production FastAPI Application

Seat reservation reconciliation and seat blocking over PostgreSQL.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import cleanup, container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.db_setting import dispose_engine, get_engine
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Seating Service] Starting up...')

    tracing = TracingConfig(service_name='seating-service')
    tracing.setup()
    Logger.base.info('📊 [Seating Service] OpenTelemetry tracing configured')

    setup()
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Seating Service] Dependency injection wired')

    tracing.instrument_sqlalchemy(engine=get_engine())
    Logger.base.info('🗄️  [Seating Service] Database engine ready + instrumented')

    Logger.base.info('✅ [Seating Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Seating Service] Shutting down...')

    await dispose_engine()
    Logger.base.info('🗄️  [Seating Service] Database engine disposed')

    # Flush remaining spans
    tracing.shutdown()

    container.unwire()
    cleanup()

    Logger.base.info('👋 [Seating Service] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')

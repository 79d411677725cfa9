"""
Production FastAPI Application

Backend-for-frontend over the exhibition ticketing REST API: show scheduling,
entry pass booking and the venue ticket scanner.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import cleanup, container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Ticketing Client] Starting up...')

    tracing = TracingConfig(service_name='ticketing-client')
    tracing.setup()
    Logger.base.info('📊 [Ticketing Client] OpenTelemetry tracing configured')

    setup()
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Ticketing Client] Dependency injection wired')
    Logger.base.info(f'📡 [Ticketing Client] Upstream API at {settings.UPSTREAM_API_URL}')

    yield

    Logger.base.info('🛑 [Ticketing Client] Shutting down...')
    await cleanup()
    Logger.base.info('📡 [Ticketing Client] Upstream client closed')

    tracing.shutdown()
    container.unwire()
    Logger.base.info('👋 [Ticketing Client] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    return RedirectResponse(url='/docs')

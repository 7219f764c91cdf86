from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.middleware.cors import CORSMiddleware

from genai_relay.api.routes import health_router, main_router
from genai_relay.core import logging
from genai_relay.core.config import get_settings
from genai_relay.core.error_handling import (
    RelayError,
    handle_exception,
    relay_error_handler,
    validation_exception_handler,
)
from genai_relay.models.gemini import GeminiBackend

logging.setup_logging(logging.LogConfig(LOG_LEVEL=get_settings().log_level))


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.settings = get_settings()
    app.state.backend = GeminiBackend.from_settings(app.state.settings)
    logging.info(f"Server is ready on port {app.state.settings.port}")
    yield
    app.state.backend = None


app = FastAPI(lifespan=lifespan)
app.add_exception_handler(RelayError, relay_error_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, handle_exception)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(main_router)

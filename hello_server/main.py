"""hello-server: answers every HTTP request with Hello World!."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from hello_server.config import settings
from hello_server.responder import hello

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("hello-server starting up...")
    logger.info(f"Listening on http://{settings.host}:{settings.port}")

    yield

    logger.info("hello-server shutting down...")


# No docs routes and no path routes: every request falls through to `hello`.
app = FastAPI(
    title="hello-server",
    version="1.0.0",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

app.router.default = hello

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from affix_splitter.config import settings
from affix_splitter.logging_config import setup_logging
from affix_splitter.routers import lexicon, split
from affix_splitter.services.loader import LexiconLoadError
from affix_splitter.services.registry import registry

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        await asyncio.to_thread(
            registry.load,
            settings.PREFIX_SOURCE,
            settings.SUFFIX_SOURCE,
            settings.SOURCE_TIMEOUT,
        )
    except LexiconLoadError:
        if settings.FAIL_ON_LOAD_ERROR:
            raise
        logger.warning("Starting without lexicons; split requests will return 503")
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
)

# MUST be BEFORE including routers
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(split.router)
app.include_router(lexicon.router)


@app.get("/api/health")
async def health():
    return {"status": "ok"}

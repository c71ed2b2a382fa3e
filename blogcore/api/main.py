"""
FastAPI app assembly: logging, error mapping and router wiring.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, status
from starlette.requests import Request
from starlette.responses import JSONResponse

from blogcore import __version__
from blogcore.config import get_settings
from blogcore.db.database import init_db
from blogcore.exceptions import BlogError, InputError, NotFoundError
from blogcore.api.posts import router as posts_router
from blogcore.api.authors import router as authors_router
from blogcore.api.taxonomy import tags_router, topics_router, categories_router

# Configure logging
LOG_LEVEL_NAME = get_settings().log_level
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # No migrations; tables are created from the model metadata.
    init_db()
    logger.info("app_startup: log_level=%s version=%s", LOG_LEVEL_NAME, __version__)
    yield


app = FastAPI(
    title="Blog Service",
    description="CRUD API for blog posts, tags, topics, categories and authors.",
    version=__version__,
    lifespan=lifespan,
)

_ERROR_STATUS = {
    InputError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}


@app.exception_handler(BlogError)
async def blog_error_handler(request: Request, exc: BlogError):
    status_code = _ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
    logger.info("request_failed: path=%s status=%s error=%s", request.url.path, status_code, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


app.include_router(posts_router)
app.include_router(tags_router)
app.include_router(topics_router)
app.include_router(categories_router)
app.include_router(authors_router)

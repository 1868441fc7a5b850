import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from app.routers import posts
from app.security import get_api_key
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Blog Content API", description="Posts indexed from the content tree")


@asynccontextmanager
async def lifespan(app: FastAPI):
    root = settings.content_root_path
    if root.is_dir():
        logger.info(f"Serving posts from {root.resolve()}")
    else:
        logger.warning(f"Content root {root} does not exist yet")
    yield


app.router.lifespan_context = lifespan

app.include_router(posts.router, dependencies=[Depends(get_api_key)])


@app.get("/")
async def root():
    return {"message": "Blog Content API is running"}

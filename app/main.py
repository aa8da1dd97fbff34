import logging

from fastapi import FastAPI

from app.routers import posts
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="spacetraveling API", description="Blog posts from Prismic")

app.include_router(posts.router)


@app.get("/")
async def root():
    return {"message": "spacetraveling API is running"}

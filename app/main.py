from fastapi import FastAPI
from contextlib import asynccontextmanager
from app.api.routes import router
from app.core.config import settings

@asynccontextmanager
async def lifespan(app: FastAPI):
    print("Starting Wiki Topic Summarizer...")
    print(f"Wiki source: {settings.WIKI_BASE_URL} (max redirects: {settings.MAX_REDIRECTS})")

    yield

    print("Shutting down Wiki Topic Summarizer...")

app = FastAPI(
    title="Wiki Topic Summarizer",
    description="Voice skill backend reading out the first paragraph of a wiki article",
    version="1.0.0",
    lifespan=lifespan
)

app.include_router(router)

@app.get("/")
async def root():
    """Root endpoint with basic info"""
    return {
        "service": "Wiki Topic Summarizer",
        "version": "1.0.0",
        "endpoints": {
            "skill": "POST /skill",
            "lookup": "GET /lookup/{topic}",
            "health": "GET /health"
        }
    }

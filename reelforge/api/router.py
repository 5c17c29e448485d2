from fastapi import APIRouter

from reelforge.api.content import router as content_router
from reelforge.api.jobs import router as jobs_router
from reelforge.api.script import router as script_router
from reelforge.api.trends import router as trends_router

api_router = APIRouter()

# API routes at /api/*
api_router.include_router(content_router, prefix="/api", tags=["content"])
api_router.include_router(trends_router, prefix="/api", tags=["trends"])
api_router.include_router(script_router, prefix="/api", tags=["script"])
api_router.include_router(jobs_router, prefix="/api", tags=["jobs"])

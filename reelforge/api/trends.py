"""Trend discovery endpoints."""

from fastapi import APIRouter, Query

from reelforge.core.exceptions import ValidationError
from reelforge.core.logging import get_logger
from reelforge.dependencies import Orchestrator
from reelforge.schemas.api import ListResponse
from reelforge.schemas.trends import TrendRecord

logger = get_logger(__name__)

router = APIRouter()


@router.get("/trends/youtube", response_model=ListResponse[TrendRecord])
async def youtube_trends(
    orchestrator: Orchestrator,
    region_code: str = Query(default="US", alias="regionCode"),
    max_results: int = Query(default=20, alias="maxResults", ge=1, le=50),
    video_category_id: str | None = Query(default=None, alias="videoCategoryId"),
) -> ListResponse[TrendRecord]:
    """Most popular videos for a region."""
    logger.bind(region_code=region_code, max_results=max_results).info("api_youtube_trends_requested")
    trends = await orchestrator.trend_service.discover_youtube_trends(
        region_code=region_code,
        max_results=max_results,
        video_category_id=video_category_id,
    )
    return ListResponse(count=len(trends), data=trends)


@router.get("/trends/search", response_model=ListResponse[TrendRecord])
async def search_trends(
    orchestrator: Orchestrator,
    keywords: str | None = Query(default=None),
    max_results: int = Query(default=10, alias="maxResults", ge=1, le=50),
    order: str = Query(default="viewCount"),
) -> ListResponse[TrendRecord]:
    """Search videos by keywords."""
    if not keywords:
        raise ValidationError("Keywords parameter is required")

    logger.bind(keywords=keywords).info("api_keyword_search_requested")
    videos = await orchestrator.trend_service.search_trending_keywords(
        keywords, max_results=max_results, order=order
    )
    return ListResponse(count=len(videos), data=videos)


@router.get("/trends/niche/{niche}", response_model=ListResponse[TrendRecord])
async def niche_trends(niche: str, orchestrator: Orchestrator) -> ListResponse[TrendRecord]:
    """Top ranked topics for a niche."""
    logger.bind(niche=niche).info("api_niche_trends_requested")
    topics = await orchestrator.trend_service.get_trending_topics_for_niche(niche)
    return ListResponse(count=len(topics), data=topics)

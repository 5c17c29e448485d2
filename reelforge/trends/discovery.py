"""Trend discovery using the YouTube Data API v3."""

import asyncio
from typing import Any

from googleapiclient.discovery import build

from reelforge.config import get_config, get_settings
from reelforge.core.exceptions import UpstreamError
from reelforge.core.logging import get_logger
from reelforge.schemas.trends import TrendRecord
from reelforge.trends.scoring import analyze_trends, get_niche_keywords

logger = get_logger(__name__)

YOUTUBE_API_SERVICE_NAME = "youtube"
YOUTUBE_API_VERSION = "v3"

# search.list returns no statistics, so niche results are ranked on fixed
# placeholder metrics. Only recency differentiates them.
PLACEHOLDER_VIEW_COUNT = 100_000
PLACEHOLDER_LIKE_COUNT = 5_000
PLACEHOLDER_COMMENT_COUNT = 500


def _to_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def video_item_to_record(item: dict[str, Any]) -> TrendRecord:
    """Map a videos.list item to a TrendRecord."""
    snippet = item.get("snippet", {})
    statistics = item.get("statistics", {})
    content_details = item.get("contentDetails", {})
    return TrendRecord(
        video_id=item.get("id"),
        title=snippet.get("title", ""),
        description=snippet.get("description", ""),
        channel_title=snippet.get("channelTitle", ""),
        published_at=snippet.get("publishedAt"),
        view_count=_to_int(statistics.get("viewCount")),
        like_count=_to_int(statistics.get("likeCount")),
        comment_count=_to_int(statistics.get("commentCount")),
        duration=content_details.get("duration"),
        tags=snippet.get("tags", []),
        category_id=snippet.get("categoryId"),
    )


def search_item_to_record(item: dict[str, Any]) -> TrendRecord:
    """Map a search.list item to a TrendRecord (no statistics)."""
    snippet = item.get("snippet", {})
    return TrendRecord(
        video_id=item.get("id", {}).get("videoId"),
        title=snippet.get("title", ""),
        description=snippet.get("description", ""),
        channel_title=snippet.get("channelTitle", ""),
        published_at=snippet.get("publishedAt"),
        thumbnails=snippet.get("thumbnails", {}),
    )


class TrendDiscoveryService:
    """
    Finds candidate topics on YouTube.

    googleapiclient is synchronous; every request executes in the default
    executor so the event loop is never blocked.
    """

    def __init__(self, service: Any = None, api_key: str | None = None):
        self._service = service
        self.api_key = api_key or get_settings().youtube_api_key

    def _get_service(self) -> Any:
        if self._service is None:
            if not self.api_key:
                raise UpstreamError("YouTube API key not configured")
            self._service = build(
                YOUTUBE_API_SERVICE_NAME,
                YOUTUBE_API_VERSION,
                developerKey=self.api_key,
                cache_discovery=False,
            )
        return self._service

    async def _execute(self, request: Any) -> dict[str, Any]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, request.execute)

    async def discover_youtube_trends(
        self,
        region_code: str | None = None,
        max_results: int = 20,
        video_category_id: str | None = None,
    ) -> list[TrendRecord]:
        """
        Fetch the most popular videos for a region.

        Raises:
            UpstreamError: If the API call fails
        """
        region_code = region_code or get_config().trends.region_code
        log = logger.bind(region_code=region_code, max_results=max_results)
        log.info("discovering_youtube_trends")

        params: dict[str, Any] = {
            "part": "snippet,statistics,contentDetails",
            "chart": "mostPopular",
            "regionCode": region_code,
            "maxResults": max_results,
        }
        if video_category_id:
            params["videoCategoryId"] = video_category_id

        try:
            response = await self._execute(self._get_service().videos().list(**params))
        except Exception as e:
            log.bind(error=str(e)).error("youtube_trend_discovery_error")
            raise UpstreamError(f"YouTube trend discovery failed: {e}") from e

        trends = [video_item_to_record(item) for item in response.get("items", [])]
        log.bind(count=len(trends)).info("youtube_trends_discovered")
        return trends

    async def search_trending_keywords(
        self,
        keywords: str,
        max_results: int = 10,
        order: str = "viewCount",
        published_after: str | None = None,
    ) -> list[TrendRecord]:
        """
        Search videos matching keywords.

        Raises:
            UpstreamError: If the API call fails
        """
        log = logger.bind(keywords=keywords, max_results=max_results)
        log.info("searching_trending_keywords")

        params: dict[str, Any] = {
            "part": "snippet",
            "q": keywords,
            "type": "video",
            "maxResults": max_results,
            "order": order,
        }
        if published_after:
            params["publishedAfter"] = published_after

        try:
            response = await self._execute(self._get_service().search().list(**params))
        except Exception as e:
            log.bind(error=str(e)).error("keyword_search_error")
            raise UpstreamError(f"Keyword search failed: {e}") from e

        videos = [search_item_to_record(item) for item in response.get("items", [])]
        log.bind(count=len(videos)).info("trending_keywords_searched")
        return videos

    async def get_trending_topics_for_niche(self, niche: str) -> list[TrendRecord]:
        """Search the niche keywords and return the top ranked results."""
        trends_config = get_config().trends
        logger.bind(niche=niche).info("getting_trending_topics_for_niche")

        keywords = get_niche_keywords(niche)
        results = await self.search_trending_keywords(
            " ".join(keywords),
            max_results=trends_config.niche_search_results,
            order="viewCount",
        )

        with_metrics = [
            record.model_copy(
                update={
                    "view_count": PLACEHOLDER_VIEW_COUNT,
                    "like_count": PLACEHOLDER_LIKE_COUNT,
                    "comment_count": PLACEHOLDER_COMMENT_COUNT,
                }
            )
            for record in results
        ]
        return analyze_trends(with_metrics)[: trends_config.top_n]

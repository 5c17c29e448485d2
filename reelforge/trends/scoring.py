"""
Trend ranking.

Score formula:
score = 100 * (
    0.3 * log10(views) / 10 +
    0.4 * (likes + comments) / views +
    0.3 * max(0, 1 - days_since_published / 30)
)

Records with no views score 0; records with no parseable publish date get no
recency credit.
"""

import math
from datetime import datetime

from reelforge.core.datetime_utils import days_since, parse_iso_datetime, utc_now
from reelforge.core.logging import get_logger
from reelforge.schemas.trends import TrendRecord

logger = get_logger(__name__)

VIEW_WEIGHT = 0.3
ENGAGEMENT_WEIGHT = 0.4
RECENCY_WEIGHT = 0.3
RECENCY_WINDOW_DAYS = 30

NICHE_KEYWORDS: dict[str, list[str]] = {
    "technology": ["tech", "AI", "software", "gadgets", "programming"],
    "finance": ["money", "investing", "crypto", "stocks", "business"],
    "health": ["fitness", "nutrition", "wellness", "workout", "health"],
    "entertainment": ["movies", "music", "gaming", "streaming", "entertainment"],
    "education": ["learning", "tutorial", "course", "education", "skills"],
}
DEFAULT_KEYWORDS = ["trending", "viral", "popular"]


def get_niche_keywords(niche: str) -> list[str]:
    """Search keywords for a niche (case-insensitive), with a generic fallback."""
    return list(NICHE_KEYWORDS.get(niche.lower(), DEFAULT_KEYWORDS))


def calculate_engagement_rate(record: TrendRecord) -> float:
    """(likes + comments) / views as a percentage, 2 decimals."""
    if record.view_count <= 0:
        return 0.0
    return round((record.like_count + record.comment_count) / record.view_count * 100, 2)


def calculate_recency(published_at: str | datetime | None, now: datetime | None = None) -> float:
    """Linear decay from 1 at publish time to 0 after 30 days."""
    published = parse_iso_datetime(published_at)
    if published is None:
        return 0.0
    return max(0.0, 1 - days_since(published, now) / RECENCY_WINDOW_DAYS)


def calculate_trend_score(record: TrendRecord, now: datetime | None = None) -> float:
    """Weighted composite of popularity, engagement and recency, 2 decimals."""
    if record.view_count <= 0:
        return 0.0

    view_score = math.log10(record.view_count) / 10
    engagement_score = (record.like_count + record.comment_count) / record.view_count
    recency_score = calculate_recency(record.published_at, now)

    score = (
        view_score * VIEW_WEIGHT
        + engagement_score * ENGAGEMENT_WEIGHT
        + recency_score * RECENCY_WEIGHT
    ) * 100
    return round(score, 2)


def analyze_trends(records: list[TrendRecord], now: datetime | None = None) -> list[TrendRecord]:
    """
    Score records and sort them by trend_score, highest first.

    Returns new records; the input list is left untouched. Ties keep input order.
    """
    now = now or utc_now()
    analyzed = [
        record.model_copy(
            update={
                "engagement_rate": calculate_engagement_rate(record),
                "trend_score": calculate_trend_score(record, now),
            }
        )
        for record in records
    ]
    analyzed.sort(key=lambda r: r.trend_score or 0.0, reverse=True)

    logger.bind(
        count=len(analyzed),
        top_score=analyzed[0].trend_score if analyzed else None,
    ).info("trends_analyzed")
    return analyzed

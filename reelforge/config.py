from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    environment: str = Field(default="development")
    debug: bool = Field(default=False)
    port: int = Field(default=3000)
    api_base_url: str = Field(default="http://localhost:3000")

    # LLM
    openai_api_key: str = Field(default="")
    llm_model: str = Field(default="gpt-4o")

    # Trend source (YouTube Data API v3)
    youtube_api_key: str = Field(default="")
    youtube_channel_id: str = Field(default="")

    # Instagram Graph API
    instagram_access_token: str = Field(default="")
    instagram_business_account_id: str = Field(default="")

    # TikTok Content Posting API
    tiktok_access_token: str = Field(default="")
    tiktok_open_id: str = Field(default="")

    # Facebook Pages API
    facebook_access_token: str = Field(default="")
    facebook_page_id: str = Field(default="")

    # LinkedIn UGC API
    linkedin_access_token: str = Field(default="")
    linkedin_person_urn: str = Field(default="")

    # Text-to-speech
    tts_provider: str = Field(default="openai")
    openai_tts_voice: str = Field(default="alloy")
    openai_tts_model: str = Field(default="tts-1")
    elevenlabs_api_key: str = Field(default="")
    elevenlabs_voice_id: str = Field(default="pNInz6obpgDQGcFmaJgB")
    audio_output_dir: str = Field(default="./output/audio")

    # Scheduler
    scheduler_enabled: bool = Field(default=True)
    trend_discovery_cron: str = Field(default="0 */6 * * *")
    content_generation_cron: str = Field(default="0 8 * * *")
    posting_cron: str = Field(default="0 10 * * *")

    # Content defaults
    min_video_duration: int = Field(default=60)
    max_video_duration: int = Field(default=600)
    target_audience: str = Field(default="general")
    content_niche: str = Field(default="technology")

    # Rate limiting
    rate_limit_window_ms: int = Field(default=900_000)
    rate_limit_max_requests: int = Field(default=100)

    # Outbound HTTP
    http_timeout_seconds: float = Field(default=30.0)
    http_max_retries: int = Field(default=3)

    # Webhook notification (n8n, Zapier, ...)
    webhook_url: str = Field(default="")
    webhook_enabled: bool = Field(default=False)

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    @property
    def is_development(self) -> bool:
        return self.debug or self.environment.lower() == "development"

    def platform_access_token(self, platform: str) -> str:
        """Access token configured for a publishing platform, or empty string."""
        return getattr(self, f"{platform}_access_token", "") or ""


class PipelineConfig:
    """Pipeline tuning from config.yml."""

    def __init__(self, data: dict[str, Any]) -> None:
        self.default_duration: int = data.get("default_duration", 120)
        self.default_platforms: list[str] = data.get("default_platforms", ["youtube"])
        self.script_tone: str = data.get("script_tone", "engaging")
        self.scene_count: int = data.get("scene_count", 5)
        self.visual_style: str = data.get("visual_style", "modern")
        self.thumbnail_count: int = data.get("thumbnail_count", 3)


class TrendsConfig:
    """Trend discovery configuration from config.yml."""

    def __init__(self, data: dict[str, Any]) -> None:
        self.region_code: str = data.get("region_code", "US")
        self.niche_search_results: int = data.get("niche_search_results", 15)
        self.top_n: int = data.get("top_n", 10)


class PostingConfig:
    """Scheduled posting configuration from config.yml."""

    def __init__(self, data: dict[str, Any]) -> None:
        self.platforms: list[str] = data.get(
            "platforms", ["instagram", "facebook", "linkedin", "tiktok"]
        )
        self.history_size: int = data.get("history_size", 10)


class TikTokConfig:
    """TikTok post settings from config.yml."""

    def __init__(self, data: dict[str, Any]) -> None:
        self.privacy_level: str = data.get("privacy_level", "PUBLIC_TO_EVERYONE")
        self.disable_duet: bool = data.get("disable_duet", False)
        self.disable_comment: bool = data.get("disable_comment", False)
        self.disable_stitch: bool = data.get("disable_stitch", False)
        self.video_cover_timestamp_ms: int = data.get("video_cover_timestamp_ms", 1000)


class AppConfig:
    """Combined application configuration from .env and config.yml."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.settings = Settings()
        self._load_yaml(config_path or Path("config.yml"))

    def _load_yaml(self, config_path: Path) -> None:
        if config_path.exists():
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
        else:
            data = {}

        self.pipeline = PipelineConfig(data.get("pipeline", {}))
        self.trends = TrendsConfig(data.get("trends", {}))
        self.posting = PostingConfig(data.get("posting", {}))
        self.tiktok = TikTokConfig(data.get("tiktok", {}))


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@lru_cache
def get_config() -> AppConfig:
    """Get cached full config instance."""
    return AppConfig()

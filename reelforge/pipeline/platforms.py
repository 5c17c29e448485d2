"""
Platform registry.

Maps a platform tag to its repurpose transform and publish call, so adding
a platform is a register() call rather than another branch.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from reelforge.pipeline.repurpose import (
    repurpose_for_facebook,
    repurpose_for_instagram,
    repurpose_for_linkedin,
    repurpose_for_tiktok,
)
from reelforge.schemas.content import ContentArtifact
from reelforge.schemas.platforms import PlatformPayload, PublishOutcome
from reelforge.services.facebook_service import post_to_facebook
from reelforge.services.instagram_service import post_to_instagram
from reelforge.services.linkedin_service import post_to_linkedin
from reelforge.services.tiktok_service import post_to_tiktok

RepurposeFn = Callable[[ContentArtifact], PlatformPayload]
PublishFn = Callable[..., Awaitable[PublishOutcome]]


@dataclass(frozen=True)
class PlatformCapability:
    """What a platform can do: shape an artifact, and post the result."""

    name: str
    repurpose: RepurposeFn
    publish: PublishFn


class PlatformRegistry:
    """Registry for publishing platforms."""

    def __init__(self) -> None:
        self._platforms: dict[str, PlatformCapability] = {}

    def register(self, capability: PlatformCapability) -> None:
        """Register a platform, replacing any previous one with the same name."""
        self._platforms[capability.name] = capability

    def get(self, name: str) -> PlatformCapability | None:
        """Get a platform by name."""
        return self._platforms.get(name)

    def list_available(self) -> list[str]:
        """List all registered platform names."""
        return list(self._platforms.keys())


def build_default_registry() -> PlatformRegistry:
    registry = PlatformRegistry()
    registry.register(PlatformCapability("instagram", repurpose_for_instagram, post_to_instagram))
    registry.register(PlatformCapability("tiktok", repurpose_for_tiktok, post_to_tiktok))
    registry.register(PlatformCapability("facebook", repurpose_for_facebook, post_to_facebook))
    registry.register(PlatformCapability("linkedin", repurpose_for_linkedin, post_to_linkedin))
    return registry


# Global registry with the default platforms
_registry = build_default_registry()


def get_registry() -> PlatformRegistry:
    """Get the global platform registry."""
    return _registry

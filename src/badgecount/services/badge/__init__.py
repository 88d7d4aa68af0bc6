"""Badge platform collaborators."""

from badgecount.services.badge.provider import (
    BadgeProvider,
    BadgeProviderError,
    ChangeCallback,
    IdentityProvider,
    InMemoryBadgeProvider,
    StaticIdentityProvider,
)

__all__ = [
    "BadgeProvider",
    "BadgeProviderError",
    "ChangeCallback",
    "IdentityProvider",
    "InMemoryBadgeProvider",
    "StaticIdentityProvider",
]

"""
Platform model — what host the launcher is running on.

Computed once at startup by the OS detector and passed explicitly to
whatever needs it. ``raw_id`` is kept verbatim so that any Linux
distribution is representable; ``kind`` narrows it to the handful of
identifiers the installer knows about.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict


class PlatformId(str, Enum):
    """Platform identifiers the installer can act on."""

    DEBIAN = "debian"
    UBUNTU = "ubuntu"
    ARCH = "arch"
    MANJARO = "manjaro"
    DARWIN = "darwin"
    UNKNOWN = "unknown"


class Platform(BaseModel):
    """Host platform as detected at startup."""

    model_config = ConfigDict(frozen=True)

    family: Literal["linux", "darwin", "unknown"] = "unknown"
    raw_id: str = PlatformId.UNKNOWN.value

    @property
    def kind(self) -> PlatformId:
        """Map ``raw_id`` to a known identifier by exact match.

        Near misses (``Ubuntu``, ``debian-like``, ``arch linux``) are
        ``UNKNOWN``: os-release ids are lowercase tokens, anything else
        is not ours to guess at.
        """
        try:
            return PlatformId(self.raw_id)
        except ValueError:
            return PlatformId.UNKNOWN

    def __str__(self) -> str:
        return self.raw_id

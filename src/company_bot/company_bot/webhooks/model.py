from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..core.enums import Provider


@dataclass(frozen=True)
class CommitSummary:
    short_hash: str
    message: str
    url: Optional[str] = None


@dataclass(frozen=True)
class PushEvent:
    """Push normalized from either provider. ``commits`` holds at most the shown commits."""

    provider: Provider
    repository: str
    repository_full_name: str
    repository_url: str
    branch: str
    pusher_name: str
    total_commits: int
    commits: Tuple[CommitSummary, ...] = field(default_factory=tuple)
    pusher_avatar_url: Optional[str] = None

    @property
    def is_truncated(self) -> bool:
        return self.total_commits > len(self.commits)

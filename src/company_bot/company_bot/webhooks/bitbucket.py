from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..core.constants import MAX_COMMITS_SHOWN, SHORT_HASH_LENGTH
from ..core.enums import Provider
from .model import CommitSummary, PushEvent

logger = logging.getLogger(__name__)

PUSH_EVENT = "repo:push"


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _href(obj: Dict[str, Any], name: str) -> Optional[str]:
    return _as_dict(_as_dict(obj.get("links")).get(name)).get("href") or None


def _commit(commit: Dict[str, Any]) -> CommitSummary:
    commit_hash = commit.get("hash")
    message = commit.get("message")
    return CommitSummary(
        short_hash=str(commit_hash)[:SHORT_HASH_LENGTH] if commit_hash else "unknown",
        message=message.split("\n")[0] if isinstance(message, str) and message else "No message",
        url=_href(commit, "html"),
    )


def parse_push(payload: Any) -> List[PushEvent]:
    """Normalize a Bitbucket ``repo:push`` payload into one event per pushed branch."""
    payload = _as_dict(payload)
    repository = _as_dict(payload.get("repository"))
    actor = _as_dict(payload.get("actor"))
    changes = _as_list(_as_dict(payload.get("push")).get("changes"))

    name = repository.get("name") or "unknown"
    pusher_name = actor.get("display_name") or actor.get("nickname") or "Unknown"
    events: List[PushEvent] = []

    for change in changes:
        change = _as_dict(change)
        new = _as_dict(change.get("new"))
        if new.get("type") != "branch":
            continue

        commits = [c for c in _as_list(change.get("commits")) if isinstance(c, dict)]
        if not commits:
            continue

        events.append(
            PushEvent(
                provider=Provider.BITBUCKET,
                repository=name,
                repository_full_name=repository.get("full_name") or name,
                repository_url=_href(repository, "html") or "",
                branch=new.get("name") or "unknown",
                pusher_name=pusher_name,
                total_commits=len(commits),
                commits=tuple(_commit(c) for c in commits[:MAX_COMMITS_SHOWN]),
                pusher_avatar_url=_href(actor, "avatar"),
            )
        )

    if not events:
        logger.info("No branch commits in Bitbucket push to %s, skipping notification", name)
    return events

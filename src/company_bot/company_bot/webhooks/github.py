from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..core.constants import MAX_COMMITS_SHOWN, SHORT_HASH_LENGTH
from ..core.enums import Provider
from .model import CommitSummary, PushEvent

logger = logging.getLogger(__name__)

PUSH_EVENT = "push"


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _branch(payload: Dict[str, Any]) -> str:
    ref = payload.get("ref")
    if isinstance(ref, str) and ref:
        return ref.replace("refs/heads/", "")
    if _as_dict(payload.get("head_commit")).get("id"):
        return "main"
    return "unknown"


def _commit_url(commit: Dict[str, Any], repository_url: str) -> str:
    url = commit.get("url")
    if isinstance(url, str) and url:
        # API urls point at the REST endpoint, not the web page.
        return url.replace("api.github.com/repos", "github.com").replace("/commits/", "/commit/")
    if repository_url and commit.get("id"):
        return f"{repository_url}/commit/{commit['id']}"
    return "#"


def _commit(commit: Dict[str, Any], repository_url: str) -> CommitSummary:
    commit_id = commit.get("id")
    message = commit.get("message")
    return CommitSummary(
        short_hash=str(commit_id)[:SHORT_HASH_LENGTH] if commit_id else "unknown",
        message=message.split("\n")[0] if isinstance(message, str) and message else "No message",
        url=_commit_url(commit, repository_url),
    )


def parse_push(payload: Any) -> Optional[PushEvent]:
    """Normalize a GitHub ``push`` payload. None when there is nothing to announce."""
    payload = _as_dict(payload)
    repository = _as_dict(payload.get("repository"))
    if not repository:
        logger.warning("Invalid GitHub payload - missing repository data")
        return None

    pusher = _as_dict(payload.get("pusher")) or _as_dict(payload.get("sender"))
    commits = [c for c in _as_list(payload.get("commits")) if isinstance(c, dict)]
    branch = _branch(payload)
    name = repository.get("name") or "unknown"

    if not commits:
        logger.info("No commits in GitHub push to %s/%s, skipping notification", name, branch)
        return None

    repository_url = repository.get("html_url") or ""
    avatar = pusher.get("avatar_url") or _as_dict(repository.get("owner")).get("avatar_url")
    return PushEvent(
        provider=Provider.GITHUB,
        repository=name,
        repository_full_name=repository.get("full_name") or name,
        repository_url=repository_url,
        branch=branch,
        pusher_name=pusher.get("name") or pusher.get("login") or "Unknown",
        total_commits=len(commits),
        commits=tuple(_commit(c, repository_url) for c in commits[:MAX_COMMITS_SHOWN]),
        pusher_avatar_url=avatar or None,
    )

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

import requests

from ..core.constants import (
    TRANSLATION_API_URL,
    TRANSLATION_MIN_LENGTH,
    TRANSLATION_MIN_LETTERS,
    TRANSLATION_TIMEOUT_SECONDS,
)

logger = logging.getLogger(__name__)

# Hiragana, Katakana, CJK ideographs.
JAPANESE_RE = re.compile(r"[぀-ゟ゠-ヿ一-龯]")
LATIN_RE = re.compile(r"[a-zA-Z]")


@dataclass(frozen=True)
class TranslationDirection:
    source_lang: str
    target_lang: str
    name: str


JA_TO_EN = TranslationDirection(source_lang="ja", target_lang="en", name="jp-to-en")
EN_TO_JA = TranslationDirection(source_lang="en", target_lang="ja", name="en-to-jp")


@dataclass(frozen=True)
class Translation:
    direction: TranslationDirection
    text: str


def contains_japanese(text: str) -> bool:
    return bool(JAPANESE_RE.search(text or ""))


def contains_english(text: str) -> bool:
    """Latin letters only, at least three of them, and no Japanese."""
    if not text or contains_japanese(text):
        return False
    return len(LATIN_RE.findall(text)) >= TRANSLATION_MIN_LETTERS


def detect_direction(text: str) -> Optional[TranslationDirection]:
    if contains_japanese(text):
        return JA_TO_EN
    if contains_english(text):
        return EN_TO_JA
    return None


class TranslationService:
    """Best-effort MyMemory client. Every failure ends as None, never an exception."""

    def __init__(
        self,
        *,
        api_url: str = TRANSLATION_API_URL,
        timeout: float = TRANSLATION_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self._api_url = api_url
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.setdefault("User-Agent", "Discord-Bot/1.0")

    def translate(self, text: str) -> Optional[Translation]:
        if not text or len(text) < TRANSLATION_MIN_LENGTH:
            return None

        direction = detect_direction(text)
        if direction is None:
            return None

        translated = self.request(text, source_lang=direction.source_lang, target_lang=direction.target_lang)
        if not translated or translated == text:
            logger.info("Translation failed or returned same text (%s)", direction.name)
            return None
        return Translation(direction=direction, text=translated)

    def request(self, text: str, *, source_lang: str, target_lang: str) -> Optional[str]:
        langpair = f"{source_lang}|{target_lang}"
        logger.debug("Translating with MyMemory API (%s)", langpair)
        try:
            response = self._session.get(
                self._api_url,
                params={"q": text, "langpair": langpair},
                timeout=self._timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.Timeout:
            logger.error("MyMemory request timeout")
            return None
        except requests.RequestException as e:
            logger.error("MyMemory request error: %s", e)
            return None
        except ValueError as e:
            logger.error("MyMemory returned invalid JSON: %s", e)
            return None

        response_data = data.get("responseData") if isinstance(data, dict) else None
        translated = response_data.get("translatedText") if isinstance(response_data, dict) else None
        if not translated:
            logger.error("No translation returned: %s", data)
            return None
        return translated

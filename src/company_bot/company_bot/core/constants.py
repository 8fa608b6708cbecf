"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import Command

# Order matters: the first keyword found in a message wins.
ATTENDANCE_KEYWORDS = (
    ("出勤", Command.CHECK_IN),
    ("休憩", Command.START_BREAK),
    ("再開", Command.RESUME),
    ("退勤", Command.CHECK_OUT),
)
STATUS_KEYWORDS = frozenset({"状況", "確認"})

DEFAULT_DATA_PATH = "attendance.json"
DEFAULT_DAY_KEY_TIMEZONE = "UTC"
DEFAULT_DISPLAY_TIMEZONE = "Asia/Tokyo"

MAX_COMMITS_SHOWN = 5
SHORT_HASH_LENGTH = 7

TRANSLATION_API_URL = "https://api.mymemory.translated.net/get"
TRANSLATION_TIMEOUT_SECONDS = 15
TRANSLATION_MIN_LENGTH = 3
TRANSLATION_MIN_LETTERS = 3

NOTIFY_TIMEOUT_SECONDS = 15

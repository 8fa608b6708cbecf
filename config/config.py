import os


class Config:
    # Discord
    DISCORD_TOKEN = os.environ.get("DISCORD_TOKEN")
    GUILD_ID = os.environ.get("GUILD_ID")
    ATTENDANCE_CHANNEL_ID = os.environ.get("ATTENDANCE_CHANNEL_ID")
    GIT_CHANNEL_ID = os.environ.get("GIT_CHANNEL_ID")

    # Webhook server. The secret is read but not verified against requests yet.
    WEBHOOK_SECRET = os.environ.get("WEBHOOK_SECRET", "default_secret")
    PORT = int(os.environ.get("PORT", "3000"))

    # Attendance storage and time zones
    ATTENDANCE_DATA_PATH = os.environ.get("ATTENDANCE_DATA_PATH", "attendance.json")
    DAY_KEY_TIMEZONE = os.environ.get("DAY_KEY_TIMEZONE", "UTC")
    DISPLAY_TIMEZONE = os.environ.get("DISPLAY_TIMEZONE", "Asia/Tokyo")

    # Translation (MyMemory, no key required)
    TRANSLATION_ENABLED = bool(int(os.environ.get("TRANSLATION_ENABLED", "1")))
    TRANSLATION_API_URL = os.environ.get("TRANSLATION_API_URL", "https://api.mymemory.translated.net/get")
    TRANSLATION_TIMEOUT = float(os.environ.get("TRANSLATION_TIMEOUT", "15"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


def channel_id(name: str, value):
    """Discord channel ids are numeric snowflakes; unset stays None."""
    if value is None or str(value).strip() == "":
        return None
    value = str(value).strip()
    if not value.isdigit():
        raise ValueError(f"{name} must be a numeric Discord channel id, got {value!r}")
    return value


def bot_config(cfg=Config) -> dict:
    """Dict consumed by build_container()."""
    return {
        "attendance_channel_id": channel_id("ATTENDANCE_CHANNEL_ID", cfg.ATTENDANCE_CHANNEL_ID),
        "git_channel_id": channel_id("GIT_CHANNEL_ID", cfg.GIT_CHANNEL_ID),
        "data_path": cfg.ATTENDANCE_DATA_PATH,
        "day_key_timezone": cfg.DAY_KEY_TIMEZONE,
        "display_timezone": cfg.DISPLAY_TIMEZONE,
        "translation_enabled": cfg.TRANSLATION_ENABLED,
        "translation_api_url": cfg.TRANSLATION_API_URL,
        "translation_timeout": cfg.TRANSLATION_TIMEOUT,
    }

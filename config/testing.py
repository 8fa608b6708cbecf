import os

DISCORD_TOKEN = "test-token"
GUILD_ID = "1"
WEBHOOK_SECRET = "test-secret"
PORT = 3000

BOT_CONFIG = {
    "attendance_channel_id": "100",
    "git_channel_id": "200",
    "data_path": os.getenv("ATTENDANCE_DATA_PATH", "attendance.test.json"),
    "day_key_timezone": "UTC",
    "display_timezone": "Asia/Tokyo",
    "translation_enabled": False,
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

from .config import Config, bot_config

DISCORD_TOKEN = Config.DISCORD_TOKEN
GUILD_ID = Config.GUILD_ID
WEBHOOK_SECRET = Config.WEBHOOK_SECRET
PORT = Config.PORT

BOT_CONFIG = bot_config()

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

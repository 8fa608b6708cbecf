from __future__ import annotations

import importlib
import logging
import threading

from dotenv import load_dotenv

from config import get_settings_module

from . import create_app
from .bot.discord_client import CompanyBot, DiscordNotifier
from .common.logging_utils import setup_logging
from .container import build_container

logger = logging.getLogger(__name__)


def _log_configuration(settings, bot_config: dict) -> None:
    def state(value) -> str:
        return "✅ Set" if value else "❌ Missing"

    logger.info("⚙️ Configuration Status:")
    logger.info("   Discord Token: %s", state(getattr(settings, "DISCORD_TOKEN", None)))
    logger.info("   Guild ID: %s", state(getattr(settings, "GUILD_ID", None)))
    logger.info("   Attendance Channel: %s", state(bot_config.get("attendance_channel_id")))
    logger.info("   Git Channel: %s", state(bot_config.get("git_channel_id")))
    logger.info("   Translation API: %s", "✅ MyMemory (No key required)" if bot_config.get("translation_enabled", True) else "Disabled")
    if getattr(settings, "WEBHOOK_SECRET", None) in (None, "", "default_secret"):
        logger.warning("   Webhook secret is unset or default (signatures are not verified)")


def _serve_webhooks(app, port: int, debug: bool = False) -> None:
    logger.info("🌐 Webhook server running on port %s", port)
    logger.info("📡 GitHub webhook URL: http://localhost:%s/webhook/github", port)
    logger.info("📡 Bitbucket webhook URL: http://localhost:%s/webhook/bitbucket", port)
    app.run(host="0.0.0.0", port=port, debug=debug, use_reloader=False)


def main() -> None:
    load_dotenv(override=False)
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    bot_config = dict(getattr(settings, "BOT_CONFIG"))
    _log_configuration(settings, bot_config)

    token = getattr(settings, "DISCORD_TOKEN", None)
    if not token:
        raise SystemExit("DISCORD_TOKEN is not set")

    client = CompanyBot(attendance_channel_id=bot_config.get("attendance_channel_id"))
    container = build_container(bot_config=bot_config, notifier=DiscordNotifier(client))
    client.bind(container.message_handler)

    app = create_app(container)
    port = int(getattr(settings, "PORT", 3000))
    debug = bool(getattr(settings, "DEBUG", False))
    threading.Thread(target=_serve_webhooks, args=(app, port, debug), name="webhooks", daemon=True).start()

    client.run(token, log_handler=None)


if __name__ == "__main__":
    main()

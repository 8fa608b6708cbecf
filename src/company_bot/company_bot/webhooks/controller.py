from __future__ import annotations

import logging

from flask import Flask, request

from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    # The shared secret is loaded into settings but signatures are not verified yet.

    @app.post("/webhook/github")
    def github_webhook():
        event_type = request.headers.get("X-GitHub-Event")
        logger.info("Received GitHub webhook (event=%s)", event_type)
        try:
            container.push_service.handle_github(event_type, request.get_json(silent=True))
        except Exception:
            logger.exception("GitHub webhook error")
            return "Internal Server Error", 500
        return "OK", 200

    @app.post("/webhook/bitbucket")
    def bitbucket_webhook():
        event_type = request.headers.get("X-Event-Key")
        logger.info("Received Bitbucket webhook (event=%s)", event_type)
        try:
            container.push_service.handle_bitbucket(event_type, request.get_json(silent=True))
        except Exception:
            logger.exception("Bitbucket webhook error")
            return "Internal Server Error", 500
        return "OK", 200

    @app.get("/health")
    def health():
        return "Bot is running! 🤖", 200

    @app.get("/")
    def index():
        return (
            "<h1>Discord Company Bot 🤖</h1>"
            "<p>✅ Bot is running successfully!</p>"
            "<p>📊 Attendance System: Active (with Report Support)</p>"
            "<p>🔧 Git Notifications: Active</p>"
            "<p>🌐 Bidirectional Auto-Translation: Active (MyMemory API)</p>"
            "<p>📡 GitHub webhook endpoint: /webhook/github</p>"
            "<p>📡 Bitbucket webhook endpoint: /webhook/bitbucket</p>"
        ), 200

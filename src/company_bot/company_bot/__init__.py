"""Company Bot package.

Organized by feature modules (attendance, commands, notifications, webhooks,
translation, bot) with a thin Flask controller for webhooks and a thin
Discord client in front of transport-neutral services.
"""
from __future__ import annotations

from flask import Flask

from .container import Container
from .webhooks.controller import register as register_webhooks


def create_app(container: Container) -> Flask:
    app = Flask(__name__)
    app.extensions["company_bot"] = container

    register_webhooks(app, container)

    return app

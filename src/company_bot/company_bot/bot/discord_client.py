from __future__ import annotations

import asyncio
import logging
from typing import Optional

import discord

from ..core.constants import NOTIFY_TIMEOUT_SECONDS
from ..core.enums import OutgoingTarget
from ..notifications.model import StructuredMessage
from .handler import IncomingMessage, MessageHandler, OutgoingMessage

logger = logging.getLogger(__name__)


def to_embed(message: StructuredMessage) -> discord.Embed:
    embed = discord.Embed(
        title=message.title,
        description=message.description,
        color=discord.Color(message.color),
        timestamp=message.timestamp,
    )
    for f in message.fields:
        embed.add_field(name=f.name, value=f.value, inline=f.inline)
    if message.thumbnail_url:
        embed.set_thumbnail(url=message.thumbnail_url)
    return embed


def _send_kwargs(body) -> dict:
    if isinstance(body, StructuredMessage):
        return {"embed": to_embed(body)}
    return {"content": body}


class CompanyBot(discord.Client):
    """Discord side of the bot: feeds messages to MessageHandler and sends its output."""

    def __init__(self, *, attendance_channel_id: Optional[str] = None, **kwargs):
        intents = discord.Intents.default()
        intents.guilds = True
        intents.guild_messages = True
        intents.message_content = True
        super().__init__(intents=intents, **kwargs)
        self._attendance_channel_id = attendance_channel_id
        self._handler: Optional[MessageHandler] = None

    def bind(self, handler: MessageHandler) -> None:
        self._handler = handler

    async def on_ready(self) -> None:
        logger.info("Bot logged in as %s", self.user)

    async def on_message(self, message: discord.Message) -> None:
        if message.author.bot or self._handler is None:
            return

        incoming = IncomingMessage(
            user_id=str(message.author.id),
            username=message.author.name,
            content=message.content or "",
            channel_id=str(message.channel.id),
            timestamp=message.created_at,
            is_bot=message.author.bot,
        )
        # Persistence and translation block; keep them off the event loop.
        outgoing = await asyncio.to_thread(self._handler.handle, incoming)
        for item in outgoing:
            await self._deliver(message, item)

    async def _deliver(self, origin: discord.Message, item: OutgoingMessage) -> None:
        kwargs = _send_kwargs(item.body)
        try:
            if item.target == OutgoingTarget.REPLY:
                await origin.reply(**kwargs)
            elif item.target == OutgoingTarget.CHANNEL:
                await origin.channel.send(**kwargs)
            elif item.target == OutgoingTarget.ATTENDANCE and self._attendance_channel_id:
                channel = self.get_channel(int(self._attendance_channel_id))
                if channel is None:
                    logger.error("Attendance channel %s not found", self._attendance_channel_id)
                    return
                await channel.send(**kwargs)
        except discord.DiscordException:
            logger.exception("Failed to deliver %s message", item.target.value)


class DiscordNotifier:
    """Send a StructuredMessage to a channel from any thread (e.g. Flask workers)."""

    def __init__(self, client: discord.Client, *, timeout: float = NOTIFY_TIMEOUT_SECONDS):
        self._client = client
        self._timeout = timeout

    def send(self, channel_id: str, message: StructuredMessage) -> bool:
        if not channel_id:
            logger.error("Notification channel is not configured")
            return False

        if not self._client.is_ready():
            logger.error("Discord client is not ready, dropping notification %r", message.title)
            return False

        future = asyncio.run_coroutine_threadsafe(self._send(int(channel_id), message), self._client.loop)
        try:
            return future.result(timeout=self._timeout)
        except Exception:
            future.cancel()
            logger.exception("Failed to send notification to channel %s", channel_id)
            return False

    async def _send(self, channel_id: int, message: StructuredMessage) -> bool:
        channel = self._client.get_channel(channel_id)
        if channel is None:
            logger.error("Notification channel %s not found", channel_id)
            return False
        await channel.send(embed=to_embed(message))
        return True

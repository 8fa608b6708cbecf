from datetime import datetime

import pytz

from src.company_bot.company_bot.bot.discord_client import to_embed
from src.company_bot.company_bot.notifications.model import StructuredMessage


def test_structured_message_becomes_embed():
    msg = (
        StructuredMessage(
            title="🟢 出勤 (Check In)",
            color=0x00FF00,
            description="taroさんが出勤しました",
            thumbnail_url="https://example.com/a.png",
            timestamp=datetime(2026, 1, 15, 0, 0, tzinfo=pytz.utc),
        )
        .with_field("時間 (Time)", "09:00:00")
        .with_field("報告 (Report)", "plan", inline=False)
    )

    embed = to_embed(msg)

    assert embed.title == "🟢 出勤 (Check In)"
    assert embed.color.value == 0x00FF00
    assert [(f.name, f.value, f.inline) for f in embed.fields] == [
        ("時間 (Time)", "09:00:00", True),
        ("報告 (Report)", "plan", False),
    ]
    assert embed.thumbnail.url == "https://example.com/a.png"

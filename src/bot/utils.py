"""
Utility functions for the bot, such as embed creation and error handling.
"""

import discord

from src.formatting.models import DisplayRecord

# Discord rejects embed fields with an empty value
EMPTY_FIELD_VALUE = "\u200b"


def create_embed(title: str, description: str, color=discord.Color.blue()) -> discord.Embed:
    """Helper function to create a styled Discord embed."""
    return discord.Embed(title=title, description=description, color=color)


def create_record_embed(record: DisplayRecord) -> discord.Embed:
    """Renders a formatted search result as a Discord embed."""
    # Truncate title if it's too long for Discord's embed limits
    title = record.title
    if len(title) > 256:
        title = title[:253] + "..."

    embed = discord.Embed(
        title=title,
        url=record.url,
        description=record.description,
        color=discord.Color(record.color)
    )
    if record.thumbnail_url:
        embed.set_thumbnail(url=record.thumbnail_url)
    for field in record.fields:
        embed.add_field(name=field.name, value=field.value or EMPTY_FIELD_VALUE, inline=field.inline)
    embed.set_footer(text=record.footer_text, icon_url=record.footer_icon_url)
    return embed


def error_reply_text(error: Exception) -> str:
    """The message shown to a user when a command fails."""
    tag = getattr(error, "tag", None)
    if tag:
        return f"Something went wrong while running that command. (Error code: {tag})"
    return "Something went wrong while running that command."

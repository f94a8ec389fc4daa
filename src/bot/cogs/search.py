"""
The /search command: looks up Workshop.codes posts or wiki articles.
"""

import logging
from typing import Optional

import discord
from discord import app_commands
from discord.ext import commands

from src.bot.utils import create_record_embed
from src.formatting.models import SearchReply
from src.formatting.search_results import format_codes, format_wiki
from src.retrievers import workshop_codes

logger = logging.getLogger(__name__)


class SearchCog(commands.GroupCog, group_name="search",
                group_description="Search Workshop.codes repository of codes, or the wiki of articles"):
    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @app_commands.command(name="codes", description="Search for Workshop.codes posts")
    @app_commands.describe(
        query="Terms to search for",
        overwatch_2_only="Whether to only include posts compatible with Overwatch 2"
    )
    async def codes(self, interaction: discord.Interaction, query: str, overwatch_2_only: Optional[bool] = None):
        await self.run_subcommand(interaction, "codes", query=query, overwatch_2_only=overwatch_2_only)

    @app_commands.command(name="wiki", description="Search for articles on the Workshop.codes wiki")
    @app_commands.describe(query="Terms to search for")
    async def wiki(self, interaction: discord.Interaction, query: str):
        await self.run_subcommand(interaction, "wiki", query=query)

    async def run_subcommand(self, interaction: discord.Interaction, name: str, **options) -> bool:
        """
        Runs one /search subcommand and replies with its results.
        Returns False for a subcommand this cog doesn't know.

        Errors from Workshop.codes are not handled here; they reach the bot's
        app command error handler.
        """
        await interaction.response.defer()
        if name == "codes":
            reply = await self.search_codes(options["query"], options.get("overwatch_2_only"))
        elif name == "wiki":
            reply = await self.search_wiki(options["query"])
        else:
            logger.warning(f"Unknown /search subcommand: {name}")
            return False

        await self.send_reply(interaction, reply)
        return True

    async def search_codes(self, query: str, overwatch_2_only: Optional[bool] = None) -> SearchReply:
        data = await workshop_codes.fetch("/search.json", {
            "search": query,
            "overwatch_2": overwatch_2_only
        })
        return format_codes(data)

    async def search_wiki(self, query: str) -> SearchReply:
        data = await workshop_codes.fetch(workshop_codes.wiki_search_path(query))
        return format_wiki(data)

    async def send_reply(self, interaction: discord.Interaction, reply: SearchReply):
        if not reply.found:
            await interaction.edit_original_response(content=reply.content)
            return

        embeds = [create_record_embed(record) for record in reply.records]
        await interaction.edit_original_response(content=reply.content, embeds=embeds)
        logger.info(f"Sent {len(embeds)} search result(s) to {interaction.user}")


async def setup(bot):
    await bot.add_cog(SearchCog(bot))

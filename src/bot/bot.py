"""
Main entry point for the Discord bot instance.
Loads the bot extensions (cogs), registers the slash commands and reports command errors.
"""
import discord
from discord import app_commands
from discord.ext import commands
import logging
from typing import Optional
from src.bot.utils import create_embed, error_reply_text

logger = logging.getLogger(__name__)

EXTENSIONS = (
    "src.bot.cogs.search",
)


class OllieBot(commands.Bot):
    def __init__(self, *args, guild_id: Optional[int] = None, **kwargs):
        super().__init__(*args, **kwargs)
        # Commands are registered to this guild only when set, otherwise globally
        self.guild_id = guild_id

    async def setup_hook(self):
        """A special method that is called when the bot logs in."""
        logger.info("Running setup hook...")
        self.tree.on_error = self.on_app_command_error
        for extension in EXTENSIONS:
            await self.load_extension(extension)
        logger.info("Cogs loaded successfully.")

        await self.register_commands()

    async def register_commands(self):
        """Syncs the slash commands with Discord, scoped to the configured guild if any."""
        if self.guild_id is not None:
            guild = discord.Object(id=self.guild_id)
            self.tree.copy_global_to(guild=guild)
            synced = await self.tree.sync(guild=guild)
            logger.info(f"Synced {len(synced)} command(s) to guild {self.guild_id}")
        else:
            synced = await self.tree.sync()
            logger.info(f"Synced {len(synced)} global command(s)")

    async def on_ready(self):
        """Event triggered when the bot is ready and connected to Discord."""
        logger.info(f'Logged in as {self.user.name} (ID: {self.user.id})')
        logger.info('------')

    async def on_app_command_error(self, interaction: discord.Interaction, error: app_commands.AppCommandError):
        """Logs a failed slash command and tells the user it failed."""
        if isinstance(error, app_commands.CommandInvokeError):
            error = error.original

        command_name = interaction.command.qualified_name if interaction.command else "unknown"
        logger.error(f"Command '{command_name}' failed: {error}", exc_info=error)

        embed = create_embed("Error", error_reply_text(error), color=discord.Color.red())
        try:
            if interaction.response.is_done():
                await interaction.edit_original_response(content=None, embed=embed)
            else:
                await interaction.response.send_message(embed=embed, ephemeral=True)
        except discord.HTTPException as e:
            logger.error(f"Failed to report error for command '{command_name}': {e}")

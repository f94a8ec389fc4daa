"""
Main entry point to start the application, configuring logging and running the Discord bot.
"""


import asyncio
import logging
import discord
from discord.ext import commands
from src.bot.bot import OllieBot
from config import config

async def main():
    """
    Main entry point for the application.
    Validates the configuration and runs the Discord bot.
    """
    # 1. Configure logging and check settings
    logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(name)s - %(message)s')
    config.validate()

    # 2. Slash commands don't need privileged intents
    intents = discord.Intents.default()

    # 3. Create and run the bot instance
    bot = OllieBot(command_prefix=commands.when_mentioned, intents=intents, guild_id=config.DISCORD_GUILD_ID)

    logging.getLogger(__name__).info("Starting OllieBot...")
    async with bot:
        await bot.start(config.DISCORD_BOT_TOKEN)

if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nBot shutting down.")

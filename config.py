"""
Loads configurations from the .env file and makes them available to the application.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _optional_int(name: str):
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return int(value)


class Config:
    """
    Configuration class to hold all application settings from environment variables.
    """
    DISCORD_BOT_TOKEN = os.getenv("DISCORD_BOT_TOKEN")
    # Only used when registering commands: scopes them to a single server
    DISCORD_GUILD_ID = _optional_int("DISCORD_GUILD_ID")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    def validate(self):
        if not self.DISCORD_BOT_TOKEN:
            raise ValueError("DISCORD_BOT_TOKEN environment variable is missing.")

# Instantiate the config
config = Config()

"""
Exceptions raised by bot commands and surfaced to users by the bot's error handler.
"""


class OllieBotError(Exception):
    """
    Base error for failures a user should be able to report.
    The tag is a short, memorable code shown in the error reply.
    """

    def __init__(self, message: str, tag: str):
        super().__init__(message)
        self.message = message
        self.tag = tag

    def __str__(self):
        return f"{self.message} ({self.tag})"

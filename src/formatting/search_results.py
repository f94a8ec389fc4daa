"""
Turns Workshop.codes search responses into replies for the /search command.
"""

from typing import Any, List

from discord.utils import format_dt

from src.bot.errors import OllieBotError
from src.formatting.models import CodePost, DisplayRecord, EmbedField, SearchReply, WikiArticle

MAX_CODE_RESULTS = 3
MAX_WIKI_RESULTS = 1
MAX_DESCRIPTION_LENGTH = 1000

FOOTER_TEXT = "workshop.codes | Powered by Elo Hell Esports"
FOOTER_ICON_URL = "https://ehe.gg/media/img/logos/Elo-Hell-Logo_I-C-Dark.png"

CODES_FOUND_MESSAGE = "Here's what I found!"
CODES_EMPTY_MESSAGE = "I didn't find anything on Workshop.codes."
WIKI_FOUND_MESSAGE = "The best wiki article I could find was..."
WIKI_EMPTY_MESSAGE = "I didn't find anything like that on the Workshop.codes wiki."


class ShapeError(OllieBotError):
    """Workshop.codes answered with something other than a list of results."""

    def __init__(self, payload: Any):
        super().__init__(
            f"Expected array from Workshop.codes, got {type(payload).__name__} instead",
            "Wombat",
        )


def truncate(text: str, length: int) -> str:
    return f"{text[:length]}..." if len(text) > length else text


def _ensure_list(payload: Any) -> List[Any]:
    if not isinstance(payload, list):
        raise ShapeError(payload)
    return payload


def code_post_record(post: CodePost) -> DisplayRecord:
    """Builds the embed record for a single code post."""
    return DisplayRecord(
        title=f"{post.title} by {post.username}",
        url=f"https://workshop.codes/{post.code}",
        description=f"Code: **{post.code}**",
        fields=(
            EmbedField(
                name="Category" if len(post.categories) == 1 else "Categories",
                value=" | ".join(post.categories),
                inline=True,
            ),
            EmbedField(name="Created", value=format_dt(post.created_at, "D"), inline=True),
            EmbedField(name="Last updated", value=format_dt(post.last_revision_created_at, "R"), inline=True),
        ),
        footer_text=FOOTER_TEXT,
        footer_icon_url=FOOTER_ICON_URL,
        thumbnail_url=post.thumbnail,
    )


def wiki_article_record(article: WikiArticle) -> DisplayRecord:
    """Builds the embed record for a single wiki article."""
    return DisplayRecord(
        title=article.title,
        url=f"https://workshop.codes/wiki/articles/{article.slug}",
        description=truncate(article.content, MAX_DESCRIPTION_LENGTH),
        fields=(
            EmbedField(name="Category", value=article.category_title, inline=True),
            EmbedField(name="Last updated", value=format_dt(article.updated_at, "R"), inline=True),
        ),
        footer_text=FOOTER_TEXT,
        footer_icon_url=FOOTER_ICON_URL,
    )


def format_codes(payload: Any) -> SearchReply:
    """
    Formats the answer of a code search.

    Only the first few posts are kept, in the order Workshop.codes ranked them.
    An empty result list is a normal reply, not an error.

    Raises:
        ShapeError: if the payload is not a list.
    """
    posts = _ensure_list(payload)
    if not posts:
        return SearchReply(CODES_EMPTY_MESSAGE)

    records = tuple(code_post_record(CodePost.from_json(item)) for item in posts[:MAX_CODE_RESULTS])
    return SearchReply(CODES_FOUND_MESSAGE, records)


def format_wiki(payload: Any) -> SearchReply:
    """
    Formats the answer of a wiki search, keeping only the best match.

    Raises:
        ShapeError: if the payload is not a list.
    """
    articles = _ensure_list(payload)
    if not articles:
        return SearchReply(WIKI_EMPTY_MESSAGE)

    records = tuple(wiki_article_record(WikiArticle.from_json(item)) for item in articles[:MAX_WIKI_RESULTS])
    return SearchReply(WIKI_FOUND_MESSAGE, records)

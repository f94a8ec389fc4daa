"""
Issues search requests against the Workshop.codes API.
"""

import enum
import json
import asyncio
import logging
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import quote, urlencode

import aiohttp

from src.bot.errors import OllieBotError

logger = logging.getLogger(__name__)

BASE_URL = "https://workshop.codes"

# Characters encodeURIComponent leaves alone on top of quote()'s defaults
_URI_COMPONENT_SAFE = "!*'()"

ParamValue = Optional[Union[str, bool]]


class GatewayErrorCode(enum.Enum):
    BAD_STATUS = "Beaver"
    NO_RESPONSE = "Tortoise"
    REQUEST_MALFORMED = "Foxhound"


class GatewayError(OllieBotError):
    """Workshop.codes could not be reached or answered with an error."""

    def __init__(self, message: str, code: GatewayErrorCode):
        super().__init__(message, code.value)
        self.code = code


def _to_param_string(value: Union[str, bool]) -> str:
    # The service expects lowercase string flags, str(True) would give "True"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_search_url(path: str, params: Optional[Mapping[str, ParamValue]] = None) -> str:
    """
    Builds an absolute Workshop.codes URL.

    Args:
        path: Request path, a leading slash is added when missing.
        params: Query parameters. None values are left out of the URL.

    Returns:
        The URL with percent-encoded query parameters.
    """
    if not path.startswith("/"):
        path = f"/{path}"
    url = f"{BASE_URL}{path}"

    query: Dict[str, str] = {}
    for key, value in (params or {}).items():
        if value is not None:
            query[key] = _to_param_string(value)

    if query:
        url = f"{url}?{urlencode(query, quote_via=quote)}"
    return url


def wiki_search_path(query: str) -> str:
    """Path for a wiki search, with the first '.' turned into a space so it isn't read as a format suffix."""
    encoded = quote(query, safe=_URI_COMPONENT_SAFE).replace(".", " ", 1)
    return f"/wiki/search/{encoded}.json"


def _log_failed_request(url: str, params: Optional[Mapping[str, ParamValue]]):
    try:
        logger.debug("Workshop.codes request failed: %s", {"method": "GET", "url": url, "params": dict(params or {})})
    except Exception:
        pass


def _decode_body(body: str) -> Any:
    try:
        return json.loads(body)
    except ValueError:
        return body


async def _get(session: aiohttp.ClientSession, url: str) -> Any:
    async with session.get(url) as response:
        if not 200 <= response.status < 300:
            request_path = url[len(BASE_URL):]
            message = (
                f"Workshop.codes responded with code {response.status} - {response.reason}\n"
                f"Request: `{request_path}`"
            )
            raise GatewayError(message, GatewayErrorCode.BAD_STATUS)
        return _decode_body(await response.text())


async def fetch(
    path: str,
    params: Optional[Mapping[str, ParamValue]] = None,
    session: Optional[aiohttp.ClientSession] = None,
) -> Any:
    """
    Sends a single GET request to Workshop.codes and returns the decoded JSON body.
    A body that isn't JSON is returned as text, callers validate the shape.

    Raises:
        GatewayError: on a non-2xx status, when no response arrives, or when
            the request can't be sent at all.
    """
    url = build_search_url(path, params)
    try:
        if session is not None:
            return await _get(session, url)
        async with aiohttp.ClientSession() as own_session:
            return await _get(own_session, url)
    except GatewayError:
        _log_failed_request(url, params)
        raise
    except (aiohttp.ClientConnectionError, aiohttp.ClientPayloadError, asyncio.TimeoutError) as e:
        _log_failed_request(url, params)
        raise GatewayError(
            f"Failed to contact Workshop.codes: GET {url} did not get a response",
            GatewayErrorCode.NO_RESPONSE,
        ) from e
    except (aiohttp.ClientError, ValueError, TypeError) as e:
        _log_failed_request(url, params)
        raise GatewayError(
            f"Malformed request to Workshop.codes? {e}",
            GatewayErrorCode.REQUEST_MALFORMED,
        ) from e

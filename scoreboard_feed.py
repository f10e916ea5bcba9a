"""
Scoreboard feed: fetches the ESPN golf scoreboard with a short TTL cache.

If the upstream call fails the fixed fallback snapshot is served instead,
so callers always get a payload shaped like the ESPN response.
"""

import copy
import logging
import threading

import requests
from cachetools import TTLCache

import config
from fallback_data import MOCK_SCOREBOARD
from leaderboard_engine import (
    LOAD_FAILED_MESSAGE,
    ScoreboardDataError,
    ScoreboardSnapshot,
    parse_event,
)

logger = logging.getLogger(__name__)

SOURCE_LIVE = "live"
SOURCE_FALLBACK = "fallback"
SOURCE_PROXY = "proxy"

_HTTP_HEADERS = {"User-Agent": config.USER_AGENT}

_cache = TTLCache(maxsize=1, ttl=config.CACHE_TTL_SECONDS)
_cache_lock = threading.Lock()
_CACHE_KEY = "scoreboard"


class FeedError(RuntimeError):
    """Upstream or proxy fetch failed (HTTP status, network, bad JSON)."""


def _get_json(url, timeout):
    try:
        resp = requests.get(url, headers=_HTTP_HEADERS, timeout=timeout)
        resp.raise_for_status()
        return resp.json()
    except requests.RequestException as exc:
        raise FeedError(f"Request to {url} failed: {exc}") from exc
    except ValueError as exc:
        raise FeedError(f"Response from {url} was not valid JSON: {exc}") from exc


def fetch_upstream(url=None, timeout=None):
    """Raw ESPN scoreboard JSON. Raises FeedError on any failure."""
    return _get_json(url or config.ESPN_SCOREBOARD_URL, timeout or config.REQUEST_TIMEOUT_SECONDS)


def fallback_payload():
    return copy.deepcopy(MOCK_SCOREBOARD)


def get_scoreboard():
    """
    Cached scoreboard payload and where it came from ("live" or "fallback").

    The fallback is not cached, so the next call retries ESPN.
    """
    with _cache_lock:
        cached = _cache.get(_CACHE_KEY)
        if cached is not None:
            logger.debug("Serving scoreboard from cache")
            return cached, SOURCE_LIVE

        try:
            payload = fetch_upstream()
        except FeedError as exc:
            logger.error("Error fetching from ESPN API: %s", exc)
            logger.warning("Serving fallback scoreboard")
            return fallback_payload(), SOURCE_FALLBACK

        _cache[_CACHE_KEY] = payload
        logger.info("Fetched live scoreboard from ESPN")
        return payload, SOURCE_LIVE


def clear_cache():
    with _cache_lock:
        _cache.clear()


def fetch_proxy(url, timeout=None):
    """Scoreboard JSON via the local proxy. Raises FeedError on failure."""
    return _get_json(url, timeout or config.REQUEST_TIMEOUT_SECONDS)


def load_snapshot(proxy_url=None):
    """
    Run one fetch cycle and wrap the result in a ScoreboardSnapshot.

    Never raises: proxy failures and payloads without competition data
    come back as a snapshot carrying the user-facing error message.
    """
    try:
        if proxy_url:
            payload, source = fetch_proxy(proxy_url), SOURCE_PROXY
        else:
            payload, source = get_scoreboard()
        event = parse_event(payload)
    except (FeedError, ScoreboardDataError) as exc:
        logger.error("Error fetching golf data: %s", exc)
        return ScoreboardSnapshot(event=None, error=LOAD_FAILED_MESSAGE, source=SOURCE_PROXY if proxy_url else SOURCE_LIVE)

    return ScoreboardSnapshot(event=event, error=None, source=source)

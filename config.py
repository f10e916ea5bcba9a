"""
Configuration for the golf groups leaderboard.

Everything here is either read from the environment once at import time
or is fixed for the lifetime of the process (the group rosters).
"""

import logging
import os

# ---------- UPSTREAM FEED ----------

ESPN_SCOREBOARD_URL = os.environ.get(
    "ESPN_SCOREBOARD_URL",
    "https://site.api.espn.com/apis/site/v2/sports/golf/pga/scoreboard",
)

# When set, the page reads from the local proxy (server.py) instead of ESPN.
GOLF_PROXY_URL = os.environ.get("GOLF_PROXY_URL", "")

REQUEST_TIMEOUT_SECONDS = float(os.environ.get("REQUEST_TIMEOUT_SECONDS", "10"))
CACHE_TTL_SECONDS = int(os.environ.get("CACHE_TTL_SECONDS", "300"))  # 5 minutes

USER_AGENT = os.environ.get(
    "USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
)

# ESPN tee times are UTC; displayed times are shifted back by this many hours.
TEE_TIME_OFFSET_HOURS = int(os.environ.get("TEE_TIME_OFFSET_HOURS", "2"))


# ---------- PROXY SERVER ----------

SERVER_HOST = os.environ.get("SERVER_HOST", "127.0.0.1")
SERVER_PORT = int(os.environ.get("SERVER_PORT", "5000"))


# ---------- LOGGING ----------

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level=None):
    """Set up root logging for an entry point (server or page)."""
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)


# ---------- GROUPS ----------

# Each group: two primary players + one wildcard. Names must match the
# feed's athlete.displayName (case-insensitive).
GROUPS = (
    {
        "name": "Phillip",
        "players": ("Rory McIlroy", "Bryson DeChambeau"),
        "wildcard": "Akshay Bhatia",
    },
    {
        "name": "Tay",
        "players": ("Scottie Scheffler", "Brooks Koepka"),
        "wildcard": "Will Zalatoris",
    },
    {
        "name": "Gilb",
        "players": ("Collin Morikawa", "Xander Schauffele"),
        "wildcard": "Wyndham Clark",
    },
)

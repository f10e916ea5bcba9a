import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional

logger = logging.getLogger(__name__)

# ============================================================
# Constants & Baselines
# ============================================================

# Par per hole, holes 1..18
PAR_VALUES = (4, 5, 4, 3, 4, 3, 4, 5, 4, 4, 4, 3, 5, 4, 5, 3, 4, 4)
DEFAULT_HOLE_PAR = 4

EVEN = "E"
PLACEHOLDER = "—"
NOT_AVAILABLE = "N/A"
ROUND_SEPARATOR = " | "

# Round indexes checked for holes completed, in precedence order
# (third round first, then second, then first).
THRU_SOURCES = (2, 1, 0)
MAX_ROUNDS_SHOWN = 3

DEFAULT_TEE_TIME_OFFSET_HOURS = 2

NO_COMPETITION_DATA = "No competition data available."
LOAD_FAILED_MESSAGE = "Failed to load scoreboard data. Please try again later."
DEFAULT_EVENT_NAME = "Golf Tournament"


class ScoreboardDataError(ValueError):
    """Raised when a scoreboard payload carries no usable competition."""


# ============================================================
# Data model
# ============================================================

@dataclass(frozen=True)
class RoundScore:
    value: Optional[float] = None
    tee_time: Optional[str] = None
    holes: tuple = ()

    @property
    def holes_played(self) -> int:
        return len(self.holes)


@dataclass(frozen=True)
class Competitor:
    id: str
    display_name: str
    score: str = ""
    short_detail: Optional[str] = None
    thru: Optional[int] = None
    rounds: tuple = ()

    def round(self, index):
        """Round at ``index`` or None when the feed has not reached it."""
        if 0 <= index < len(self.rounds):
            return self.rounds[index]
        return None


@dataclass(frozen=True)
class Event:
    id: str
    name: str
    date: str
    competitors: tuple = ()


@dataclass(frozen=True)
class Group:
    name: str
    players: tuple
    wildcard: str

    @property
    def members(self):
        return tuple(self.players) + (self.wildcard,)


@dataclass(frozen=True)
class PlayerLine:
    name: str
    role: str
    found: bool
    score: int
    score_display: str
    today_score: str = ""
    progress_label: Optional[str] = None
    progress: str = ""
    today_over_under: Optional[str] = None
    status: str = NOT_AVAILABLE


@dataclass(frozen=True)
class GroupStanding:
    group: Group
    total: int
    total_display: str
    place: int
    place_label: str
    lines: tuple = ()


@dataclass(frozen=True)
class ScoreboardSnapshot:
    """Everything one fetch cycle produced. Replaced, never mutated."""

    event: Optional[Event] = None
    error: Optional[str] = None
    source: str = "live"
    fetched_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def ok(self) -> bool:
        return self.event is not None and self.error is None


def build_groups(definitions):
    """Turn config-style dicts into immutable Group records."""
    return tuple(
        Group(name=d["name"], players=tuple(d["players"]), wildcard=d["wildcard"])
        for d in definitions
    )


# ============================================================
# Payload parsing
# ============================================================

def _first(items):
    if isinstance(items, list) and items:
        return items[0]
    return None


def _parse_round(raw) -> RoundScore:
    if not isinstance(raw, dict):
        return RoundScore()
    holes = raw.get("linescores") or ()
    return RoundScore(
        value=raw.get("value"),
        tee_time=raw.get("teeTime"),
        holes=tuple(holes) if isinstance(holes, list) else (),
    )


def _score_token(raw):
    # Some ESPN endpoints nest the score as {"value": ..., "displayValue": "-7"}
    if isinstance(raw, dict):
        raw = raw.get("displayValue", "")
    if raw is None:
        return ""
    return str(raw)


def parse_competitor(raw: dict) -> Competitor:
    athlete = raw.get("athlete") or {}
    status = raw.get("status") or {}
    status_type = status.get("type") or {}
    linescores = raw.get("linescores") or []
    return Competitor(
        id=str(raw.get("id", "")),
        display_name=athlete.get("displayName", "") or "",
        score=_score_token(raw.get("score")),
        short_detail=status_type.get("shortDetail"),
        thru=status.get("thru"),
        rounds=tuple(_parse_round(r) for r in linescores) if isinstance(linescores, list) else (),
    )


def parse_event(payload) -> Event:
    """
    Build an Event from a raw scoreboard payload.

    Reads events[0].competitions[0].competitors[]. Raises ScoreboardDataError
    when the event is missing or has no competitors.
    """
    raw_event = _first(payload.get("events")) if isinstance(payload, dict) else None
    raw_competition = _first(raw_event.get("competitions")) if isinstance(raw_event, dict) else None
    raw_competitors = (raw_competition or {}).get("competitors") or []

    if not raw_event or not raw_competitors:
        raise ScoreboardDataError(NO_COMPETITION_DATA)

    return Event(
        id=str(raw_event.get("id", "")),
        name=raw_event.get("name", "") or "",
        date=raw_event.get("date", "") or "",
        competitors=tuple(parse_competitor(c) for c in raw_competitors if isinstance(c, dict)),
    )


# ============================================================
# Score parsing & formatting
# ============================================================

def try_parse_score(token) -> Optional[int]:
    """"E" -> 0, "+3" -> 3, "-4" -> -4. None when the token is not a score."""
    if token is None:
        return None
    text = str(token).strip()
    if text == EVEN:
        return 0
    if text.startswith("+"):
        text = text[1:]
    try:
        return int(text)
    except ValueError:
        return None


def parse_score(token, default: int = 0) -> int:
    """Relative-to-par integer for a score token; unparsable tokens count as ``default``."""
    value = try_parse_score(token)
    if value is None:
        logger.debug("Unparsable score token %r, using %d", token, default)
        return default
    return value


def format_relative(total: int) -> str:
    if total > 0:
        return f"+{total}"
    if total == 0:
        return EVEN
    return str(total)


def format_score(token) -> str:
    """Player score display. Feed tokens are already signed ("-7", "+1", "E")."""
    text = "" if token is None else str(token).strip()
    return text or PLACEHOLDER


def _format_number(value) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# ============================================================
# Par table & over/under
# ============================================================

def partial_par(holes_played: int) -> int:
    """Sum of par for holes 1..holes_played. Holes past the table count as par 4."""
    total = 0
    for i in range(max(0, int(holes_played))):
        total += PAR_VALUES[i] if i < len(PAR_VALUES) else DEFAULT_HOLE_PAR
    return total


def calculate_over_under_par(score, holes_played: int) -> str:
    diff = score - partial_par(holes_played)
    if isinstance(diff, float) and diff.is_integer():
        diff = int(diff)
    return format_relative(diff)


# ============================================================
# Player lookup & group aggregation
# ============================================================

def find_player_by_name(event: Optional[Event], name: str) -> Optional[Competitor]:
    if event is None or not name:
        return None
    wanted = name.lower()
    for competitor in event.competitors:
        if competitor.display_name.lower() == wanted:
            return competitor
    return None


def player_score(event: Optional[Event], name: str) -> int:
    """Parsed score for ``name``; a player missing from the field counts as 0."""
    competitor = find_player_by_name(event, name)
    if competitor is None:
        return 0
    return parse_score(competitor.score)


def calculate_group_score(group: Group, event: Optional[Event]) -> int:
    return sum(player_score(event, name) for name in group.members)


def sort_groups(groups, event: Optional[Event]):
    """Lowest total first. Ties keep configuration order."""
    return sorted(groups, key=lambda g: calculate_group_score(g, event))


def place_label(index: int) -> str:
    if index == 0:
        return "Currently Leading"
    if index == 1:
        suffix = "nd"
    elif index == 2:
        suffix = "rd"
    else:
        suffix = "th"
    return f"{index + 1}{suffix} Place"


# ============================================================
# Status formatting
# ============================================================

def get_today_score(competitor: Competitor) -> str:
    """Round values joined with " | ". Missing and even (0) rounds are left out."""
    values = [r.value for r in competitor.rounds[:MAX_ROUNDS_SHOWN]]
    shown = [_format_number(v) for v in values if v is not None and v != 0]
    return ROUND_SEPARATOR.join(shown)


def holes_completed(competitor: Competitor) -> Optional[int]:
    for index in THRU_SOURCES:
        rnd = competitor.round(index)
        if rnd is not None and rnd.holes_played > 0:
            return rnd.holes_played
    return None


def _parse_utc_timestamp(value: str) -> Optional[datetime]:
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        ts = datetime.fromisoformat(text)
    except ValueError:
        return None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def format_tee_time(tee_time, offset_hours: int = DEFAULT_TEE_TIME_OFFSET_HOURS) -> Optional[str]:
    """
    UTC tee time -> local "h:mm AM/PM".

    Values that are not ISO timestamps (e.g. the fallback feed's "10:00 AM")
    are already display strings and are returned unchanged.
    """
    if not tee_time:
        return None
    ts = _parse_utc_timestamp(str(tee_time))
    if ts is None:
        return str(tee_time).strip()
    local = ts - timedelta(hours=offset_hours)
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{hour}:{local.minute:02d} {meridiem}"


def get_thru_or_tee_time(competitor: Competitor, offset_hours: int = DEFAULT_TEE_TIME_OFFSET_HOURS) -> str:
    holes = holes_completed(competitor)
    if holes is not None:
        return str(holes)
    first = competitor.round(0)
    tee = format_tee_time(first.tee_time if first else None, offset_hours)
    return tee or PLACEHOLDER


def progress_label(competitor: Competitor) -> Optional[str]:
    if not competitor.rounds:
        return None
    first = competitor.rounds[0]
    return "Thru" if first.holes_played else "Tee"


def get_today_over_under(competitor: Competitor) -> Optional[str]:
    second = competitor.round(1)
    if second is None or not second.value:
        return None
    return calculate_over_under_par(second.value, second.holes_played)


def get_status(competitor: Competitor) -> str:
    return competitor.short_detail or NOT_AVAILABLE


# ============================================================
# Leaderboard assembly
# ============================================================

def build_player_line(event, name, role="player", offset_hours=DEFAULT_TEE_TIME_OFFSET_HOURS) -> PlayerLine:
    competitor = find_player_by_name(event, name)
    if competitor is None:
        return PlayerLine(name=name, role=role, found=False, score=0, score_display=NOT_AVAILABLE)

    return PlayerLine(
        name=name,
        role=role,
        found=True,
        score=parse_score(competitor.score),
        score_display=format_score(competitor.score),
        today_score=get_today_score(competitor),
        progress_label=progress_label(competitor),
        progress=get_thru_or_tee_time(competitor, offset_hours),
        today_over_under=get_today_over_under(competitor),
        status=get_status(competitor),
    )


def build_leaderboard(groups, event: Optional[Event], offset_hours: int = DEFAULT_TEE_TIME_OFFSET_HOURS):
    """
    Sorted group standings for the page.

    Each standing carries the group total, its display string, the place
    label and one PlayerLine per member (primary players first, wildcard last).
    """
    standings = []
    for index, group in enumerate(sort_groups(groups, event)):
        lines = [build_player_line(event, name, "player", offset_hours) for name in group.players]
        lines.append(build_player_line(event, group.wildcard, "wildcard", offset_hours))
        total = sum(line.score for line in lines)
        standings.append(
            GroupStanding(
                group=group,
                total=total,
                total_display=format_relative(total),
                place=index + 1,
                place_label=place_label(index),
                lines=tuple(lines),
            )
        )
    return standings


def page_title(event: Optional[Event]) -> str:
    name = event.name if event is not None and event.name else DEFAULT_EVENT_NAME
    return f"{name} Groups"

import requests

import config
import leaderboard_engine as lbe
import scoreboard_feed


def test_fallback_scoreboard_ranks_groups(monkeypatch):
    def down(*args, **kwargs):
        raise requests.ConnectionError("ESPN unreachable")

    scoreboard_feed.clear_cache()
    monkeypatch.setattr(scoreboard_feed.requests, "get", down)

    snapshot = scoreboard_feed.load_snapshot()
    assert snapshot.ok
    assert snapshot.source == scoreboard_feed.SOURCE_FALLBACK

    groups = lbe.build_groups(config.GROUPS)
    standings = lbe.build_leaderboard(groups, snapshot.event)

    assert [s.group.name for s in standings] == ["Tay", "Gilb", "Phillip"]
    assert [s.total for s in standings] == [-11, -9, -7]
    assert [s.total_display for s in standings] == ["-11", "-9", "-7"]
    assert standings[0].place_label == "Currently Leading"


def test_fallback_player_lines():
    event = lbe.parse_event(scoreboard_feed.fallback_payload())
    groups = lbe.build_groups(config.GROUPS)
    phillip = next(s for s in lbe.build_leaderboard(groups, event) if s.group.name == "Phillip")

    rory, bryson, wildcard = phillip.lines
    assert rory.score_display == "-2"
    # even first round is dropped from today's score
    assert rory.today_score == ""
    assert rory.progress_label == "Tee"
    assert rory.progress == "10:50 AM"
    assert rory.today_over_under is None
    assert rory.status == "F"

    assert bryson.today_score == "-2"
    assert wildcard.role == "wildcard"
    assert wildcard.name == "Akshay Bhatia"
    assert wildcard.score_display == "+1"
    assert wildcard.today_score == "1"

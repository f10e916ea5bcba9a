import leaderboard_engine as lbe


def _event(scores):
    competitors = tuple(
        lbe.Competitor(id=str(i), display_name=name, score=score)
        for i, (name, score) in enumerate(scores.items(), start=1)
    )
    return lbe.Event(id="1", name="Test Open", date="2024-01-01", competitors=competitors)


def test_lookup_is_case_insensitive_exact_match():
    event = _event({"Scottie Scheffler": "-7"})
    assert lbe.find_player_by_name(event, "scottie scheffler").score == "-7"
    assert lbe.find_player_by_name(event, "SCOTTIE SCHEFFLER") is not None
    assert lbe.find_player_by_name(event, "Scheffler") is None
    assert lbe.find_player_by_name(None, "Scottie Scheffler") is None


def test_group_total_sums_players_and_wildcard():
    event = _event({"A": "-2", "B": "-1", "C": "+1"})
    group = lbe.Group(name="G", players=("A", "B"), wildcard="C")
    assert lbe.calculate_group_score(group, event) == -2


def test_missing_player_contributes_zero():
    event = _event({"A": "-2", "B": "-1"})
    group = lbe.Group(name="G", players=("A", "B"), wildcard="D")
    assert lbe.calculate_group_score(group, event) == -3

    line = lbe.build_player_line(event, "D", role="wildcard")
    assert not line.found
    assert line.score == 0
    assert line.score_display == "N/A"


def test_groups_sort_ascending():
    event = _event({"A": "-2", "B": "E", "C": "+1"})
    groups = [
        lbe.Group(name="plus", players=("C", "x1"), wildcard="x2"),
        lbe.Group(name="minus", players=("A", "x1"), wildcard="x2"),
        lbe.Group(name="even", players=("B", "x1"), wildcard="x2"),
    ]
    ranked = lbe.sort_groups(groups, event)
    assert [lbe.calculate_group_score(g, event) for g in ranked] == [-2, 0, 1]


def test_ties_keep_configuration_order():
    event = _event({"A": "-2", "B": "-2"})
    groups = [
        lbe.Group(name="first", players=("A", "x1"), wildcard="x2"),
        lbe.Group(name="second", players=("B", "x1"), wildcard="x2"),
    ]
    for _ in range(5):
        assert [g.name for g in lbe.sort_groups(groups, event)] == ["first", "second"]


def test_place_labels():
    assert lbe.place_label(0) == "Currently Leading"
    assert lbe.place_label(1) == "2nd Place"
    assert lbe.place_label(2) == "3rd Place"
    assert lbe.place_label(3) == "4th Place"


def test_build_leaderboard_shapes_standings():
    event = _event({"A": "-2", "B": "-1", "C": "+1", "D": "+4"})
    groups = lbe.build_groups(
        [
            {"name": "Worse", "players": ["D", "B"], "wildcard": "C"},
            {"name": "Better", "players": ["A", "B"], "wildcard": "C"},
        ]
    )
    standings = lbe.build_leaderboard(groups, event)

    assert [s.group.name for s in standings] == ["Better", "Worse"]
    best = standings[0]
    assert best.total == -2
    assert best.total_display == "-2"
    assert best.place == 1
    assert best.place_label == "Currently Leading"
    assert [line.role for line in best.lines] == ["player", "player", "wildcard"]
    assert standings[1].total_display == "+4"


def test_leaderboard_without_event_is_all_even():
    groups = lbe.build_groups([{"name": "G", "players": ["A", "B"], "wildcard": "C"}])
    standings = lbe.build_leaderboard(groups, None)
    assert standings[0].total_display == "E"
    assert all(line.score_display == "N/A" for line in standings[0].lines)

import leaderboard_engine as lbe


def test_even_parses_to_zero():
    assert lbe.parse_score("E") == 0


def test_plus_and_minus_tokens():
    assert lbe.parse_score("+3") == 3
    assert lbe.parse_score("-4") == -4
    assert lbe.parse_score("0") == lbe.parse_score("E")


def test_unparsable_token_degrades_to_zero():
    assert lbe.try_parse_score("CUT") is None
    assert lbe.try_parse_score("") is None
    assert lbe.try_parse_score(None) is None

    assert lbe.parse_score("CUT") == 0
    assert lbe.parse_score("") == 0
    # caller can pick a different policy
    assert lbe.parse_score("WD", default=99) == 99


def test_whitespace_is_ignored():
    assert lbe.parse_score(" -2 ") == -2
    assert lbe.parse_score("E ") == 0


def test_format_relative():
    assert lbe.format_relative(5) == "+5"
    assert lbe.format_relative(0) == "E"
    assert lbe.format_relative(-11) == "-11"


def test_format_score_passes_feed_tokens_through():
    assert lbe.format_score("-7") == "-7"
    assert lbe.format_score("+1") == "+1"
    assert lbe.format_score("E") == "E"
    assert lbe.format_score("") == lbe.PLACEHOLDER

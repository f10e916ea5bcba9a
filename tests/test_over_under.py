import leaderboard_engine as lbe


def test_par_table_shape():
    assert len(lbe.PAR_VALUES) == 18
    assert set(lbe.PAR_VALUES) <= {3, 4, 5}
    assert lbe.partial_par(18) == sum(lbe.PAR_VALUES)


def test_partial_round_against_partial_par():
    # par for holes 1-3 is 4 + 5 + 4 = 13
    assert lbe.partial_par(3) == 13
    assert lbe.calculate_over_under_par(2, 3) == "-11"


def test_zero_holes_is_even():
    assert lbe.partial_par(0) == 0
    assert lbe.calculate_over_under_par(0, 0) == "E"


def test_over_par_gets_plus_sign():
    # hole 1 is a par 4
    assert lbe.calculate_over_under_par(6, 1) == "+2"
    assert lbe.calculate_over_under_par(4, 1) == "E"


def test_holes_past_the_table_count_as_par_four():
    assert lbe.partial_par(19) == sum(lbe.PAR_VALUES) + 4
    assert lbe.partial_par(-3) == 0


def test_float_round_values_format_as_integers():
    assert lbe.calculate_over_under_par(-2.0, 0) == "-2"

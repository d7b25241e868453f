import math

import pytest

from contestkit.arrays import (
    array_balancing,
    array_elimination,
    avengers,
    beat_the_odds,
    card_game_winners,
    cut_ribbon,
    diamond_miner,
    dima_line,
    directional_increase,
    dragons,
    flipping_game,
    good_pair,
    great_graph_cost,
    great_sequence,
    mainak,
    make_increasing,
    masked_sum,
)


def test_masked_sum_increasing_all_marked_is_plain_sum():
    values = [2, 4, 7, 9]
    assert masked_sum("1111", values) == sum(values)


def test_masked_sum_no_marks_is_zero():
    assert masked_sum("000", [5, 6, 7]) == 0


def test_masked_sum_length_mismatch():
    with pytest.raises(ValueError):
        masked_sum("10", [1, 2, 3])


def test_array_balancing_symmetric_and_bounded():
    a = [1, 10, 3, 8]
    b = [9, 2, 7, 4]
    result = array_balancing(a, b)
    assert result == array_balancing(b, a)
    naive = sum(abs(q - p) for p, q in zip(a, a[1:])) + sum(
        abs(q - p) for p, q in zip(b, b[1:])
    )
    assert result <= naive


def test_array_balancing_constant_arrays():
    assert array_balancing([3, 3, 3], [3, 3, 3]) == 0


def test_array_balancing_length_mismatch():
    with pytest.raises(ValueError):
        array_balancing([1, 2], [1])


def test_array_elimination_all_zero_allows_every_k():
    assert array_elimination([0, 0, 0]) == [1, 2, 3]


def test_array_elimination_repeated_value_gives_divisors():
    expected = [k for k in range(1, 7) if 6 % k == 0]
    assert array_elimination([5] * 6) == expected


def test_array_elimination_distinct_bits():
    assert array_elimination([1, 2, 4]) == [1]


def test_beat_the_odds_parity_swap_invariant():
    values = [1, 4, 6, 3, 8, 10, 5]
    assert beat_the_odds(values) == beat_the_odds([v + 1 for v in values])
    assert beat_the_odds(values) <= len(values) // 2


def test_beat_the_odds_all_even():
    assert beat_the_odds([2, 4, 6]) == 0


def test_cut_ribbon_unit_pieces():
    assert cut_ribbon(11, 1, 1, 1) == 11


def test_cut_ribbon_piece_order_does_not_matter():
    assert cut_ribbon(17, 3, 5, 7) == cut_ribbon(17, 7, 3, 5)


def test_cut_ribbon_unreachable():
    assert cut_ribbon(5, 2, 4, 6) is None


def test_cut_ribbon_rejects_zero_piece():
    with pytest.raises(ValueError):
        cut_ribbon(5, 0, 1, 2)


def test_diamond_miner_single_pair():
    assert diamond_miner([(3, 0), (0, 4)]) == pytest.approx(5.0)


def test_diamond_miner_order_and_sign_invariant():
    points = [(0, 1), (1, 0), (0, -2), (-3, 0), (0, 5), (4, 0)]
    mirrored = [(-x, -y) for x, y in reversed(points)]
    assert math.isclose(diamond_miner(points), diamond_miner(mirrored))


def test_diamond_miner_unbalanced():
    with pytest.raises(ValueError):
        diamond_miner([(0, 1), (0, 2)])


def test_dima_line_crossing_and_not():
    assert dima_line([0, 10, 5, 15]) is True
    assert dima_line([0, 15, 5, 10]) is False


def test_dima_line_monotone_never_crosses():
    assert dima_line(list(range(0, 50, 5))) is False


def test_directional_increase_cases():
    assert directional_increase([0]) is True
    assert directional_increase([1, -1]) is True
    assert directional_increase([-1, 1]) is False
    assert directional_increase([1, -1, 1, -1]) is False


def test_directional_increase_empty():
    with pytest.raises(ValueError):
        directional_increase([])


def test_dragons_bonus_unlocks_next():
    fights = [(1, 99), (100, 0)]
    assert dragons(2, fights) is True
    assert dragons(2, list(reversed(fights))) is True


def test_dragons_equal_strength_loses():
    assert dragons(5, [(5, 10)]) is False


def test_flipping_game_all_zeros_and_all_ones():
    assert flipping_game([0, 0, 0, 0]) == 4
    assert flipping_game([1, 1, 1]) == 2
    assert flipping_game([1]) == 0


def test_flipping_game_empty():
    with pytest.raises(ValueError):
        flipping_game([])


def test_card_game_winners():
    assert card_game_winners([2, 9], [3, 5]) == ("Alice", "Alice")
    assert card_game_winners([2, 7], [7, 1]) == ("Alice", "Bob")
    assert card_game_winners([1], [4]) == ("Bob", "Bob")


def test_good_pair_points_at_extremes():
    values = [5, 1, 9, 1, 9, 3]
    low, high = good_pair(values)
    assert values[low - 1] == min(values)
    assert values[high - 1] == max(values)
    assert low == values.index(min(values)) + 1


def test_great_graph_cost():
    assert great_graph_cost([0, 5]) == 0
    weights = [0, 3, 8, 2]
    assert great_graph_cost(weights) == -max(weights)


def test_great_sequence_already_paired():
    assert great_sequence([1, 3, 5, 2, 6, 10], 2) == 0


def test_great_sequence_parity_matches_length():
    values = [4, 7, 8, 13, 2, 26, 1]
    assert (great_sequence(values, 2) - len(values)) % 2 == 0
    assert great_sequence([5], 3) == 1


def test_great_sequence_rejects_small_factor():
    with pytest.raises(ValueError):
        great_sequence([1, 1], 1)


def test_mainak_bounds():
    values = [4, 1, 7, 3, 2]
    result = mainak(values)
    assert result >= values[-1] - values[0]
    assert result <= max(values) - min(values)
    assert mainak([5]) == 0


def test_make_increasing_small():
    assert make_increasing([7]) == 0
    assert make_increasing([3, 8]) == 1
    assert make_increasing([1, 2, 3, 4, 5]) == 4


def test_make_increasing_empty():
    with pytest.raises(ValueError):
        make_increasing([])


def test_avengers_single_and_empty():
    assert avengers([7]) == 7
    assert avengers([]) == 0
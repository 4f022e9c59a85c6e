from __future__ import annotations

import pytest

from patterns import SYMMETRIES, Pattern, generate_orientations
from resources import Resource

B, G, S, Wt, Wd = Resource.BRICK, Resource.GLASS, Resource.STONE, Resource.WHEAT, Resource.WOOD


def test_dimensions_are_derived():
    pattern = Pattern(((None, S, None), (Wd, G, Wd)))
    assert pattern.width == 3
    assert pattern.height == 2
    assert pattern.size == 6


def test_short_rows_are_padded_with_gaps():
    ragged = Pattern(((Wd,), (Wd, S)))
    assert ragged.cells == ((Wd, None), (Wd, S))
    assert ragged == Pattern(((Wd, None), (Wd, S)))


def test_lists_are_accepted_and_stored_as_tuples():
    pattern = Pattern([[Wd, S]])
    assert pattern.cells == ((Wd, S),)
    assert pattern == Pattern(((Wd, S),))


def test_equality_is_structural():
    assert Pattern(((Wd, S),)) == Pattern(((Wd, S),))
    assert Pattern(((Wd, S),)) != Pattern(((S, Wd),))
    assert Pattern(((Wd, None),)) != Pattern(((None, Wd),))
    assert len({Pattern(((Wd, S),)), Pattern(((Wd, S),))}) == 1


def test_equal_patterns_hash_equal():
    assert hash(Pattern(((B, None), (B, G)))) == hash(Pattern(((B, None), (B, G))))


def test_pattern_is_immutable():
    pattern = Pattern(((Wd,),))
    with pytest.raises(AttributeError):
        pattern.width = 3


@pytest.mark.parametrize("cells", [(), ((),), ((), ())])
def test_empty_grid_is_rejected(cells):
    with pytest.raises(ValueError):
        Pattern(cells)


def test_parse_and_str():
    text = "-- St --\nWd Gs Wd"
    pattern = Pattern.parse(text)
    assert pattern.cells == ((None, S, None), (Wd, G, Wd))
    assert str(pattern) == text


def test_parse_accepts_dot_gaps_and_indentation():
    pattern = Pattern.parse(
        """
        . wt
        Bk Gs
        """
    )
    assert pattern.cells == ((None, Wt), (B, G))


def test_parse_rejects_unknown_code():
    with pytest.raises(ValueError):
        Pattern.parse("Wd Xx")


def test_filled_cells_skip_gaps():
    pattern = Pattern.parse("St Wd --\nSt Wd Bk")
    assert list(pattern.filled_cells()) == [
        (0, 0, S),
        (1, 0, Wd),
        (0, 1, S),
        (1, 1, Wd),
        (2, 1, B),
    ]


def test_eight_symmetries():
    assert len(SYMMETRIES) == 8
    assert SYMMETRIES[0][0] == "identity"


def test_rotation_swaps_dimensions():
    pattern = Pattern.parse("St Wd --\nSt Wd Bk")
    rotated = dict(SYMMETRIES)["rotate_90"](pattern.cells)
    assert rotated == ((S, S), (Wd, Wd), (None, B))


def test_each_symmetry_matches_hand_computed_grid():
    # 1 2
    # 3 4
    grid = ((B, G), (S, Wt))
    expected = {
        "identity": ((B, G), (S, Wt)),
        "flip_horizontal": ((S, Wt), (B, G)),
        "flip_vertical": ((G, B), (Wt, S)),
        "rotate_180": ((Wt, S), (G, B)),
        "rotate_90": ((B, S), (G, Wt)),
        "rotate_90_flip_horizontal": ((G, Wt), (B, S)),
        "rotate_90_flip_vertical": ((S, B), (Wt, G)),
        "rotate_90_flip_both": ((Wt, G), (S, B)),
    }
    for name, transform in SYMMETRIES:
        assert transform(grid) == expected[name], name


def test_orientations_of_asymmetric_square_are_all_distinct():
    pattern = Pattern(((B, G), (S, Wt)))
    assert len(generate_orientations(pattern)) == 8


def test_single_cell_has_one_orientation():
    assert generate_orientations(Pattern(((Wd,),))) == [Pattern(((Wd,),))]


def test_uniform_domino_has_two_orientations():
    orientations = generate_orientations(Pattern(((Wd, Wd),)))
    assert orientations == [Pattern(((Wd, Wd),)), Pattern(((Wd,), (Wd,)))]


def test_uniform_square_has_one_orientation():
    assert len(generate_orientations(Pattern(((S, S), (S, S))))) == 1


def test_orientations_start_with_canonical_pattern():
    pattern = Pattern.parse("-- -- Gs\nSt Gs St")
    assert generate_orientations(pattern)[0] == pattern


def test_orientations_are_unique():
    orientations = generate_orientations(Pattern.parse("Wt Wt\nWd Wd"))
    assert len(orientations) == len(set(orientations)) == 4

from __future__ import annotations

import pytest

from othello.board import (
    BLACK,
    INVALID_COORD,
    NOT_FOUND,
    START,
    WHITE,
    Position,
    bb_square,
    coord_to_index,
    count,
    index_to_coord,
    squares,
)


def test_coordinate_round_trip_for_every_cell():
    for index in range(64):
        assert coord_to_index(index_to_coord(index)) == index


def test_coordinate_layout_corners():
    assert coord_to_index("A1") == 0
    assert coord_to_index("H1") == 7
    assert coord_to_index("A8") == 56
    assert coord_to_index("h8") == 63
    assert coord_to_index("d3") == coord_to_index("D3") == 19


@pytest.mark.parametrize("text", ["Z9", "A", "", "A9", "I1", "A0", "D33", " D3", "3D", None, 27])
def test_malformed_coordinate_is_not_found(text):
    assert coord_to_index(text) == NOT_FOUND


def test_index_to_coord_out_of_range_sentinel():
    assert index_to_coord(-1) == INVALID_COORD
    assert index_to_coord(64) == INVALID_COORD


def test_initial_position():
    p = Position.initial()
    assert squares(p.black) == [27, 36]
    assert squares(p.white) == [28, 35]
    assert p.current_player is BLACK
    assert p.pass_count == 0
    assert p.last_move == START
    assert p.total_discs() == 4
    assert p.black & p.white == 0


def test_rows_render_rank_one_first():
    rows = Position.initial().to_rows()
    assert rows[3] == "...BW..."
    assert rows[4] == "...WB..."
    assert rows[0] == "........"


def test_overlapping_discs_rejected():
    with pytest.raises(ValueError):
        Position(black=bb_square(10), white=bb_square(10))


def test_discs_outside_board_rejected():
    with pytest.raises(ValueError):
        Position(black=1 << 64, white=0)


def test_with_player_keeps_occupancy():
    p = Position.initial()
    q = p.with_player(WHITE)
    assert q.current_player is WHITE
    assert (q.black, q.white) == (p.black, p.white)
    assert p.with_player(BLACK) is p


def test_count_is_popcount():
    assert count(0) == 0
    assert count(0xFFFF_FFFF_FFFF_FFFF) == 64
    assert count(bb_square(0) | bb_square(63)) == 2

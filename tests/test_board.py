import pytest

from graphboard.core import (
    Board,
    BoardError,
    IllegalMoveError,
    Marker,
    Move,
    MoveError,
    Position,
    is_empty,
)
from graphboard.topologies import diamond, ladder


def ladder_board() -> Board:
    return ladder().build()


def test_neighbors_follow_adjacency_order() -> None:
    board = diamond().build()

    assert board.node_neighbors(board[0]) == [Position(1), Position(2), Position(3)]
    assert [p.index for p in board.node_neighbors(board[1])] == [0, 3]


def test_neighbors_carry_current_markers() -> None:
    board = ladder_board()
    neighbors = board.node_neighbors(board[2])

    assert [p.index for p in neighbors] == [1, 3, 4]
    assert [p.marker for p in neighbors] == [Marker.RED, Marker.RED, Marker.EMPTY]


def test_neighbor_count_matches_out_degree() -> None:
    board = ladder_board()
    for index, neighbors in enumerate(board.adjacency):
        assert len(board.node_neighbors(board[index])) == len(neighbors)


def test_size_and_initial_markers() -> None:
    board = ladder_board()

    assert board.size() == 12
    assert len(board) == 12
    assert board.occupied_positions(Marker.RED) == [0, 1, 2, 3]
    assert board.occupied_positions(Marker.BLUE) == [8, 9, 10, 11]
    assert board.occupied_positions(Marker.EMPTY) == [4, 5, 6, 7]


def test_indexing_returns_snapshot() -> None:
    board = ladder_board()
    before = board[2]
    board.do_move(Move(2, 5))

    assert before.marker == Marker.RED
    assert board[2].marker == Marker.EMPTY


def test_search_ignores_predicate_for_same_start_and_end() -> None:
    board = ladder_board()
    for index in range(board.size()):
        assert board.breadth_first_search(index, index, lambda p: False)


def test_search_on_ladder() -> None:
    board = ladder_board()

    assert board.breadth_first_search(0, 11, lambda p: True)
    assert board.breadth_first_search(2, 6, is_empty)
    assert not board.breadth_first_search(0, 11, is_empty)


def test_search_after_move() -> None:
    board = ladder_board()
    board.do_move(Move(2, 5))

    assert not board.breadth_first_search(1, 5, is_empty)
    assert board.breadth_first_search(1, 4, is_empty)


def test_search_predicate_gates_target_too() -> None:
    board = ladder_board()
    # 8 is blue, so it is never enqueued under the empty-only predicate.
    assert not board.breadth_first_search(4, 8, is_empty)
    assert board.breadth_first_search(4, 8, lambda p: p.index != 3)


def test_invalid_move_reasons() -> None:
    board = ladder_board()

    assert board.invalid_move(Move(4, 2)) == MoveError.SOURCE_EMPTY
    assert board.invalid_move(Move(2, 3)) == MoveError.DESTINATION_OCCUPIED
    assert board.invalid_move(Move(0, 4)) == MoveError.UNREACHABLE
    assert board.invalid_move(Move(2, 7)) is None


def test_source_empty_checked_first() -> None:
    board = ladder_board()
    # Both endpoints fail; the empty source wins.
    assert board.invalid_move(Move(5, 8)) == MoveError.SOURCE_EMPTY
    assert board.invalid_move(Move(4, 4)) == MoveError.SOURCE_EMPTY


def test_possible_moves_on_ladder() -> None:
    board = ladder_board()
    moves = [move.as_tuple() for move in board.possible_moves()]

    assert moves == [(2, 4), (2, 5), (2, 6), (2, 7), (8, 4), (8, 5), (8, 6), (8, 7)]


def test_possible_moves_are_all_valid() -> None:
    board = ladder_board()
    board.do_move(Move(8, 4))
    for move in board.possible_moves():
        assert board.invalid_move(move) is None


def test_do_move_transfers_marker() -> None:
    board = ladder_board()
    board.do_move(Move(8, 6))

    assert board[6].marker == Marker.BLUE
    assert board[8].marker == Marker.EMPTY
    assert board.occupied_positions(Marker.BLUE) == [6, 9, 10, 11]


def test_do_move_rejects_illegal_move() -> None:
    board = ladder_board()
    untouched = board.copy()

    with pytest.raises(IllegalMoveError) as excinfo:
        board.do_move(Move(0, 4))

    assert excinfo.value.reason == MoveError.UNREACHABLE
    assert excinfo.value.move == Move(0, 4)
    assert board == untouched


def test_equality_is_label_sensitive() -> None:
    board = ladder_board()
    assert board == ladder_board()
    assert board != diamond().build()

    relabelled = Board([[1], [0]], positions_red=[0])
    mirrored = Board([[1], [0]], positions_red=[1])
    assert relabelled != mirrored

    board.do_move(Move(2, 4))
    assert board != ladder_board()


def test_copy_is_independent() -> None:
    board = ladder_board()
    clone = board.copy()
    clone.do_move(Move(2, 4))

    assert board[2].marker == Marker.RED
    assert clone[4].marker == Marker.RED


def test_construction_rejects_overlapping_placements() -> None:
    with pytest.raises(BoardError):
        Board([[1], [0]], positions_red=[0], positions_blue=[0])


def test_construction_rejects_out_of_range_indices() -> None:
    with pytest.raises(BoardError):
        Board([[1], [2]])
    with pytest.raises(BoardError):
        Board([[1], [0]], positions_blue=[5])


def test_self_loops_are_tolerated() -> None:
    board = Board([[0, 1], [0]], positions_red=[0])

    assert [move.as_tuple() for move in board.possible_moves()] == [(0, 1)]


def test_encode_decode_move() -> None:
    board = ladder_board()

    assert board.encode_move(Move(2, 5)) == 29
    assert board.decode_move(29) == Move(2, 5)
    with pytest.raises(ValueError):
        board.encode_move(Move(12, 0))
    with pytest.raises(ValueError):
        board.decode_move(144)

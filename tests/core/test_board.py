"""Tests for Board."""

import pytest

from chessfinder.core.board import Board
from chessfinder.core.enums import Color, PieceType
from chessfinder.core.errors import InvalidSquareError, MalformedInputError
from chessfinder.core.piece import Piece
from chessfinder.core.types import parse_square


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board.piece_at("e1") == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board.piece_at("e8") == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            ("a1", PieceType.ROOK), ("b1", PieceType.KNIGHT), ("c1", PieceType.BISHOP),
            ("d1", PieceType.QUEEN), ("e1", PieceType.KING), ("f1", PieceType.BISHOP),
            ("g1", PieceType.KNIGHT), ("h1", PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            ("a8", PieceType.ROOK), ("b8", PieceType.KNIGHT), ("c8", PieceType.BISHOP),
            ("d8", PieceType.QUEEN), ("e8", PieceType.KING), ("f8", PieceType.BISHOP),
            ("g8", PieceType.KNIGHT), ("h8", PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_pawns(self) -> None:
        board = Board.initial()
        for file in "abcdefgh":
            assert board[f"{file}2"] == Piece(Color.WHITE, PieceType.PAWN)
            assert board[f"{file}7"] == Piece(Color.BLACK, PieceType.PAWN)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for file in "abcdefgh":
            for rank in "3456":
                assert board.is_empty(file + rank)

    def test_no_pawns(self) -> None:
        board = Board.no_pawns()
        assert len(board) == 16
        assert all(p.piece_type != PieceType.PAWN for p in board)


class TestBoardOperations:
    def test_place_and_get(self) -> None:
        board = Board()
        piece = board.place_piece(PieceType.PAWN, Color.WHITE, "e4")
        assert piece == Piece(Color.WHITE, PieceType.PAWN)
        assert board.piece_at("e4") == piece
        assert board.piece_at(parse_square("e4")) == piece
        assert board.is_occupied("e4")
        assert board.is_empty("e2")

    def test_place_overwrites(self) -> None:
        board = Board()
        board.place_piece(PieceType.PAWN, Color.WHITE, "d5")
        board.place_piece(PieceType.QUEEN, Color.BLACK, "d5")
        assert board.piece_at("d5") == Piece(Color.BLACK, PieceType.QUEEN)
        assert len(board) == 1

    def test_clear_square(self) -> None:
        board = Board.initial()
        board.clear("e2")
        assert board.piece_at("e2") is None
        assert not board.is_occupied("e2")
        assert len(board) == 31

    def test_clear_empty_square_is_noop(self) -> None:
        board = Board()
        board.clear("a1")
        assert len(board) == 0

    def test_reset(self) -> None:
        board = Board.initial()
        board.reset()
        assert board.all_pieces() == []

    def test_locate(self) -> None:
        board = Board.initial()
        placed = board.locate("g8")
        assert placed is not None
        assert placed.piece == Piece(Color.BLACK, PieceType.KNIGHT)
        assert placed.square == "g8"
        assert board.locate("e4") is None

    def test_invalid_square_rejected(self) -> None:
        board = Board()
        with pytest.raises(InvalidSquareError):
            board.piece_at("i9")
        with pytest.raises(InvalidSquareError):
            board.place_piece(PieceType.ROOK, Color.WHITE, "a0")

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy.clear("e1")
        assert board != copy
        assert board.piece_at("e1") == Piece(Color.WHITE, PieceType.KING)


class TestAllPieces:
    def test_storage_order(self) -> None:
        board = Board.initial()
        squares = [p.square for p in board.all_pieces()]
        assert len(squares) == 32
        assert squares[:3] == ["a8", "b8", "c8"]
        assert squares[8] == "a7"
        assert squares[-1] == "h1"

    def test_filter_by_color(self) -> None:
        board = Board.initial()
        white = board.all_pieces(Color.WHITE)
        assert len(white) == 16
        assert all(p.color == Color.WHITE for p in white)
        assert white[0].square == "a2"

    def test_coordinates_match_grid(self) -> None:
        board = Board.initial()
        for placed in board:
            assert board[placed.coordinate] == placed.piece


class TestLoadPiecePlacement:
    def test_single_rook(self) -> None:
        board = Board()
        board.load_piece_placement("8/8/8/8/8/8/8/R7")
        assert board.piece_at("a1") == Piece(Color.WHITE, PieceType.ROOK)
        assert len(board) == 1

    def test_trailing_fields_ignored(self) -> None:
        board = Board.from_fen("4k3/8/8/8/8/8/8/4K3 b - - 12 40")
        assert board.piece_at("e8") == Piece(Color.BLACK, PieceType.KING)
        assert board.piece_at("e1") == Piece(Color.WHITE, PieceType.KING)
        assert len(board) == 2

    def test_load_replaces_contents(self) -> None:
        board = Board.initial()
        board.load_piece_placement("8/8/8/8/8/8/8/R7")
        assert len(board) == 1

    def test_malformed_leaves_board_untouched(self) -> None:
        board = Board.initial()
        with pytest.raises(MalformedInputError):
            board.load_piece_placement("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP")
        assert board == Board.initial()


class TestBoardRepr:
    def test_repr(self) -> None:
        text = repr(Board.initial())
        lines = text.splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[-1] == "  a b c d e f g h"

    def test_empty_board_repr(self) -> None:
        assert repr(Board()).splitlines()[3] == "5 . . . . . . . ."

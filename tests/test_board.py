import unittest

from chess_core.core import Board, Color, Piece, PieceType, ascii_board, coords_from_an


class TestPiece(unittest.TestCase):
    def test_fourteen_variants(self):
        self.assertEqual(len(Piece), 14)

    def test_color_accessors(self):
        self.assertTrue(Piece.WHITE_QUEEN.is_white)
        self.assertFalse(Piece.WHITE_QUEEN.is_black)
        self.assertIs(Piece.BLACK_KNIGHT.color, Color.BLACK)
        self.assertIs(Piece.BLACK_KNIGHT.kind, PieceType.KNIGHT)
        for p in (Piece.BLANK, Piece.OFF_BOARD):
            self.assertIsNone(p.color)
            self.assertFalse(p.is_white)
            self.assertFalse(p.is_black)
            self.assertFalse(p.is_piece)

    def test_of_lookup(self):
        self.assertIs(Piece.of(PieceType.ROOK, Color.WHITE), Piece.WHITE_ROOK)
        self.assertIs(Piece.of(PieceType.KING, Color.BLACK), Piece.BLACK_KING)


class TestBoardIndexing(unittest.TestCase):
    def test_out_of_range_reads_sentinel(self):
        b = Board.default_position()
        for s in ((-1, 0), (0, -1), (9, 3), (3, 9), (100, 100), (-5, -5)):
            with self.subTest(square=s):
                self.assertIs(b[s], Piece.OFF_BOARD)

    def test_index_eight_is_sentinel_band(self):
        b = Board.default_position()
        # (8, 0) would alias (0, 1) with a plain file + 8 * rank
        self.assertIs(b[8, 0], Piece.OFF_BOARD)
        self.assertIs(b[0, 8], Piece.OFF_BOARD)
        self.assertIs(b[8, 8], Piece.OFF_BOARD)
        self.assertIs(b[0, 1], Piece.BLACK_PAWN)

    def test_off_board_write_is_absorbed(self):
        b = Board.default_position()
        before = b.copy()
        b[8, 0] = Piece.WHITE_QUEEN
        b[coords_from_an("z", 3)] = Piece.WHITE_QUEEN
        b[-1, 4] = Piece.WHITE_QUEEN
        self.assertEqual(b, before)
        self.assertIs(b[8, 0], Piece.OFF_BOARD)

    def test_write_and_read(self):
        b = Board()
        b[3, 4] = Piece.BLACK_BISHOP
        self.assertIs(b[3, 4], Piece.BLACK_BISHOP)
        self.assertIs(b[4, 3], Piece.BLANK)

    def test_copy_is_independent(self):
        b = Board.default_position()
        c = b.copy()
        c[4, 4] = Piece.WHITE_KNIGHT
        self.assertIs(b[4, 4], Piece.BLANK)
        self.assertNotEqual(b, c)

    def test_bad_slot_count(self):
        with self.assertRaises(ValueError):
            Board([Piece.BLANK] * 63)


class TestDefaultPosition(unittest.TestCase):
    def setUp(self):
        self.b = Board.default_position()

    def test_back_ranks(self):
        b = self.b
        self.assertIs(b[0, 7], Piece.WHITE_ROOK)
        self.assertIs(b[7, 7], Piece.WHITE_ROOK)
        self.assertIs(b[4, 7], Piece.WHITE_KING)
        self.assertIs(b[3, 7], Piece.WHITE_QUEEN)
        self.assertIs(b[4, 0], Piece.BLACK_KING)
        self.assertIs(b[3, 0], Piece.BLACK_QUEEN)
        self.assertIs(b[1, 0], Piece.BLACK_KNIGHT)
        self.assertIs(b[5, 0], Piece.BLACK_BISHOP)

    def test_middle_is_blank(self):
        for r in range(2, 6):
            for f in range(8):
                self.assertIs(self.b[f, r], Piece.BLANK)

    def test_full_pawn_ranks(self):
        for f in range(8):
            self.assertIs(self.b[f, 6], Piece.WHITE_PAWN)
            self.assertIs(self.b[f, 1], Piece.BLACK_PAWN)

    def test_one_king_each(self):
        self.assertEqual(self.b.king_square(Color.WHITE), (4, 7))
        self.assertEqual(self.b.king_square(Color.BLACK), (4, 0))
        kings = [p for _, p in self.b.iter_squares() if p.kind is PieceType.KING]
        self.assertEqual(len(kings), 2)

    def test_ascii(self):
        rows = ascii_board(self.b).splitlines()
        self.assertEqual(rows[0], "r n b q k b n r")
        self.assertEqual(rows[3], ". . . . . . . .")
        self.assertEqual(rows[7], "R N B Q K B N R")


if __name__ == "__main__":
    unittest.main()

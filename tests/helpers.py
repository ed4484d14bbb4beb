"""Shared move sequences for the test suite."""

# X wins on row 0 with its third move.
ROW_WIN = [(0, 0), (1, 1), (0, 1), (2, 2), (0, 2)]

# Fills a 3x3 board without any line:
#   X O X
#   X O O
#   O X X
TIE_FILL = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]


def play(game, moves):
    for row, col in moves:
        assert game.make_move(row, col), f"move {(row, col)} was rejected"

"""Game rules constants for 8x8 draughts."""

# Board dimensions
BOARD_SIZE = 8

# Starting rows for each player
PLAYER_ONE_ROWS = range(0, 3)  # Rows 0, 1, 2
PLAYER_TWO_ROWS = range(5, 8)  # Rows 5, 6, 7

# Diagonal directions for moves
# (row_delta, col_delta)
FORWARD_DIRECTIONS_P1 = [(1, -1), (1, 1)]   # Down-left, Down-right
FORWARD_DIRECTIONS_P2 = [(-1, -1), (-1, 1)] # Up-left, Up-right
ALL_DIRECTIONS = [(-1, -1), (-1, 1), (1, -1), (1, 1)]  # Captures, and king moves

# Promotion
# Player 1 promotes on row 7
# Player 2 promotes on row 0
PROMOTION_ROW_P1 = BOARD_SIZE - 1
PROMOTION_ROW_P2 = 0

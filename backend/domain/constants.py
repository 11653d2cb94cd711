"""
Game constants for GridSnake.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# (row, col) offset applied to the head for each heading
MOVE_OFFSETS = {
    UP: (-1, 0),
    DOWN: (1, 0),
    LEFT: (0, -1),
    RIGHT: (0, 1),
}

# Game settings
POINTS_PER_FOOD = 10
TICK_INTERVAL_SECONDS = 0.3
TIMER_INTERVAL_SECONDS = 1
INITIAL_SNAKE = [(2, 8)]
INITIAL_HEADING = LEFT

# Size of one rendered cell when deriving a grid from a display area
BLOCK_SIZE = 30

# Key under which the high score is persisted
HIGH_SCORE_KEY = "highScore"

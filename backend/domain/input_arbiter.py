"""
Turns raw direction requests into one committed heading per tick.
"""

from typing import Optional

from .constants import DOWN, INITIAL_HEADING, LEFT, OPPOSITES, RIGHT, UP, VALID_MOVES

KEY_BINDINGS = {
    "arrowup": UP,
    "arrowdown": DOWN,
    "arrowleft": LEFT,
    "arrowright": RIGHT,
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
    "w": UP,
    "s": DOWN,
    "a": LEFT,
    "d": RIGHT,
}


def heading_for_key(key: str) -> Optional[str]:
    """Map a key name such as 'ArrowUp' to a heading, or None if unbound."""
    if not key:
        return None
    return KEY_BINDINGS.get(key.strip().lower())


class InputArbiter:
    """
    Single-buffered direction input.

    Requests are validated against the heading committed on the previous tick,
    and only the last accepted request before a commit takes effect. A request
    for the exact opposite of the committed heading is dropped, since the snake
    would run into its own neck before anything is drawn.
    """

    def __init__(self, heading: str = INITIAL_HEADING):
        self.committed_heading = heading
        self.pending_heading = heading

    def reset(self, heading: str) -> None:
        self.committed_heading = heading
        self.pending_heading = heading

    def request(self, new_heading: str) -> bool:
        """Buffer ``new_heading`` for the next commit. Returns True if accepted."""
        if new_heading not in VALID_MOVES:
            return False
        if new_heading == OPPOSITES[self.committed_heading]:
            return False
        self.pending_heading = new_heading
        return True

    def handle_key(self, key: str) -> bool:
        heading = heading_for_key(key)
        if heading is None:
            return False
        return self.request(heading)

    def commit(self) -> str:
        """Lock in the buffered heading for this tick and return it."""
        self.committed_heading = self.pending_heading
        return self.committed_heading

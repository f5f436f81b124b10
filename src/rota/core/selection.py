"""
Selection index bookkeeping.

Modified: 2026-10-18
"""


class SelectionTracker:
    """
    Bounded index into a list whose length can change between calls.

    Index 0 doubles as "no selection" when the list is empty. Both
    operations accept any input without raising.
    """

    def __init__(self, index: int = 0):
        self.index = max(0, index)

    def clamp(self, length: int) -> int:
        """Pull the index back inside ``[0, length - 1]``."""
        if length <= 0:
            self.index = 0
        elif self.index >= length:
            self.index = length - 1
        return self.index

    def move_by(self, delta: int, length: int) -> int:
        """Move by ``delta`` rows, saturating at both ends."""
        if length <= 0:
            return self.index
        self.index = max(0, min(self.index + delta, length - 1))
        return self.index

    def reset(self) -> None:
        self.index = 0

    def __repr__(self) -> str:
        return f"SelectionTracker(index={self.index})"

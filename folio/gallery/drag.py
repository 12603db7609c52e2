"""Drag vs click disambiguation for tiles that are both draggable and links."""

import math


class DragTracker:
    """Remember whether the last pointer gesture on a tile was a drag."""

    def __init__(self, threshold: float = 5.0):
        self.threshold = threshold
        self.origin = (0.0, 0.0)
        self.was_dragged = False

    def start(self, x: float, y: float) -> None:
        self.origin = (x, y)
        self.was_dragged = False

    def move(self, x: float, y: float) -> None:
        if math.hypot(x - self.origin[0], y - self.origin[1]) > self.threshold:
            self.was_dragged = True

    def click(self) -> bool:
        """Return True if the click should navigate.

        A click ending a drag is swallowed and clears the mark.
        """
        if self.was_dragged:
            self.was_dragged = False
            return False
        return True

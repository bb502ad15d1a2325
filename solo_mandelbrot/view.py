"""
View state and pointer interaction for the Mandelbrot viewer.

Contains:
- ViewState: center and zoom of the region being shown
- Idle / Dragging: the two states of the drag state machine
- update_drag: advances the drag state by one frame of input
"""

import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ZOOM_FACTOR = 1.1  # Per wheel notch


def _valid_zoom(zoom):
    return math.isfinite(zoom) and zoom > 0


class ViewState:
    """
    Center and zoom of the region currently shown.

    zoom is the half-extent of the view along each axis in complex-plane
    units and is always a positive finite number.
    """

    def __init__(self, center_x=-0.5, center_y=0.0, zoom=1.0):
        """
        Initialize the view.

        Args:
            center_x, center_y: View center in the complex plane
            zoom: Half-extent of the view (must be positive and finite)

        Raises:
            ValueError: If zoom is not a positive finite number.
        """
        if not _valid_zoom(zoom):
            raise ValueError(f"zoom must be a positive finite number, got {zoom!r}")
        self.center_x = center_x
        self.center_y = center_y
        self.zoom = zoom

    def __repr__(self):
        return f"ViewState(center_x={self.center_x!r}, center_y={self.center_y!r}, zoom={self.zoom!r})"

    def scroll(self, delta_y, factor=ZOOM_FACTOR):
        """
        Apply a mouse wheel delta.

        A step that would leave zoom outside the positive finite range
        (overflow on zoom out) is skipped.

        Args:
            delta_y: Vertical wheel delta (positive zooms in)
            factor: Zoom ratio per step (default 1.1)

        Returns:
            True if the view changed.
        """
        if delta_y > 0:
            zoom = self.zoom / factor
        elif delta_y < 0:
            zoom = self.zoom * factor
        else:
            return False
        if not _valid_zoom(zoom) or zoom == self.zoom:
            return False
        self.zoom = zoom
        return True

    def pan(self, dx, dy):
        """
        Shift the center opposite to a pixel delta.

        Args:
            dx, dy: Pointer movement in pixels since the last frame
        """
        self.center_x -= dx / self.zoom
        self.center_y -= dy / self.zoom

    def reset(self, other):
        """
        Copy center and zoom from another view.

        Args:
            other: The ViewState to take values from
        """
        self.center_x = other.center_x
        self.center_y = other.center_y
        self.zoom = other.zoom


@dataclass(frozen=True)
class Idle:
    """No button held; no previous pointer position."""


@dataclass(frozen=True)
class Dragging:
    """Primary button held; last is the pointer position seen last frame."""

    last: tuple


def update_drag(state, view, button_down, pos):
    """
    Advance the drag state machine by one frame's input snapshot.

    Args:
        state: Current drag state (Idle or Dragging)
        view: ViewState to pan, modified in place
        button_down: Whether the primary button is held this frame
        pos: Pointer position, or None when the pointer is outside the window

    Returns:
        (new_state, changed) where changed is True if the view was panned.
    """
    if not button_down:
        return Idle(), False
    if pos is None:
        return state, False

    logger.debug("drag pointer at %s", pos)
    if isinstance(state, Dragging):
        dx = pos[0] - state.last[0]
        dy = pos[1] - state.last[1]
        view.pan(dx, dy)
        return Dragging(pos), True
    return Dragging(pos), False

"""
Synchronous Mandelbrot renderer with a cached display surface.

The MandelbrotRenderer class handles:
- Owning the fixed-size RGB raster for the window
- Tracking whether the raster is stale (dirty flag)
- Recomputing the whole raster inline when the view changes
- Converting the raster into a pygame surface, rebuilt only after a recompute
"""

import logging
import time

import numpy as np
import pygame

from .compute import compute_escape_counts, apply_grayscale, MAX_ITER

logger = logging.getLogger(__name__)


class MandelbrotRenderer:
    """
    Renders the current view into a raster on demand.

    Usage:
        renderer = MandelbrotRenderer(800, 600)
        renderer.invalidate()

        # In your game loop:
        renderer.render_if_dirty(view)
        screen.blit(renderer.get_surface(), (0, 0))

    Attributes:
        width, height: Raster dimensions in pixels
        max_iter: Iteration cap for the escape-time loop
        rgb: The raster, shape (height, width, 3), uint8
        dirty: True when the raster no longer matches the view
        render_count: Number of full recomputes performed so far
    """

    def __init__(self, width, height, max_iter=MAX_ITER):
        """
        Initialize the renderer.

        Args:
            width, height: Raster dimensions in pixels
            max_iter: Maximum iteration count (default 256)
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"raster size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.max_iter = max_iter

        # Allocated once; contents are overwritten on every recompute
        self.rgb = np.zeros((height, width, 3), dtype=np.uint8)

        self.dirty = True
        self.render_count = 0
        self._surface = None

    def invalidate(self):
        """Mark the raster stale so the next frame recomputes it."""
        self.dirty = True

    def render(self, view):
        """
        Recompute the whole raster for the given view.

        Blocks until every pixel has been written. The cached surface is
        dropped and rebuilt on the next get_surface() call.

        Returns:
            The raster array.
        """
        start = time.perf_counter()
        counts = compute_escape_counts(
            view.center_x, view.center_y, view.zoom,
            self.width, self.height, self.max_iter
        )
        apply_grayscale(counts, self.rgb)
        self.dirty = False
        self.render_count += 1
        self._surface = None
        logger.debug(
            "rendered %dx%d at center=(%r, %r) zoom=%r in %.1f ms",
            self.width, self.height, view.center_x, view.center_y, view.zoom,
            (time.perf_counter() - start) * 1000.0,
        )
        return self.rgb

    def render_if_dirty(self, view):
        """Recompute only if the raster is stale. Returns True if it did."""
        if not self.dirty:
            return False
        self.render(view)
        return True

    def get_surface(self):
        """
        Get a pygame surface for the current raster.

        pygame's surfarray is indexed (x, y), so the raster is transposed
        before conversion.
        """
        if self._surface is None:
            self._surface = pygame.surfarray.make_surface(self.rgb.swapaxes(0, 1))
        return self._surface

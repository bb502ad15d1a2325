"""
Solo Mandelbrot Set viewer

An interactive Mandelbrot set explorer using Pygame for display and
Numba for JIT-compiled escape-time computation.

Quick Start:
    from solo_mandelbrot import run
    run()

Or from command line:
    python -m solo_mandelbrot

Package Structure:
    - compute.py: JIT-compiled escape-time and raster functions
    - view.py: View state and the drag state machine
    - renderer.py: Synchronous raster rendering with a cached surface
    - app.py: Main application and event loop

Controls:
    - Scroll: Zoom in/out around the view center
    - Drag: Pan around
    - R: Reset to default view
    - ESC: Quit
"""

from .app import run, main, MandelbrotApp
from .renderer import MandelbrotRenderer
from .view import ViewState, Idle, Dragging, update_drag
from .compute import escape_time, pixel_to_complex, compute_escape_counts, apply_grayscale, MAX_ITER

__version__ = "1.0.0"
__all__ = [
    "run",
    "main",
    "MandelbrotApp",
    "MandelbrotRenderer",
    "ViewState",
    "Idle",
    "Dragging",
    "update_drag",
    "escape_time",
    "pixel_to_complex",
    "compute_escape_counts",
    "apply_grayscale",
    "MAX_ITER",
]

"""
Mandelbrot computation functions using Numba JIT compilation.

This module contains the performance-critical computation functions
that are JIT-compiled for speed. These functions handle:
- Escape-time iteration of z² + c for a single point
- Mapping pixel coordinates to the complex plane
- Filling a grayscale raster for the current view (counts, then intensities)

The kernels run on a single thread; the whole raster is recomputed
synchronously whenever the view changes.
"""

import numpy as np
from numba import jit


MAX_ITER = 256          # Iteration cap for the escape-time loop
ESCAPE_RADIUS_SQ = 4.0  # |z|² threshold (|z| > 2)


@jit(nopython=True, cache=True)
def escape_time(cr, ci, max_iter=MAX_ITER):
    """
    Count iterations of z² + c (from z = 0) until |z|² exceeds 4.

    The magnitude is tested before each update, so the returned value is
    the index of the first iterate that lies outside the radius-2 disk.

    Args:
        cr, ci: Real and imaginary parts of c
        max_iter: Iteration cap (default 256)

    Returns:
        Iteration count, or max_iter if the point never escaped.
    """
    zr = 0.0
    zi = 0.0
    for i in range(max_iter):
        if zr * zr + zi * zi > ESCAPE_RADIUS_SQ:
            return i
        zr, zi = zr * zr - zi * zi + cr, 2.0 * zr * zi + ci
    return max_iter


@jit(nopython=True, cache=True)
def pixel_to_complex(x, y, width, height, center_x, center_y, zoom):
    """
    Map pixel (x, y) to a point in the complex plane.

    Each axis is scaled by its own half-dimension, so the view is not
    aspect corrected: a non-square window shows a stretched plane.
    Row 0 is the top of the image.

    Returns:
        (re, im) tuple of float64.
    """
    half_w = width / 2.0
    half_h = height / 2.0
    re = center_x + (x - half_w) / half_w * zoom
    im = center_y + (y - half_h) / half_h * zoom
    return re, im


@jit(nopython=True, cache=True)
def compute_escape_counts(center_x, center_y, zoom, width, height, max_iter=MAX_ITER):
    """
    Compute escape-time counts for every pixel of the view.

    Args:
        center_x, center_y: View center in the complex plane
        zoom: Half-extent of the view along each axis (must be > 0)
        width, height: Image dimensions in pixels
        max_iter: Iteration cap

    Returns:
        2D numpy array of int64 (height, width) with escape counts.
    """
    counts = np.zeros((height, width), dtype=np.int64)

    for py in range(height):
        for px in range(width):
            cr, ci = pixel_to_complex(px, py, width, height, center_x, center_y, zoom)
            counts[py, px] = escape_time(cr, ci, max_iter)

    return counts


@jit(nopython=True, cache=True)
def apply_grayscale(counts, out):
    """
    Write counts as grayscale intensities into an RGB image.

    Each count is reduced modulo 256, so points inside the set
    (count == 256) come out black. Every pixel of out is overwritten.

    Args:
        counts: 2D array of escape counts
        out: Output RGB image array (height, width, 3), modified in place
    """
    height, width = counts.shape
    for py in range(height):
        for px in range(width):
            v = np.uint8(counts[py, px] % 256)
            out[py, px, 0] = v
            out[py, px, 1] = v
            out[py, px, 2] = v


def warmup_jit():
    """
    Warm up JIT compilation with small dummy arrays.

    Call this once at startup to pre-compile the Numba functions,
    avoiding a delay on the first real frame.
    """
    dummy = np.zeros((4, 4, 3), dtype=np.uint8)
    apply_grayscale(compute_escape_counts(-0.5, 0.0, 1.0, 4, 4, MAX_ITER), dummy)

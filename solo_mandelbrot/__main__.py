"""
Allow running the package directly: python -m solo_mandelbrot
"""
import sys

from .app import main

sys.exit(main())

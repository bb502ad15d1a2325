"""
Main application module for the Mandelbrot viewer.

Contains the MandelbrotApp class which handles:
- Window setup and main loop
- User input (wheel zoom, drag pan, keyboard)
- Recomputing and displaying the raster when the view changes
"""

import logging

import pygame

from .compute import MAX_ITER, warmup_jit
from .renderer import MandelbrotRenderer
from .view import ZOOM_FACTOR, Idle, ViewState, update_drag

logger = logging.getLogger(__name__)


class MandelbrotApp:
    """
    Main application class for the Mandelbrot viewer.

    Handles the pygame window, the per-frame input snapshot, and
    coordinates between the view state and the renderer. Nothing touches
    pygame's display until run() is called.
    """

    # Default configuration
    DEFAULT_WIDTH = 800
    DEFAULT_HEIGHT = 600
    MAX_ITER = MAX_ITER
    FPS = 60
    TITLE = "Solo Mandelbrot Set"

    # Initial view
    DEFAULT_CENTER = (-0.5, 0.0)
    DEFAULT_ZOOM = 1.0

    ZOOM_FACTOR = ZOOM_FACTOR

    HEADING_COLOR = (220, 220, 220)

    def __init__(self, width=None, height=None, max_iter=None):
        """
        Initialize the application.

        Args:
            width: Window width in pixels (default 800)
            height: Window height in pixels (default 600)
            max_iter: Maximum iteration count (default 256)
        """
        self.width = width or self.DEFAULT_WIDTH
        self.height = height or self.DEFAULT_HEIGHT
        self.max_iter = max_iter or self.MAX_ITER

        self.view = self._default_view()
        self.drag_state = Idle()
        self.renderer = MandelbrotRenderer(self.width, self.height, self.max_iter)

        # Pygame state (initialized in run())
        self.screen = None
        self.clock = None
        self.font = None

        self.running = False

    def _default_view(self):
        cx, cy = self.DEFAULT_CENTER
        return ViewState(cx, cy, self.DEFAULT_ZOOM)

    def run(self):
        """Run the application main loop."""
        try:
            self._init_pygame()
            self._warmup_and_initial_render()

            self.running = True
            while self.running:
                scroll_y = self._handle_events()
                button_down, pos = self._poll_pointer()
                self.update(scroll_y, button_down, pos)
                self.renderer.render_if_dirty(self.view)
                self._draw()

                self.clock.tick(self.FPS)
        finally:
            pygame.quit()

    def _init_pygame(self):
        """Initialize pygame and create window."""
        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(self.TITLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont('Arial', 20, bold=True)

    def _warmup_and_initial_render(self):
        """Warm up JIT and do initial render."""
        pygame.display.set_caption("Compiling (first run only)...")
        logger.info("compiling kernels")
        warmup_jit()
        self.renderer.render(self.view)
        pygame.display.set_caption(self.TITLE)
        logger.info("initial %dx%d render done", self.width, self.height)

    def _handle_events(self):
        """
        Process all pending pygame events.

        Returns:
            The summed vertical wheel delta for this frame.
        """
        scroll_y = 0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.MOUSEWHEEL:
                scroll_y += event.y
            elif event.type == pygame.KEYDOWN:
                self.handle_key(event.key)
        return scroll_y

    def _poll_pointer(self):
        """Snapshot the primary button state and pointer position."""
        button_down = pygame.mouse.get_pressed()[0]
        pos = pygame.mouse.get_pos() if pygame.mouse.get_focused() else None
        return button_down, pos

    def update(self, scroll_y, button_down, pos):
        """
        Apply one frame of input to the view.

        Zoom and pan are handled independently; either one marks the
        raster stale.

        Args:
            scroll_y: Vertical wheel delta (positive zooms in)
            button_down: Whether the primary button is held
            pos: Pointer position, or None if the pointer is outside the window

        Returns:
            True if the view changed.
        """
        changed = self.view.scroll(scroll_y, self.ZOOM_FACTOR)
        self.drag_state, panned = update_drag(self.drag_state, self.view, button_down, pos)
        changed = changed or panned
        if changed:
            self.renderer.invalidate()
        return changed

    def handle_key(self, key):
        """Handle keyboard input."""
        if key == pygame.K_r:
            # Reset to default view
            self.view.reset(self._default_view())
            self.drag_state = Idle()
            self.renderer.invalidate()
        elif key == pygame.K_ESCAPE:
            self.running = False

    def _draw(self):
        """Draw the current frame."""
        self.screen.fill((0, 0, 0))
        self.screen.blit(self.renderer.get_surface(), (0, 0))
        heading = self.font.render(self.TITLE, True, self.HEADING_COLOR)
        self.screen.blit(heading, (10, 8))
        pygame.display.flip()


def run(width=None, height=None, max_iter=None):
    """
    Run the Mandelbrot viewer.

    Args:
        width: Window width (default 800)
        height: Window height (default 600)
        max_iter: Maximum iterations (default 256)
    """
    app = MandelbrotApp(width, height, max_iter)
    try:
        app.run()
    except KeyboardInterrupt:
        pass


def main():
    """Console entry point. Returns a process exit status."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    try:
        run()
    except pygame.error as exc:
        logger.error("could not start the viewer: %s", exc)
        return 1
    return 0

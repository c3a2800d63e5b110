# app.py - pointer-reactive particle field
import logging
import time

import cv2

from errors import ConfigError
from logging_config import setup_logging
from params import Params
from renderer import CanvasSurface
from sim import FrameDriver, ParticleSim, TickScheduler

logger = logging.getLogger(__name__)

WINDOW_NAME = "Particle Field"

START_W = 1280
START_H = 720
SEED = None

SHOW_FPS = True
VERBOSE = False


class WindowHost:
    """
    Owns the OpenCV window and feeds the sim between ticks:
      - mouse move -> pointer
      - window size change -> rebuild particles + surface
      - keys: ESC quit, R reseed
    """

    def __init__(self, sim, surface):
        self.sim = sim
        self.surface = surface
        self.scheduler = None

        # Last size the sim refused, so a minimised window isn't retried every frame
        self.rejected_size = None

        self.prev = time.time()
        self.fps_smooth = 0.0

    def open(self):
        cv2.namedWindow(WINDOW_NAME, cv2.WINDOW_NORMAL)
        cv2.resizeWindow(WINDOW_NAME, int(self.sim.width), int(self.sim.height))
        cv2.setMouseCallback(WINDOW_NAME, self.on_mouse)

    def on_mouse(self, event, x, y, flags, param):
        if event == cv2.EVENT_MOUSEMOVE:
            self.sim.set_pointer(x, y)

    def handle_key(self, key):
        if key == 27:
            self.scheduler.stop()
        elif key in (ord("r"), ord("R")):
            self.sim.reset()

    def apply_window_size(self, w, h):
        if (w, h) == (int(self.sim.width), int(self.sim.height)):
            self.rejected_size = None
            return
        if (w, h) == self.rejected_size:
            return

        try:
            self.sim.resize(w, h)
        except ConfigError as e:
            # Minimised windows report tiny or zero sizes
            logger.warning("Ignoring resize: %s", e)
            self.rejected_size = (w, h)
            return
        self.rejected_size = None
        self.surface.resize(w, h)

    def _check_resize(self):
        # Window closed by the user
        if cv2.getWindowProperty(WINDOW_NAME, cv2.WND_PROP_VISIBLE) < 1:
            self.scheduler.stop()
            return

        _, _, w, h = cv2.getWindowImageRect(WINDOW_NAME)
        self.apply_window_size(w, h)

    def pump(self):
        """Show the last tick's frame, then drain window events."""
        composed = self.surface.present()

        now = time.time()
        dt = max(1e-6, now - self.prev)
        self.prev = now
        fps = 1.0 / dt
        self.fps_smooth = fps if self.fps_smooth == 0 else 0.9 * self.fps_smooth + 0.1 * fps

        if SHOW_FPS:
            fps_text = f"FPS: {self.fps_smooth:5.1f}  N: {len(self.sim.particles)}"
            cv2.putText(composed, fps_text, (12, composed.shape[0] - 12), cv2.FONT_HERSHEY_SIMPLEX, 0.6, (235, 235, 235), 1, cv2.LINE_AA)

        cv2.imshow(WINDOW_NAME, composed)

        key = cv2.waitKey(1) & 0xFF
        if key != 255:
            self.handle_key(key)

        if not self.scheduler.stopped:
            self._check_resize()


def main():
    setup_logging(verbose=VERBOSE)

    params = Params()
    sim = ParticleSim(params, START_W, START_H, seed=SEED)
    surface = CanvasSurface(START_W, START_H, params.gradient_colors)

    host = WindowHost(sim, surface)
    host.open()
    scheduler = TickScheduler(pump=host.pump)
    host.scheduler = scheduler

    driver = FrameDriver(sim, surface, scheduler)

    print("\n" + "=" * 60)
    print("✨ PARTICLE FIELD")
    print("=" * 60)
    print("\n📋 CONTROLS:")
    print("   Move mouse - push particles away")
    print("   R - Respawn particles")
    print("   ESC - Exit")
    print("\n" + "=" * 60 + "\n")

    driver.start()
    frames = scheduler.run()
    driver.stop()

    cv2.destroyAllWindows()
    logger.info("Stopped after %d frames", frames)
    print("\n✅ Particle field shutdown complete")


if __name__ == "__main__":
    main()

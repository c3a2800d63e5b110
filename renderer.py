import numpy as np
import cv2


def hex_to_bgr(color):
    c = color.lstrip("#")
    r, g, b = int(c[0:2], 16), int(c[2:4], 16), int(c[4:6], 16)
    return (b, g, r)


def diagonal_gradient(width, height, colors):
    """
    Linear gradient from (0, 0) to (width, height) through evenly spaced stops.

    Returns an (H, W, 3) float32 BGR image.
    """
    stops = np.linspace(0.0, 1.0, len(colors))
    bgr = np.array([hex_to_bgr(c) for c in colors], dtype=np.float32)

    ys, xs = np.mgrid[0:height, 0:width].astype(np.float32)
    # Project each pixel onto the diagonal
    t = (xs * width + ys * height) / float(width * width + height * height)
    t = np.clip(t, 0.0, 1.0)

    img = np.empty((height, width, 3), dtype=np.float32)
    for ch in range(3):
        img[:, :, ch] = np.interp(t, stops, bgr[:, ch])
    return img


class CanvasSurface:
    """
    Rasterises Line/Circle requests with one gradient shared by strokes and fills.

    Everything is drawn into a single-channel coverage mask (line opacity ->
    mask value, circles fully opaque); `present()` tints the mask with the
    gradient. Later draws overwrite earlier ones, which is what lets circles
    cover line ends.
    """

    def __init__(self, width, height, colors, line_thickness=1):
        self.colors = list(colors)
        self.line_thickness = int(line_thickness)
        self.resize(width, height)

    def resize(self, width, height):
        self.width = int(width)
        self.height = int(height)
        self.gradient = diagonal_gradient(self.width, self.height, self.colors)
        self.mask = np.zeros((self.height, self.width), dtype=np.uint8)

    def clear(self):
        self.mask[:] = 0

    def stroke_line(self, line):
        alpha = int(round(max(0.0, min(1.0, line.opacity)) * 255))
        if alpha == 0:
            return
        a = (int(round(line.x1)), int(round(line.y1)))
        b = (int(round(line.x2)), int(round(line.y2)))
        cv2.line(self.mask, a, b, alpha, self.line_thickness, cv2.LINE_AA)

    def fill_circle(self, circle):
        center = (int(round(circle.x)), int(round(circle.y)))
        cv2.circle(self.mask, center, max(1, int(round(circle.radius))), 255, -1, cv2.LINE_AA)

    def present(self):
        """Compose the current mask into a BGR uint8 frame."""
        cover = self.mask.astype(np.float32)[:, :, None] * (1.0 / 255.0)
        return (self.gradient * cover).astype(np.uint8)

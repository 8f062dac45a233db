"""
Plasma Pattern

Full-field interference of four sine terms, computed with numpy.
"""

import numpy as np

from animations.base import BasePattern
from models.enums import BurnInPatternID
from utils.colors import hue_array_to_rgb


class PlasmaPattern(BasePattern):
    """
    v = sin(x/16 + t) + sin(y/8 + t) + sin((x+y)/16 + t) + sin(sqrt(x^2+y^2)/8 + t)

    with t = offset / 50. v lies in [-4, 4] and maps to hue (v+4)/8 * 360 when
    color cycling, otherwise to gray (v+4)/8 * 255.

    The field is sampled every plasma_stride pixels and each sample is
    replicated over its stride x stride block.
    """

    PATTERN_ID = BurnInPatternID.PLASMA

    TIME_DIVISOR = 50

    def sample(self, width: int, height: int, offset: float, stride: int) -> np.ndarray:
        """Plasma value at every sample point, shaped (ceil(h/stride), ceil(w/stride))"""
        t = offset / self.TIME_DIVISOR
        xs = np.arange(0, width, stride, dtype=np.float64)[np.newaxis, :]
        ys = np.arange(0, height, stride, dtype=np.float64)[:, np.newaxis]
        return (
            np.sin(xs / 16 + t)
            + np.sin(ys / 8 + t)
            + np.sin((xs + ys) / 16 + t)
            + np.sin(np.hypot(xs, ys) / 8 + t)
        )

    def draw(self, surface, offset, color, params):
        size = surface.size
        if size.width <= 0 or size.height <= 0 or not np.isfinite(offset):
            return

        stride = max(1, int(params.plasma_stride))
        value = self.sample(size.width, size.height, offset, stride)
        level = np.clip((value + 4) / 8, 0.0, 1.0)

        samples = np.empty(value.shape + (4,), dtype=np.uint8)
        if params.color_cycle:
            samples[..., :3] = hue_array_to_rgb(level * 360)
        else:
            samples[..., :3] = np.rint(level * 255).astype(np.uint8)[..., np.newaxis]
        samples[..., 3] = 255

        if stride > 1:
            samples = np.repeat(np.repeat(samples, stride, axis=0), stride, axis=1)
        surface.put_pixel_block(samples[:size.height, :size.width], 0, 0)

"""
Pixel Buffer
============
The RGBA canvas the rasterizer writes into.

Why is this file needed?
------------------------
1. Storage: It owns the flat RGBA byte array (width * height * 4) that the
   presentation surface blits on every frame.
2. Protection: It keeps the baseline snapshot of committed ink, so that
   erasing a transient preview never removes a stroke the user already
   released.

Classes:
    PixelBuffer: The canvas plus its baseline.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from rasterpaint.config import INK_RGBA, OPAQUE
from rasterpaint.model.errors import OutOfBounds
from rasterpaint.model.geometry import Point

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

_ALPHA = 3


class PixelBuffer:
    """
    Flat RGBA buffer, one byte per channel.

    Every pixel is either set (opaque black) or clear (alpha 0). The baseline
    is a read-only copy of the buffer taken on every commit; `clear_pixel`
    never clears a pixel that is opaque in the baseline.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Buffer size must be positive, got {width}x{height}.")
        self.width = width
        self.height = height
        self.data: npt.NDArray[np.uint8] = np.zeros(width * height * 4, dtype=np.uint8)
        self._ink = np.asarray(INK_RGBA, dtype=np.uint8)
        self._baseline = self.snapshot()

    def __repr__(self) -> str:
        return f"PixelBuffer({self.width}x{self.height}, {self.opaque_count()} set)"

    # ------------------------------------------------------------------------------
    # Pixel access
    # ------------------------------------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def offset(self, x: int, y: int) -> int:
        """
        Byte offset of the pixel's red channel.

        Raises:
            OutOfBounds: If (x, y) is outside the buffer.
        """
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        return (y * self.width + x) * 4

    def set_pixel(self, x: int, y: int) -> None:
        n = self.offset(x, y)
        self.data[n:n + 4] = self._ink

    def clear_pixel(self, x: int, y: int) -> None:
        """Clear a pixel unless it belongs to committed ink."""
        n = self.offset(x, y)
        if self._baseline[n + _ALPHA] > 0:
            return
        self.data[n + _ALPHA] = 0

    def is_set(self, x: int, y: int) -> bool:
        return bool(self.data[self.offset(x, y) + _ALPHA] == OPAQUE)

    # ------------------------------------------------------------------------------
    # Whole buffer
    # ------------------------------------------------------------------------------

    def clear_all(self) -> None:
        """Zero every byte and forget the committed ink."""
        self.data.fill(0)
        self._baseline = self.snapshot()
        logger.info("Canvas cleared (%dx%d).", self.width, self.height)

    def snapshot(self) -> npt.NDArray[np.uint8]:
        """Read-only copy of the current bytes."""
        copy = self.data.copy()
        copy.flags.writeable = False
        return copy

    def commit(self) -> None:
        """Make everything currently drawn permanent."""
        self._baseline = self.snapshot()
        logger.debug("Baseline committed with %d opaque pixels.", self.opaque_count())

    @property
    def baseline(self) -> npt.NDArray[np.uint8]:
        return self._baseline

    def as_rgba(self) -> npt.NDArray[np.uint8]:
        """(height, width, 4) view on the live bytes, for presentation surfaces."""
        return self.data.reshape(self.height, self.width, 4)

    def opaque_count(self) -> int:
        return int(np.count_nonzero(self.data[_ALPHA::4]))

    def opaque_points(self) -> set[Point]:
        ys, xs = np.nonzero(self.as_rgba()[:, :, _ALPHA])
        return {Point(int(x), int(y)) for x, y in zip(xs, ys)}

# --- rmap_lib/rendering/png_renderer.py ---
import logging
from typing import Any, Dict, Tuple

import cv2
import numpy as np
from PIL import Image

from rmap_lib.constants import CELL_SIZE
from rmap_lib.enums import BlockType, TreatAsSlopeType
from rmap_lib.schema import Cell, Room
from rmap_lib.shapes import polygon_for
from .constants import DEFAULT_STYLES, TRANSPARENT

log = logging.getLogger("rmap.render")

RGBA = Tuple[int, int, int, int]


def hex_to_rgba(value: str) -> RGBA:
    """Parses '#RRGGBB' or '#RRGGBBAA' into an RGBA tuple."""
    h = value.lstrip("#")
    if len(h) not in (6, 8):
        raise ValueError(f"Invalid colour value: {value!r}")
    r, g, b = int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)
    a = int(h[6:8], 16) if len(h) == 8 else 255
    return (r, g, b, a)


class PNGRenderer:
    """Rasterizes a classified room into an RGBA pixel buffer."""

    def __init__(self, room: Room, style_options: Dict[str, Any] | None = None):
        self.room = room
        self.style_options = style_options or {}
        self.styles = self._initialize_styles()
        self.solid = hex_to_rgba(self.styles["solid_color"])
        self.colors = {
            TreatAsSlopeType.SOLID: self.solid,
            TreatAsSlopeType.SLOPE_LEFT: hex_to_rgba(self.styles["slope_left_color"]),
            TreatAsSlopeType.SLOPE_RIGHT: hex_to_rgba(self.styles["slope_right_color"]),
            TreatAsSlopeType.SLOPE_PROTECT_NEG_X: hex_to_rgba(
                self.styles["protect_neg_x_color"]
            ),
            TreatAsSlopeType.SLOPE_PROTECT_POS_X: hex_to_rgba(
                self.styles["protect_pos_x_color"]
            ),
        }

    def _initialize_styles(self) -> Dict[str, Any]:
        """Sets up the default and user-provided styles."""
        styles = dict(DEFAULT_STYLES)
        styles.update({k: v for k, v in self.style_options.items() if v is not None})
        log.debug("Using styles: %s", styles)
        return styles

    @property
    def image_size(self) -> Tuple[int, int]:
        """(width, height) of the output image in pixels."""
        return (self.room.width_tiles * CELL_SIZE, self.room.height_tiles * CELL_SIZE)

    def render(self) -> np.ndarray:
        """Draws the room and returns an (H, W, 4) uint8 RGBA array."""
        width, height = self.image_size
        img = np.zeros((height, width, 4), dtype=np.uint8)
        if width == 0 or height == 0:
            log.warning("Room '%s' has an empty grid; nothing to render.", self.room.room_id)
            return img

        drawn = 0
        for cell in self.room.cells:
            if cell.block_type == BlockType.SLOPE:
                self._draw_slope(img, cell)
                drawn += 1
            elif cell.block_type == BlockType.SOLID:
                self._draw_solid(img, cell)
                drawn += 1
        log.debug("Drew %d solid/slope cells for room '%s'.", drawn, self.room.room_id)

        self._cleanup_seams(img, int(self.styles["cleanup_iterations"]))

        if self.styles["outline"]:
            cv2.rectangle(img, (0, 0), (width - 1, height - 1), self.solid, 1)
        return img

    def _draw_slope(self, img: np.ndarray, cell: Cell):
        shape = polygon_for(cell.slope_type)
        if shape.is_empty():
            return
        slope_flip = cell.slope_flip
        if slope_flip.mirrors_x:
            shape.mirror_x()
        if slope_flip.mirrors_y:
            shape.mirror_y()
        shape.translate(cell.x * float(CELL_SIZE), cell.y * float(CELL_SIZE))
        cv2.fillPoly(img, [shape.to_array()], self.colors[cell.treat_as_slope])

    def _draw_solid(self, img: np.ndarray, cell: Cell):
        kind = cell.treat_as_slope
        if kind in (TreatAsSlopeType.SLOPE_LEFT, TreatAsSlopeType.SLOPE_RIGHT):
            return

        x0, y0 = cell.x * CELL_SIZE, cell.y * CELL_SIZE
        x1, y1 = x0 + CELL_SIZE - 1, y0 + CELL_SIZE - 1
        cv2.rectangle(img, (x0, y0), (x1, y1), self.colors[kind], -1)

        if kind == TreatAsSlopeType.SLOPE_PROTECT_NEG_X:
            cv2.line(img, (x0, y0), (x0, y1), self.solid, 1)
        elif kind == TreatAsSlopeType.SLOPE_PROTECT_POS_X:
            cv2.line(img, (x1, y0), (x1, y1), self.solid, 1)

    def _cleanup_seams(self, img: np.ndarray, iterations: int):
        """
        Clears stray seam pixels next to transparent space.

        Each pass reads from a snapshot of the previous one. Border pixels and
        pixels in the solid colour are never cleared. A pixel is cleared when
        its left or right neighbour is transparent, or when its row neighbours
        differ from it (and are not both solid) while one vertical neighbour is
        transparent and the opposite one is solid.
        """
        height, width = img.shape[:2]
        if width < 3 or height < 3:
            return
        solid = np.array(self.solid, dtype=np.uint8)

        def is_solid(a: np.ndarray) -> np.ndarray:
            return np.all(a == solid, axis=-1)

        for _ in range(iterations):
            snap = img.copy()
            px = snap[1:-1, 1:-1]
            left, right = snap[1:-1, :-2], snap[1:-1, 2:]
            up, down = snap[:-2, 1:-1], snap[2:, 1:-1]

            differs = np.any(px != left, axis=-1) | np.any(px != right, axis=-1)
            row_open = ~(is_solid(left) & is_solid(right))
            vertical_seam = ((up[..., 3] == 0) & is_solid(down)) | (
                (down[..., 3] == 0) & is_solid(up)
            )
            beside_gap = (left[..., 3] == 0) | (right[..., 3] == 0)

            clear = ~is_solid(px) & ((differs & row_open & vertical_seam) | beside_gap)
            img[1:-1, 1:-1][clear] = TRANSPARENT


def render_room(room: Room, style_options: Dict[str, Any] | None = None) -> np.ndarray:
    """Renders ``room`` to an RGBA array."""
    return PNGRenderer(room, style_options).render()


def save_png(img: np.ndarray, output_path: str) -> None:
    """Writes an RGBA array to ``output_path`` as PNG."""
    Image.fromarray(img).save(output_path, "PNG")
    log.info("Saved room image to '%s'", output_path)

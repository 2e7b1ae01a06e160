"""Rendering surfaces — the drawing capabilities the renderer relies on.

The router and the circuit model never import this module; only the
renderer draws.  ``RasterSurface`` is the Pillow-backed implementation;
anything else (SVG, a GUI canvas, a recording stub in tests) only has to
provide the same methods.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from PIL import Image, ImageDraw, ImageFont

from netcircuit.geometry import Point, Rect

from .options import DEFAULT_RENDER_OPTIONS, RenderOptions


class RenderSurface(Protocol):
    """Minimal 2-D drawing interface."""

    def clear(self, color: str) -> None: ...

    def fill_rect(self, rect: Rect, color: str) -> None: ...

    def stroke_rect(self, rect: Rect, color: str, width: int) -> None: ...

    def draw_text(self, point: Point, text: str, color: str, size: int) -> None: ...

    def text_width(self, text: str, size: int) -> float: ...

    def draw_circle(self, center: Point, radius: float, fill: str, outline: str | None = None) -> None: ...

    def draw_polyline(self, points: Sequence[Point], color: str, width: int) -> None: ...


class RasterSurface:
    """Draws onto an RGB Pillow image of a fixed pixel size.

    Canvas units map 1:1 to pixels.  Text is anchored at its baseline-left
    corner, like a 2-D canvas ``fillText``.
    """

    def __init__(self, width: int, height: int, background: str = "#ffffff") -> None:
        self.width = width
        self.height = height
        self._image = Image.new("RGB", (width, height), background)
        self._draw = ImageDraw.Draw(self._image)
        self._fonts: dict[int, ImageFont.ImageFont | ImageFont.FreeTypeFont] = {}

    @classmethod
    def from_options(cls, options: RenderOptions = DEFAULT_RENDER_OPTIONS) -> RasterSurface:
        """A surface sized and filled from the canvas settings of *options*."""
        return cls(options.canvas_width, options.canvas_height, options.background_color)

    @property
    def image(self) -> Image.Image:
        return self._image

    def _font(self, size: int):
        if size not in self._fonts:
            self._fonts[size] = ImageFont.load_default(size=size)
        return self._fonts[size]

    # ── RenderSurface ──────────────────────────────────────────────

    def clear(self, color: str) -> None:
        self._draw.rectangle([(0, 0), (self.width, self.height)], fill=color)

    def fill_rect(self, rect: Rect, color: str) -> None:
        self._draw.rectangle([(rect.x, rect.y), (rect.right, rect.bottom)], fill=color)

    def stroke_rect(self, rect: Rect, color: str, width: int) -> None:
        self._draw.rectangle([(rect.x, rect.y), (rect.right, rect.bottom)], outline=color, width=width)

    def draw_text(self, point: Point, text: str, color: str, size: int) -> None:
        # Pillow anchors at the top-left; shift up so *point* is the baseline
        self._draw.text((point.x, point.y - size), text, fill=color, font=self._font(size))

    def text_width(self, text: str, size: int) -> float:
        return self._draw.textlength(text, font=self._font(size))

    def draw_circle(self, center: Point, radius: float, fill: str, outline: str | None = None) -> None:
        self._draw.ellipse(
            [(center.x - radius, center.y - radius), (center.x + radius, center.y + radius)],
            fill=fill,
            outline=outline,
        )

    def draw_polyline(self, points: Sequence[Point], color: str, width: int) -> None:
        if len(points) < 2:
            return
        self._draw.line([p.as_tuple() for p in points], fill=color, width=width, joint="curve")

    # ── Output ─────────────────────────────────────────────────────

    def save(self, path: str | Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self._image.save(path, "PNG")
        return path

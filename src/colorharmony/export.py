from __future__ import annotations

"""Helpers for handing palettes to display code.

Exposes label/enum pairs for export formats and :func:`export_colors`,
which turns a list of :class:`Color` into plain values that UI code can
consume without knowing about the engine.
"""

from enum import Enum
from typing import Dict, Iterable, List, Union

from .category import PaletteCategory
from .color_types import Color


class ExportFormat(Enum):
    """Supported output formats for exported color lists."""

    HEX = "hex"
    RGB_255 = "rgb_255"
    RGB_01 = "rgb_01"
    HSL = "hsl"
    CMYK = "cmyk"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


EXPORT_FORMAT_OPTIONS: List[tuple[str, ExportFormat]] = [
    ("HEX", ExportFormat.HEX),
    ("RGB (0-255)", ExportFormat.RGB_255),
    ("RGB (0-1)", ExportFormat.RGB_01),
    ("HSL", ExportFormat.HSL),
    ("CMYK", ExportFormat.CMYK),
]

CATEGORY_LABEL_MAP: Dict[str, PaletteCategory] = {c.value: c for c in PaletteCategory}


def export_colors(colors: Iterable[Color], fmt: Union[ExportFormat, str]) -> List[object]:
    """Convert colors to a list in the desired format.

    ``HEX`` entries carry a leading ``#``; ``HSL`` and ``CMYK`` entries are the
    integer tuples of :meth:`Color.to_hsl` / :meth:`Color.to_cmyk` without
    the alpha slot.
    """
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    if export_fmt == ExportFormat.HEX:
        return ["#" + c.to_hex() for c in colors]
    if export_fmt == ExportFormat.RGB_255:
        return [c.to_rgb() for c in colors]
    if export_fmt == ExportFormat.RGB_01:
        return [c.rgb for c in colors]
    if export_fmt == ExportFormat.HSL:
        return [c.to_hsl()[:3] for c in colors]
    if export_fmt == ExportFormat.CMYK:
        return [c.to_cmyk()[:4] for c in colors]
    raise ValueError(f"Unsupported export format: {fmt}")


__all__ = [
    "ExportFormat",
    "EXPORT_FORMAT_OPTIONS",
    "CATEGORY_LABEL_MAP",
    "export_colors",
]

"""Public entrypoint for the colorharmony palette library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``colorharmony`` instead of individual
submodules.
"""

from .blend import BlendTable, ColorBlend
from .category import PaletteCategory, adjust_color_to_category, apply_category
from .classifier import HarmonyQuality, HarmonyResult, HarmonyType, calculate_harmony
from .color_types import Color, difference
from .enhancer import enhance_colors
from .errors import (
    DegenerateRequestError,
    DistinctnessUnsatisfiableError,
    InvalidFormatError,
    PaletteError,
)
from .export import EXPORT_FORMAT_OPTIONS, ExportFormat, export_colors
from .harmony import HarmonyScheme, generate_harmonious_palette, sample_from_color_scheme
from .service import PaletteService, ServiceConfig

__all__ = [
    "Color",
    "difference",
    "HarmonyType",
    "HarmonyQuality",
    "HarmonyResult",
    "calculate_harmony",
    "HarmonyScheme",
    "generate_harmonious_palette",
    "sample_from_color_scheme",
    "PaletteCategory",
    "adjust_color_to_category",
    "apply_category",
    "enhance_colors",
    "PaletteService",
    "ServiceConfig",
    "BlendTable",
    "ColorBlend",
    "ExportFormat",
    "export_colors",
    "EXPORT_FORMAT_OPTIONS",
    "PaletteError",
    "InvalidFormatError",
    "DegenerateRequestError",
    "DistinctnessUnsatisfiableError",
]

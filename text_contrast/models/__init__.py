"""
Text Contrast - Data Models
===========================
This package contains the color value, parser and compositor.
"""

from text_contrast.models.color import (
    Color, CompositeColor, NAMED_COLORS, BLACK, WHITE,
    parse_color, blend_colors, perceived_luminance
)

__all__ = [
    'Color', 'CompositeColor', 'NAMED_COLORS', 'BLACK', 'WHITE',
    'parse_color', 'blend_colors', 'perceived_luminance'
]

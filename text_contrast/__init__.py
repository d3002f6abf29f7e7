"""
Text Contrast Package
=====================
Pick a readable text color (black or white) for a background color,
compositing translucent backgrounds against their container.
"""

__version__ = "0.1.0"

from text_contrast.core import CONFIG, configure, Profiler
from text_contrast.core.cache import DecisionCache
from text_contrast.core.decider import TextColorDecider, decide, reset, get_default_decider
from text_contrast.models.color import Color, CompositeColor, NAMED_COLORS, parse_color, blend_colors
from text_contrast.utils.logger import setup_logger, get_logger

__all__ = [
    'CONFIG',
    'configure',
    'Profiler',
    'DecisionCache',
    'TextColorDecider',
    'decide',
    'reset',
    'get_default_decider',
    'Color',
    'CompositeColor',
    'NAMED_COLORS',
    'parse_color',
    'blend_colors',
    'setup_logger',
    'get_logger',
]

"""
Color model for text contrast decisions.
Provides the immutable color value, the color string parser and the
alpha compositor.
"""

import re
import math
from types import MappingProxyType
from typing import Any, Mapping, NamedTuple, Tuple

from text_contrast.utils.logger import get_logger

# Configure logger
logger = get_logger(__name__)

# Type definitions
RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, float]

# Constants
DEFAULT_ALPHA = 1

# Whole-string patterns, ASCII digits only
_HEX_PATTERN = re.compile(r'#(?:[0-9a-fA-F]{3}){1,2}')
_RGB_PATTERN = re.compile(r'rgb\(([0-9]+),\s*([0-9]+),\s*([0-9]+)\)')
_RGBA_PATTERN = re.compile(r'rgba\(([0-9]+),\s*([0-9]+),\s*([0-9]+),\s*([0-9.]+)\)')


def perceived_luminance(r: float, g: float, b: float) -> float:
    """Weighted channel sum normalized to 0-1 (black=0, white=1)."""
    return (0.299 * r + 0.587 * g + 0.114 * b) / 255


class Color:
    """
    Immutable RGBA color carrying a precomputed luminance.

    Channels are stored exactly as parsed; no clamping is applied, so
    ``rgb(999,0,0)`` keeps a red channel of 999.
    """

    __slots__ = ('_r', '_g', '_b', '_a', '_l')

    def __init__(self, r: int, g: int, b: int, a: float = DEFAULT_ALPHA, l: float = None):
        """
        Initialize a color from its components.

        Args:
            r: Red component
            g: Green component
            b: Blue component
            a: Alpha value (1 = fully opaque)
            l: Luminance; computed from the channels when omitted
        """
        self._r = r
        self._g = g
        self._b = b
        self._a = a
        self._l = perceived_luminance(r, g, b) if l is None else l

    @property
    def r(self) -> int:
        return self._r

    @property
    def g(self) -> int:
        return self._g

    @property
    def b(self) -> int:
        return self._b

    @property
    def a(self) -> float:
        return self._a

    @property
    def l(self) -> float:
        return self._l

    @property
    def rgb(self) -> RGB:
        """Get RGB tuple."""
        return (self._r, self._g, self._b)

    @property
    def rgba(self) -> RGBA:
        """Get RGBA tuple."""
        return (self._r, self._g, self._b, self._a)

    @property
    def hex(self) -> str:
        """Get hex color string without alpha."""
        return f"#{self._r:02x}{self._g:02x}{self._b:02x}"

    @property
    def is_translucent(self) -> bool:
        """True when alpha is below 1. A NaN alpha is not translucent."""
        return self._a < 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return False
        return (self._r, self._g, self._b, self._a, self._l) == \
            (other._r, other._g, other._b, other._a, other._l)

    def __hash__(self) -> int:
        return hash((self._r, self._g, self._b, self._a, self._l))

    def __repr__(self) -> str:
        return f"Color(r={self._r}, g={self._g}, b={self._b}, a={self._a}, l={self._l})"


class CompositeColor(NamedTuple):
    """Result of compositing; ``a`` carries the blend factor."""
    r: int
    g: int
    b: int
    a: float


BLACK = Color(0, 0, 0, 1, 0)
WHITE = Color(255, 255, 255, 1, 1)

# Fixed named-color table; luminance values are literal, not computed
NAMED_COLORS: Mapping[str, Color] = MappingProxyType({
    "black": BLACK,
    "white": WHITE,
    "red": Color(255, 0, 0, 1, 0.2126),
    "green": Color(0, 128, 0, 1, 0.7152),
    "blue": Color(0, 0, 255, 1, 0.0722),
    "yellow": Color(255, 255, 0, 1, 0.9278),
    "orange": Color(255, 165, 0, 1, 0.3932),
    "purple": Color(128, 0, 128, 1, 0.2126),
    "pink": Color(255, 182, 193, 1, 0.5647),
    "brown": Color(165, 42, 42, 1, 0.1686),
    "gray": Color(128, 128, 128, 1, 0.5),
    "lightgray": Color(211, 211, 211, 1, 0.8275),
    "darkgray": Color(169, 169, 169, 1, 0.3333),
    "silver": Color(192, 192, 192, 1, 0.5019),
    "gold": Color(255, 215, 0, 1, 0.6372),
    "navy": Color(0, 0, 128, 1, 0.0352),
    "olive": Color(128, 128, 0, 1, 0.2159),
    "teal": Color(0, 128, 128, 1, 0.139),
    "maroon": Color(128, 0, 0, 1, 0.0722),
    "lime": Color(0, 255, 0, 1, 0.7152),
})


def _hex_to_color(hex_string: str) -> Color:
    """
    Decode a hex token into a color using its last six hex digits.

    Args:
        hex_string: Hex digits, optionally prefixed with '#'

    Returns:
        Opaque color
    """
    value = int(hex_string.lstrip('#'), 16)
    r = (value >> 16) & 255
    g = (value >> 8) & 255
    b = value & 255
    return Color(r, g, b)


def _parse_alpha(value: str, source: str) -> float:
    try:
        return float(value)
    except ValueError:
        logger.debug(f"Malformed alpha {value!r} in {source!r}, treating as NaN")
        return math.nan


def parse_color(value: Any) -> Color:
    """
    Parse a color string into a Color.

    Recognized forms, in priority order: ``#RGB``/``#RRGGBB``,
    ``rgb(r, g, b)``, ``rgba(r, g, b, a)`` and the names in NAMED_COLORS.

    The hex token is doubled before decoding (``#abc`` is read as
    ``#abcabc``), so three-digit input does not follow CSS shorthand
    expansion. Kept for compatibility with existing stored decisions.

    Args:
        value: Color string

    Returns:
        Parsed color, or opaque black when the value is not recognized
    """
    if not isinstance(value, str):
        logger.debug(f"Non-string color {value!r}, falling back to black")
        return BLACK

    if _HEX_PATTERN.fullmatch(value):
        return _hex_to_color(value + value[1:])

    match = _RGB_PATTERN.fullmatch(value)
    if match:
        r, g, b = (int(channel) for channel in match.groups())
        return Color(r, g, b)

    match = _RGBA_PATTERN.fullmatch(value)
    if match:
        r, g, b = (int(channel) for channel in match.groups()[:3])
        return Color(r, g, b, _parse_alpha(match.group(4), value))

    named = NAMED_COLORS.get(value)
    if named is not None:
        return named

    logger.debug(f"Unrecognized color {value!r}, falling back to black")
    return BLACK


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def blend_colors(foreground: Color, background: Color, alpha: float) -> CompositeColor:
    """
    Composite a foreground color over a background color.

    Each channel moves from the background toward the foreground by
    ``alpha`` and is rounded half up.

    Args:
        foreground: Color laid on top
        background: Color underneath
        alpha: Blend factor (0.0 = background, 1.0 = foreground)

    Returns:
        CompositeColor whose ``a`` is ``alpha`` unchanged
    """
    def blend(bg_channel: float, fg_channel: float) -> int:
        return _round_half_up(bg_channel + (fg_channel - bg_channel) * alpha)

    return CompositeColor(
        r=blend(background.r, foreground.r),
        g=blend(background.g, foreground.g),
        b=blend(background.b, foreground.b),
        a=alpha,
    )

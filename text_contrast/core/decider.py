"""
Text color decision engine.

Chooses black or white text for a background color, compositing a
translucent background against the container it sits on, and memoizes
each decision per input pair.
"""

from typing import Any, Dict, Optional

from text_contrast.core import CONFIG, Profiler
from text_contrast.core.cache import DecisionCache
from text_contrast.models.color import BLACK, WHITE, parse_color, blend_colors, perceived_luminance
from text_contrast.utils.logger import get_logger

logger = get_logger(__name__)


class TextColorDecider:
    """
    Decide a readable text color for background colors.

    Each decider owns a DecisionCache; pass one in to share or inspect it.
    """

    def __init__(
        self,
        cache: Optional[DecisionCache] = None,
        config: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize the decider.

        Args:
            cache: Decision cache to use, a new empty one when omitted
            config: Overrides applied on top of the core CONFIG snapshot

        Raises:
            KeyError: If config contains unknown keys
        """
        overrides = config or {}
        unknown = [key for key in overrides if key not in CONFIG]
        if unknown:
            raise KeyError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        self.config = {**CONFIG, **overrides}
        self.cache = cache if cache is not None else DecisionCache()

    def _cache_key(self, background_color: Optional[str], container_background_color: str) -> str:
        # None shares the empty-string entry
        background = "" if background_color is None else str(background_color)
        return f"{background}{self.config['cache_key_separator']}{container_background_color}"

    def _save(self, key: str, brightness: float = 1) -> str:
        if brightness > self.config["brightness_threshold"]:
            text_color = self.config["dark_text_color"]
        else:
            text_color = self.config["light_text_color"]
        self.cache.set(key, text_color)
        return text_color

    def decide(
        self,
        background_color: Optional[str],
        container_background_color: Optional[str] = None
    ) -> str:
        """
        Get the text color to use on a background.

        An empty or missing background is treated as opaque white, giving
        dark text. A translucent background uses its own alpha as the
        brightness, after compositing black (light container) or white
        (dark container) over it.

        Args:
            background_color: Background color string, may be empty or None
            container_background_color: Color of the surface underneath,
                defaults to the configured container color ("white")

        Returns:
            The dark or light text color ("#000" or "#fff" by default)
        """
        if container_background_color is None:
            container_background_color = self.config["default_container_color"]

        key = self._cache_key(background_color, container_background_color)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        if background_color is None or background_color == "":
            logger.debug("Empty background color, using dark text")
            return self._save(key)

        with Profiler(f"decide {key!r}"):
            background = parse_color(background_color)
            container = parse_color(container_background_color)

            if background.is_translucent:
                anchor = BLACK if container.l > 0.5 else WHITE
                composite = blend_colors(anchor, background, background.a)
                logger.debug(
                    f"Translucent background {background_color!r} over "
                    f"{container_background_color!r} composited to {composite}"
                )
                return self._save(key, composite.a)

            brightness = perceived_luminance(background.r, background.g, background.b)
            return self._save(key, brightness)

    def reset(self) -> None:
        """Clear every memoized decision."""
        self.cache.clear()


_default_decider: Optional[TextColorDecider] = None


def get_default_decider() -> TextColorDecider:
    """Get or create the process-wide decider behind decide() and reset()."""
    global _default_decider
    if _default_decider is None:
        _default_decider = TextColorDecider()
    return _default_decider


def decide(background_color: Optional[str], container_background_color: Optional[str] = None) -> str:
    """Decide the text color using the process-wide decider."""
    return get_default_decider().decide(background_color, container_background_color)


def reset() -> None:
    """Clear the process-wide decision cache."""
    get_default_decider().reset()

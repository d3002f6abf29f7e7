"""
Text Contrast - Utilities Package
=================================
This package contains utility modules for the text contrast package.
"""

from text_contrast.utils.logger import (
    JsonFormatter, setup_logger, get_logger, LogCapture
)


__all__ = [
    'JsonFormatter', 'setup_logger', 'get_logger', 'LogCapture'
]

"""
Command driven image processors.
"""
from .resize import ResizeWebProcessor
from .auto_orient import AutoOrientWebProcessor
from .background_color import BackgroundColorWebProcessor
from .format import FormatWebProcessor
from .quality import QualityWebProcessor

__all__ = [
    'ResizeWebProcessor',
    'AutoOrientWebProcessor',
    'BackgroundColorWebProcessor',
    'FormatWebProcessor',
    'QualityWebProcessor',
]

from .base import BaseDetector
from .tin import NorwegianTinDetector

__all__ = [
    "BaseDetector",
    "NorwegianTinDetector",
]

from .common import Font, MeasureMode, Measurer, Monospace, measure_text
from .truetype import TrueType

__all__ = [
    "Font",
    "MeasureMode",
    "Measurer",
    "Monospace",
    "TrueType",
    "measure_text",
]

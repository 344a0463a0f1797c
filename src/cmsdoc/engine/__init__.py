"""Batch conversion engine.

Entry point for converting whole files of documents, including
configuration and result types.
"""

from cmsdoc.engine.config import ConversionConfig, ConversionResult
from cmsdoc.engine.runner import run_conversion

__all__ = [
    "ConversionConfig",
    "ConversionResult",
    "run_conversion",
]

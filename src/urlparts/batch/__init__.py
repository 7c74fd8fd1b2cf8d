"""
Batch decomposition of URL columns.
"""

from .ids import IDGenerator
from .processor import OUTPUT_SCHEMA, UrlBatchProcessor

__all__ = [
    "IDGenerator",
    "UrlBatchProcessor",
    "OUTPUT_SCHEMA",
]

"""
Curriculum taxonomy: parsing and built-in sample snapshots.

All functions in this module are pure (no file I/O).
"""

from domain.taxonomy.loader import parse_taxonomy_config
from domain.taxonomy.samples import SAMPLE_TAXONOMIES, get_sample_taxonomy

__all__ = [
    "parse_taxonomy_config",
    "get_sample_taxonomy",
    "SAMPLE_TAXONOMIES",
]

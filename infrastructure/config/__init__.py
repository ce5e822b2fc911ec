"""
Configuration management: models, loading, and validation.

Handles:
- RunConfig: Main tagging run configuration
- Column mapping for the questions table
- Taxonomy loading from YAML/JSON (or built-in samples)
- Evaluation statistics settings

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import (
    load_run_config,
    load_taxonomy_config,
    resolve_taxonomy,
)
from infrastructure.config.models import (
    # Column mapping
    DataColumnsConfig,
    # Main config
    RunConfig,
    # Stats config
    StatsConfig,
)

__all__ = [
    # Main config (most commonly used)
    "RunConfig",
    "load_run_config",
    # Data columns
    "DataColumnsConfig",
    # Stats
    "StatsConfig",
    # Loaders
    "load_taxonomy_config",
    "resolve_taxonomy",
]

"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML experiment and taxonomy files)
- Question table reading and JSON artifacts
- Observability (logging with run/batch context)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import (
    RunConfig,
    StatsConfig,
    load_run_config,
    load_taxonomy_config,
)

__all__ = [
    # Configuration (most commonly used)
    "load_run_config",
    "load_taxonomy_config",
    "RunConfig",
    "StatsConfig",
]

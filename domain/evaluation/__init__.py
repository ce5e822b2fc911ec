"""
Evaluation of tag suggestions against human-assigned tags.

Provides:
- Multi-label tagging metrics (micro P/R/F1, top-1 hit rate)
- Bootstrap confidence intervals
- Confidence calibration tables

All functions are pure (depend only on numpy, pandas, sklearn).
"""

from domain.evaluation.bootstrap import bootstrap_ci
from domain.evaluation.metrics import compute_tagging_metrics, top1_hits
from domain.evaluation.tables import compute_confidence_calibration_table

__all__ = [
    "compute_tagging_metrics",
    "top1_hits",
    "bootstrap_ci",
    "compute_confidence_calibration_table",
]

"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing the batch tagging and evaluation workflows.
"""

from application.batching import detect_columns_from_questions_data, iter_segments
from application.evaluation import log_evaluation_summary, run_evaluation_if_tags_available
from application.serialize import attach_and_serialize_predictions
from application.tagging import run_tagging

__all__ = [
    # Main workflows
    "run_tagging",
    "run_evaluation_if_tags_available",
    "log_evaluation_summary",
    # Data utilities
    "iter_segments",
    "detect_columns_from_questions_data",
    "attach_and_serialize_predictions",
]

"""Column resolution and batch segmentation utilities."""

import logging

import pandas as pd

from infrastructure.config.models import RunConfig

logger = logging.getLogger(__name__)


def _optional_column(df: pd.DataFrame, col: str | None, key: str) -> str | None:
    if col is None or not str(col).strip():
        return None
    if col not in df.columns:
        logger.warning("Configured %s='%s' not found in questions dataset; ignoring it.", key, col)
        return None
    return col


def detect_columns_from_questions_data(
    cfg: RunConfig,
    df: pd.DataFrame,
) -> tuple[str, str | None, str | None, str | None]:
    """
    Resolve the question column (required) and the optional subject / human tag columns.

    Args:
        cfg: RunConfig instance
        df: Questions DataFrame

    Returns:
        Tuple of (question_col, subject_col, concept_tags_col, learning_goal_tags_col);
        optional entries are None when unset or missing from df

    Raises:
        KeyError: If configured question column not found in DataFrame
    """
    question_col = cfg.columns.question_col

    if question_col not in df.columns:
        raise KeyError(
            f"Configured question_col='{question_col}' not found in questions dataset columns: {list(df.columns)}"
        )

    subject_col = _optional_column(df, cfg.columns.subject_col, "subject_col")
    concept_tags_col = _optional_column(df, cfg.columns.concept_tags_col, "concept_tags_col")
    goal_tags_col = _optional_column(df, cfg.columns.learning_goal_tags_col, "learning_goal_tags_col")

    if cfg.evaluation_enabled and concept_tags_col is None and goal_tags_col is None:
        logger.warning("No human tag columns found; proceeding with tagging only (evaluation will be skipped).")

    return question_col, subject_col, concept_tags_col, goal_tags_col


def iter_segments(n_items: int, batch_size: int | None) -> list[tuple[int, int]]:
    """
    Return (start, end) index pairs for segmenting a list of length n_items.

    Args:
        n_items: Total number of items to segment
        batch_size: Size of each batch, or None to return entire range

    Returns:
        List of (start, end) index pairs
    """
    if batch_size is not None and batch_size <= 0:
        raise ValueError("batch_size must be a positive integer or None")

    if batch_size is None:
        return [(0, n_items)]

    segments: list[tuple[int, int]] = []
    start = 0
    while start < n_items:
        end = min(start + batch_size, n_items)
        segments.append((start, end))
        start = end
    return segments

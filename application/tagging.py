"""Batch tagging workflow over a questions table."""

import logging
from collections import Counter

import pandas as pd

from application.batching import iter_segments
from domain.schemas import TaggingResult
from domain.tagging import tag_question
from infrastructure.config.models import RunConfig
from infrastructure.observability.logging import clear_batch_context, set_log_context

logger = logging.getLogger(__name__)


def resolve_row_subject(row: pd.Series, subject_col: str | None, default: str | None) -> str | None:
    """Row subject cell, stripped; falls back to default when the column is unset or the cell is blank."""
    if subject_col is None:
        return default
    value = row[subject_col]
    if pd.isna(value) or not str(value).strip():
        return default
    return str(value).strip()


def run_tagging(
    cfg: RunConfig,
    questions_df: pd.DataFrame,
    question_col: str,
    subject_col: str | None = None,
) -> tuple[dict[object, TaggingResult], dict[str, int | float]]:
    """
    Tag every question in the table and return results keyed by DataFrame index, plus run stats.

    The per-row subject (if subject_col is set and non-empty) overrides cfg.subject for
    pattern boosting; the taxonomy is the same for every row.
    """
    results: dict[object, TaggingResult] = {}
    confidence_counts: Counter[str] = Counter()
    total_concepts = 0
    total_goals = 0

    if cfg.taxonomy is None:
        logger.warning("No taxonomy resolved; every question will get an empty low-confidence result.")

    logger.info("Total questions: %d", len(questions_df))

    indices = questions_df.index.tolist()
    for batch_id, (seg_start, seg_end) in enumerate(iter_segments(len(indices), cfg.batch_size), start=1):
        set_log_context(batch_id=batch_id)
        logger.info("Processing batch %d (items %d to %d of %d)...", batch_id, seg_start, seg_end - 1, len(indices))

        batch_counts: Counter[str] = Counter()
        for df_idx in indices[seg_start:seg_end]:
            row = questions_df.loc[df_idx]
            raw_text = row[question_col]
            question_text = "" if pd.isna(raw_text) else str(raw_text).strip()
            if not question_text:
                logger.warning("Row %s has an empty question; it will get no suggestions.", df_idx)

            result = tag_question(
                question_text,
                cfg.taxonomy,
                subject=resolve_row_subject(row, subject_col, cfg.subject),
                policy=cfg.policy,
            )
            results[df_idx] = result

            batch_counts[result.confidence] += 1
            total_concepts += len(result.concepts)
            total_goals += len(result.learning_goals)

        logger.info(
            "Batch %d confidence: high=%d, medium=%d, low=%d",
            batch_id,
            batch_counts["high"],
            batch_counts["medium"],
            batch_counts["low"],
        )
        confidence_counts.update(batch_counts)

    n = len(results)
    run_stats: dict[str, int | float] = {
        "total_questions": n,
        "confidence_high": confidence_counts["high"],
        "confidence_medium": confidence_counts["medium"],
        "confidence_low": confidence_counts["low"],
        "avg_concepts_per_question": round(total_concepts / n, 4) if n > 0 else 0.0,
        "avg_learning_goals_per_question": round(total_goals / n, 4) if n > 0 else 0.0,
    }
    logger.info("All batches processed.")

    clear_batch_context()
    return results, run_stats

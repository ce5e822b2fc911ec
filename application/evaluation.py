"""Evaluation workflow and summary logging."""

import logging
from pathlib import Path

import pandas as pd

from application.constants import (
    PRED_CONCEPTS_COL,
    PRED_CONFIDENCE_COL,
    PRED_LEARNING_GOALS_COL,
    TOP1_HIT_COL,
)
from domain.evaluation.metrics import compute_tagging_metrics, top1_hits
from domain.evaluation.tables import compute_confidence_calibration_table
from infrastructure.config.models import RunConfig
from infrastructure.io import split_tag_cell

logger = logging.getLogger(__name__)


def run_evaluation_if_tags_available(
    cfg: RunConfig,
    df_out: pd.DataFrame,
    concept_tags_col: str | None,
    goal_tags_col: str | None,
) -> tuple[dict, pd.DataFrame | None]:
    """
    Compute metrics if human tags are present; otherwise return empty metrics.

    Concept metrics are prefixed `concept_`, learning goal metrics `learning_goal_`.
    Rows whose human tag cell is empty are treated as untagged and left out.
    The calibration table uses concept top-1 hits when concept tags exist, otherwise
    learning goal top-1 hits.

    Args:
        cfg: RunConfig instance
        df_out: DataFrame with predictions attached
        concept_tags_col: Human concept tag column (optional)
        goal_tags_col: Human learning goal tag column (optional)

    Returns:
        Tuple of (metrics dict, calibration table DataFrame or None)
    """
    if concept_tags_col is None and goal_tags_col is None:
        logger.info("No human tags provided; skipping metric computation.")
        return {}, None

    delimiter = cfg.columns.tag_delimiter
    metrics: dict = {}
    calibration_df: pd.DataFrame | None = None

    for prefix, tags_col, pred_col in (
        ("concept", concept_tags_col, PRED_CONCEPTS_COL),
        ("learning_goal", goal_tags_col, PRED_LEARNING_GOALS_COL),
    ):
        if tags_col is None:
            continue

        true_all = df_out[tags_col].apply(lambda v: split_tag_cell(v, delimiter))
        tagged_mask = true_all.map(bool)
        if not tagged_mask.any():
            logger.info("Column '%s' has no human tags; skipping %s metrics.", tags_col, prefix)
            continue

        true_tags = true_all[tagged_mask].tolist()
        pred_tags = df_out.loc[tagged_mask, pred_col].tolist()

        kind_metrics = compute_tagging_metrics(true_tags, pred_tags, cfg.stats)
        for key, value in kind_metrics.items():
            metrics[f"{prefix}_{key}"] = value

        if calibration_df is None:
            eval_df = df_out.loc[tagged_mask, [PRED_CONFIDENCE_COL]].copy()
            eval_df[TOP1_HIT_COL] = top1_hits(true_tags, pred_tags)
            calibration_df = compute_confidence_calibration_table(
                df=eval_df,
                confidence_col=PRED_CONFIDENCE_COL,
                hit_col=TOP1_HIT_COL,
                confidence_order=cfg.stats.confidence_order,
            )

    return metrics, calibration_df


def log_evaluation_summary(
    metrics: dict,
    calibration_df: pd.DataFrame | None,
    run_stats: dict[str, int | float],
    predictions_path: Path,
    metrics_path: Path,
) -> None:
    """
    Log a concise, human-readable evaluation summary.

    Args:
        metrics: Dictionary of computed metrics
        calibration_df: Confidence calibration table (optional)
        run_stats: Tagging run statistics (confidence counts, suggestions per question)
        predictions_path: Path to predictions JSON file
        metrics_path: Path to metrics JSON file
    """
    logger.info("=== Tagging Summary ===")
    logger.info(
        "Questions: %d (confidence high=%d, medium=%d, low=%d)",
        run_stats["total_questions"],
        run_stats["confidence_high"],
        run_stats["confidence_medium"],
        run_stats["confidence_low"],
    )
    logger.info(
        "Suggestions per question: concepts=%.2f, learning goals=%.2f",
        run_stats["avg_concepts_per_question"],
        run_stats["avg_learning_goals_per_question"],
    )

    evaluated = False
    for prefix, title in (("concept", "Concept"), ("learning_goal", "Learning goal")):
        if f"{prefix}_micro_f1" not in metrics:
            continue
        evaluated = True
        logger.info("--- %s metrics (n=%d) ---", title, metrics[f"{prefix}_n_questions"])
        logger.info(
            "Micro precision: %.4f, micro recall: %.4f",
            metrics[f"{prefix}_micro_precision"],
            metrics[f"{prefix}_micro_recall"],
        )
        logger.info(
            "Micro F1: %.4f (95%% CI [%.4f, %.4f])",
            metrics[f"{prefix}_micro_f1"],
            metrics[f"{prefix}_micro_f1_ci_95"][0],
            metrics[f"{prefix}_micro_f1_ci_95"][1],
        )
        logger.info(
            "Top-1 hit rate: %.4f (95%% CI [%.4f, %.4f])",
            metrics[f"{prefix}_top1_hit_rate"],
            metrics[f"{prefix}_top1_hit_rate_ci_95"][0],
            metrics[f"{prefix}_top1_hit_rate_ci_95"][1],
        )
        logger.info(
            "Any-hit rate: %.4f, coverage: %.4f",
            metrics[f"{prefix}_any_hit_rate"],
            metrics[f"{prefix}_coverage"],
        )

    if not evaluated:
        logger.info("No human tags provided; skipped metric computation.")

    if calibration_df is not None and not calibration_df.empty:
        logger.info("Confidence calibration:\n%s", calibration_df.to_string(index=False))

    logger.info("--- Artifacts ---")
    logger.info("Predictions JSON: %s", predictions_path)
    logger.info("Metrics JSON: %s", metrics_path)

"""
CLI entrypoint for the curriculum question tagger.

Batch mode (default) performs the following steps:
- loads configs/experiment.yaml and resolves the taxonomy (file or built-in sample)
- creates a per-run output folder under outputs/
- tags every question of the configured table
- serializes predictions, runs evaluation if human tags are available
- saves metrics and a confidence calibration table
- logs a human-readable summary of results

Single-question mode (--question) prints one TaggingResult as JSON to stdout.
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from application import (
    attach_and_serialize_predictions,
    detect_columns_from_questions_data,
    log_evaluation_summary,
    run_evaluation_if_tags_available,
    run_tagging,
)
from application.constants import (
    CALIBRATION_FILENAME,
    CONFIG_SNAPSHOT_FILENAME,
    LOG_FILENAME,
    METRICS_FILENAME,
    OUTPUT_ROOT,
    PREDICTIONS_FILENAME,
)
from domain.tagging import tag_question
from infrastructure.config import load_run_config, resolve_taxonomy
from infrastructure.constants import EXPERIMENT_FILE
from infrastructure.io import ensure_exists, read_table, write_json
from infrastructure.observability import configure_logging, get_log_context, make_run_tag, set_log_context

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Suggest curriculum tags for questions")
    p.add_argument(
        "--experiment",
        type=str,
        default=str(EXPERIMENT_FILE),
        help="Path to experiment.yaml for batch mode (default: configs/experiment.yaml)",
    )
    p.add_argument(
        "--question",
        type=str,
        default=None,
        help="Tag a single question and print the result as JSON instead of running a batch.",
    )
    p.add_argument(
        "--subject",
        type=str,
        default=None,
        help="Subject for --question mode (pattern boosting and sample taxonomy).",
    )
    p.add_argument(
        "--taxonomy",
        type=str,
        default=None,
        help="Taxonomy YAML/JSON for --question mode (default: sample taxonomy for --subject).",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default="INFO",
        choices=LOG_LEVELS,
        help="Console log level",
    )
    p.add_argument(
        "--file-level",
        type=str,
        default="DEBUG",
        choices=LOG_LEVELS,
        help="File log level",
    )
    return p.parse_args()


def tag_single_question(args: argparse.Namespace) -> None:
    configure_logging(console_level=getattr(logging, args.console_level))

    taxonomy_path = Path(args.taxonomy) if args.taxonomy else None
    if taxonomy_path is not None:
        ensure_exists(taxonomy_path, "taxonomy file")

    taxonomy = resolve_taxonomy(taxonomy_path, args.subject)
    result = tag_question(args.question, taxonomy, subject=args.subject)

    sys.stdout.write(result.model_dump_json(indent=2) + "\n")


def run_batch(args: argparse.Namespace) -> None:
    experiment_path = Path(args.experiment)
    ensure_exists(experiment_path, "experiment.yaml")

    cfg = load_run_config(experiment_path)

    # ---- Per-run output folder ----
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    taxonomy_name = cfg.taxonomy.id if cfg.taxonomy is not None and cfg.taxonomy.id else "no_taxonomy"
    run_id = f"{ts}_{taxonomy_name}_{cfg.subject or 'nosubject'}"

    run_dir = OUTPUT_ROOT / run_id
    run_dir.mkdir(parents=True, exist_ok=True)

    log_path = run_dir / LOG_FILENAME
    configure_logging(
        log_file=log_path,
        console_level=getattr(logging, args.console_level),
        file_level=getattr(logging, args.file_level),
    )

    set_log_context(run_id_full=run_id, subject=cfg.subject or "-", taxonomy=taxonomy_name)

    logger.info("Starting run: run_id=%s (run_tag=%s)", run_id, make_run_tag(run_id))
    logger.info("Run output directory: %s", run_dir)

    # Load questions
    logger.info("Loading questions from %s...", cfg.questions_file_path)
    questions_df = read_table(cfg.questions_file_path)
    logger.info("Questions loaded: %d rows, %d columns", questions_df.shape[0], questions_df.shape[1])

    question_col, subject_col, concept_tags_col, goal_tags_col = detect_columns_from_questions_data(
        cfg=cfg, df=questions_df
    )

    # Save config snapshot
    write_json(
        run_dir / CONFIG_SNAPSHOT_FILENAME,
        {**cfg.model_dump(mode="json"), "log_context": get_log_context()},
    )

    results, run_stats = run_tagging(
        cfg=cfg,
        questions_df=questions_df,
        question_col=question_col,
        subject_col=subject_col,
    )

    df_out, predictions_path = attach_and_serialize_predictions(
        cfg=cfg,
        questions_df=questions_df,
        question_col=question_col,
        subject_col=subject_col,
        concept_tags_col=concept_tags_col,
        goal_tags_col=goal_tags_col,
        results=results,
        predictions_path=run_dir / PREDICTIONS_FILENAME,
    )

    # Evaluation (only if human tags exist)
    metrics, calibration_df = run_evaluation_if_tags_available(
        cfg=cfg,
        df_out=df_out,
        concept_tags_col=concept_tags_col,
        goal_tags_col=goal_tags_col,
    )

    metrics.update(run_stats)
    metrics_path = write_json(run_dir / METRICS_FILENAME, metrics)
    logger.info("Saved metrics to %s", metrics_path)

    if calibration_df is not None:
        calibration_path = run_dir / CALIBRATION_FILENAME
        calibration_df.to_csv(calibration_path, index=False)
        logger.info("Saved confidence calibration table to %s", calibration_path)

    log_evaluation_summary(
        metrics=metrics,
        calibration_df=calibration_df,
        run_stats=run_stats,
        predictions_path=predictions_path,
        metrics_path=metrics_path,
    )

    logger.info("Detailed log: %s", log_path)


def main() -> None:
    args = _parse_args()
    if args.question is not None:
        tag_single_question(args)
    else:
        run_batch(args)


if __name__ == "__main__":
    main()

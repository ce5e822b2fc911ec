"""Prediction serialization utilities."""

import logging
from pathlib import Path

import pandas as pd

from application.constants import (
    HUMAN_CONCEPTS_KEY,
    HUMAN_LEARNING_GOALS_KEY,
    PRED_CONCEPTS_COL,
    PRED_CONFIDENCE_COL,
    PRED_LEARNING_GOALS_COL,
    QUESTION_KEY,
    ROW_INDEX_KEY,
    SUBJECT_KEY,
    SUGGESTIONS_KEY,
)
from application.tagging import resolve_row_subject
from domain.schemas import TaggingResult
from infrastructure.config import RunConfig
from infrastructure.io import split_tag_cell, write_json

logger = logging.getLogger(__name__)


def attach_and_serialize_predictions(
    cfg: RunConfig,
    questions_df: pd.DataFrame,
    question_col: str,
    subject_col: str | None,
    concept_tags_col: str | None,
    goal_tags_col: str | None,
    results: dict[object, TaggingResult],
    predictions_path: Path,
) -> tuple[pd.DataFrame, Path]:
    """
    Attach suggested ids and confidence to the DataFrame and write predictions_path as a JSON list.

    Each record carries the full suggestion lists (scores and reasons) and, when available,
    the human tags parsed from the configured tag columns.
    """
    df_out = questions_df.copy()
    df_out[PRED_CONCEPTS_COL] = [[s.entity_id for s in results[idx].concepts] for idx in df_out.index]
    df_out[PRED_LEARNING_GOALS_COL] = [[s.entity_id for s in results[idx].learning_goals] for idx in df_out.index]
    df_out[PRED_CONFIDENCE_COL] = [results[idx].confidence for idx in df_out.index]

    delimiter = cfg.columns.tag_delimiter
    records: list[dict] = []
    for idx, row in df_out.iterrows():
        record: dict[str, object] = {ROW_INDEX_KEY: idx}

        raw_question = row[question_col]
        record[QUESTION_KEY] = "" if pd.isna(raw_question) else str(raw_question)

        # Same subject the tagger used for pattern boosting
        record[SUBJECT_KEY] = resolve_row_subject(row, subject_col, cfg.subject)

        # Human tags (optional)
        record[HUMAN_CONCEPTS_KEY] = split_tag_cell(row[concept_tags_col], delimiter) if concept_tags_col else None
        record[HUMAN_LEARNING_GOALS_KEY] = split_tag_cell(row[goal_tags_col], delimiter) if goal_tags_col else None

        record[SUGGESTIONS_KEY] = results[idx].model_dump(mode="json")
        records.append(record)

    write_json(predictions_path, records)
    logger.info("Saved predictions JSON: %s", predictions_path)

    return df_out, predictions_path

import json
from pathlib import Path

import pandas as pd
import pytest

from application.batching import detect_columns_from_questions_data, iter_segments
from application.constants import PRED_CONCEPTS_COL, PRED_CONFIDENCE_COL, SUGGESTIONS_KEY
from application.serialize import attach_and_serialize_predictions
from application.tagging import resolve_row_subject, run_tagging
from domain.taxonomy.samples import MATHEMATICS_GRADE_9
from infrastructure.config.models import DataColumnsConfig, RunConfig
from infrastructure.io import read_table, split_tag_cell

REPO_ROOT = Path(__file__).resolve().parents[2]


def _cfg(**column_kwargs) -> RunConfig:
    cfg = RunConfig(
        subject="Mathematics",
        questions_file_path=Path("dataset/questions.csv"),
        columns=DataColumnsConfig(question_col="question", **column_kwargs),
        batch_size=2,
    )
    cfg.taxonomy = MATHEMATICS_GRADE_9
    return cfg


def _questions() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "question": ["Solve the linear equation 2x + 3 = 7 for x", "What color is the sky?", None],
            "subject": ["", "History", None],
            "concept_tags": ["alg-2", None, None],
        }
    )


@pytest.mark.parametrize(
    ("n_items", "batch_size", "expected"),
    [
        (5, None, [(0, 5)]),
        (5, 2, [(0, 2), (2, 4), (4, 5)]),
        (4, 4, [(0, 4)]),
        (0, 3, []),
    ],
)
def test_iter_segments(n_items, batch_size, expected) -> None:
    assert iter_segments(n_items, batch_size) == expected


def test_iter_segments_rejects_non_positive_batch_size() -> None:
    with pytest.raises(ValueError):
        iter_segments(3, 0)


def test_detect_columns_requires_question_column() -> None:
    cfg = _cfg()
    with pytest.raises(KeyError):
        detect_columns_from_questions_data(cfg, pd.DataFrame({"text": ["q"]}))


def test_detect_columns_ignores_missing_optional_columns() -> None:
    cfg = _cfg(subject_col="subject", concept_tags_col="concept_tags", learning_goal_tags_col="goals")
    cols = detect_columns_from_questions_data(cfg, _questions())
    assert cols == ("question", "subject", "concept_tags", None)


def test_run_tagging_tags_every_row() -> None:
    df = _questions()
    results, stats = run_tagging(_cfg(subject_col="subject"), df, "question", subject_col="subject")

    assert list(results) == [0, 1, 2]
    # blank row subject falls back to the configured subject
    assert results[0].concepts[0].entity_id == "alg-2"
    assert "Subject pattern" in results[0].concepts[0].reason
    assert results[1].confidence == "low"
    assert results[2].concepts == [] and results[2].confidence == "low"

    assert stats["total_questions"] == 3
    assert stats["confidence_high"] == 1
    assert stats["confidence_low"] == 2


def test_run_tagging_without_taxonomy() -> None:
    cfg = _cfg()
    cfg.taxonomy = None
    results, stats = run_tagging(cfg, _questions(), "question")
    assert all(r.concepts == [] and r.confidence == "low" for r in results.values())
    assert stats["avg_concepts_per_question"] == 0.0


def test_attach_and_serialize_predictions(tmp_path: Path) -> None:
    df = _questions()
    cfg = _cfg(subject_col="subject", concept_tags_col="concept_tags")
    results, _ = run_tagging(cfg, df, "question", subject_col="subject")

    df_out, path = attach_and_serialize_predictions(
        cfg=cfg,
        questions_df=df,
        question_col="question",
        subject_col="subject",
        concept_tags_col="concept_tags",
        goal_tags_col=None,
        results=results,
        predictions_path=tmp_path / "run" / "predictions.json",
    )

    assert df_out.loc[0, PRED_CONCEPTS_COL][0] == "alg-2"
    assert df_out[PRED_CONFIDENCE_COL].tolist() == ["high", "low", "low"]
    assert PRED_CONCEPTS_COL not in df.columns

    records = json.loads(path.read_text(encoding="utf-8"))
    assert len(records) == 3
    assert records[0]["human_concepts"] == ["alg-2"]
    assert records[0]["human_learning_goals"] is None
    assert records[0]["subject"] == "Mathematics"
    assert records[1]["subject"] == "History"
    assert records[2]["question"] == ""
    assert records[0][SUGGESTIONS_KEY]["concepts"][0]["entity_id"] == "alg-2"


def test_serialized_subject_matches_subject_used_for_tagging(tmp_path: Path) -> None:
    df = pd.DataFrame(
        {
            "question": ["Solve the linear equation 2x + 3 = 7 for x", "Solve for x", "Solve for x"],
            "subject": ["   ", None, " History "],
        }
    )
    cfg = _cfg(subject_col="subject")
    results, _ = run_tagging(cfg, df, "question", subject_col="subject")
    assert "Subject pattern" in results[0].concepts[0].reason

    _, path = attach_and_serialize_predictions(
        cfg=cfg,
        questions_df=df,
        question_col="question",
        subject_col="subject",
        concept_tags_col=None,
        goal_tags_col=None,
        results=results,
        predictions_path=tmp_path / "predictions.json",
    )

    records = json.loads(path.read_text(encoding="utf-8"))
    assert [r["subject"] for r in records] == ["Mathematics", "Mathematics", "History"]


def test_resolve_row_subject() -> None:
    row = pd.Series({"subject": "  English "})
    assert resolve_row_subject(row, "subject", "Mathematics") == "English"
    assert resolve_row_subject(row, None, "Mathematics") == "Mathematics"
    assert resolve_row_subject(pd.Series({"subject": ""}), "subject", None) is None


def test_split_tag_cell() -> None:
    assert split_tag_cell("alg-1; alg-2;;alg-1 ") == ["alg-1", "alg-2"]
    assert split_tag_cell("a|b", delimiter="|") == ["a", "b"]
    assert split_tag_cell(float("nan")) == []
    assert split_tag_cell(None) == []


def test_read_table_sample_questions() -> None:
    df = read_table(REPO_ROOT / "dataset" / "sample_questions.csv")
    assert {"question", "subject", "concept_tags", "learning_goal_tags"} <= set(df.columns)
    assert len(df) == 7


def test_read_table_rejects_unknown_suffix(tmp_path: Path) -> None:
    path = tmp_path / "questions.txt"
    path.write_text("question\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported file format"):
        read_table(path)

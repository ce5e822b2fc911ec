import math

import numpy as np
import pandas as pd
import pytest

from application.constants import PRED_CONCEPTS_COL, PRED_CONFIDENCE_COL, PRED_LEARNING_GOALS_COL
from application.evaluation import run_evaluation_if_tags_available
from domain.evaluation import bootstrap_ci, compute_confidence_calibration_table, compute_tagging_metrics
from infrastructure.config.models import DataColumnsConfig, RunConfig, StatsConfig

STATS = StatsConfig(seed=7, n_boot=50, alpha=0.05)


def test_compute_tagging_metrics_values() -> None:
    true_tags = [["a"], ["b"], ["c", "d"]]
    pred_tags = [["a", "x"], [], ["d"]]

    metrics = compute_tagging_metrics(true_tags, pred_tags, STATS)

    # TP = {a, d}, FP = {x}, FN = {b, c}
    assert metrics["n_questions"] == 3
    assert metrics["n_labels"] == 5
    assert metrics["micro_precision"] == pytest.approx(2 / 3)
    assert metrics["micro_recall"] == pytest.approx(0.5)
    assert metrics["micro_f1"] == pytest.approx(4 / 7)
    assert metrics["top1_hit_rate"] == pytest.approx(2 / 3)
    assert metrics["any_hit_rate"] == pytest.approx(2 / 3)
    assert metrics["coverage"] == pytest.approx(2 / 3)

    for key in ("micro_f1_ci_95", "top1_hit_rate_ci_95"):
        low, high = metrics[key]
        assert 0.0 <= low <= high <= 1.0


def test_compute_tagging_metrics_is_reproducible() -> None:
    true_tags = [["a"], ["b"], ["a", "b"], ["c"]]
    pred_tags = [["a"], ["a"], ["b"], []]
    assert compute_tagging_metrics(true_tags, pred_tags, STATS) == compute_tagging_metrics(
        true_tags, pred_tags, STATS
    )


def test_compute_tagging_metrics_edge_cases() -> None:
    assert compute_tagging_metrics([], [], STATS) == {}
    assert compute_tagging_metrics([[], []], [[], []], STATS) == {}
    with pytest.raises(ValueError, match="Length mismatch"):
        compute_tagging_metrics([["a"]], [], STATS)


def test_bootstrap_ci_constant_statistic() -> None:
    values = np.ones(10)
    low, high = bootstrap_ci(values, values, lambda yt, _yp: float(yt.mean()), n_boot=20, alpha=0.05, seed=1)
    assert low == high == 1.0

    low, high = bootstrap_ci(np.array([]), np.array([]), lambda yt, _yp: 0.0, n_boot=20, alpha=0.05, seed=1)
    assert math.isnan(low) and math.isnan(high)


def test_confidence_calibration_table_orders_labels() -> None:
    df = pd.DataFrame(
        {
            "confidence": ["low", "high", "high", "medium"],
            "hit": [0.0, 1.0, 0.0, 1.0],
        }
    )
    table = compute_confidence_calibration_table(df, "confidence", "hit", ["high", "medium", "low"])

    assert table["Confidence"].tolist() == ["high", "medium", "low"]
    assert table["Questions"].tolist() == [2, 1, 1]
    assert table["Top-1 hits (count)"].tolist() == [1, 1, 0]
    assert table["Top-1 hit rate (%)"].tolist() == [50.0, 100.0, 0.0]


def test_confidence_calibration_table_missing_column() -> None:
    with pytest.raises(KeyError):
        compute_confidence_calibration_table(pd.DataFrame({"confidence": []}), "confidence", "hit", [])


def test_run_evaluation_skips_untagged_rows() -> None:
    cfg = RunConfig(
        subject="Mathematics",
        questions_file_path="q.csv",
        columns=DataColumnsConfig(question_col="question", concept_tags_col="concepts"),
        stats=STATS,
    )
    df_out = pd.DataFrame(
        {
            "question": ["q1", "q2", "q3"],
            "concepts": ["alg-2", None, "lr-1; ag-1"],
            PRED_CONCEPTS_COL: [["alg-2", "lr-1"], ["alg-1"], ["ag-1"]],
            PRED_LEARNING_GOALS_COL: [["lg-2"], [], []],
            PRED_CONFIDENCE_COL: ["high", "low", "medium"],
        }
    )

    metrics, calibration = run_evaluation_if_tags_available(cfg, df_out, "concepts", None)

    assert metrics["concept_n_questions"] == 2
    assert metrics["concept_top1_hit_rate"] == pytest.approx(1.0)
    assert not any(key.startswith("learning_goal_") for key in metrics)
    assert calibration is not None
    assert calibration["Confidence"].tolist() == ["high", "medium"]


def test_run_evaluation_without_tag_columns() -> None:
    cfg = RunConfig(
        subject="Mathematics",
        questions_file_path="q.csv",
        columns=DataColumnsConfig(question_col="question"),
    )
    metrics, calibration = run_evaluation_if_tags_available(cfg, pd.DataFrame({"question": ["q"]}), None, None)
    assert metrics == {}
    assert calibration is None

"""Multi-label tagging metrics with bootstrap confidence intervals."""

import warnings
from collections.abc import Sequence

import numpy as np
from sklearn.exceptions import UndefinedMetricWarning
from sklearn.metrics import f1_score, precision_recall_fscore_support
from sklearn.preprocessing import MultiLabelBinarizer

from domain.evaluation.bootstrap import bootstrap_ci
from infrastructure.config.models import StatsConfig


def top1_hits(true_tags: Sequence[Sequence[str]], pred_tags: Sequence[Sequence[str]]) -> np.ndarray:
    """1.0 where the first suggestion is one of the human tags, else 0.0 (no suggestion = miss)."""
    return np.array(
        [float(bool(pred) and pred[0] in set(true)) for true, pred in zip(true_tags, pred_tags, strict=True)],
        dtype=float,
    )


def compute_tagging_metrics(
    true_tags: Sequence[Sequence[str]],
    pred_tags: Sequence[Sequence[str]],
    stats_cfg: StatsConfig,
) -> dict:
    """
    Compare suggested tag ids against human-assigned tag ids, question by question.

    Args:
        true_tags: Human tag ids per question
        pred_tags: Suggested tag ids per question, best first
        stats_cfg: Statistics configuration (seed, n_boot, alpha)

    Returns:
        Metrics dict (micro precision/recall/F1, samples F1, top-1 hit rate,
        any-hit rate, coverage, CIs). Empty dict if there is nothing to compare.

    Raises:
        ValueError: If the two sequences differ in length
    """
    if len(true_tags) != len(pred_tags):
        raise ValueError(f"Length mismatch: {len(true_tags)} true rows vs {len(pred_tags)} predicted rows")

    n = len(true_tags)
    classes = sorted({tag for row in (*true_tags, *pred_tags) for tag in row})
    if n == 0 or not classes:
        return {}

    mlb = MultiLabelBinarizer(classes=classes)
    y_true = mlb.fit_transform([list(row) for row in true_tags])
    y_pred = mlb.transform([list(row) for row in pred_tags])

    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", category=UndefinedMetricWarning)

        precision, recall, micro_f1, _ = precision_recall_fscore_support(
            y_true,
            y_pred,
            average="micro",
            zero_division=0,
        )
        samples_f1 = f1_score(y_true, y_pred, average="samples", zero_division=0)

    hits = top1_hits(true_tags, pred_tags)
    any_hits = np.array(
        [float(bool(set(true) & set(pred))) for true, pred in zip(true_tags, pred_tags, strict=True)],
        dtype=float,
    )
    coverage = float(np.mean([bool(pred) for pred in pred_tags]))

    # Bootstrap CIs
    micro_f1_ci_low, micro_f1_ci_high = bootstrap_ci(
        y_true=y_true,
        y_pred=y_pred,
        stat_fn=lambda yt, yp: f1_score(yt, yp, average="micro", zero_division=0),
        n_boot=stats_cfg.n_boot,
        alpha=stats_cfg.alpha,
        seed=stats_cfg.seed,
    )
    hit_ci_low, hit_ci_high = bootstrap_ci(
        y_true=hits,
        y_pred=hits,
        stat_fn=lambda yt, _yp: float(np.mean(yt)),
        n_boot=stats_cfg.n_boot,
        alpha=stats_cfg.alpha,
        seed=stats_cfg.seed,
    )

    return {
        "n_questions": n,
        "n_labels": len(classes),
        "micro_precision": float(precision),
        "micro_recall": float(recall),
        "micro_f1": float(micro_f1),
        "micro_f1_ci_95": [micro_f1_ci_low, micro_f1_ci_high],
        "samples_f1": float(samples_f1),
        "top1_hit_rate": float(hits.mean()),
        "top1_hit_rate_ci_95": [hit_ci_low, hit_ci_high],
        "any_hit_rate": float(any_hits.mean()),
        "coverage": coverage,
    }

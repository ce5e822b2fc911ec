"""Confidence calibration table generation."""

import pandas as pd

TABLE_COLUMNS = [
    "Confidence",
    "Questions",
    "Top-1 hits (count)",
    "Top-1 hit rate (%)",
]


def compute_confidence_calibration_table(
    df: pd.DataFrame,
    confidence_col: str,
    hit_col: str,
    confidence_order: list[str],
) -> pd.DataFrame:
    """
    Check whether the confidence label tracks suggestion quality.

    Columns in the result:
      - Confidence: high / medium / low
      - Questions: number of evaluated questions with this label
      - Top-1 hits (count): questions whose first suggestion matches a human tag
      - Top-1 hit rate (%): hits / questions * 100

    Args:
        df: DataFrame with one row per evaluated question
        confidence_col: Column holding the confidence label
        hit_col: Column holding 1.0 / 0.0 top-1 hit flags
        confidence_order: Row order of confidence labels (e.g. ['high', 'medium', 'low'])

    Returns:
        DataFrame with one row per confidence label present in df
    """
    for col in [confidence_col, hit_col]:
        if col not in df.columns:
            raise KeyError(f"Required column '{col}' not found in DataFrame.")

    sub_df = df.dropna(subset=[confidence_col, hit_col])
    if sub_df.empty:
        return pd.DataFrame(columns=TABLE_COLUMNS)

    rows: list[dict[str, object]] = []
    for confidence, group in sub_df.groupby(confidence_col, sort=False):
        total = len(group)
        hit_count = int(group[hit_col].astype(float).sum())
        rows.append(
            {
                "Confidence": str(confidence),
                "Questions": total,
                "Top-1 hits (count)": hit_count,
                "Top-1 hit rate (%)": round(hit_count / total * 100.0, 1),
            }
        )

    result = pd.DataFrame(rows, columns=TABLE_COLUMNS)

    # Enforce high -> medium -> low; unknown labels sort last
    order_map = {label: idx for idx, label in enumerate(confidence_order)}
    result["_order"] = result["Confidence"].map(lambda c: order_map.get(c, len(order_map)))
    result = result.sort_values(["_order", "Confidence"]).reset_index(drop=True)
    return result.drop(columns=["_order"])


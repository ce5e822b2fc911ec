"""Application-level constants."""

from pathlib import Path

# Keys for serialization
ROW_INDEX_KEY = "row_index"
QUESTION_KEY = "question"
SUBJECT_KEY = "subject"
HUMAN_CONCEPTS_KEY = "human_concepts"
HUMAN_LEARNING_GOALS_KEY = "human_learning_goals"
SUGGESTIONS_KEY = "suggestions"

# Column names for predictions
PRED_CONCEPTS_COL = "Suggested_Concepts"
PRED_LEARNING_GOALS_COL = "Suggested_Learning_Goals"
PRED_CONFIDENCE_COL = "Tagging_Confidence"
TOP1_HIT_COL = "Top1_Hit"

# Output filenames
PREDICTIONS_FILENAME = "predictions.json"
METRICS_FILENAME = "metrics.json"
CALIBRATION_FILENAME = "confidence_calibration.csv"
CONFIG_SNAPSHOT_FILENAME = "config.resolved.json"

# Output directory structure
OUTPUT_ROOT = Path("outputs")
LOG_FILENAME = "run.log"

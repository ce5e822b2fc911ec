"""Configuration models (Pydantic classes)."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from domain.schemas import TaxonomySnapshot
from domain.tagging.policy import TaggingPolicy


class DataColumnsConfig(BaseModel):
    """Column name mapping for the questions table."""

    # Always required
    question_col: str

    # Optional per-row subject overriding RunConfig.subject for pattern boosting
    subject_col: str | None = None

    # Optional human tags (enable evaluation)
    concept_tags_col: str | None = None
    learning_goal_tags_col: str | None = None
    tag_delimiter: str = ";"


class StatsConfig(BaseModel):
    """Configuration for evaluation statistics."""

    seed: int = 42
    n_boot: int = Field(default=2000, ge=1)
    alpha: float = Field(default=0.05, gt=0.0, lt=1.0)
    confidence_order: list[str] = Field(default_factory=lambda: ["high", "medium", "low"])


class RunConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from experiment.yaml
    - Validated and enriched by configuration loader
    - Consumed by the tagging and evaluation workflows
    - Contains both user-specified and resolved fields
    """

    subject: str | None = Field(
        default=None,
        description="Subject used for pattern boosting and for picking a sample taxonomy.",
    )

    # Taxonomy (resolved by loader)
    taxonomy_file: Path | None = Field(
        default=None,
        description="YAML/JSON taxonomy file. If missing, the sample taxonomy for `subject` is used.",
    )
    taxonomy: TaxonomySnapshot | None = None

    questions_file_path: Path = Field(..., description="Path to the questions dataset file (Excel or CSV).")
    columns: DataColumnsConfig

    batch_size: int | None = Field(
        default=None,
        description="Questions per logged batch. None processes the whole table as one batch.",
    )

    stats: StatsConfig = Field(default_factory=StatsConfig)
    policy: TaggingPolicy = Field(default_factory=TaggingPolicy)

    @model_validator(mode="after")
    def _validate(self) -> "RunConfig":
        if self.subject is not None and not str(self.subject).strip():
            self.subject = None

        if self.taxonomy_file is None and self.subject is None:
            raise ValueError("Either taxonomy_file or subject must be set in experiment.yaml")

        if not self.columns.question_col:
            raise ValueError("columns.question_col is required in experiment.yaml")

        if not self.columns.tag_delimiter:
            raise ValueError("columns.tag_delimiter must be a non-empty string")

        if self.batch_size is not None and self.batch_size <= 0:
            raise ValueError("batch_size must be a positive integer or None")

        return self

    @property
    def evaluation_enabled(self) -> bool:
        return bool(self.columns.concept_tags_col or self.columns.learning_goal_tags_col)

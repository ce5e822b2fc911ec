"""Scoring thresholds and limits used by the tagger."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TaggingPolicy(BaseModel):
    """
    Policy knobs for ranking and confidence.

    Defaults reproduce the reference tagging behaviour; override them from the
    `policy` block of experiment.yaml.
    """

    model_config = ConfigDict(frozen=True)

    top_n: int = Field(default=5, ge=1, description="Maximum suggestions kept per kind.")

    # Post-filters (strict "greater than")
    concept_min_score: float = Field(default=0.15, ge=0.0)
    learning_goal_min_score: float = Field(default=0.1, ge=0.0)

    # Subject pattern boosting
    pattern_boost: float = Field(default=0.2, ge=0.0, description="Added to a concept per matching pattern.")
    pattern_base_score: float = Field(default=0.3, ge=0.0, description="Score of a pattern-only concept.")

    # Confidence bands (strict "greater than")
    high_concept_score: float = 0.6
    high_goal_score: float = 0.4
    medium_concept_score: float = 0.3
    medium_goal_score: float = 0.2

    @model_validator(mode="after")
    def _validate_bands(self) -> "TaggingPolicy":
        if self.medium_concept_score > self.high_concept_score:
            raise ValueError("medium_concept_score must not exceed high_concept_score")
        if self.medium_goal_score > self.high_goal_score:
            raise ValueError("medium_goal_score must not exceed high_goal_score")
        return self


DEFAULT_POLICY = TaggingPolicy()

"""Pydantic models for curriculum taxonomies and tag suggestions."""

from functools import cached_property
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

SuggestionKind = Literal["concept", "learning_goal"]
Confidence = Literal["high", "medium", "low"]


class Concept(BaseModel):
    """Atomic curriculum topic."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique concept identifier.")
    name: str = Field(..., description="Human-readable concept name.")
    description: str | None = None
    strand: str | None = None
    subsection: str | None = None

    @property
    def match_text(self) -> str:
        return f"{self.name} {self.description or ''}"


class LearningGoal(BaseModel):
    """Curriculum objective referencing one or more concepts."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique learning goal identifier.")
    name: str
    description: str = ""
    concepts: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Ordered concept ids. May reference concepts missing from the snapshot.",
    )
    strand: str | None = None
    subsection: str | None = None

    @property
    def match_text(self) -> str:
        return f"{self.name} {self.description}"


class TaxonomySnapshot(BaseModel):
    """Concepts, learning goals and strands active at tagging time."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    title: str | None = None
    concepts: tuple[Concept, ...] = Field(default_factory=tuple)
    learning_goals: tuple[LearningGoal, ...] = Field(default_factory=tuple)
    strands: tuple[str, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def _validate_unique_ids(self) -> "TaxonomySnapshot":
        for kind, items in (("concept", self.concepts), ("learning goal", self.learning_goals)):
            seen: set[str] = set()
            for item in items:
                if item.id in seen:
                    raise ValueError(f"Duplicate {kind} id in taxonomy: {item.id!r}")
                seen.add(item.id)
        return self

    @cached_property
    def concept_by_id(self) -> dict[str, Concept]:
        return {c.id: c for c in self.concepts}

    def related_concepts(self, goal: LearningGoal) -> list[Concept]:
        """
        Resolve a learning goal's concept ids against this snapshot.

        Ids that do not exist in the snapshot are skipped.
        """
        lookup = self.concept_by_id
        return [lookup[cid] for cid in goal.concepts if cid in lookup]


class Suggestion(BaseModel):
    """One scored, explainable candidate tag for a question."""

    entity_id: str
    entity_name: str
    score: float = Field(..., ge=0.0, description="Match score; may exceed 1.0 after subject boosting.")
    reason: str = Field(..., description="Which signal(s) produced this suggestion.")
    kind: SuggestionKind


class TaggingResult(BaseModel):
    """Ranked concept and learning goal suggestions with an overall confidence label."""

    concepts: list[Suggestion] = Field(default_factory=list)
    learning_goals: list[Suggestion] = Field(default_factory=list)
    confidence: Confidence = "low"


class StoredTags(BaseModel):
    """Deduplicated tag ids as handed to the persistence layer."""

    concepts: list[str] = Field(default_factory=list)
    learning_goals: list[str] = Field(default_factory=list)

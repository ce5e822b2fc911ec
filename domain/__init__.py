"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- schemas: Pydantic models for taxonomies, suggestions and tagging results
- taxonomy: Taxonomy parsing and sample curricula
- tagging: Keyword extraction, scoring and confidence
- evaluation: Tagging metrics against human-assigned tags
"""

from domain.schemas import (
    Concept,
    LearningGoal,
    StoredTags,
    Suggestion,
    TaggingResult,
    TaxonomySnapshot,
)

__all__ = [
    "Concept",
    "LearningGoal",
    "TaxonomySnapshot",
    "Suggestion",
    "TaggingResult",
    "StoredTags",
]

"""
Question tagging: keyword extraction, concept/learning goal scoring, confidence.

All functions in this module are pure (no I/O) and never mutate the taxonomy snapshot,
so they are safe to call concurrently.
"""

from domain.tagging.keywords import extract_keywords, similarity
from domain.tagging.matcher import (
    apply_subject_boost,
    enhanced_concept_matching,
    match_concepts,
    match_learning_goals,
)
from domain.tagging.patterns import SUBJECT_PATTERNS, patterns_for_subject
from domain.tagging.policy import DEFAULT_POLICY, TaggingPolicy
from domain.tagging.tagger import derive_confidence, format_tags_for_storage, tag_question

__all__ = [
    # Entry point
    "tag_question",
    "derive_confidence",
    "format_tags_for_storage",
    # Scoring stages
    "extract_keywords",
    "similarity",
    "match_concepts",
    "apply_subject_boost",
    "enhanced_concept_matching",
    "match_learning_goals",
    # Configuration
    "TaggingPolicy",
    "DEFAULT_POLICY",
    "SUBJECT_PATTERNS",
    "patterns_for_subject",
]

"""Question tagging entry point."""

import logging
from collections.abc import Iterable, Sequence

from domain.schemas import Confidence, StoredTags, Suggestion, TaggingResult, TaxonomySnapshot
from domain.tagging.matcher import enhanced_concept_matching, match_learning_goals
from domain.tagging.policy import DEFAULT_POLICY, TaggingPolicy

logger = logging.getLogger(__name__)


def derive_confidence(
    concepts: Sequence[Suggestion],
    learning_goals: Sequence[Suggestion],
    policy: TaggingPolicy = DEFAULT_POLICY,
) -> Confidence:
    """Map the best concept and learning goal scores onto high / medium / low."""
    max_concept = max((s.score for s in concepts), default=0.0)
    max_goal = max((s.score for s in learning_goals), default=0.0)

    if max_concept > policy.high_concept_score or max_goal > policy.high_goal_score:
        return "high"
    if max_concept > policy.medium_concept_score or max_goal > policy.medium_goal_score:
        return "medium"
    return "low"


def tag_question(
    question_text: str,
    taxonomy: TaxonomySnapshot | None,
    subject: str | None = None,
    policy: TaggingPolicy = DEFAULT_POLICY,
) -> TaggingResult:
    """
    Suggest concept and learning goal tags for a question.

    A missing taxonomy is a normal state (nothing uploaded yet) and yields an empty,
    low-confidence result.

    Args:
        question_text: Raw question text
        taxonomy: Curriculum snapshot to match against, or None
        subject: Optional subject name selecting the pattern registry (case-insensitive)
        policy: Thresholds and limits

    Returns:
        TaggingResult with both suggestion lists sorted by score descending
    """
    if taxonomy is None:
        logger.debug("No taxonomy available; returning empty suggestions.")
        return TaggingResult(concepts=[], learning_goals=[], confidence="low")

    concept_matches = enhanced_concept_matching(question_text, taxonomy.concepts, subject, policy=policy)
    concepts = [
        Suggestion(
            entity_id=m.concept.id,
            entity_name=m.concept.name,
            score=m.score,
            reason=m.reason,
            kind="concept",
        )
        for m in concept_matches
        if m.score > policy.concept_min_score
    ]

    goal_matches = match_learning_goals(
        question_text,
        taxonomy.learning_goals,
        min_score=policy.learning_goal_min_score,
    )
    learning_goals = [
        Suggestion(
            entity_id=m.goal.id,
            entity_name=m.goal.name,
            score=m.score,
            reason=m.reason,
            kind="learning_goal",
        )
        for m in goal_matches[: policy.top_n]
    ]

    confidence = derive_confidence(concepts, learning_goals, policy=policy)
    logger.debug(
        "Tagged question: %d concept(s), %d learning goal(s), confidence=%s",
        len(concepts),
        len(learning_goals),
        confidence,
    )
    return TaggingResult(concepts=concepts, learning_goals=learning_goals, confidence=confidence)


def _dedupe(ids: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(ids))


def format_tags_for_storage(concept_ids: Iterable[str], learning_goal_ids: Iterable[str]) -> StoredTags:
    """Deduplicate accepted tag ids (first occurrence wins) for persistence."""
    return StoredTags(concepts=_dedupe(concept_ids), learning_goals=_dedupe(learning_goal_ids))

"""Concept and learning goal scoring."""

from collections.abc import Sequence
from dataclasses import dataclass

from domain.schemas import Concept, LearningGoal
from domain.tagging.keywords import extract_keywords, similarity
from domain.tagging.patterns import patterns_for_subject
from domain.tagging.policy import DEFAULT_POLICY, TaggingPolicy

REASON_KEYWORD = "Keyword overlap"
REASON_KEYWORD_AND_PATTERN = "Keyword overlap + Subject pattern"
REASON_PATTERN = "Subject pattern match"
REASON_TEXT_SIMILARITY = "Text similarity"


@dataclass
class ConceptMatch:
    concept: Concept
    score: float
    reason: str = REASON_KEYWORD


@dataclass(frozen=True)
class LearningGoalMatch:
    goal: LearningGoal
    score: float
    reason: str = REASON_TEXT_SIMILARITY


def _keywords_overlap(question_keyword: str, concept_keywords: Sequence[str]) -> bool:
    # Substring containment in either direction, so "solve" matches "solving".
    return any(question_keyword in ck or ck in question_keyword for ck in concept_keywords)


def match_concepts(question_keywords: Sequence[str], concepts: Sequence[Concept]) -> list[ConceptMatch]:
    """
    Score concepts by keyword overlap with the question.

    score = overlap / max(len(question_keywords), len(concept_keywords)), where overlap
    counts question keywords contained in (or containing) any concept keyword.
    Concepts with no overlap are left out. Sorted by score descending; ties keep input order.
    """
    matches: list[ConceptMatch] = []

    for concept in concepts:
        concept_keywords = extract_keywords(concept.match_text.lower())
        overlap = sum(1 for kw in question_keywords if _keywords_overlap(kw, concept_keywords))

        if overlap > 0:
            score = overlap / max(len(question_keywords), len(concept_keywords))
            matches.append(ConceptMatch(concept=concept, score=score))

    return sorted(matches, key=lambda m: m.score, reverse=True)


def apply_subject_boost(
    question_text: str,
    concepts: Sequence[Concept],
    subject: str | None,
    matches: Sequence[ConceptMatch],
    policy: TaggingPolicy = DEFAULT_POLICY,
) -> list[ConceptMatch]:
    """
    Boost concept matches using the subject's vocabulary patterns.

    For every pattern found in both the question and a concept's text, an existing match
    gains `policy.pattern_boost`; a concept without a match is added at
    `policy.pattern_base_score`. Unknown subjects leave the matches unchanged.

    The input matches are not modified; a new, unsorted list is returned.
    """
    boosted = [ConceptMatch(m.concept, m.score, m.reason) for m in matches]

    patterns = patterns_for_subject(subject)
    if not patterns:
        return boosted

    by_id = {m.concept.id: m for m in boosted}
    question_text = question_text or ""

    for concept in concepts:
        concept_text = concept.match_text.lower()

        for pattern in patterns:
            if not (pattern.search(question_text) and pattern.search(concept_text)):
                continue

            existing = by_id.get(concept.id)
            if existing is None:
                added = ConceptMatch(concept=concept, score=policy.pattern_base_score, reason=REASON_PATTERN)
                boosted.append(added)
                by_id[concept.id] = added
            else:
                existing.score += policy.pattern_boost
                if existing.reason == REASON_KEYWORD:
                    existing.reason = REASON_KEYWORD_AND_PATTERN

    return boosted


def enhanced_concept_matching(
    question_text: str,
    concepts: Sequence[Concept],
    subject: str | None = None,
    policy: TaggingPolicy = DEFAULT_POLICY,
) -> list[ConceptMatch]:
    """Keyword matching plus subject boosting, ranked and cut to `policy.top_n`."""
    keywords = extract_keywords(question_text)
    basic = match_concepts(keywords, concepts)
    boosted = apply_subject_boost(question_text, concepts, subject, basic, policy=policy)
    return sorted(boosted, key=lambda m: m.score, reverse=True)[: policy.top_n]


def match_learning_goals(
    question_text: str,
    learning_goals: Sequence[LearningGoal],
    min_score: float = DEFAULT_POLICY.learning_goal_min_score,
) -> list[LearningGoalMatch]:
    """Score learning goals by keyword similarity to the question; keep those above `min_score`."""
    matches: list[LearningGoalMatch] = []

    for goal in learning_goals:
        score = similarity(question_text, goal.match_text)
        if score > min_score:
            matches.append(LearningGoalMatch(goal=goal, score=score))

    return sorted(matches, key=lambda m: m.score, reverse=True)

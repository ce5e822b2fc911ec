import pytest

from domain.schemas import Concept, LearningGoal
from domain.tagging.matcher import (
    REASON_KEYWORD,
    REASON_KEYWORD_AND_PATTERN,
    REASON_PATTERN,
    ConceptMatch,
    apply_subject_boost,
    enhanced_concept_matching,
    match_concepts,
    match_learning_goals,
)
from domain.tagging.patterns import patterns_for_subject
from domain.tagging.policy import TaggingPolicy
from domain.taxonomy.samples import MATHEMATICS_GRADE_9

LINEAR_QUESTION = "Solve the linear equation 2x + 3 = 7 for x"


def test_match_concepts_scores_keyword_overlap() -> None:
    matches = match_concepts(["solve", "linear", "equation"], MATHEMATICS_GRADE_9.concepts)

    assert [m.concept.id for m in matches] == ["alg-2", "lr-1"]
    # 3 overlapping of max(3, 5) concept keywords
    assert matches[0].score == pytest.approx(0.6)
    # only "linear" overlaps, 5 concept keywords
    assert matches[1].score == pytest.approx(0.2)
    assert all(m.reason == REASON_KEYWORD for m in matches)


def test_match_concepts_uses_substring_containment_both_ways() -> None:
    concept = Concept(id="c1", name="Solve")
    assert match_concepts(["solving"], [concept])[0].score == pytest.approx(1.0)

    concept = Concept(id="c2", name="Solving")
    assert match_concepts(["solve"], [concept])[0].score == pytest.approx(1.0)


def test_match_concepts_excludes_zero_overlap() -> None:
    assert match_concepts(["color", "sky"], MATHEMATICS_GRADE_9.concepts) == []
    assert match_concepts([], MATHEMATICS_GRADE_9.concepts) == []


def test_match_concepts_ties_keep_input_order() -> None:
    concepts = [Concept(id=f"c{i}", name=f"Fractions {i}") for i in range(4)]
    matches = match_concepts(["add", "fractions"], concepts)
    assert [m.concept.id for m in matches] == ["c0", "c1", "c2", "c3"]


def test_subject_boost_upgrades_existing_matches() -> None:
    basic = match_concepts(["solve", "linear", "equation"], MATHEMATICS_GRADE_9.concepts)
    boosted = apply_subject_boost(LINEAR_QUESTION, MATHEMATICS_GRADE_9.concepts, "Mathematics", basic)
    by_id = {m.concept.id: m for m in boosted}

    # equation/solve cluster and linear cluster both fire
    assert by_id["alg-2"].score == pytest.approx(1.0)
    assert by_id["alg-2"].reason == REASON_KEYWORD_AND_PATTERN
    # only the linear cluster fires
    assert by_id["lr-1"].score == pytest.approx(0.4)
    assert by_id["lr-1"].reason == REASON_KEYWORD_AND_PATTERN


def test_subject_boost_does_not_mutate_input() -> None:
    basic = match_concepts(["solve", "linear", "equation"], MATHEMATICS_GRADE_9.concepts)
    apply_subject_boost(LINEAR_QUESTION, MATHEMATICS_GRADE_9.concepts, "mathematics", basic)
    assert basic[0].score == pytest.approx(0.6)
    assert basic[0].reason == REASON_KEYWORD


def test_subject_boost_inserts_pattern_only_concepts() -> None:
    concept = Concept(id="circ", name="Circles", description="How to determine circumference")
    question = "Find the area of the rectangle"

    assert match_concepts(["find", "area", "rectangle"], [concept]) == []

    boosted = apply_subject_boost(question, [concept], "Mathematics", [])
    assert len(boosted) == 1
    # inserted by the find/determine cluster, then boosted by the shapes cluster
    assert boosted[0].score == pytest.approx(0.5)
    assert boosted[0].reason == REASON_PATTERN


@pytest.mark.parametrize("subject", [None, "", "History", "maths"])
def test_subject_boost_unknown_subject_is_noop(subject) -> None:
    basic = [ConceptMatch(concept=MATHEMATICS_GRADE_9.concepts[3], score=0.6)]
    boosted = apply_subject_boost(LINEAR_QUESTION, MATHEMATICS_GRADE_9.concepts, subject, basic)
    assert [(m.concept.id, m.score, m.reason) for m in boosted] == [("alg-2", 0.6, REASON_KEYWORD)]


def test_patterns_for_subject_is_case_insensitive() -> None:
    assert patterns_for_subject("  SCIENCE ") == patterns_for_subject("science")
    assert len(patterns_for_subject("English")) == 5
    assert patterns_for_subject("Art") == ()


def test_enhanced_concept_matching_truncates_to_top_n() -> None:
    concepts = [Concept(id=f"c{i}", name=f"Fractions {i}") for i in range(7)]
    matches = enhanced_concept_matching("Add fractions", concepts)
    assert [m.concept.id for m in matches] == ["c0", "c1", "c2", "c3", "c4"]

    matches = enhanced_concept_matching("Add fractions", concepts, policy=TaggingPolicy(top_n=2))
    assert len(matches) == 2


def test_enhanced_concept_matching_sorts_boosted_first() -> None:
    matches = enhanced_concept_matching(LINEAR_QUESTION, MATHEMATICS_GRADE_9.concepts, "Mathematics")
    scores = [m.score for m in matches]
    assert scores == sorted(scores, reverse=True)
    assert matches[0].concept.id == "alg-2"


def test_match_learning_goals_threshold_and_order() -> None:
    matches = match_learning_goals(LINEAR_QUESTION, MATHEMATICS_GRADE_9.learning_goals)

    # lg-2 shares "solve" and "linear" with the question: 2 / 8
    assert [m.goal.id for m in matches] == ["lg-2"]
    assert matches[0].score == pytest.approx(0.25)


def test_match_learning_goals_verbatim_description_ranks_first() -> None:
    question = "Solve linear equations with one variable"
    goals = [
        LearningGoal(id="partial", name="Linear relations", description="Graph linear relations"),
        LearningGoal(id="verbatim", name="Linear equations", description=question),
    ]
    matches = match_learning_goals(question, goals)

    assert matches[0].goal.id == "verbatim"
    assert matches[0].score == pytest.approx(1.0)

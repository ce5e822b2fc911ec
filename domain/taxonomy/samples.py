"""Built-in sample curricula for trying the tagger before a real taxonomy is uploaded."""

from domain.schemas import Concept, LearningGoal, TaxonomySnapshot

MATHEMATICS_GRADE_9 = TaxonomySnapshot(
    id="math-grade-9-ontario",
    title="Ontario Mathematics Grade 9 - Academic",
    strands=("Number Sense", "Algebra", "Linear Relations", "Analytic Geometry", "Measurement"),
    concepts=(
        Concept(
            id="ns-1",
            name="Real Numbers",
            description="Properties and operations with real numbers",
            strand="Number Sense",
            subsection="Number Properties",
        ),
        Concept(
            id="ns-2",
            name="Exponents and Radicals",
            description="Laws of exponents and radical expressions",
            strand="Number Sense",
            subsection="Exponential Operations",
        ),
        Concept(
            id="alg-1",
            name="Algebraic Expressions",
            description="Simplifying and manipulating algebraic expressions",
            strand="Algebra",
            subsection="Expression Manipulation",
        ),
        Concept(
            id="alg-2",
            name="Linear Equations",
            description="Solving linear equations in one variable",
            strand="Algebra",
            subsection="Equation Solving",
        ),
        Concept(
            id="lr-1",
            name="Linear Relations",
            description="Identifying and representing linear relationships",
            strand="Linear Relations",
            subsection="Relationship Analysis",
        ),
        Concept(
            id="ag-1",
            name="Coordinate Geometry",
            description="Working with points, lines, and shapes in the coordinate plane",
            strand="Analytic Geometry",
            subsection="Coordinate Systems",
        ),
    ),
    learning_goals=(
        LearningGoal(
            id="lg-1",
            name="Solve problems involving operations with real numbers",
            description=(
                "Students will demonstrate an understanding of real numbers and perform operations "
                "with real numbers, with and without technology."
            ),
            concepts=("ns-1", "ns-2"),
            strand="Number Sense",
        ),
        LearningGoal(
            id="lg-2",
            name="Manipulate algebraic expressions and solve linear equations",
            description="Students will manipulate algebraic expressions and solve linear equations.",
            concepts=("alg-1", "alg-2"),
            strand="Algebra",
        ),
        LearningGoal(
            id="lg-3",
            name="Identify and represent linear relations",
            description=(
                "Students will identify and represent linear relations, using concrete, pictorial, "
                "and algebraic methods."
            ),
            concepts=("lr-1", "ag-1"),
            strand="Linear Relations",
        ),
        LearningGoal(
            id="lg-4",
            name="Solve problems using analytic geometry",
            description="Students will solve problems using the slope and y-intercept of a line.",
            concepts=("ag-1", "lr-1"),
            strand="Analytic Geometry",
        ),
    ),
)

ENGLISH_GRADE_10 = TaxonomySnapshot(
    id="english-grade-10",
    title="English Language Arts Grade 10",
    strands=("Reading", "Writing", "Speaking", "Listening", "Media Literacy"),
    concepts=(
        Concept(
            id="read-1",
            name="Reading Comprehension",
            description="Understanding and analyzing written texts",
            strand="Reading",
            subsection="Comprehension Skills",
        ),
        Concept(
            id="write-1",
            name="Essay Writing",
            description="Organizing and developing ideas in written form",
            strand="Writing",
            subsection="Composition",
        ),
        Concept(
            id="speak-1",
            name="Oral Communication",
            description="Effective speaking and presentation skills",
            strand="Speaking",
            subsection="Communication Skills",
        ),
    ),
    learning_goals=(
        LearningGoal(
            id="lg-e1",
            name="Analyze and interpret texts",
            description="Students will read and analyze various texts to demonstrate understanding.",
            concepts=("read-1",),
            strand="Reading",
        ),
        LearningGoal(
            id="lg-e2",
            name="Compose clear and coherent writing",
            description="Students will write clear, coherent, and well-organized texts.",
            concepts=("write-1",),
            strand="Writing",
        ),
    ),
)

# subject alias (lower-case) -> sample taxonomy
SAMPLE_TAXONOMIES: dict[str, TaxonomySnapshot] = {
    "mathematics": MATHEMATICS_GRADE_9,
    "math": MATHEMATICS_GRADE_9,
    "english": ENGLISH_GRADE_10,
    "english language arts": ENGLISH_GRADE_10,
}


def get_sample_taxonomy(subject: str | None) -> TaxonomySnapshot | None:
    """Return the sample taxonomy for a subject, or None when there is none."""
    if not subject:
        return None
    return SAMPLE_TAXONOMIES.get(str(subject).strip().lower())

"""Subject-specific vocabulary patterns used to boost concept matches."""

import re

# subject (lower-case) -> ordered vocabulary clusters
SUBJECT_PATTERNS: dict[str, tuple[re.Pattern[str], ...]] = {
    "mathematics": (
        re.compile(r"equation|solve|calculate|find|determine", re.IGNORECASE),
        re.compile(r"graph|plot|function|linear|quadratic", re.IGNORECASE),
        re.compile(r"angle|triangle|circle|rectangle|area|volume", re.IGNORECASE),
        re.compile(r"fraction|decimal|percent|ratio|proportion", re.IGNORECASE),
        re.compile(r"algebra|variable|expression|simplify", re.IGNORECASE),
    ),
    "english": (
        re.compile(r"analyze|interpret|meaning|theme|character", re.IGNORECASE),
        re.compile(r"essay|paragraph|argument|persuade|convince", re.IGNORECASE),
        re.compile(r"metaphor|simile|imagery|symbolism|literary", re.IGNORECASE),
        re.compile(r"grammar|sentence|clause|phrase|punctuation", re.IGNORECASE),
        re.compile(r"read|write|author|text|passage", re.IGNORECASE),
    ),
    "science": (
        re.compile(r"experiment|hypothesis|theory|observation", re.IGNORECASE),
        re.compile(r"atom|molecule|element|chemical|reaction", re.IGNORECASE),
        re.compile(r"force|energy|motion|velocity|acceleration", re.IGNORECASE),
        re.compile(r"cell|organism|ecosystem|evolution|genetics", re.IGNORECASE),
        re.compile(r"earth|climate|weather|planet|solar", re.IGNORECASE),
    ),
}


def patterns_for_subject(subject: str | None) -> tuple[re.Pattern[str], ...]:
    """Return the registered patterns for a subject, or an empty tuple if unknown."""
    if not subject:
        return ()
    return SUBJECT_PATTERNS.get(str(subject).strip().lower(), ())

"""Parse curriculum taxonomy from a YAML/JSON dict."""

from typing import Any

from domain.schemas import Concept, LearningGoal, TaxonomySnapshot


def _as_list(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key, []) or []
    if not isinstance(value, list):
        raise ValueError(f"{key} must be a list")
    return value


def _clean_entry(item: dict[str, Any], exclude: tuple[str, ...] = ()) -> dict[str, Any]:
    """Drop null fields and stringify numbers and strings (YAML may load ids like `101` as ints)."""
    cleaned: dict[str, Any] = {}
    for key, value in item.items():
        if value is None or key in exclude:
            continue
        if isinstance(value, str | int | float) and not isinstance(value, bool):
            value = str(value).strip()
        cleaned[str(key)] = value
    return cleaned


def parse_taxonomy_config(data: dict[str, Any]) -> TaxonomySnapshot:
    """
    Parse pre-loaded YAML dict into a TaxonomySnapshot.

    This is a pure function - it does NOT perform file I/O.
    The YAML loading happens in infrastructure.config.loader.

    Args:
        data: Dictionary from yaml.safe_load()

    Returns:
        TaxonomySnapshot with concepts, learning goals and strands

    Raises:
        ValueError: If sections have wrong types, entries are not mappings,
            or concept / learning goal ids are duplicated
    """
    concepts_raw = _as_list(data, "concepts")
    goals_raw = _as_list(data, "learning_goals")
    strands_raw = _as_list(data, "strands")

    for key, items in (("concepts", concepts_raw), ("learning_goals", goals_raw)):
        for i, item in enumerate(items):
            if not isinstance(item, dict):
                raise ValueError(f"{key}[{i}] must be a mapping, got {type(item).__name__}")

    concepts = [Concept(**_clean_entry(item)) for item in concepts_raw]
    learning_goals = [
        LearningGoal(
            **_clean_entry(item, exclude=("concepts",)),
            concepts=tuple(str(cid).strip() for cid in (item.get("concepts") or [])),
        )
        for item in goals_raw
    ]

    # Strands listed explicitly first, then any only mentioned on entries
    strands = [str(s).strip() for s in strands_raw if str(s).strip()]
    for entry in (*concepts, *learning_goals):
        if entry.strand and entry.strand not in strands:
            strands.append(entry.strand)

    return TaxonomySnapshot(
        id=str(data["id"]) if data.get("id") is not None else None,
        title=str(data["title"]) if data.get("title") is not None else None,
        concepts=tuple(concepts),
        learning_goals=tuple(learning_goals),
        strands=tuple(strands),
    )

"""Configuration loading from YAML files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from domain.schemas import TaxonomySnapshot
from domain.tagging.policy import TaggingPolicy
from domain.taxonomy.loader import parse_taxonomy_config
from domain.taxonomy.samples import get_sample_taxonomy
from infrastructure.config.models import DataColumnsConfig, RunConfig, StatsConfig
from infrastructure.constants import DATA_DIR

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_taxonomy_config(path: Path) -> TaxonomySnapshot:
    """
    Load taxonomy from a YAML (or JSON) file.

    This function handles file I/O, then delegates parsing to domain layer.
    """
    data = _load_yaml(path)
    taxonomy = parse_taxonomy_config(data)
    logger.info(
        "Loaded taxonomy %s: %d concepts, %d learning goals, %d strands",
        taxonomy.id or path.name,
        len(taxonomy.concepts),
        len(taxonomy.learning_goals),
        len(taxonomy.strands),
    )
    return taxonomy


def resolve_taxonomy(taxonomy_file: Path | None, subject: str | None) -> TaxonomySnapshot | None:
    """Load the taxonomy file if given, else fall back to the sample taxonomy for the subject."""
    if taxonomy_file is not None:
        return load_taxonomy_config(taxonomy_file)

    taxonomy = get_sample_taxonomy(subject)
    if taxonomy is None:
        logger.warning("No taxonomy file and no sample taxonomy for subject=%r; suggestions will be empty.", subject)
    else:
        logger.info("Using sample taxonomy %s for subject=%r", taxonomy.id, subject)
    return taxonomy


def load_run_config(experiment_path: Path) -> RunConfig:
    """
    Load experiment.yaml and construct a fully-resolved RunConfig.

    Required keys: questions_file, question_col, and one of taxonomy_file / subject.
    Relative `questions_file` paths are resolved against `data_dir` (default: dataset/).
    """
    exp = _load_yaml(experiment_path)

    if "questions_file" not in exp or not exp.get("questions_file"):
        raise ValueError("experiment.yaml missing required key: questions_file")
    if "question_col" not in exp or not exp.get("question_col"):
        raise ValueError("experiment.yaml missing required key: question_col")

    subject = exp.get("subject")
    subject = str(subject).strip() if subject is not None else None

    data_dir = Path(exp.get("data_dir", str(DATA_DIR)))
    questions_file_path = data_dir / str(exp["questions_file"])

    taxonomy_file_raw = exp.get("taxonomy_file")
    taxonomy_file = Path(taxonomy_file_raw) if taxonomy_file_raw else None

    columns = DataColumnsConfig(
        question_col=str(exp["question_col"]),
        subject_col=exp.get("subject_col"),
        concept_tags_col=exp.get("concept_tags_col"),
        learning_goal_tags_col=exp.get("learning_goal_tags_col"),
        tag_delimiter=str(exp.get("tag_delimiter", ";")),
    )

    stats = StatsConfig(**(exp.get("stats") or {}))
    policy = TaggingPolicy(**(exp.get("policy") or {}))

    cfg = RunConfig(
        subject=subject,
        taxonomy_file=taxonomy_file,
        questions_file_path=questions_file_path,
        columns=columns,
        batch_size=exp.get("batch_size"),
        stats=stats,
        policy=policy,
    )

    # Resolve after validation so a bad config fails before any file is read
    cfg.taxonomy = resolve_taxonomy(cfg.taxonomy_file, cfg.subject)
    return cfg

"""
Logging setup with contextvars-based run metadata.

Console lines carry the short run tag and batch id. File lines also carry the
subject and taxonomy id the run was tagged against, so a log file can be read
without the config snapshot next to it.
"""

import contextvars
import hashlib
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_MAX_BYTES = 10_000_000
LOG_BACKUP_COUNT = 3

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] r=%(run)s b=%(batch)s | %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s | r=%(run)s b=%(batch)s s=%(subject)s t=%(taxonomy)s | %(message)s"

cv_run_id_full = contextvars.ContextVar("run_id_full", default="-")
cv_run_tag = contextvars.ContextVar("run_tag", default="-")
cv_batch_id = contextvars.ContextVar("batch_id", default="-")
cv_subject = contextvars.ContextVar("subject", default="-")
cv_taxonomy = contextvars.ContextVar("taxonomy", default="-")


def make_run_tag(run_id_full: str, length: int = 8) -> str:
    """Short stable tag for a run id; runs started in the same second still differ."""
    return hashlib.blake2s(run_id_full.encode("utf-8"), digest_size=8).hexdigest()[:length]


class ContextInjectFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.run = cv_run_tag.get()
        record.batch = cv_batch_id.get()
        record.subject = cv_subject.get()
        record.taxonomy = cv_taxonomy.get()
        return True


def set_log_context(
    *,
    run_id_full: str | None = None,
    batch_id: int | None = None,
    subject: str | None = None,
    taxonomy: str | None = None,
) -> None:
    """Update only the fields that are passed."""
    if run_id_full is not None:
        cv_run_id_full.set(run_id_full)
        cv_run_tag.set(make_run_tag(run_id_full))
    if batch_id is not None:
        cv_batch_id.set(f"{batch_id:03d}")
    if subject is not None:
        cv_subject.set(subject.strip() or "-")
    if taxonomy is not None:
        cv_taxonomy.set(taxonomy.strip() or "-")


def get_log_context() -> dict[str, str]:
    """Current context, written into run artifacts to correlate them with log lines."""
    return {
        "run_tag": cv_run_tag.get(),
        "run_id_full": cv_run_id_full.get(),
        "batch_id": cv_batch_id.get(),
        "subject": cv_subject.get(),
        "taxonomy": cv_taxonomy.get(),
    }


def clear_batch_context() -> None:
    cv_batch_id.set("-")


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Replace root handlers with a console handler and, if log_file is given, a rotating file handler.

    Args:
        log_file: Path to log file (None for console only)
        console_level: Minimum level for console output
        file_level: Minimum level for file output
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # handlers enforce levels

    ctx_filter = ContextInjectFilter()

    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    ch.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    # openpyxl warns on every styled workbook it reads
    logging.getLogger("openpyxl").setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        "Logging configured (console_level=%s, file=%s)", logging.getLevelName(console_level), log_file
    )

import contextvars
import logging

from infrastructure.observability.logging import (
    FILE_FORMAT,
    ContextInjectFilter,
    clear_batch_context,
    get_log_context,
    make_run_tag,
    set_log_context,
)


def _in_fresh_context(fn):
    return contextvars.Context().run(fn)


def test_make_run_tag_is_stable_and_short() -> None:
    assert make_run_tag("20240101_120000_math") == make_run_tag("20240101_120000_math")
    assert make_run_tag("20240101_120000_math") != make_run_tag("20240101_120000_english")
    assert len(make_run_tag("x")) == 8


def test_set_log_context_updates_only_passed_fields() -> None:
    def run() -> dict[str, str]:
        set_log_context(run_id_full="run-1", subject=" Mathematics ", taxonomy="math-9")
        set_log_context(batch_id=7)
        ctx = get_log_context()
        clear_batch_context()
        return {**ctx, "after_clear": get_log_context()["batch_id"]}

    ctx = _in_fresh_context(run)
    assert ctx["run_id_full"] == "run-1"
    assert ctx["run_tag"] == make_run_tag("run-1")
    assert ctx["batch_id"] == "007"
    assert ctx["subject"] == "Mathematics"
    assert ctx["taxonomy"] == "math-9"
    assert ctx["after_clear"] == "-"


def test_file_format_carries_subject_and_taxonomy() -> None:
    def run() -> str:
        set_log_context(run_id_full="run-1", batch_id=2, subject="English", taxonomy="")
        record = logging.LogRecord("tagger", logging.INFO, __file__, 1, "tagged %d", (3,), None)
        assert ContextInjectFilter().filter(record)
        return logging.Formatter(FILE_FORMAT).format(record)

    line = _in_fresh_context(run)
    assert f"r={make_run_tag('run-1')} b=002 s=English t=- | tagged 3" in line

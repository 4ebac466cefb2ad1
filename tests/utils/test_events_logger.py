"""Tests for the rotating events logger."""

import logging

from lexisent.utils.logging import EVENTS_LEVEL_NUM, format_event, setup_events_logger


def _flush(logger):
    for handler in logger.handlers:
        handler.flush()


def test_event_written_to_log_file(tmp_path):
    """Events land in events.log with the EVENT level name"""
    logger = setup_events_logger(str(tmp_path), 1024 * 1024)

    logger.event("analysis complete tweets=3")
    _flush(logger)

    content = (tmp_path / "events.log").read_text()
    assert "| EVENT | analysis complete tweets=3" in content
    assert logging.getLevelName(EVENTS_LEVEL_NUM) == "EVENT"


def test_run_label_in_filename(tmp_path):
    """A run label is included in the log filename"""
    logger = setup_events_logger(str(tmp_path), 1024 * 1024, run_label="nightly")

    logger.event("hello")
    _flush(logger)

    assert (tmp_path / "events_nightly.log").exists()


def test_repeated_setup_does_not_duplicate_lines(tmp_path):
    """Setting up the same file twice keeps a single handler for it"""
    setup_events_logger(str(tmp_path / "logs"), 1024 * 1024)
    logger = setup_events_logger(str(tmp_path / "logs"), 1024 * 1024)

    logger.event("once")
    _flush(logger)

    content = (tmp_path / "logs" / "events.log").read_text()
    assert content.count("once") == 1


def test_format_event_keeps_field_order():
    """Milestone first, then key=value pairs in the order given"""
    line = format_event("analysis complete", tweets=3, warnings=0, output="out/output.txt")

    assert line == "analysis complete tweets=3 warnings=0 output=out/output.txt"


def test_format_event_without_fields():
    assert format_event("analysis started") == "analysis started"


def test_events_do_not_reach_root_logger(tmp_path, caplog):
    """Run milestones go only to the events file"""
    logger = setup_events_logger(str(tmp_path), 1024 * 1024)

    with caplog.at_level(logging.DEBUG):
        logger.event("private milestone")

    assert "private milestone" not in caplog.text

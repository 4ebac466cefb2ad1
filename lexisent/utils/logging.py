import os
import logging
from logging.handlers import RotatingFileHandler

EVENTS_LEVEL_NUM = 38
DEFAULT_LOG_BACKUP_COUNT = 10
EVENTS_LOGGER_NAME = "lexisent.events"

EVENT_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
EVENT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _register_event_level():
    """Add the EVENT level and Logger.event() once per process."""
    if logging.getLevelName(EVENTS_LEVEL_NUM) == "EVENT":
        return

    logging.addLevelName(EVENTS_LEVEL_NUM, "EVENT")

    def event(self, message, *args, **kws):
        if self.isEnabledFor(EVENTS_LEVEL_NUM):
            self._log(EVENTS_LEVEL_NUM, message, args, **kws)

    logging.Logger.event = event


def format_event(milestone, **fields):
    """
    Build one event line: the run milestone followed by key=value pairs.

    Example:
        format_event("analysis complete", tweets=3) -> "analysis complete tweets=3"
    """
    parts = [milestone]
    parts.extend(f"{key}={value}" for key, value in fields.items())
    return " ".join(parts)


def setup_events_logger(full_path, events_retention_size, run_label=None):
    """
    Setup the analysis events logger.

    Run milestones (start, completion) are written one per line to
    events.log, or events_<run_label>.log when a label is given.

    Args:
        full_path: Directory for event log files (created if missing)
        events_retention_size: Maximum size of log files before rotation
        run_label: Optional label to include in filename (default: None)
    """
    _register_event_level()

    logger = logging.getLogger(EVENTS_LOGGER_NAME)
    logger.setLevel(EVENTS_LEVEL_NUM)
    logger.propagate = False

    os.makedirs(full_path, exist_ok=True)
    log_filename = f"events_{run_label}.log" if run_label is not None else "events.log"
    log_path = os.path.abspath(os.path.join(full_path, log_filename))

    # One handler per file
    for handler in logger.handlers:
        if isinstance(handler, RotatingFileHandler) and handler.baseFilename == log_path:
            return logger

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=events_retention_size,
        backupCount=DEFAULT_LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(EVENT_FORMAT, datefmt=EVENT_DATE_FORMAT))
    file_handler.setLevel(EVENTS_LEVEL_NUM)
    logger.addHandler(file_handler)

    return logger

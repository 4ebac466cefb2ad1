"""
Lexicon aggregation.

Resolves a lexicon path to its source files, parses every file in its own
worker task and merges the per-file tables into one combined lexicon.
Scores for the same word are summed across files.
"""

import time
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed, TimeoutError as FuturesTimeoutError
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple, Union
import bittensor as bt

from lexisent.analyser.utils.config import (
    ANALYSIS_MAX_WORKERS,
    LEXICON_FILE_EXTENSIONS,
    LEXICON_LOAD_TIMEOUT
)
from lexisent.analyser.utils.error_handling import (
    ErrorMessages,
    ParseError,
    PathError,
    log_and_raise_timeout
)
from .lexicon_parser import parse_lexicon_file


class LexiconAccumulator:
    """Combined fingerprint -> score table built from per-file tables."""

    def __init__(self):
        self._lock = threading.Lock()
        self._scores: Dict[int, float] = {}
        self.files_merged = 0

    def merge(self, table: Dict[int, float]) -> None:
        """Add one file's table, summing scores for fingerprints already present."""
        with self._lock:
            for key, score in table.items():
                self._scores[key] = self._scores.get(key, 0.0) + score
            self.files_merged += 1

    def snapshot(self) -> Mapping[int, float]:
        """Read-only view of the combined lexicon."""
        with self._lock:
            return MappingProxyType(dict(self._scores))

    def __len__(self) -> int:
        return len(self._scores)


def resolve_lexicon_files(
    path: Union[str, Path, None],
    extensions: Tuple[str, ...] = LEXICON_FILE_EXTENSIONS
) -> List[Path]:
    """
    Resolve a lexicon path to the list of files to parse.

    Args:
        path: A single lexicon file or a directory of lexicon files
        extensions: Recognized lexicon file extensions (lowercase, with dot)

    Returns:
        Sorted list of lexicon files (a single-item list for a file path)

    Raises:
        PathError: If the path is empty, missing or neither a file nor a directory
    """
    if path is None or not str(path).strip():
        raise PathError(path, ErrorMessages.LEXICON_PATH_MISSING)

    source = Path(path)
    if not source.exists():
        raise PathError(source, "path does not exist")

    if source.is_file():
        return [source]

    if source.is_dir():
        return sorted(
            f for f in source.iterdir()
            if f.is_file() and f.suffix.lower() in extensions
        )

    raise PathError(source, "neither a directory nor a regular file")


def parse_lexicon_file_safe(file_path: Path) -> Tuple[Dict[int, float], Optional[str]]:
    """
    Parse one lexicon file with error handling.

    Args:
        file_path: Lexicon file to parse

    Returns:
        Tuple of (table, error_message); table is empty when error_message is set
    """
    try:
        return parse_lexicon_file(file_path), None
    except (ParseError, OSError, UnicodeDecodeError) as e:
        return {}, f"Error loading lexicon: {e} File: {file_path.name}"


def load_lexicons(
    path: Union[str, Path, None],
    max_workers: Optional[int] = None,
    timeout: Optional[float] = None
) -> Tuple[Mapping[int, float], List[str]]:
    """
    Load and combine every lexicon found at a path.

    One parse task is submitted per file. A file that fails to parse is
    reported as a warning and contributes nothing; the other files still load.

    Args:
        path: A lexicon file or a directory of lexicon files
        max_workers: Worker pool size (default: ANALYSIS_MAX_WORKERS)
        timeout: Bounded wait in seconds for all files (default: LEXICON_LOAD_TIMEOUT)

    Returns:
        Tuple of (combined_lexicon, warnings). An invalid path yields an
        empty lexicon and no warnings.

    Raises:
        BatchTimeoutError: If the files are not all parsed within the timeout
    """
    max_workers = max_workers or ANALYSIS_MAX_WORKERS
    timeout = LEXICON_LOAD_TIMEOUT if timeout is None else timeout

    try:
        lexicon_files = resolve_lexicon_files(path)
    except PathError as e:
        bt.logging.error(f"Invalid lexicon path: {e}")
        return MappingProxyType({}), []

    if not lexicon_files:
        bt.logging.warning(f"{ErrorMessages.NO_LEXICON_FILES}: {path}")
        return MappingProxyType({}), []

    start_time = time.time()
    bt.logging.info(f"Loading {len(lexicon_files)} lexicon file(s) from {path}")

    accumulator = LexiconAccumulator()
    warnings: List[str] = []

    executor = ThreadPoolExecutor(max_workers=max_workers)
    try:
        future_to_file = {
            executor.submit(parse_lexicon_file_safe, lexicon_file): lexicon_file
            for lexicon_file in lexicon_files
        }

        try:
            for future in as_completed(future_to_file, timeout=timeout):
                table, error = future.result()
                if error:
                    warnings.append(error)
                else:
                    accumulator.merge(table)
        except FuturesTimeoutError:
            pending = sum(1 for f in future_to_file if not f.done())
            log_and_raise_timeout(ErrorMessages.LEXICON_LOAD_FAILED, timeout, pending)
    finally:
        # Outstanding parses are abandoned; they own no shared state
        executor.shutdown(wait=False, cancel_futures=True)

    for warning in warnings:
        bt.logging.warning(warning)

    combined = accumulator.snapshot()
    bt.logging.info(
        f"  → Combined lexicon: {len(combined)} entries from "
        f"{accumulator.files_merged}/{len(lexicon_files)} file(s) "
        f"({time.time() - start_time:.1f}s)"
    )

    return combined, warnings

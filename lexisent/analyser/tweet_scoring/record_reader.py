"""
Tweet record reading.

Reads one tweet per line from a single file, or from every regular file
in a directory with one read task per file.
"""

import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Tuple, Union
import bittensor as bt

from lexisent.analyser.utils.config import ANALYSIS_MAX_WORKERS
from lexisent.analyser.utils.error_handling import ErrorMessages, PathError


def read_records_from_file(file_path: Union[str, Path]) -> List[str]:
    """
    Read every line of a file as one tweet, in file order.

    Raises:
        OSError: If the file cannot be opened
    """
    with open(file_path, 'r', encoding='utf-8', errors='replace') as f:
        return [line.rstrip('\r\n') for line in f]


def read_records_from_file_safe(file_path: Path) -> Tuple[List[str], Optional[str]]:
    """
    Read tweets from a file with error handling.

    Returns:
        Tuple of (records, error_message)
    """
    try:
        return read_records_from_file(file_path), None
    except OSError as e:
        bt.logging.warning(f"Failed to read tweets from {file_path}: {e}")
        return [], str(e)


def read_records_from_directory(
    directory: Path,
    max_workers: Optional[int] = None
) -> List[str]:
    """
    Read tweets from every regular file in a directory.

    Files are read concurrently. Per-file results are concatenated in
    filename order, with line order preserved inside each file.

    Args:
        directory: Directory holding tweet files
        max_workers: Worker pool size (default: ANALYSIS_MAX_WORKERS)

    Returns:
        Concatenated list of tweets
    """
    files = sorted(f for f in directory.iterdir() if f.is_file())
    if not files:
        bt.logging.warning(f"No files found in the directory: {directory}")
        return []

    start_time = time.time()
    failed_files = []

    with ThreadPoolExecutor(max_workers=max_workers or ANALYSIS_MAX_WORKERS) as executor:
        futures = [executor.submit(read_records_from_file_safe, f) for f in files]

        records: List[str] = []
        for file_path, future in zip(files, futures):
            file_records, error = future.result()
            if error:
                failed_files.append((file_path.name, error))
            records.extend(file_records)

    bt.logging.info(
        f"  → Read {len(records)} tweets from "
        f"{len(files) - len(failed_files)}/{len(files)} file(s) "
        f"({time.time() - start_time:.1f}s)"
    )

    if failed_files:
        bt.logging.debug(f"Failed to read {len(failed_files)} file(s): {[name for name, _ in failed_files]}")

    return records


def read_records(
    path: Union[str, Path, None],
    max_workers: Optional[int] = None
) -> List[str]:
    """
    Read tweets from a file or a directory of files.

    Args:
        path: Tweet file, or directory of tweet files
        max_workers: Worker pool size for directory reads

    Returns:
        Ordered list of tweets; empty if the path is not a file or directory
    """
    try:
        if path is None or not str(path).strip():
            raise PathError(path, ErrorMessages.RECORDS_PATH_MISSING)

        source = Path(path)
        if source.is_file():
            records = read_records_from_file(source)
            bt.logging.info(f"  → Read {len(records)} tweets from {source}")
            return records

        if source.is_dir():
            return read_records_from_directory(source, max_workers=max_workers)

        raise PathError(source)

    except PathError as e:
        bt.logging.error(f"Cannot read tweets: {e}")
        return []
    except OSError as e:
        bt.logging.error(f"Failed to read tweets from {path}: {e}")
        return []

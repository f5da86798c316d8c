"""
Reading of `go test -json` log files.
"""

import logging
from typing import Iterable, List

from .exceptions import LogFileError, RecordDecodeError
from .models import RawEvent
from .parser import parse_line
from .store import StatsStore

logger = logging.getLogger(__name__)


def read_file(path: str) -> List[RawEvent]:
    """
    Read and decode all events in a log file.

    Empty lines are skipped; events without a set timestamp are dropped.

    Args:
        path: Path to a file with one JSON record per line

    Returns:
        Decoded events in file order

    Raises:
        LogFileError: If the file cannot be opened or read
        RecordDecodeError: If any line fails to decode
    """
    events: List[RawEvent] = []
    dropped = 0
    try:
        # Invalid UTF-8 becomes U+FFFD rather than failing the file
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for line_number, line in enumerate(f, start=1):
                line = line.rstrip("\r\n")
                if not line:
                    continue
                try:
                    event = parse_line(line)
                except RecordDecodeError as e:
                    raise RecordDecodeError(e.reason, path=path, line_number=line_number)
                if event.has_time:
                    events.append(event)
                else:
                    dropped += 1
    except OSError as e:
        raise LogFileError(path, e)

    logger.info("Read %d events from %s", len(events), path)
    if dropped:
        logger.debug("Dropped %d events without a timestamp from %s", dropped, path)
    return events


def read_files(paths: Iterable[str], store: StatsStore) -> StatsStore:
    """
    Populate a store from log files, in the order given.

    Each file is applied fully before the next one is read, so records in
    later files overwrite those of earlier files.

    Args:
        paths: Log file paths
        store: Store to populate

    Returns:
        The populated store

    Raises:
        LogFileError: If any file cannot be read
        RecordDecodeError: If any line of any file fails to decode
    """
    for path in paths:
        store.apply_all(read_file(path))
    return store

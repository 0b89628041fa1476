# pdfmerger/merge_queue.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from pdfmerger.errors import NoSelection

logger = logging.getLogger(__name__)

MIN_FILES_TO_MERGE = 2


@dataclass(frozen=True)
class ButtonStates:
    merge_enabled: bool
    remove_enabled: bool


def derive_button_states(queue_length: int) -> ButtonStates:
    """Merge needs at least two files, remove needs at least one."""
    return ButtonStates(
        merge_enabled=queue_length >= MIN_FILES_TO_MERGE,
        remove_enabled=queue_length >= 1,
    )


def add_file(file_list: List[str], path: Optional[str]) -> bool:
    """
    Append a path to the end of the queue.
    Returns False (and leaves the queue alone) when no path was chosen.
    Duplicates are kept; nothing is validated here.
    """
    if not path:
        return False
    file_list.append(path)
    logger.debug("Queued %s (%d in queue)", path, len(file_list))
    return True


def remove_file(file_list: List[str], index: Optional[int]) -> str:
    """Remove the entry at the selected index and return it."""
    if index is None or not 0 <= index < len(file_list):
        raise NoSelection()
    removed = file_list.pop(index)
    logger.debug("Removed %s (%d in queue)", removed, len(file_list))
    return removed


def clear_files(file_list: List[str]) -> None:
    file_list.clear()

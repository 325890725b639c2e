"""Load and validate YAML board definitions. Used by BoardService.import_boards."""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

import yaml

from kinboard.domain import KanbanBoard

logger = logging.getLogger(__name__)


def _repo_root() -> Path:
    """Return repo root (parent of src)."""
    return Path(__file__).resolve().parent.parent.parent.parent


def get_boards_path() -> Path:
    """Return path to the boards YAML (KINBOARD_BOARDS_PATH env or boards/default.yaml)."""
    default = _repo_root() / "boards" / "default.yaml"
    path = os.environ.get("KINBOARD_BOARDS_PATH", "").strip()
    if path:
        return Path(path).resolve()
    return default


def parse_boards(
    document: object, default_statuses: Iterable[str] | None = None
) -> list[KanbanBoard]:
    """Build boards from a parsed YAML document. Validates minimal structure.

    Boards without a statuses key are seeded with default_statuses, or with
    the KanbanBoard defaults when that is None.
    """
    if not isinstance(document, dict):
        raise ValueError("Boards YAML must be a dict")
    entries = document.get("boards")
    if not isinstance(entries, list) or not entries:
        raise ValueError("Boards YAML must have a non-empty 'boards' list")
    if default_statuses is not None:
        default_statuses = tuple(default_statuses)
    boards = []
    seen: set[str] = set()
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"Board #{index} must be a dict")
        name = entry.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Board #{index} must have a non-empty 'name'")
        name = name.strip()
        if name in seen:
            raise ValueError(f"Board '{name}' is defined more than once")
        seen.add(name)
        statuses = entry.get("statuses")
        if statuses is None:
            statuses = default_statuses
        else:
            if not isinstance(statuses, list) or not all(
                isinstance(s, str) and s.strip() for s in statuses
            ):
                raise ValueError(
                    f"Board '{name}' statuses must be a list of non-empty strings"
                )
            statuses = [s.strip() for s in statuses]
        boards.append(KanbanBoard(name, statuses=statuses))
    return boards


def load_boards(
    path: Path | None = None, default_statuses: Iterable[str] | None = None
) -> list[KanbanBoard]:
    """Load boards YAML and return KanbanBoard instances."""
    if path is None:
        path = get_boards_path()
    raw = path.read_text(encoding="utf-8")
    boards = parse_boards(yaml.safe_load(raw), default_statuses)
    logger.info("Loaded %d board(s) from %s", len(boards), path)
    return boards

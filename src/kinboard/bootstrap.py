"""Wire services with in-memory repositories from settings."""

import logging
from dataclasses import dataclass

from kinboard.application import BoardService, PeopleService
from kinboard.config import Settings, configure_logging, get_settings, load_env
from kinboard.infrastructure import (
    InMemoryBoardRepository,
    InMemoryPersonRepository,
    get_boards_path,
    load_boards,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Services:
    people: PeopleService
    boards: BoardService


def build_services(settings: Settings | None = None) -> Services:
    """Build PeopleService and BoardService.

    With no settings given, .env is loaded, settings are read from the
    environment and logging is configured. Boards from settings.boards_path,
    or boards/default.yaml (if present) when unset, are imported into the
    board service. Boards without statuses get settings.default_statuses.
    """
    if settings is None:
        load_env()
        settings = get_settings()
        configure_logging(settings)

    people = PeopleService(repository=InMemoryPersonRepository())
    boards = BoardService(
        repository=InMemoryBoardRepository(),
        default_statuses=settings.default_statuses,
    )
    # An explicit path must exist; the default file is optional
    boards_path = settings.boards_path or get_boards_path()
    if settings.boards_path is not None or boards_path.exists():
        added = boards.import_boards(
            load_boards(boards_path, default_statuses=settings.default_statuses)
        )
        logger.info("Imported boards: %s", ", ".join(added) or "none")
    else:
        logger.debug("No boards file at %s", boards_path)
    return Services(people=people, boards=boards)

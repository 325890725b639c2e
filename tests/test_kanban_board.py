"""Tests for the KanbanBoard entity."""

from kinboard.domain import DEFAULT_STATUSES, KanbanBoard


def test_new_board_includes_backlog() -> None:
    board = KanbanBoard("Things to Do")
    assert board.name == "Things to Do"
    assert "Backlog" in board.statuses
    assert board.statuses == DEFAULT_STATUSES


def test_new_board_does_not_include_bogus() -> None:
    board = KanbanBoard("Things to Do")
    assert "Bogus" not in board.statuses
    assert not board.has_status("Bogus")


def test_add_status() -> None:
    board = KanbanBoard("Things to Do")
    board.add_status("NewStatus")
    assert "NewStatus" in board.statuses
    assert board.statuses[-1] == "NewStatus"


def test_add_status_twice_does_not_duplicate() -> None:
    board = KanbanBoard("Things to Do")
    board.add_status("NewStatus")
    board.add_status("NewStatus")
    board.add_status("Backlog")
    assert board.statuses.count("NewStatus") == 1
    assert board.statuses.count("Backlog") == 1
    assert len(board.statuses) == len(DEFAULT_STATUSES) + 1


def test_remove_status() -> None:
    board = KanbanBoard("Things to Do")
    board.remove_status("Backlog")
    assert "Backlog" not in board.statuses


def test_remove_missing_status_is_noop() -> None:
    board = KanbanBoard("Things to Do")
    board.remove_status("Bogus")
    assert board.statuses == DEFAULT_STATUSES


def test_removed_status_can_be_added_back_at_end() -> None:
    board = KanbanBoard("Things to Do")
    board.remove_status("Backlog")
    board.add_status("Backlog")
    assert board.statuses[-1] == "Backlog"


def test_custom_seed_statuses_deduplicated_in_order() -> None:
    board = KanbanBoard("Release", statuses=["Todo", "Doing", "Todo", "Done"])
    assert board.statuses == ("Todo", "Doing", "Done")


def test_empty_seed_gives_empty_board() -> None:
    board = KanbanBoard("Blank", statuses=[])
    assert board.statuses == ()

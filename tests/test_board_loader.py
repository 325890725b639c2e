"""Tests for the YAML board loader."""

import pytest

from kinboard.domain import DEFAULT_STATUSES
from kinboard.infrastructure import get_boards_path, load_boards


def test_load_default_boards() -> None:
    path = get_boards_path()
    assert path.name == "default.yaml"
    boards = load_boards(path)
    names = [b.name for b in boards]
    assert "Things to Do" in names
    things = next(b for b in boards if b.name == "Things to Do")
    assert things.statuses == DEFAULT_STATUSES


def test_boards_path_from_env(tmp_path, monkeypatch) -> None:
    target = tmp_path / "boards.yaml"
    monkeypatch.setenv("KINBOARD_BOARDS_PATH", str(target))
    assert get_boards_path() == target.resolve()


def test_load_boards_with_statuses(tmp_path) -> None:
    yaml_content = """
boards:
  - name: Release
    statuses: [Backlog, " In Review ", Shipped, Backlog]
  - name: Chores
"""
    (tmp_path / "boards.yaml").write_text(yaml_content)
    boards = load_boards(tmp_path / "boards.yaml")
    assert [b.name for b in boards] == ["Release", "Chores"]
    assert boards[0].statuses == ("Backlog", "In Review", "Shipped")
    assert boards[1].statuses == DEFAULT_STATUSES


@pytest.mark.parametrize(
    ("yaml_content", "message"),
    [
        ("- just a list\n", "must be a dict"),
        ("boards: []\n", "non-empty 'boards' list"),
        ("boards:\n  - 42\n", "Board #0 must be a dict"),
        ("boards:\n  - statuses: [A]\n", "non-empty 'name'"),
        ("boards:\n  - name: A\n  - name: A\n", "defined more than once"),
        ("boards:\n  - name: A\n    statuses: [1, 2]\n", "list of non-empty strings"),
        ("boards:\n  - name: A\n    statuses: Backlog\n", "list of non-empty strings"),
    ],
)
def test_load_boards_invalid(tmp_path, yaml_content, message) -> None:
    (tmp_path / "boards.yaml").write_text(yaml_content)
    with pytest.raises(ValueError, match=message):
        load_boards(tmp_path / "boards.yaml")


def test_load_boards_uses_given_default_statuses(tmp_path) -> None:
    yaml_content = """
boards:
  - name: Release
    statuses: [Backlog, Shipped]
  - name: Chores
  - name: Errands
"""
    (tmp_path / "boards.yaml").write_text(yaml_content)
    boards = load_boards(tmp_path / "boards.yaml", default_statuses=iter(["Todo", "Done"]))
    assert [b.statuses for b in boards] == [
        ("Backlog", "Shipped"),
        ("Todo", "Done"),
        ("Todo", "Done"),
    ]

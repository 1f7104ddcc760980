from __future__ import annotations

import logging
from pathlib import Path

import pytest

from globalkit.utils.io import (
    documents_dir,
    load,
    load_collection,
    save,
    save_collection,
    to_dict_representation,
    to_list_representation,
)

from tests.helpers import Bookmark, Shelf


def test_save_creates_parent_directories(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "deeper" / "bookmark.json"
    bookmark = Bookmark(title="Intro", page=3, tags=["a", "b"])

    save(bookmark, target)

    assert target.exists()
    assert load(target) == {"title": "Intro", "page": 3, "tags": ["a", "b"]}
    assert load(target, Bookmark) == bookmark


def test_collection_round_trip_with_dataclasses(tmp_path: Path) -> None:
    target = tmp_path / "out" / "bookmarks.json"
    items = [Bookmark("One", 1, []), Bookmark("Two", 2, ["x"])]

    save_collection(items, target)

    assert load_collection(target, Bookmark) == items
    assert load_collection(target)[1]["title"] == "Two"


def test_load_collection_rejects_non_array(tmp_path: Path) -> None:
    target = tmp_path / "single.json"
    save({"title": "x"}, target)

    with pytest.raises(ValueError):
        load_collection(target)


def test_invalid_json_names_the_file(tmp_path: Path) -> None:
    target = tmp_path / "broken.json"
    target.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError) as excinfo:
        load(target)
    assert "broken.json" in str(excinfo.value)


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load(tmp_path / "missing.json")


def test_dict_and_list_representations(caplog: pytest.LogCaptureFixture) -> None:
    assert to_dict_representation(Bookmark("T", 1, ["z"])) == {"title": "T", "page": 1, "tags": ["z"]}
    assert to_dict_representation([1, 2]) == {}
    assert to_list_representation([1, "two"]) == [1, "two"]
    assert to_list_representation({"a": 1}) == []

    with caplog.at_level(logging.ERROR):
        assert to_dict_representation(object()) is None
    assert "Error:" in caplog.text


def test_documents_dir_is_under_home() -> None:
    assert documents_dir() == Path.home() / "Documents"


def test_nested_dataclasses_are_rebuilt(tmp_path: Path) -> None:
    target = tmp_path / "shelf.json"
    shelf = Shelf(
        name="reading",
        bookmarks=[Bookmark("One", 1, ["x"]), Bookmark("Two", 2, [])],
        featured=Bookmark("Top", 9, ["star"]),
        by_label={"later": Bookmark("Later", 4, [])},
    )

    save(shelf, target)
    loaded = load(target, Shelf)

    assert loaded == shelf
    assert isinstance(loaded.bookmarks[0], Bookmark)
    assert isinstance(loaded.featured, Bookmark)
    assert isinstance(loaded.by_label["later"], Bookmark)


def test_optional_nested_dataclass_may_be_absent(tmp_path: Path) -> None:
    target = tmp_path / "shelves.json"

    save_collection([Shelf("empty", [])], target)

    assert load_collection(target, Shelf) == [Shelf("empty", [], None, {})]

from __future__ import annotations

from pathlib import Path

import pytest

from trooper.errors import CollisionLimitError
from trooper.fs import DirectoryListing, FileOperationEngine, free_destination
from trooper.state import YankRegister


def make_engine(cwd: Path, *, limit: int = 64) -> FileOperationEngine:
    return FileOperationEngine(
        DirectoryListing(cwd), YankRegister(), collision_limit=limit
    )


def test_copy_suffix_goes_before_extension(tmp_path: Path) -> None:
    (tmp_path / "note.txt").write_text("v1", encoding="utf-8")
    engine = make_engine(tmp_path)
    engine.copy_files([tmp_path / "note.txt"])

    first = engine.paste_files()
    second = engine.paste_files()

    assert first.succeeded == [tmp_path / "note (Copy).txt"]
    assert second.succeeded == [tmp_path / "note (Copy) (Copy).txt"]
    assert (tmp_path / "note (Copy) (Copy).txt").read_text(encoding="utf-8") == "v1"


def test_directory_copy_suffix_appends_to_name(tmp_path: Path) -> None:
    assert free_destination(tmp_path / "photos", is_dir=True, limit=4) == (
        tmp_path / "photos"
    )
    (tmp_path / "photos").mkdir()

    assert free_destination(tmp_path / "photos", is_dir=True, limit=4) == (
        tmp_path / "photos (Copy)"
    )


def test_collision_renames_are_capped(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("", encoding="utf-8")
    (tmp_path / "a (Copy).txt").write_text("", encoding="utf-8")

    with pytest.raises(CollisionLimitError):
        free_destination(tmp_path / "a.txt", is_dir=False, limit=1)


def test_cut_paste_moves_tree_into_current_dir(tmp_path: Path) -> None:
    src = tmp_path / "src"
    (src / "nested").mkdir(parents=True)
    (src / "nested" / "deep.txt").write_text("deep", encoding="utf-8")
    target = tmp_path / "target"
    target.mkdir()
    engine = make_engine(target)
    engine.cut_files([src])

    report = engine.paste_files()

    assert report.ok
    assert (target / "src" / "nested" / "deep.txt").read_text(encoding="utf-8") == "deep"
    assert not src.exists()
    assert engine.listing.index_of("src") == 0


def test_failed_cut_paste_keeps_source_and_continues(tmp_path: Path) -> None:
    good = tmp_path / "good.txt"
    good.write_text("ok", encoding="utf-8")
    target = tmp_path / "target"
    target.mkdir()
    engine = make_engine(target)
    engine.cut_files([tmp_path / "vanished.txt", good])

    report = engine.paste_files()

    assert [path for path, _ in report.failed] == [tmp_path / "vanished.txt"]
    assert report.succeeded == [target / "good.txt"]
    assert not good.exists()


def test_cut_paste_with_collision_cap_keeps_source(tmp_path: Path) -> None:
    src = tmp_path / "src"
    src.mkdir()
    (src / "x.txt").write_text("new", encoding="utf-8")
    (tmp_path / "x.txt").write_text("old", encoding="utf-8")
    engine = make_engine(tmp_path, limit=0)
    engine.cut_files([src / "x.txt"])

    report = engine.paste_files()

    assert not report.ok
    assert (src / "x.txt").read_text(encoding="utf-8") == "new"
    assert (tmp_path / "x.txt").read_text(encoding="utf-8") == "old"


def test_paste_directory_into_itself_fails(tmp_path: Path) -> None:
    loop = tmp_path / "loop"
    loop.mkdir()
    engine = make_engine(loop)
    engine.copy_files([loop])

    report = engine.paste_files()

    assert report.succeeded == []
    assert report.failed[0][0] == loop
    assert list(loop.iterdir()) == []


def test_paste_with_empty_register_is_noop(tmp_path: Path) -> None:
    report = make_engine(tmp_path).paste_files()

    assert report.ok
    assert report.succeeded == []


def test_delete_reports_each_item(tmp_path: Path) -> None:
    (tmp_path / "dir" / "inner").mkdir(parents=True)
    (tmp_path / "file.txt").write_text("x", encoding="utf-8")
    engine = make_engine(tmp_path)

    report = engine.delete_files(
        [tmp_path / "missing", tmp_path / "dir", tmp_path / "file.txt"]
    )

    assert [path for path, _ in report.failed] == [tmp_path / "missing"]
    assert report.succeeded == [tmp_path / "dir", tmp_path / "file.txt"]
    assert list(tmp_path.iterdir()) == []
    assert len(engine.listing) == 0


def test_move_entry_renames_in_place(tmp_path: Path) -> None:
    (tmp_path / "old.txt").write_text("x", encoding="utf-8")
    engine = make_engine(tmp_path)

    report = engine.move_entry(tmp_path / "old.txt", "new.txt")

    assert report.succeeded == [tmp_path / "new.txt"]
    assert [entry.name for entry in engine.listing.entries] == ["new.txt"]


def test_move_entry_refuses_to_overwrite(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("a", encoding="utf-8")
    (tmp_path / "b.txt").write_text("b", encoding="utf-8")
    engine = make_engine(tmp_path)

    report = engine.move_entry(tmp_path / "a.txt", "b.txt")

    assert not report.ok
    assert (tmp_path / "b.txt").read_text(encoding="utf-8") == "b"


def test_create_dirs_makes_nested_and_skips_blank(tmp_path: Path) -> None:
    engine = make_engine(tmp_path)

    report = engine.create_dirs(["one", "two/three", ""])

    assert report.succeeded == [tmp_path / "one", tmp_path / "two/three"]
    assert (tmp_path / "two" / "three").is_dir()
    assert [entry.name for entry in engine.listing.entries] == ["one", "two"]

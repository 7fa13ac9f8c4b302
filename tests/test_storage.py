"""
Tests for flat-file storage.
"""
from datetime import datetime

import pytest
from mama.data import Storage
from mama.errors import PersistenceError, StorageFormatError
from mama.models import EntryList, MilkEntry, NoteEntry, WorkoutEntry

TS = datetime(2025, 10, 28, 1, 14)


def test_load_missing_file_is_empty(tmp_path):
    """Test missing file loads as an empty list."""
    entries = Storage(tmp_path / "missing.txt").load()
    assert entries.full_size() == 0


def test_save_then_load(tmp_path):
    """Test entries survive a save/load cycle in order."""
    path = tmp_path / "mama.txt"
    storage = Storage(path)
    entries = EntryList([
        MilkEntry(150, timestamp=TS),
        WorkoutEntry("yoga", 30, 5, timestamp=TS),
        NoteEntry("hello", timestamp=TS),
    ])
    storage.save(entries)

    assert path.read_text(encoding="utf-8").splitlines() == [
        "MILK|150ml|28/10/25 01:14",
        "WORKOUT|yoga|30|5|28/10/25 01:14",
        "NOTE|hello|28/10/25 01:14",
    ]
    assert storage.load().all() == entries.all()


def test_save_ignores_filter(tmp_path):
    """Test save writes the full backing list, not the shown view."""
    storage = Storage(tmp_path / "mama.txt")
    entries = EntryList([MilkEntry(150, timestamp=TS), NoteEntry("hello", timestamp=TS)])
    entries.filter_by_type("note")
    storage.save(entries)
    assert storage.load().full_size() == 2


def test_save_rewrites_whole_file(tmp_path):
    """Test deleted entries disappear from the file."""
    storage = Storage(tmp_path / "mama.txt")
    entries = EntryList([MilkEntry(150, timestamp=TS), MilkEntry(90, timestamp=TS)])
    storage.save(entries)
    entries.delete_by_shown_index(0)
    storage.save(entries)
    assert storage.load().all() == [MilkEntry(90, timestamp=TS)]
    assert not (tmp_path / "mama.txt.tmp").exists()


def test_load_skips_blank_lines(tmp_path):
    """Test blank lines are skipped."""
    path = tmp_path / "mama.txt"
    path.write_text("MILK|150ml|28/10/25 01:14\n\n   \nNOTE|hi|28/10/25 01:14\n", encoding="utf-8")
    entries = Storage(path).load()
    assert entries.full_size() == 2
    assert entries.total_milk_volume() == 150


def test_load_fails_on_malformed_line(tmp_path):
    """Test one bad line fails the whole load and names the line."""
    path = tmp_path / "mama.txt"
    path.write_text(
        "MILK|150ml|28/10/25 01:14\n"
        "NOTE|hi|28/10/25 01:14\n"
        "WORKOUT|yoga|thirty|5|28/10/25 01:14\n",
        encoding="utf-8",
    )
    with pytest.raises(StorageFormatError) as excinfo:
        Storage(path).load()
    assert excinfo.value.line_number == 3
    assert "Line 3" in str(excinfo.value)


def test_load_fails_on_undecodable_line(tmp_path):
    """Test a line that is not UTF-8 fails the load with its line number."""
    path = tmp_path / "mama.txt"
    path.write_bytes(b"MILK|150ml|28/10/25 01:14\nNOTE|caf\xe9|28/10/25 01:14\n")
    with pytest.raises(StorageFormatError) as excinfo:
        Storage(path).load()
    assert excinfo.value.line_number == 2
    assert "Line 2" in str(excinfo.value)


def test_save_failure_keeps_previous_file(tmp_path):
    """Test a failed save raises PersistenceError and leaves old content."""
    path = tmp_path / "mama.txt"
    storage = Storage(path)
    storage.save(EntryList([MilkEntry(150, timestamp=TS)]))
    before = path.read_text(encoding="utf-8")

    # A directory in place of the temp file makes the write fail
    (tmp_path / "mama.txt.tmp").mkdir()
    with pytest.raises(PersistenceError) as excinfo:
        storage.save(EntryList([MilkEntry(150, timestamp=TS), MilkEntry(60, timestamp=TS)]))

    assert isinstance(excinfo.value.__cause__, OSError)
    assert path.read_text(encoding="utf-8") == before

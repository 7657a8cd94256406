"""Tests for file discovery and the file selection prompt."""
import pytest

from utils.discovery import choose_file, find_csv_files


def test_find_csv_files_sorted(tmp_path):
    for name in ["b.csv", "a.csv", "notes.txt", "C.CSV"]:
        (tmp_path / name).write_text("")
    (tmp_path / "dir.csv").mkdir()

    assert find_csv_files(str(tmp_path)) == ["C.CSV", "a.csv", "b.csv"]


def test_find_csv_files_missing_directory(tmp_path):
    assert find_csv_files(str(tmp_path / "missing")) == []


def test_choose_file_reprompts_until_valid():
    answers = iter(["0", "abc", "2"])
    shown = []
    chosen = choose_file(["a.csv", "b.csv"], input_fn=lambda _: next(answers), output_fn=shown.append)

    assert chosen == "b.csv"
    assert shown[0] == "Choose a file to load (enter the file number):"
    assert "1. a.csv" in shown
    assert shown[-1] == "You chose: b.csv"


def test_choose_file_without_files():
    with pytest.raises(FileNotFoundError):
        choose_file([], input_fn=lambda _: "1", output_fn=lambda _: None)

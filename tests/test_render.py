import json
from pathlib import Path

from transcripts.__main__ import main
from transcripts.backend_logic import generate_transcripts
from transcripts.render import format_transcript, format_transcripts
from transcripts.sample_data import SAMPLE_STUDENTS

ALICE = """Student ID: S001
Name: Alice
Semester: Fall 2023
  Math: Credits: 4, Final Grade: 76.00%, Grade Point: 3.04
  Physics: Credits: 3, Final Grade: 71.00%, Grade Point: 2.84
  Semester GPA: 2.95
Cumulative GPA: 2.95
Academic Honors: None"""


def test_format_transcript() -> None:
    alice = generate_transcripts(SAMPLE_STUDENTS)[0]
    assert format_transcript(alice) == ALICE


def test_format_transcripts_separates_students() -> None:
    text = format_transcripts(generate_transcripts(SAMPLE_STUDENTS))
    first, second = text.split("\n\n")
    assert first == ALICE
    assert second.startswith("Student ID: S002\nName: Bob")
    assert second.endswith("Cumulative GPA: 3.25\nAcademic Honors: None")


def test_main_prints_sample(capsys) -> None:
    assert main([]) == 0
    out = capsys.readouterr().out
    assert ALICE in out
    assert "Name: Bob" in out


def test_main_reads_json_and_skips_bad_students(tmp_path: Path, capsys) -> None:
    students = [SAMPLE_STUDENTS[0], {"id": "S404", "name": "Eve", "semesters": []}]
    path = tmp_path / "students.json"
    path.write_text(json.dumps(students), encoding="utf-8")

    assert main(["--json", str(path)]) == 0
    captured = capsys.readouterr()
    assert captured.out.strip() == ALICE
    assert "S404" not in captured.out


def test_main_missing_file_returns_error(tmp_path: Path) -> None:
    assert main(["--csv", str(tmp_path / "missing.csv")]) == 1

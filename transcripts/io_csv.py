import json
from typing import Any, Dict, List

import pandas as pd

from transcripts.errors import InputError

RECORD_COLUMNS = [
    "student_id",
    "name",
    "term",
    "subject",
    "credits",
    "assignments",
    "exams",
    "attendance",
]

SCORE_COLUMNS = ["assignments", "exams", "attendance"]

# ------------------------
# CSV / JSON helpers
# ------------------------

def _normalise_cols(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    df.columns = [str(c).strip().lower().replace(" ", "_") for c in df.columns]
    # allow singular "credit"
    if "credit" in df.columns and "credits" not in df.columns:
        df = df.rename(columns={"credit": "credits"})
    return df

def read_csv_upload(uploaded_file) -> pd.DataFrame:
    try:
        df = pd.read_csv(uploaded_file)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise InputError(f"Could not read CSV: {e}") from e
    return _normalise_cols(df)

def validate_records_csv(df: pd.DataFrame) -> pd.DataFrame:
    missing = set(RECORD_COLUMNS) - set(df.columns)
    if missing:
        raise InputError(
            f"Missing columns: {sorted(missing)}. Expected: {', '.join(RECORD_COLUMNS)}."
        )
    return df[RECORD_COLUMNS].copy()

def _cell(value: Any) -> Any:
    if pd.isna(value):
        return None
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value.item() if hasattr(value, "item") else value

def _score(value: Any) -> Any:
    value = _cell(value)
    if isinstance(value, str):
        # leave unparseable text in place so score validation reports it
        try:
            return float(value)
        except ValueError:
            return value
    return value

def records_to_students(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """
    Group long-format rows (one per subject) into nested student records.
    Students, terms and subjects keep their first-seen order.
    """
    students: Dict[Any, Dict[str, Any]] = {}
    terms: Dict[Any, Dict[Any, Dict[str, Any]]] = {}

    for _, row in df.iterrows():
        sid = _cell(row.get("student_id"))
        if sid is not None:
            sid = str(sid)
        student = students.get(sid)
        if student is None:
            student = {"id": sid, "name": _cell(row.get("name")), "semesters": []}
            students[sid] = student
            terms[sid] = {}

        term = _cell(row.get("term"))
        semester = terms[sid].get(term)
        if semester is None:
            semester = {"term": term, "subjects": []}
            terms[sid][term] = semester
            student["semesters"].append(semester)

        semester["subjects"].append({
            "name": _cell(row.get("subject")),
            "credits": _score(row.get("credits")),
            "performance": {col: _score(row.get(col)) for col in SCORE_COLUMNS},
        })

    return list(students.values())

def load_students_json(source) -> Any:
    """
    source: path or file-like object holding a JSON array of students.
    The decoded value is returned as-is; shape checks happen downstream.
    """
    try:
        if hasattr(source, "read"):
            raw = source.read()
            if isinstance(raw, bytes):
                raw = raw.decode("utf-8")
            return json.loads(raw)
        with open(source, encoding="utf-8") as fh:
            return json.load(fh)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InputError(f"Could not read JSON: {e}") from e

def load_students_csv(source) -> List[Dict[str, Any]]:
    return records_to_students(validate_records_csv(read_csv_upload(source)))

def transcripts_to_frame(transcripts: List[Dict[str, Any]]) -> pd.DataFrame:
    rows = []
    for t in transcripts:
        for semester in t["semesters"]:
            for subject in semester["subjects"]:
                rows.append({
                    "Student ID": t["student_id"],
                    "Name": t["name"],
                    "Term": semester["term"],
                    "Subject": subject["name"],
                    "Credits": subject["credits"],
                    "Final Grade": subject["final_grade"],
                    "Grade Point": subject["grade_point"],
                    "Semester GPA": semester["semester_gpa"],
                    "Cumulative GPA": t["cumulative_gpa"],
                    "Academic Honors": t["academic_honors"],
                })
    columns = [
        "Student ID", "Name", "Term", "Subject", "Credits", "Final Grade",
        "Grade Point", "Semester GPA", "Cumulative GPA", "Academic Honors",
    ]
    return pd.DataFrame(rows, columns=columns)

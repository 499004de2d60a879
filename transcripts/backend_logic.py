import logging
import math
from decimal import Decimal, ROUND_HALF_UP
from numbers import Real
from collections.abc import Mapping
from typing import Any, Dict, List, NamedTuple, Tuple

import numpy as np

from transcripts.errors import (
    StructureError,
    TranscriptError,
    ValidationError,
    ZeroCreditError,
)

logger = logging.getLogger(__name__)

WEIGHTS = {
    "assignments": 0.3,
    "exams": 0.5,
    "attendance": 0.2,
}

SCORE_MIN = 0.0
SCORE_MAX = 100.0
MAX_GRADE_POINT = 4.0

HIGH_HONORS_MIN = 3.7
HONORS_MIN = 3.3

UNKNOWN_STUDENT = "Unknown"


# ------------------------
# Core logic
# ------------------------
def format_2dp(x: float) -> str:
    return str(Decimal(str(x)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def validate_score(score: Any, metric_label: str) -> None:
    if not is_number(score) or not (SCORE_MIN <= score <= SCORE_MAX):
        raise ValidationError(
            f"Invalid {metric_label} score: {score}. Must be a number between 0 and 100."
        )


def final_grade(performance: Mapping[str, Any]) -> float:
    """
    performance: mapping with 'assignments', 'exams' and 'attendance' scores
    returns: weighted final grade in [0, 100], unrounded
    """
    if not isinstance(performance, Mapping):
        raise StructureError("Invalid performance data")

    grade = 0.0
    for metric, weight in WEIGHTS.items():
        score = performance.get(metric)
        validate_score(score, metric)
        grade += score * weight
    return grade


def grade_point(grade: float) -> float:
    return grade / 100 * MAX_GRADE_POINT


def weighted_mean(vc: np.ndarray) -> Tuple[float, float]:
    """
    vc: Nx2 numpy array -> [value, credit]
    returns: (credit-weighted mean value, total credits)
    """
    if vc.size == 0:
        return np.nan, 0.0

    values = vc[:, 0].astype(float)
    credits = vc[:, 1].astype(float)
    total_credits = float(credits.sum())
    if total_credits == 0:
        return np.nan, 0.0

    return float(np.dot(values, credits) / total_credits), total_credits


def classify_honors(cumulative_gpa: float) -> str:
    if cumulative_gpa >= HIGH_HONORS_MIN:
        return "High Honors"
    elif cumulative_gpa >= HONORS_MIN:
        return "Honors"
    return "None"


# ------------------------
# Transcript building
# ------------------------
def student_label(student: Any) -> str:
    if isinstance(student, Mapping) and student.get("id"):
        return str(student["id"])
    return UNKNOWN_STUDENT


def _non_empty_list(value: Any) -> bool:
    return isinstance(value, list) and len(value) > 0


def _check_student(student: Any) -> str:
    sid = student_label(student)
    if (
        not isinstance(student, Mapping)
        or not student.get("id")
        or not student.get("name")
        or not _non_empty_list(student.get("semesters"))
    ):
        raise StructureError(f"Invalid student structure for student ID: {sid}")
    return sid


def _check_semester(semester: Any, sid: str) -> None:
    term = semester.get("term") if isinstance(semester, Mapping) else None
    if not term or not _non_empty_list(semester.get("subjects")):
        raise StructureError(
            f"Invalid semester structure for student ID: {sid}, term: {term}"
        )


def _check_subject(subject: Any, term: str, sid: str) -> None:
    if (
        not isinstance(subject, Mapping)
        or not subject.get("name")
        or not is_number(subject.get("credits"))
        or subject["credits"] <= 0
        or not subject.get("performance")
    ):
        raise StructureError(
            f"Invalid subject structure in term: {term} for student ID: {sid}"
        )


def build_semester(semester: Mapping[str, Any], sid: str) -> Tuple[Dict[str, Any], float, float]:
    """
    Returns (semester result, unrounded semester GPA, semester credits).
    """
    _check_semester(semester, sid)
    term = semester["term"]

    subjects = []
    points_credits: List[Tuple[float, float]] = []
    for subject in semester["subjects"]:
        _check_subject(subject, term, sid)
        grade = final_grade(subject["performance"])
        point = grade_point(grade)
        points_credits.append((point, subject["credits"]))
        subjects.append({
            "name": subject["name"],
            "credits": subject["credits"],
            "final_grade": format_2dp(grade),
            "grade_point": format_2dp(point),
        })

    semester_gpa, semester_credits = weighted_mean(np.array(points_credits, dtype=float))
    if semester_credits == 0:
        raise ZeroCreditError(f"Total credits for term {term} is zero for student ID: {sid}")

    result = {
        "term": term,
        "subjects": subjects,
        "semester_gpa": format_2dp(semester_gpa),
    }
    return result, semester_gpa, semester_credits


def build_transcript(student: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Raises a TranscriptError subclass on the first problem found, so a single
    bad subject or semester rejects the whole student.
    """
    sid = _check_student(student)

    semesters = []
    gpa_credits: List[Tuple[float, float]] = []
    for semester in student["semesters"]:
        result, semester_gpa, semester_credits = build_semester(semester, sid)
        semesters.append(result)
        gpa_credits.append((semester_gpa, semester_credits))

    cumulative_gpa, total_credits = weighted_mean(np.array(gpa_credits, dtype=float))
    if total_credits == 0:
        raise ZeroCreditError(f"Total credits for student ID: {sid} is zero")

    return {
        "student_id": student["id"],
        "name": student["name"],
        "semesters": semesters,
        "cumulative_gpa": format_2dp(cumulative_gpa),
        "academic_honors": classify_honors(cumulative_gpa),
    }


class BatchResult(NamedTuple):
    transcripts: List[Dict[str, Any]]
    errors: List[Tuple[str, str]]


def process_students(students: Any) -> BatchResult:
    if not isinstance(students, list):
        message = "Invalid input: students data should be an array."
        logger.error(message)
        return BatchResult([], [(UNKNOWN_STUDENT, message)])

    transcripts = []
    errors = []
    for student in students:
        label = student_label(student)
        try:
            transcripts.append(build_transcript(student))
        except TranscriptError as e:
            logger.error("Error processing student ID %s: %s", label, e)
            errors.append((label, str(e)))

    logger.info(
        "Built %d transcript(s) from %d student record(s), %d rejected",
        len(transcripts), len(students), len(errors),
    )
    return BatchResult(transcripts, errors)


def generate_transcripts(students: Any) -> List[Dict[str, Any]]:
    return process_students(students).transcripts

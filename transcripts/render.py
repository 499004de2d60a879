from typing import Any, Dict, List


def format_transcript(transcript: Dict[str, Any]) -> str:
    lines = [
        f"Student ID: {transcript['student_id']}",
        f"Name: {transcript['name']}",
    ]
    for semester in transcript["semesters"]:
        lines.append(f"Semester: {semester['term']}")
        for subject in semester["subjects"]:
            lines.append(
                f"  {subject['name']}: Credits: {subject['credits']}, "
                f"Final Grade: {subject['final_grade']}%, "
                f"Grade Point: {subject['grade_point']}"
            )
        lines.append(f"  Semester GPA: {semester['semester_gpa']}")
    lines.append(f"Cumulative GPA: {transcript['cumulative_gpa']}")
    lines.append(f"Academic Honors: {transcript['academic_honors']}")
    return "\n".join(lines)


def format_transcripts(transcripts: List[Dict[str, Any]]) -> str:
    # blank line between students
    return "\n\n".join(format_transcript(t) for t in transcripts)

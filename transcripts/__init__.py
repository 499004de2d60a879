from transcripts.backend_logic import (
    BatchResult,
    build_transcript,
    classify_honors,
    final_grade,
    generate_transcripts,
    grade_point,
    process_students,
    validate_score,
)
from transcripts.errors import (
    InputError,
    StructureError,
    TranscriptError,
    ValidationError,
    ZeroCreditError,
)

__all__ = [
    "BatchResult",
    "InputError",
    "StructureError",
    "TranscriptError",
    "ValidationError",
    "ZeroCreditError",
    "build_transcript",
    "classify_honors",
    "final_grade",
    "generate_transcripts",
    "grade_point",
    "process_students",
    "validate_score",
]

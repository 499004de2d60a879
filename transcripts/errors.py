class TranscriptError(Exception):
    """Base class for transcript processing errors."""


class ValidationError(TranscriptError):
    """Raised when a single score is missing, non-numeric or out of range."""


class StructureError(TranscriptError):
    """Raised when a student, semester, subject or performance record is malformed."""


class ZeroCreditError(TranscriptError):
    """Raised when a semester or student has no credits to divide by."""


class InputError(TranscriptError):
    """Raised when an input file cannot be read into student records."""

import argparse
import logging
import sys

from transcripts.backend_logic import generate_transcripts
from transcripts.errors import InputError
from transcripts.io_csv import load_students_csv, load_students_json
from transcripts.render import format_transcripts
from transcripts.sample_data import SAMPLE_STUDENTS

logger = logging.getLogger("transcripts")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="transcripts",
        description="Student transcript and GPA calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Built-in example students
    python -m transcripts

    # Nested student records
    python -m transcripts --json students.json

    # One row per subject
    python -m transcripts --csv records.csv
        """,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--json", metavar="FILE", help="JSON array of student records")
    source.add_argument("--csv", metavar="FILE", help="CSV with one row per subject")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s',
        stream=sys.stderr,
    )

    try:
        if args.json:
            students = load_students_json(args.json)
        elif args.csv:
            students = load_students_csv(args.csv)
        else:
            students = SAMPLE_STUDENTS
    except InputError as e:
        logger.error("%s", e)
        return 1

    logger.debug("Processing %s", args.json or args.csv or "built-in sample")
    transcripts = generate_transcripts(students)
    if transcripts:
        print(format_transcripts(transcripts))
    return 0


if __name__ == "__main__":
    sys.exit(main())

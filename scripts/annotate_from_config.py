#!/usr/bin/env python3
"""
Insert citation tags into a text described by a YAML job file.
"""

import argparse
import sys
from pathlib import Path

from citemark import InvalidSourceError, insert_sup_tags
from citemark.config import load_annotation_job
from citemark.utils import setup_logging


def main() -> int:
    parser = argparse.ArgumentParser(description="Insert <sup> citation tags using a job YAML.")
    parser.add_argument("config", help="Path to job YAML (text/text_file + sources)")
    parser.add_argument("--output", help="Write the annotated text here instead of stdout")
    args = parser.parse_args()

    try:
        job = load_annotation_job(args.config)
        setup_logging(job.log_level, job.log_file)
        annotated = insert_sup_tags(job.text, job.sources)
    except InvalidSourceError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.output:
        Path(args.output).write_text(annotated, encoding="utf-8")
    else:
        print(annotated)
    return 0


if __name__ == "__main__":
    sys.exit(main())

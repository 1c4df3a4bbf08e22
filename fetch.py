"""
York Grades Fetcher
"""

import argparse
import logging
import sys
from typing import List, Optional

from errors import GradesError
from gpa import compute_gpa
from grades_scraper import YorkGradesScraper
from records import Credential
from report import render_json, render_tables


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grades_list",
        description="A simple command line program to print out York grades and GPA",
    )
    parser.add_argument("username", help="York Username")
    parser.add_argument("password", help="York Password")
    parser.add_argument("-j", "--json", action="store_true", help="Output in JSON or as a table")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # stdout carries the report, so logs go to stderr
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    scraper = YorkGradesScraper(Credential(username=args.username, password=args.password))

    try:
        grades = scraper.fetch_grades()
        gpa = compute_gpa(grades)
    except GradesError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(render_json(grades, gpa))
    else:
        print(render_tables(grades, gpa))

    return 0


if __name__ == "__main__":
    sys.exit(main())

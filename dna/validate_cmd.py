"""
``dna validate``: structural check plus scored rule validation of one
design-dna.json file.

Exit codes:
    0  document is valid
    1  document is invalid, unreadable, malformed JSON, or fails the schema
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from .rules import load_rules
from .schema import check_schema
from .utils import load_json, log, write_text
from .validators import MAX_SCORE, PASSING_SCORE, ValidationReport, validate_document


def print_report(report: ValidationReport) -> None:
    """Print the human-readable validation report."""
    log.banner("Design DNA Validation Report")

    log.info("Scores:")
    for key, score in report.scores.items():
        if score >= PASSING_SCORE:
            log.success(f"{key}: {score}/{MAX_SCORE}")
        else:
            log.error(f"{key}: {score}/{MAX_SCORE}")

    if report.errors:
        log.header("Errors")
        for message in report.errors:
            log.error(message)

    if report.warnings:
        log.header("Warnings")
        for message in report.warnings:
            log.warning(message)

    verdict = "PASS" if report.valid else "FAIL"
    log.banner(f"Verdict: {verdict}")


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate one Design DNA file and report."""
    path = Path(args.path).resolve()

    try:
        document = load_json(path)
    except FileNotFoundError as e:
        log.error(str(e))
        return 1
    except json.JSONDecodeError as e:
        log.error(f"Failed to parse JSON: {e}")
        return 1

    if not args.no_schema:
        schema_errors = check_schema(document)
        if schema_errors:
            log.header("Schema Validation Failed")
            for line in schema_errors:
                log.error(line)
            return 1

    rules = load_rules(args.rules) if args.rules else load_rules()
    report = validate_document(document, rules=rules, source=path)

    if args.output:
        write_text(Path(args.output), json.dumps(report.to_dict(), indent=2))

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print_report(report)

    return 0 if report.valid else 1

"""Corrections report generation."""

import os
from collections import Counter

import yaml
from loguru import logger

from typofix.core import CorrectionResult


def build_report(results: list[CorrectionResult]) -> dict:
    """Summarize correction results as a plain dict ready for YAML."""
    corrections = []
    for line_no, result in enumerate(results, start=1):
        for record in result.corrections:
            entry = {"line": line_no} if len(results) > 1 else {}
            entry.update(record.model_dump())
            corrections.append(entry)

    unresolved = Counter(word for result in results for word in result.unresolved)

    return {
        "total_corrections": len(corrections),
        "corrections": corrections,
        "unresolved": [
            {"word": word, "count": count} for word, count in sorted(unresolved.items())
        ],
    }


def write_corrections_report(results: list[CorrectionResult], report_path: str) -> None:
    """Write the corrections report as YAML.

    Args:
        results: Results of one or more correction calls
        report_path: Destination file
    """
    report = build_report(results)
    os.makedirs(os.path.dirname(report_path) or ".", exist_ok=True)

    with open(report_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(
            report,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
            width=float("inf"),
        )

    logger.info(f"Wrote report with {report['total_corrections']} corrections to {report_path}")

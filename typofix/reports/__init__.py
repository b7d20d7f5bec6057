"""Report generation."""

from .corrections import build_report, write_corrections_report

__all__ = ["build_report", "write_corrections_report"]

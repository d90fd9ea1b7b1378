"""Analysis reporters for outputting metrics in various formats."""

from .console import ConsoleReporter
from .text import format_text_report

__all__ = ["ConsoleReporter", "format_text_report"]

"""Plain text report: one line per analyzed class."""

from __future__ import annotations

from ..registry import ClassRegistry


def format_text_report(registry: ClassRegistry, public_only: bool = False) -> str:
    """Format analyzed classes, one line each.

    Each line reads ``name WMC DIT NOC CBO DICBO RFC LCOM CA NPM SRFC DRFC``.
    Classes that were only referenced are left out.

    Args:
        registry: Registry after a run
        public_only: Report only public classes
    """
    return "\n".join(
        f"{record.name} {record.summary().to_text()}"
        for record in registry.analyzed()
        if record.measurements.is_public or not public_only
    )

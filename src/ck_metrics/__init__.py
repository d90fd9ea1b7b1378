"""ck-metrics - Chidamber-Kemerer design metrics for compiled classes."""

__version__ = "0.3.0"

from .core.exceptions import CKMetricsError

__all__ = ["CKMetricsError", "__version__"]

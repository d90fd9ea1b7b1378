"""Tests for the typed exception hierarchy."""

from __future__ import annotations

import pytest


class TestExceptionHierarchy:
    """Verify the class hierarchy defined in core/exceptions.py."""

    def test_base_is_exception(self):
        from ck_metrics.core.exceptions import CKMetricsError

        assert isinstance(CKMetricsError("base"), Exception)

    def test_base_exported_from_package_root(self):
        from ck_metrics import CKMetricsError
        from ck_metrics.core.exceptions import CKMetricsError as Direct

        assert CKMetricsError is Direct

    @pytest.mark.parametrize(
        "name, parent",
        [
            ("RegistryError", "CKMetricsError"),
            ("DuplicateClassError", "RegistryError"),
            ("UnvisitedRecordError", "RegistryError"),
            ("FactsError", "CKMetricsError"),
            ("ConfigError", "CKMetricsError"),
        ],
    )
    def test_parents(self, name, parent):
        from ck_metrics.core import exceptions

        assert issubclass(getattr(exceptions, name), getattr(exceptions, parent))

    def test_context_defaults_to_empty_dict(self):
        from ck_metrics.core.exceptions import FactsError

        assert FactsError("bad").context == {}

    def test_context_is_kept(self):
        from ck_metrics.core.exceptions import DuplicateClassError

        err = DuplicateClassError("dup", context={"class_name": "com.example.A"})
        assert err.context["class_name"] == "com.example.A"
        assert str(err) == "dup"

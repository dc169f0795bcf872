"""
Tests for generation naming and anchored version parsing.
"""

import pytest

from es_migrator.migration.naming import (
    check_version,
    default_prefix,
    index_name,
    parse_version,
    parse_versions,
)


class TestIndexName:
    def test_default_prefix(self):
        assert default_prefix("products") == "products__v"

    def test_decimal_without_padding(self):
        assert index_name("products__v", 1) == "products__v1"
        assert index_name("products__v", 12) == "products__v12"


class TestParseVersion:
    """Generation numbers are read only from names that are exactly prefix + digits."""

    def test_extracts_version_number(self):
        assert parse_version("products__v", "products__v1") == 1
        assert parse_version("products__v", "products__v123") == 123

    def test_rejects_other_names(self):
        assert parse_version("products__v", "products") is None
        assert parse_version("products__v", "products__v") is None
        assert parse_version("products__v", "products__v1_old") is None
        assert parse_version("products__v", "old_products__v1") is None

    def test_rejects_padded_and_zero(self):
        assert parse_version("products__v", "products__v01") is None
        assert parse_version("products__v", "products__v0") is None

    def test_prefix_is_literal(self):
        assert parse_version("a.b__v", "a.b__v2") == 2
        assert parse_version("a.b__v", "axb__v2") is None

    def test_parse_versions_sorted_descending(self):
        names = ["p__v2", "p__v10", "unrelated", "p__v1"]
        assert parse_versions("p__v", names) == [10, 2, 1]


class TestCheckVersion:
    def test_accepts_positive_int(self):
        assert check_version(3) == 3

    @pytest.mark.parametrize("value", [0, -1, "2", 1.0, True])
    def test_rejects_invalid(self, value):
        with pytest.raises(ValueError):
            check_version(value)

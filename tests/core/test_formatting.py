"""
Tests for diagnostic text rendering.
"""

import numpy as np
import pytest

from pylinearalgebra.core.exceptions import ValidationError
from pylinearalgebra.core.formatting import (
    format_matrix,
    format_vector,
    parse_format_spec,
)


class TestParseFormatSpec:

    @pytest.mark.parametrize("spec, expected", [
        ("", ("", None)),
        ("S", ("S", None)),
        ("c", ("C", None)),
        ("SC.3", ("SC", 3)),
        (".0", ("", 0)),
    ])
    def test_valid(self, spec, expected):
        assert parse_format_spec(spec) == expected

    def test_unknown_layout(self):
        with pytest.raises(ValidationError, match="unknown layout"):
            parse_format_spec("X")

    def test_malformed(self):
        with pytest.raises(ValidationError, match="cannot parse"):
            parse_format_spec("S.x")


class TestFormatVector:

    def test_plain(self):
        assert format_vector(np.array([1.0, 2.5])) == "(1.0, 2.5)"

    def test_rounded(self):
        assert format_vector(np.array([1.234, 5.678]), decimals=1) == "(1.2, 5.7)"


class TestFormatMatrix:

    @pytest.fixture
    def data(self):
        return np.array([[1.0, 2.0], [3.0, 4.0]])

    def test_default_layout_newline(self, data):
        assert format_matrix(data) == "{ { 1.0, 2.0 }\n{ 3.0, 4.0 } }"

    @pytest.mark.parametrize("layout, separator", [
        ("S", " "),
        ("C", ", "),
        ("SC", " ; "),
    ])
    def test_layouts(self, data, layout, separator):
        expected = "{ { 1.0, 2.0 }" + separator + "{ 3.0, 4.0 } }"
        assert format_matrix(data, layout) == expected

    def test_decimals(self):
        data = np.array([[0.5, -0.8660254]])
        assert format_matrix(data, "S", 2) == "{ { 0.5, -0.87 } }"

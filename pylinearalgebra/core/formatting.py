"""
Diagnostic text rendering for vectors and matrices.

For human inspection only; the output is not meant to be parsed back.

Format specs accepted by format() on the value types:
    ''      rows separated by newlines
    'S'     rows separated by a space
    'C'     rows separated by ', '
    'SC'    rows separated by ' ; '
An optional '.N' suffix rounds every element to N decimals, e.g. 'SC.3'.
"""

import re
from typing import Any, Iterable

import numpy as np

from pylinearalgebra.core.exceptions import ValidationError

ROW_SEPARATORS = {
    '': '\n',
    'S': ' ',
    'C': ', ',
    'SC': ' ; ',
}

COMPONENT_SEPARATOR = ', '

# Decimals used by matrix rendering when the format spec gives none
DEFAULT_MATRIX_DECIMALS = 2

_SPEC_PATTERN = re.compile(r'^(?P<layout>[A-Za-z]*)(?:\.(?P<decimals>\d+))?$')


def parse_format_spec(format_spec: str) -> tuple[str, int | None]:
    """
    Split a format spec into its layout letters and decimal count.

    Raises:
        ValidationError: If the spec is malformed or the layout is unknown
    """
    match = _SPEC_PATTERN.match(format_spec)
    if match is None:
        raise ValidationError(f"format_spec: cannot parse {format_spec!r}")
    layout = match.group('layout').upper()
    if layout not in ROW_SEPARATORS:
        raise ValidationError(
            f"format_spec: unknown layout {layout!r}, expected one of {sorted(ROW_SEPARATORS)}"
        )
    decimals = match.group('decimals')
    return layout, int(decimals) if decimals is not None else None


def format_scalar(value: Any, decimals: int | None) -> str:
    if decimals is not None:
        value = np.round(value, decimals)
    return str(value)


def format_components(
    values: Iterable[Any],
    decimals: int | None = None,
    separator: str = COMPONENT_SEPARATOR,
) -> str:
    return separator.join(format_scalar(v, decimals) for v in values)


def format_vector(components: np.ndarray, decimals: int | None = None) -> str:
    """Render components as '(x, y, z)'."""
    return f"({format_components(components, decimals)})"


def format_matrix(
    data: np.ndarray,
    layout: str = '',
    decimals: int | None = DEFAULT_MATRIX_DECIMALS,
) -> str:
    """Render a 2-D array as '{ { a, b } <sep> { c, d } }'."""
    row_separator = ROW_SEPARATORS[layout]
    rows = (f"{{ {format_components(row, decimals)} }}" for row in data)
    return f"{{ {row_separator.join(rows)} }}"

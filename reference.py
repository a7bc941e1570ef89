"""
Self-test against the published Verhoeff tables.

The checksum engine never needs these: validate/generate only depend on the
derived tables being internally consistent. This module confirms that the
algebraic derivation lands on the standard tables cell for cell.
"""
import logging
from typing import NamedTuple, Tuple

logger = logging.getLogger(__name__)

REFERENCE_D = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 2, 3, 4, 0, 6, 7, 8, 9, 5),
    (2, 3, 4, 0, 1, 7, 8, 9, 5, 6),
    (3, 4, 0, 1, 2, 8, 9, 5, 6, 7),
    (4, 0, 1, 2, 3, 9, 5, 6, 7, 8),
    (5, 9, 8, 7, 6, 0, 4, 3, 2, 1),
    (6, 5, 9, 8, 7, 1, 0, 4, 3, 2),
    (7, 6, 5, 9, 8, 2, 1, 0, 4, 3),
    (8, 7, 6, 5, 9, 3, 2, 1, 0, 4),
    (9, 8, 7, 6, 5, 4, 3, 2, 1, 0),
)

REFERENCE_P = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 5, 7, 6, 2, 8, 3, 0, 9, 4),
    (5, 8, 0, 3, 7, 9, 6, 1, 4, 2),
    (8, 9, 1, 6, 0, 4, 3, 5, 2, 7),
    (9, 4, 5, 3, 1, 2, 6, 8, 7, 0),
    (4, 2, 8, 6, 5, 7, 3, 9, 0, 1),
    (2, 7, 9, 3, 8, 0, 6, 4, 1, 5),
    (7, 0, 4, 6, 9, 1, 3, 2, 5, 8),
)

REFERENCE_INV = (0, 4, 3, 2, 1, 5, 6, 7, 8, 9)


class Mismatch(NamedTuple):
    table: str
    indices: Tuple[int, ...]
    got: object
    expected: object

    def __str__(self):
        if not self.indices:
            return f"{self.table} shape mismatch: got {self.got} expected {self.expected}"
        where = ",".join(str(i) for i in self.indices)
        return f"{self.table} mismatch at [{where}]: got {self.got} expected {self.expected}"


def _shape(table):
    return (len(table),) + tuple(len(row) for row in table)


def _compare_matrix(name, got, expected):
    if _shape(got) != _shape(expected):
        return [Mismatch(name, (), _shape(got), _shape(expected))]
    return [
        Mismatch(name, (i, j), got[i][j], expected[i][j])
        for i in range(len(expected))
        for j in range(len(expected[i]))
        if got[i][j] != expected[i][j]
    ]


def _compare_vector(name, got, expected):
    if len(got) != len(expected):
        return [Mismatch(name, (), (len(got),), (len(expected),))]
    return [
        Mismatch(name, (i,), got[i], expected[i])
        for i in range(len(expected))
        if got[i] != expected[i]
    ]


def compare_tables(tables):
    """Every mismatching cell across D, P and inv (empty list means equal)."""
    mismatches = []
    mismatches += _compare_matrix("D", tables.d, REFERENCE_D)
    mismatches += _compare_matrix("P", tables.p, REFERENCE_P)
    mismatches += _compare_vector("inv", tables.inv, REFERENCE_INV)
    return mismatches


def verify_tables(tables, log=logger):
    mismatches = compare_tables(tables)
    for mismatch in mismatches:
        log.warning(str(mismatch))

    if mismatches:
        log.error(f"Some tables did NOT match the canonical Verhoeff tables ({len(mismatches)} cells)")
        return False
    log.info("Generated tables match the canonical Verhoeff tables")
    return True

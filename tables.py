"""
Derives the three Verhoeff tables.

- D (10x10): composition table of D5, D[a][b] = label of "a then b"
- inv (10):  right-inverse of each label under D
- P (8x10):  digit permutation schedule generated by iterating sigma
"""
import logging
from functools import lru_cache
from typing import NamedTuple, Tuple

from config import SIGMA, P_ROWS
from errors import GroupClosureViolation, InvalidDigitPermutation, MissingInverse
from group import DihedralGroup, find_label
from permutation import compose, identity, is_permutation

logger = logging.getLogger(__name__)


class VerhoeffTables(NamedTuple):
    d: Tuple[Tuple[int, ...], ...]
    p: Tuple[Tuple[int, ...], ...]
    inv: Tuple[int, ...]

    def as_dict(self):
        """Plain-list form, suitable for JSON."""
        return {
            "d": [list(row) for row in self.d],
            "p": [list(row) for row in self.p],
            "inv": list(self.inv),
        }


def build_d(elements):
    n = len(elements)
    d = []
    for a in range(n):
        row = []
        for b in range(n):
            comp = compose(elements[a], elements[b])
            label = find_label(comp, elements)
            if label is None:
                raise GroupClosureViolation(comp, a, b)
            row.append(label)
        d.append(tuple(row))
    return tuple(d)


def build_inv(d):
    # Only valid once D is complete
    inv = []
    for a, row in enumerate(d):
        for b, value in enumerate(row):
            if value == 0:
                inv.append(b)
                break
        else:
            raise MissingInverse(a)
    return tuple(inv)


def next_p_row(row, sigma=SIGMA):
    """Applies sigma to every entry of row."""
    return tuple(sigma[v] for v in row)


def build_p(sigma=SIGMA, rows=P_ROWS):
    if not is_permutation(sigma):
        raise InvalidDigitPermutation(sigma)

    p = []
    current = identity(len(sigma))
    for _ in range(rows):
        p.append(current)
        current = next_p_row(current, sigma)
    return tuple(p)


def build_tables(group=None, sigma=SIGMA):
    """Full derivation. Raises TableConstructionError on any structural fault."""
    if group is None:
        group = DihedralGroup()

    logger.debug("Building D from group composition...")
    d = build_d(group.elements)
    logger.debug("Building inverse table...")
    inv = build_inv(d)
    logger.debug("Building permutation schedule...")
    p = build_p(sigma)

    return VerhoeffTables(d=d, p=p, inv=inv)


@lru_cache(maxsize=None)
def get_tables():
    """Process-wide tables, derived on first use."""
    tables = build_tables()
    logger.info("Verhoeff tables derived from D5")
    return tables

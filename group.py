import logging
from config import ROTATION, REFLECTION, GROUP_ORDER
from permutation import compose, power

logger = logging.getLogger(__name__)


def build_group_elements(r=ROTATION, s=REFLECTION):
    """
    Enumerates D5 as permutations of the pentagon vertices.
    Label order: r^0..r^4, then s, r^1 s, r^2 s, r^3 s, r^4 s
    where r^k s means "apply r^k, then s".
    """
    elements = [power(r, k) for k in range(5)]
    elements.append(tuple(s))
    for k in range(1, 5):
        elements.append(compose(power(r, k), s))
    return elements


def find_label(perm, elements):
    """Linear scan for the label of perm. Returns None if it is not an element."""
    perm = tuple(perm)
    for i, element in enumerate(elements):
        if element == perm:
            return i
    return None


class DihedralGroup:
    def __init__(self, rotation=ROTATION, reflection=REFLECTION):
        self.rotation = tuple(rotation)
        self.reflection = tuple(reflection)
        self.elements = build_group_elements(self.rotation, self.reflection)
        logger.debug(f"Enumerated {len(self.elements)} group elements")

    def __len__(self):
        return len(self.elements)

    def __getitem__(self, label):
        return self.elements[label]

    def describe(self):
        """Yields (label, perm, kind) for diagnostics."""
        half = GROUP_ORDER // 2
        for label, perm in enumerate(self.elements):
            kind = "rotation" if label < half else "reflection"
            yield label, perm, kind

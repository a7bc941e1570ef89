"""
Errors raised while deriving the Verhoeff tables.
Both indicate a programming fault, never bad user input.
"""


class TableConstructionError(RuntimeError):
    """Base class for fatal table derivation failures."""


class GroupClosureViolation(TableConstructionError):
    """A composed permutation is not one of the enumerated group elements."""

    def __init__(self, perm, a=None, b=None):
        self.perm = tuple(perm)
        self.a = a
        self.b = b
        if a is None:
            msg = f"Permutation {list(self.perm)} is not a group element"
        else:
            msg = f"Composition of elements {a} and {b} gives {list(self.perm)}, which is not a group element"
        super().__init__(msg)


class MissingInverse(TableConstructionError):
    """No right-inverse exists in row D[label]."""

    def __init__(self, label):
        self.label = label
        super().__init__(f"Element {label} has no right-inverse in the composition table")


class InvalidDigitPermutation(TableConstructionError):
    """The digit schedule generator is not a permutation of 0..9."""

    def __init__(self, sigma):
        self.sigma = tuple(sigma)
        super().__init__(f"sigma must be a permutation of 0..{len(self.sigma) - 1}, got {list(self.sigma)}")

"""
Permutation algebra on small fixed-size sequences.
A permutation is a tuple where perm[x] is the image of position x.
"""


def identity(size=5):
    return tuple(range(size))


def is_permutation(seq):
    """True if seq maps 0..len-1 bijectively onto itself."""
    return sorted(seq) == list(range(len(seq)))


def compose(a, b):
    """
    Composes two permutations: first apply a, then apply b.
    h[x] = b[a[x]], so compose(a, b) and compose(b, a) usually differ.
    """
    return tuple(b[ax] for ax in a)


def power(base, exponent):
    """
    Raises base to a non-negative power under composition
    using repeated squaring. exponent 0 gives the identity.
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")

    result = identity(len(base))
    while exponent > 0:
        if exponent % 2 == 1:
            result = compose(result, base)
        base = compose(base, base)
        exponent //= 2
    return result

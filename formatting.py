from config import AADHAAR_LENGTH


def format_matrix(name, rows):
    lines = [f"{name} = ["]
    for row in rows:
        lines.append("  [" + ", ".join(str(v) for v in row) + "],")
    lines.append("]")
    return "\n".join(lines)


def format_vector(name, values):
    return f"{name} = [\n  " + ", ".join(str(v) for v in values) + "\n]"


def format_tables(tables):
    """D, P and inv in the usual literal layout."""
    return "\n\n".join([
        format_matrix("D", tables.d),
        format_matrix("P", tables.p),
        format_vector("inv", tables.inv),
    ])


def format_elements(group):
    lines = ["Elements (as permutations of [0..4]) in canonical labeling:"]
    for label, perm, kind in group.describe():
        lines.append(f"  {label} -> {list(perm)} ({kind})")
    return "\n".join(lines)


def format_aadhaar(digits):
    """XXXX XXXX XXXX grouping. Returns digits unchanged if not 12 long."""
    if len(digits) != AADHAAR_LENGTH:
        return digits
    return f"{digits[:4]} {digits[4:8]} {digits[8:]}"

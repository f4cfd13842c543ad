"""Checking that two strings differ by at most one edit."""


def is_one_edit_away(first: str, second: str) -> bool:
    """Whether one insertion, deletion or substitution at most turns first into second."""
    longer, shorter = (first, second) if len(first) >= len(second) else (second, first)
    if len(longer) - len(shorter) > 1:
        return False
    mismatch = next(
        (index for index, (a, b) in enumerate(zip(longer, shorter)) if a != b),
        None,
    )
    if mismatch is None:
        return True
    if len(longer) == len(shorter):
        return longer[mismatch + 1:] == shorter[mismatch + 1:]
    return longer[mismatch + 1:] == shorter[mismatch:]
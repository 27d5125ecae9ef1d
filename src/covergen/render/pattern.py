"""Binary pattern generation for the background grid."""

from __future__ import annotations

PATTERN_LENGTH = 16


def make_pattern(seed: int) -> str:
    """Turn a seed into a 16 character string of ``0``/``1`` cells.

    Short encodings are stretched: the first four bits are recombined into
    eight, then the string is mirrored onto itself. Whatever comes out is
    cut or zero-padded to 16 cells; the grid only ever reads 16 of them.
    """
    bc = format(seed, "b")
    if len(bc) < 8:
        bc = bc[0:3] + bc[0:1] + bc[2:4] + bc[3:4] + bc[1:2]
    if len(bc) < PATTERN_LENGTH:
        bc += bc[::-1]
    return bc[:PATTERN_LENGTH].ljust(PATTERN_LENGTH, "0")

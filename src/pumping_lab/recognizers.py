"""Membership predicates for the built-in languages.

Every recognizer is a pure ``str -> bool`` function. They are registered by key
so the catalog data file can refer to them by name.
"""

from __future__ import annotations

import re
from typing import Dict

from .models import Recognizer

_A_STAR_B_STAR = re.compile(r"a*b*")
_AB_STAR = re.compile(r"(?:ab)*")
_A_PLUS_B_PLUS = re.compile(r"(a+)(b+)")
_A_PLUS_B_PLUS_C_PLUS = re.compile(r"(a+)(b+)(c+)")


def a_star_b_star(candidate: str) -> bool:
    return _A_STAR_B_STAR.fullmatch(candidate) is not None


def ab_star(candidate: str) -> bool:
    return _AB_STAR.fullmatch(candidate) is not None


def a_n_b_n(candidate: str) -> bool:
    """Equal runs of a's then b's; the empty string is a member (n = 0)."""

    if candidate == "":
        return True
    match = _A_PLUS_B_PLUS.fullmatch(candidate)
    if not match:
        return False
    return len(match.group(1)) == len(match.group(2))


def palindrome(candidate: str) -> bool:
    return candidate == candidate[::-1]


def a_n_b_n_c_n(candidate: str) -> bool:
    if candidate == "":
        return True
    match = _A_PLUS_B_PLUS_C_PLUS.fullmatch(candidate)
    if not match:
        return False
    a_run, b_run, c_run = (len(group) for group in match.groups())
    return a_run == b_run == c_run


RECOGNIZERS: Dict[str, Recognizer] = {
    "a_star_b_star": a_star_b_star,
    "ab_star": ab_star,
    "a_n_b_n": a_n_b_n,
    "palindrome": palindrome,
    "a_n_b_n_c_n": a_n_b_n_c_n,
}

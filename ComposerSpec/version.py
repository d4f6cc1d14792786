""" Converts Composer version constraints to RPM comparator syntax."""

import re

__all__ = ["convert"]

_operator_re = re.compile(r"^([<>=!~]+)\s*(?=\S)")

def convert(raw):
    """Rewrites one Composer constraint as "OPERATOR VERSION"

    A caret constraint only keeps its lower bound: "^1.2" becomes
    ">= 1.2", the implicit "< 2.0" is not emitted. Bare versions are
    returned unchanged.
    """
    constraint = raw.strip()
    if constraint.startswith("^"):
        constraint = ">= " + constraint[1:].lstrip()
    m = _operator_re.match(constraint)
    if m:
        constraint = m.group(1) + " " + constraint[m.end():]
    return constraint

# vim:et:ts=4:sw=4

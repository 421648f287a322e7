"""
This file helps validating STS directives specified by ABNF using regex.
"""


import re

from .syntax.rfc6797 import directive, max_age_value


def check_regex(pattern: str, value: str) -> bool:
    """Check that the pattern matches the value. VERBOSE as the pattern contains WHITESPACE."""
    # ASCII so that DIGIT stays 0-9 and never matches other unicode digits
    if re.match(pattern, value, re.VERBOSE | re.ASCII):
        return True

    return False


def check_directive(value: str) -> bool:
    return check_regex(rf"^{directive}$", value)


def check_max_age_value(value: str) -> bool:
    return check_regex(rf"^{max_age_value}$", value)

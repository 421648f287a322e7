"""
Parse a single STS header string and evaluate the preload list rules on it.

  https://hstspreload.org/#submission-requirements
  https://hstspreload.org/#removal
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .issues import Code, Issues, combine_issues
from .syntax_validation import check_directive, check_max_age_value

logger = logging.getLogger(__name__)

# 18 weeks
MIN_PRELOAD_MAX_AGE = 10886400
# Largest max-age the preload list can represent (unsigned 64 bit)
MAX_AGE_LIMIT = 2**64 - 1

PRELOAD = "preload"
INCLUDE_SUB_DOMAINS = "includeSubDomains"
MAX_AGE = "max-age"


@dataclass
class DirectiveSet:
    """Directives found in one header."""

    max_age: Optional[int] = None
    # max-age value exactly as written in the header
    max_age_literal: Optional[str] = None
    include_sub_domains: bool = False
    preload: bool = False
    malformed: List[str] = field(default_factory=list)


def parse_max_age(value: str) -> Tuple[Optional[int], Issues]:
    """Parse the value of a max-age directive (the part after "=")."""
    issues = Issues()
    if value and not check_max_age_value(value):
        return None, issues.add_error(
            Code.MAX_AGE_NON_DIGIT,
            "Invalid max-age syntax",
            f"The header's max-age value contains invalid characters: `{value}`",
        )
    if len(value) > 1 and value.startswith("0"):
        issues.add_warning(
            Code.MAX_AGE_LEADING_ZERO,
            "Max-age leading zero",
            f"The header's max-age value contains a leading 0: `{MAX_AGE}={value}`",
        )
    # int() refuses strings above sys.get_int_max_str_digits(), so drop
    # leading zeros and compare lengths before converting
    digits = value.lstrip("0") or "0"
    if (
        not value
        or len(digits) > len(str(MAX_AGE_LIMIT))
        or int(digits) > MAX_AGE_LIMIT
    ):
        return None, issues.add_error(
            Code.MAX_AGE_PARSE_INT,
            "Invalid max-age syntax",
            f"We could not parse the header's max-age value `{value}`.",
        )
    return int(digits), issues


def parse_header_string(header: str) -> Tuple[DirectiveSet, Issues]:
    """Split the header into directives and record every parse-level issue.

    Directive names are case-insensitive (RFC6797 section 6.1). Parsing never
    stops early except for an empty header, where the other checks would only
    repeat the same information.
    """
    directives = DirectiveSet()
    issues = Issues()

    tokens = [t.strip() for t in header.split(";")]
    if tokens == [""]:
        issues.add_warning(
            Code.EMPTY_HEADER, "Empty Header", "The HSTS header is empty."
        )
        return directives, issues

    seen_max_age = False
    for token in tokens:
        name = token.lower()
        if name == PRELOAD:
            if directives.preload:
                issues.add_unique_error(
                    Code.REPEATED_PRELOAD,
                    "Repeated preload directive",
                    f"Header contains a repeated directive: `{PRELOAD}`",
                )
            directives.preload = True

        elif name.startswith(PRELOAD):
            directives.malformed.append(token)
            issues.add_unique_warning(
                Code.INVALID_PRELOAD,
                "Invalid preload directive",
                f"Header contains a `{PRELOAD}` directive with extra parts.",
            )

        elif name == INCLUDE_SUB_DOMAINS.lower():
            if directives.include_sub_domains:
                issues.add_unique_error(
                    Code.REPEATED_INCLUDE_SUB_DOMAINS,
                    "Repeated includeSubDomains directive",
                    f"Header contains a repeated directive: `{INCLUDE_SUB_DOMAINS}`",
                )
            directives.include_sub_domains = True
            if token != INCLUDE_SUB_DOMAINS:
                issues.add_unique_warning(
                    Code.SPELLING_INCLUDE_SUB_DOMAINS,
                    "Non-standard capitalization of includeSubDomains",
                    f"Header contains the token `{token}`. The recommended "
                    f"capitalization is `{INCLUDE_SUB_DOMAINS}`.",
                )

        elif name.startswith(INCLUDE_SUB_DOMAINS.lower()):
            directives.malformed.append(token)
            issues.add_unique_warning(
                Code.INVALID_INCLUDE_SUB_DOMAINS,
                "Invalid includeSubDomains directive",
                f"The header contains an `{INCLUDE_SUB_DOMAINS}` directive with extra directives.",
            )

        elif name.startswith(f"{MAX_AGE}="):
            if seen_max_age:
                issues.add_unique_error(
                    Code.REPEATED_MAX_AGE,
                    "Repeated max-age directive",
                    f"The header contains a repeated directive: `{MAX_AGE}`",
                )
            seen_max_age = True
            value = token[len(MAX_AGE) + 1 :]
            max_age, max_age_issues = parse_max_age(value)
            issues = combine_issues(issues, max_age_issues)
            # First parsable value wins
            if max_age is not None and directives.max_age is None:
                directives.max_age = max_age
                directives.max_age_literal = value

        elif name.startswith(MAX_AGE):
            directives.malformed.append(token)
            issues.add_unique_error(
                Code.MAX_AGE_NO_VALUE,
                "Max-age directive without a value",
                "The header contains a max-age directive name without an "
                "associated value. Please specify the max-age in seconds.",
            )

        elif name == "":
            issues.add_unique_warning(
                Code.EMPTY_DIRECTIVE,
                "Empty directive or extra semicolon",
                "The header includes an empty directive or extra semicolon.",
            )

        elif not check_directive(token):
            directives.malformed.append(token)
            issues.add_warning(
                Code.INVALID_DIRECTIVE_SYNTAX,
                "Invalid directive syntax",
                f"The header contains a directive that is not a valid "
                f"`name[=value]` pair: `{token}`",
            )

        else:
            directives.malformed.append(token)
            issues.add_warning(
                Code.UNKNOWN_DIRECTIVE,
                "Unknown directive",
                f"The header contains an unknown directive: `{token}`",
            )

    return directives, issues


def preloadable_header(directives: DirectiveSet) -> Issues:
    """Check the requirements for adding a domain to the preload list.

    All rules are evaluated so that one pass reports every problem.
    """
    issues = Issues()
    if not directives.include_sub_domains:
        issues.add_error(
            Code.PRELOADABLE_INCLUDE_SUB_DOMAINS_MISSING,
            "No includeSubDomains directive",
            "Header requirement error: Header must contain the `includeSubDomains` directive.",
        )
    if not directives.preload:
        issues.add_error(
            Code.PRELOADABLE_PRELOAD_MISSING,
            "No preload directive",
            "Header requirement error: Header must contain the `preload` directive.",
        )
    if directives.max_age is None:
        issues.add_error(
            Code.PRELOADABLE_MAX_AGE_MISSING,
            "No max-age directive",
            "Header requirement error: Header must contain a valid `max-age` directive.",
        )
    elif directives.max_age < MIN_PRELOAD_MAX_AGE:
        issues.add_error(
            Code.PRELOADABLE_MAX_AGE_TOO_LOW,
            "Max-age too low",
            f"The max-age must be at least {MIN_PRELOAD_MAX_AGE} seconds (== 18 weeks), "
            f"but the header currently only has {MAX_AGE}={directives.max_age_literal or directives.max_age}.",
        )
    return issues


def removable_header(directives: DirectiveSet) -> Issues:
    """Check that the header still enforces HSTS but no longer asks for preloading."""
    issues = Issues()
    if directives.preload:
        issues.add_error(
            Code.REMOVABLE_CONTAINS_PRELOAD,
            "Contains preload directive",
            "Header requirement error: For preload list removal, the header must "
            "not contain the `preload` directive.",
        )
    if directives.max_age is None:
        issues.add_error(
            Code.REMOVABLE_MISSING_MAX_AGE,
            "No max-age directive",
            "Header requirement error: Header must contain a valid `max-age` directive.",
        )
    return issues


def preloadable_header_string(header: str) -> Issues:
    directives, parse_issues = parse_header_string(header)
    issues = combine_issues(parse_issues, preloadable_header(directives))
    logger.debug(
        f"Preloadable check of {header!r}: {len(issues.errors)} errors, {len(issues.warnings)} warnings"
    )
    return issues


def removable_header_string(header: str) -> Issues:
    directives, parse_issues = parse_header_string(header)
    issues = combine_issues(parse_issues, removable_header(directives))
    logger.debug(
        f"Removable check of {header!r}: {len(issues.errors)} errors, {len(issues.warnings)} warnings"
    )
    return issues

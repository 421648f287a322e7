from dataclasses import dataclass, field
from typing import List

from strenum import StrEnum


class Code(StrEnum):
    """Stable identifiers of all issues. Callers may branch on these."""

    NO_HEADER = "response.no_header"
    MULTIPLE_HEADERS = "response.multiple_headers"

    EMPTY_HEADER = "header.parse.empty"
    EMPTY_DIRECTIVE = "header.parse.empty_directive"
    UNKNOWN_DIRECTIVE = "header.parse.unknown_directive"
    INVALID_DIRECTIVE_SYNTAX = "header.parse.syntax.invalid_directive"
    REPEATED_PRELOAD = "header.parse.repeated.preload"
    INVALID_PRELOAD = "header.parse.invalid.preload"
    REPEATED_INCLUDE_SUB_DOMAINS = "header.parse.repeated.include_sub_domains"
    INVALID_INCLUDE_SUB_DOMAINS = "header.parse.invalid.include_sub_domains"
    SPELLING_INCLUDE_SUB_DOMAINS = "header.parse.spelling.include_sub_domains"
    REPEATED_MAX_AGE = "header.parse.repeated.max_age"
    MAX_AGE_NO_VALUE = "header.parse.invalid.max_age.no_value"
    MAX_AGE_NON_DIGIT = "header.parse.max_age.non_digit_characters"
    MAX_AGE_PARSE_INT = "header.parse.max_age.parse_int_error"
    MAX_AGE_LEADING_ZERO = "header.parse.max_age.leading_zero"

    PRELOADABLE_INCLUDE_SUB_DOMAINS_MISSING = (
        "header.preloadable.include_sub_domains.missing"
    )
    PRELOADABLE_PRELOAD_MISSING = "header.preloadable.preload.missing"
    PRELOADABLE_MAX_AGE_MISSING = "header.preloadable.max_age.missing"
    PRELOADABLE_MAX_AGE_TOO_LOW = "header.preloadable.max_age.too_low"

    REMOVABLE_CONTAINS_PRELOAD = "header.removable.contains.preload"
    REMOVABLE_MISSING_MAX_AGE = "header.removable.missing.max_age"


@dataclass(frozen=True)
class Issue:
    """A single error or warning. Only the code takes part in comparisons."""

    code: str
    summary: str = field(default="", compare=False)
    message: str = field(default="", compare=False)


@dataclass
class Issues:
    errors: List[Issue] = field(default_factory=list)
    warnings: List[Issue] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        """Only a header without errors and without warnings passes."""
        return not self.errors and not self.warnings

    def add_error(self, code: str, summary: str = "", message: str = "") -> "Issues":
        self.errors.append(Issue(code=code, summary=summary, message=message))
        return self

    def add_warning(self, code: str, summary: str = "", message: str = "") -> "Issues":
        self.warnings.append(Issue(code=code, summary=summary, message=message))
        return self

    def add_unique_error(
        self, code: str, summary: str = "", message: str = ""
    ) -> "Issues":
        if Issue(code) not in self.errors:
            self.add_error(code, summary, message)
        return self

    def add_unique_warning(
        self, code: str, summary: str = "", message: str = ""
    ) -> "Issues":
        if Issue(code) not in self.warnings:
            self.add_warning(code, summary, message)
        return self


def combine_issues(*issues: Issues) -> Issues:
    """Concatenate errors and warnings in the order given."""
    combined = Issues()
    for i in issues:
        combined.errors.extend(i.errors)
        combined.warnings.extend(i.warnings)
    return combined

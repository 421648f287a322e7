from .issues import Issues


def format_issues(header, issues: Issues) -> str:
    """Human readable report of one check (codes first, messages may change)."""
    lines = [f"Header: {header}" if header is not None else "Header: <none>"]
    if issues.passed:
        lines.append("  OK")
    for kind, entries in (("Error", issues.errors), ("Warning", issues.warnings)):
        for issue in entries:
            line = f"  {kind}: {issue.code}"
            if issue.message:
                line += f" - {issue.message}"
            lines.append(line)
    return "\n".join(lines)

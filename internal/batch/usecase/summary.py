from typing import List

from internal.batch.type import BatchSummary


def format_summary(summary: BatchSummary) -> str:
    """Render the end-of-run report shown to the operator."""
    lines: List[str] = ["Done!", f"Failed keys (count: {len(summary.failures)}):"]
    for failure in summary.failures:
        lines.append(f"- {failure.key} ({failure.message})")

    backup_label = summary.action if summary.backup_keys_included else "skipped"
    lines.extend(
        [
            "Summary:",
            f"- {summary.image_keys} image keys ({summary.action}!)",
            f"  - {summary.successes} successes, {summary.no_ops} no-ops, "
            f"{len(summary.failures)} failures",
            f"- {summary.backup_keys} backup image keys ({backup_label}!)",
            f"- {summary.other_keys} other keys (skipped!)",
            f"- {summary.in_scope_keys} keys in scope",
            f"- {summary.total_keys} total",
        ]
    )
    if summary.cursor:
        lines.append(f"Last key: {summary.cursor}")
    return "\n".join(lines)


__all__ = ["format_summary"]

"""Error types: exception variants for raise-based callers and programmer errors.

Validation failures never leave a processor as exceptions. ``ValidationError``
exists for code that prefers to raise, and converts to and from the ``Err``
struct. ``OptionsError`` is raised only at processor construction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from klaw_validate.issue import Issue
    from klaw_validate.result import Err

__all__ = ['OptionsError', 'ValidationError']


class ValidationError(Exception):
    """One or more validation issues - exception variant of ``Err``."""

    def __init__(self, issues: Iterable[Issue]) -> None:
        self.issues = tuple(issues)
        reasons = ', '.join(f'{_format_path(issue.path)}: {issue.reason}' for issue in self.issues)
        super().__init__(f'Validation failed ({reasons})')

    def to_struct(self) -> Err:
        """Convert to struct for Result-based code."""
        from klaw_validate.result import Err

        return Err(self.issues)


class OptionsError(TypeError):
    """Processor options were rejected at construction time."""

    def __init__(self, type_name: str, detail: str) -> None:
        self.type_name = type_name
        self.detail = detail
        super().__init__(f"Invalid options for '{type_name}' processor: {detail}")


def _format_path(path: tuple[str | int, ...]) -> str:
    if not path:
        return '$'
    return '$' + ''.join(f'[{segment}]' if isinstance(segment, int) else f'.{segment}' for segment in path)

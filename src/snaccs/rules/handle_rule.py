"""HandleRule — проверка social handle после parse_handle."""

from typing import Final, Optional

from snaccs.core.parse.handle import parse_handle
from snaccs.rules.base import RuleResult

DEFAULT_HANDLE_MAX_LENGTH: Final[int] = 30
HANDLE_EXTRA_CHARS: Final[str] = "_."


class HandleRule:
    """Handle: буквы, цифры, "_" и "."; длина 1..max_length."""

    def __init__(self, max_length: int = DEFAULT_HANDLE_MAX_LENGTH):
        if max_length < 1:
            raise ValueError(f"max_length must be positive, got {max_length}")
        self.max_length = max_length

    def evaluate(self, value: Optional[str]) -> RuleResult:
        handle = parse_handle(value)

        if not handle:
            return RuleResult(
                passes=False,
                fail_reason="handle_empty",
                value=handle,
                details="Handle is empty",
            )

        if len(handle) > self.max_length:
            return RuleResult(
                passes=False,
                fail_reason="handle_too_long",
                value=handle,
                details=f"Handle has {len(handle)} characters, max {self.max_length}",
            )

        invalid = sorted(
            {ch for ch in handle if not (ch.isascii() and ch.isalnum()) and ch not in HANDLE_EXTRA_CHARS}
        )
        if invalid:
            return RuleResult(
                passes=False,
                fail_reason="handle_invalid_chars",
                value=handle,
                details=f"Handle contains invalid characters: {''.join(invalid)!r}",
            )

        return RuleResult(
            passes=True,
            fail_reason="",
            value=handle,
            details="Handle valid",
        )

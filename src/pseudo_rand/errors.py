"""Sampling error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'InvalidParameter',
    'InvalidParameterError',
    'ResampleExhausted',
    'ResampleExhaustedError',
]


# --- Parameter Errors ---


class InvalidParameter(msgspec.Struct, frozen=True, gc=False):
    """Request parameters outside the distribution's domain - struct variant for Result[T, InvalidParameter]."""

    kind: str
    parameter: str
    reason: str

    def to_exception(self) -> InvalidParameterError:
        """Convert to exception for raise-based code."""
        return InvalidParameterError(self.kind, self.parameter, self.reason)


class InvalidParameterError(ValueError):
    """Request parameters outside the distribution's domain - exception variant."""

    def __init__(self, kind: str, parameter: str, reason: str) -> None:
        self.kind = kind
        self.parameter = parameter
        self.reason = reason
        super().__init__(f'{kind}.{parameter}: {reason}')

    def to_struct(self) -> InvalidParameter:
        """Convert to struct for Result-based code."""
        return InvalidParameter(self.kind, self.parameter, self.reason)


# --- Draw Errors ---


class ResampleExhausted(msgspec.Struct, frozen=True, gc=False):
    """Composite draw found no positive inner value - struct variant for Result[T, ResampleExhausted]."""

    kind: str
    attempts: int

    def to_exception(self) -> ResampleExhaustedError:
        """Convert to exception for raise-based code."""
        return ResampleExhaustedError(self.kind, self.attempts)


class ResampleExhaustedError(RuntimeError):
    """Composite draw found no positive inner value - exception variant."""

    def __init__(self, kind: str, attempts: int) -> None:
        self.kind = kind
        self.attempts = attempts
        super().__init__(f'{kind}: no positive draw after {attempts} attempts')

    def to_struct(self) -> ResampleExhausted:
        """Convert to struct for Result-based code."""
        return ResampleExhausted(self.kind, self.attempts)

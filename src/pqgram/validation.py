"""Shared precondition checks and the error types raised by pqgram."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A size parameter (p, q, w or a register length) is out of range."""


class IncompatibleArityError(ValueError):
    """Registers or profiles of different lengths were combined."""


def _is_positive_integer(value: object) -> bool:
    # bool is an int subclass but never a meaningful size
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def require_positive_integer(*values: object, **named: object) -> None:
    """Ensure every given value is a positive integer.

    Keyword arguments produce messages that name the parameter, e.g.
    ``require_positive_integer(p=p, q=q)``. Calling it without arguments is a no-op.
    """

    for value in values:
        if not _is_positive_integer(value):
            raise InvalidArgumentError(f"Must be positive integer: {value!r}")
    for name, value in named.items():
        if not _is_positive_integer(value):
            raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")


def require_window_size(w: object) -> None:
    require_positive_integer(w=w)
    if w < 2:  # type: ignore[operator]
        raise InvalidArgumentError(f"w must be greater than or equal to 2, got {w!r}")

"""Local error records with stable identity and causal-chain rendering.

``ErrCodeError`` wraps at most one cause; ``MultiCauseError`` groups
independent causes. Both are write-once after construction. Rendering output is
shared with other services reading the same logs, so its layout is fixed:

    <name> [<code>][<id>] <detail or title>
    <captured stack>
    Caused by: <nested rendering, every following line indented by one space>
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Iterable, TypeVar

from . import codes
from .capabilities import capture_trace, new_id
from .types import ErrCodeErr, ErrorCode

DEFAULT_ERROR_NAME = "ErrCodeError"
MULTI_CAUSE_ERROR_NAME = "MultiCauseError"

_NESTED_PREFIX = " "

TError = TypeVar("TError", bound="ErrCodeError")


@dataclass(eq=False, kw_only=True)
class ErrCodeError(Exception):
    """Classified error with a unique id and an optional single cause.

    Fields are write-once: assigning a field that is already set raises
    ``FrozenInstanceError``. Subclass with ``@dataclass(eq=False)`` to add
    variant fields and construct instances through ``new`` so base fields
    are filled in.
    """

    id: str = ""
    name: str = ""
    error_code: ErrorCode = ErrorCode("", "")
    detail: str = ""
    stack_trace: str = field(default="", repr=False)
    cause: BaseException | None = None

    def __post_init__(self) -> None:
        if self.cause is not None:
            self.__cause__ = self.cause

    def __setattr__(self, name: str, value: object) -> None:
        if name in self.__dataclass_fields__ and name in self.__dict__:
            raise dataclasses.FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)

    def __reduce__(self) -> tuple[Any, ...]:
        # Fields are write-once, so rebuild through the constructor.
        return (_rebuild, (type(self), self._field_values()))

    def _field_values(self) -> dict[str, Any]:
        return {item.name: getattr(self, item.name) for item in dataclasses.fields(self)}

    def __str__(self) -> str:
        return _message(self.name or DEFAULT_ERROR_NAME, self)

    def render_stack_trace(self) -> str:
        """Render this error, its captured stack, and its cause chain."""
        rendered = str(self) + "\n" + self.stack_trace
        if self.cause is not None:
            rendered += "Caused by: " + _render_cause(self.cause)
        return rendered


@dataclass(eq=False, kw_only=True)
class MultiCauseError(ErrCodeError):
    """Error representing several independent, co-occurring failures."""

    causes: tuple[BaseException, ...] = ()

    def __str__(self) -> str:
        return _message(MULTI_CAUSE_ERROR_NAME, self)

    def render_stack_trace(self) -> str:
        return render_causes(str(self), self.causes)


def new_error(
    code: ErrorCode, detail: str, cause: BaseException | None = None
) -> ErrCodeError:
    """Create an ``ErrCodeError`` with a fresh id and the current stack."""
    return ErrCodeError(
        id=new_id(),
        error_code=code,
        detail=detail,
        stack_trace=capture_trace(),
        cause=cause,
    )


def new(
    template: TError,
    code: ErrorCode,
    detail: str,
    cause: BaseException | None = None,
) -> TError:
    """Instantiate a custom error variant from a pre-populated template.

    ``template`` must be an instance of an ``ErrCodeError`` dataclass subclass.
    Its variant-specific fields are kept; id, name, code, detail, stack and
    cause are set here. Passing anything else is a programming error and
    raises ``TypeError``.
    """
    if not isinstance(template, ErrCodeError) or not dataclasses.is_dataclass(template):
        raise TypeError(
            f"template must be an ErrCodeError dataclass instance, got {type(template).__name__}"
        )
    return dataclasses.replace(
        template,
        id=new_id(),
        name=type(template).__name__,
        error_code=code,
        detail=detail,
        stack_trace=capture_trace(),
        cause=cause,
    )


def new_multi_cause_error(
    code: ErrorCode, detail: str, causes: Iterable[BaseException]
) -> MultiCauseError:
    """Create a ``MultiCauseError`` over ``causes`` in their given order."""
    return MultiCauseError(
        id=new_id(),
        error_code=code,
        detail=detail,
        stack_trace=capture_trace(),
        causes=tuple(causes),
    )


def new_default_multi_cause_error(causes: Iterable[BaseException]) -> MultiCauseError:
    """Create a ``MultiCauseError`` with the shared multi-cause classification."""
    return new_multi_cause_error(codes.MULTI_CAUSE, codes.MULTI_CAUSE_DETAIL, causes)


def _rebuild(cls: type[TError], values: dict[str, Any]) -> TError:
    return cls(**values)


def render_causes(header: str, causes: tuple[BaseException, ...]) -> str:
    """Render ``header`` followed by numbered ``Caused by (i/N)`` sections."""
    rendered = header + "\n"
    total = len(causes)
    for index, cause in enumerate(causes, start=1):
        rendered += f"Caused by ({index}/{total}): " + _render_cause(cause)
    return rendered


def describe_exception(exc: BaseException) -> str:
    """Return a one-line description of an arbitrary exception."""
    if isinstance(exc, ErrCodeErr):
        return str(exc)
    text = str(exc)
    if not text:
        return type(exc).__name__
    return f"{type(exc).__name__}: {text}"


def _message(name: str, err: ErrCodeError) -> str:
    prefix = f"{name} [{err.error_code.code}][{err.id}] "
    if err.detail:
        return prefix + err.detail
    return prefix + err.error_code.title


def _render_cause(cause: BaseException) -> str:
    if isinstance(cause, ErrCodeErr):
        return _indent_nested(cause.render_stack_trace())
    return _NESTED_PREFIX + describe_exception(cause)


def _indent_nested(rendered: str) -> str:
    # Every newline but the last gains the prefix; the trailing one stays bare.
    return rendered.replace("\n", "\n" + _NESTED_PREFIX, rendered.count("\n") - 1)

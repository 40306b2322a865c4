# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Result types for service-layer error handling without exceptions.

The pricing core raises typed exceptions; the services wrap outcomes in
``Ok``/``Err`` so routes can map failures to HTTP responses explicitly.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar

from attrs import frozen
from beartype import beartype

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@frozen
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @beartype
    def is_ok(self) -> bool:
        return True

    @beartype
    def is_err(self) -> bool:
        return False

    @property
    def ok_value(self) -> T:
        return self.value

    @property
    def err_value(self) -> None:
        return None

    @beartype
    def unwrap(self) -> T:
        return self.value

    @beartype
    def unwrap_or(self, default: Any) -> Any:
        return self.value

    @beartype
    def unwrap_err(self) -> NoReturn:
        raise ValueError("Called unwrap_err on Ok value")

    @beartype
    def map_err(self, func: Callable[[Any], Any]) -> "Ok[T]":
        """Leave the success value untouched."""
        return self


@frozen
class Err(Generic[E]):
    """Failed outcome carrying an error description."""

    error: E

    @beartype
    def is_ok(self) -> bool:
        return False

    @beartype
    def is_err(self) -> bool:
        return True

    @property
    def ok_value(self) -> None:
        return None

    @property
    def err_value(self) -> E:
        return self.error

    @beartype
    def unwrap(self) -> NoReturn:
        raise ValueError(f"Called unwrap on Err value: {self.error}")

    @beartype
    def unwrap_or(self, default: Any) -> Any:
        return default

    @beartype
    def unwrap_err(self) -> E:
        return self.error

    @beartype
    def map_err(self, func: Callable[[E], U]) -> "Err[U]":
        """Rewrite the error, e.g. to prefix it with context."""
        return Err(func(self.error))


if TYPE_CHECKING:
    Result = Ok[T] | Err[E]
else:

    class Result(Generic[T, E]):
        """Factory and annotation helper: ``Result[T, E]`` means ``Ok[T] | Err[E]``."""

        @staticmethod
        def ok(value: T) -> Ok[T]:
            return Ok(value)

        @staticmethod
        def err(error: E) -> Err[E]:
            return Err(error)

        def __class_getitem__(cls, params: Any) -> Any:
            return Ok[Any] | Err[Any]

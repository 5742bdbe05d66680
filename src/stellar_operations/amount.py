"""
Ledger amounts.

Amounts travel on the wire as int64 counts of stroops; one lumen (or one
unit of any credit asset) is 10,000,000 stroops.
"""

from __future__ import annotations
from decimal import Decimal, InvalidOperation
from typing import Any, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from .runtime.errors import DecodingError, EncodingError

STROOPS_PER_UNIT = 10_000_000
INT64_MAX = 2**63 - 1


class Stroops:
    """Integer amount in stroops. Range is checked on conversion to the wire."""

    __slots__ = ("_value",)

    def __init__(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Stroops value must be an int, got {type(value).__name__}")
        self._value = value

    @classmethod
    def from_amount(cls, amount: Union[str, Decimal, int]) -> Stroops:
        """
        Convert a decimal amount such as "12.5" to stroops.

        Raises:
            ValueError: If the amount has more than 7 decimal places
        """
        try:
            scaled = Decimal(str(amount)) * STROOPS_PER_UNIT
        except InvalidOperation as e:
            raise ValueError(f"Invalid amount {amount!r}") from e
        if not scaled.is_finite():
            raise ValueError(f"Invalid amount {amount!r}")
        if scaled != scaled.to_integral_value():
            raise ValueError(f"Amount {amount!r} has more than 7 decimal places")
        return cls(int(scaled))

    @property
    def value(self) -> int:
        return self._value

    def to_amount(self) -> Decimal:
        return Decimal(self._value) / STROOPS_PER_UNIT

    def to_xdr_int64(self) -> int:
        """
        Raises:
            EncodingError: If the value is negative or exceeds int64
        """
        if not 0 <= self._value <= INT64_MAX:
            raise EncodingError(f"Amount {self._value} is outside 0..{INT64_MAX} stroops")
        return self._value

    @classmethod
    def from_xdr_int64(cls, value: int) -> Stroops:
        if value < 0:
            raise DecodingError(f"Negative amount {value} on the wire")
        return cls(value)

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Stroops):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Stroops({self._value})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        """Accept Stroops instances or plain ints."""
        return core_schema.no_info_before_validator_function(
            cls._validate,
            core_schema.is_instance_schema(cls),
        )

    @classmethod
    def _validate(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        return value


__all__ = ["Stroops", "STROOPS_PER_UNIT"]

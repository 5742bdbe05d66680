"""
Base operation variant and builder.

Every variant is an immutable pydantic model carrying an optional
source-account override. Builders accumulate fields and produce exactly one
variant through build().
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Generic, List, Optional, Tuple, Type, TypeVar, Union, TYPE_CHECKING

from pydantic import BaseModel, ValidationError

from .. import xdr
from ..crypto.keys import MuxedAccount
from ..runtime.errors import ConstructionError, StellarError

if TYPE_CHECKING:
    from .operation import Operation

OpT = TypeVar("OpT", bound="BaseOperation")


class BaseOperation(BaseModel, ABC):
    """Fields and wire conversion shared by all operation variants."""

    operation_type: ClassVar[xdr.OperationType]

    source_account: Optional[MuxedAccount] = None

    model_config = {"frozen": True}

    @abstractmethod
    def to_wire_body(self) -> xdr.OperationBody:
        """
        Build the tagged wire body for this variant.

        Raises:
            EncodingError: If a payload field cannot be represented on the wire
        """

    @classmethod
    @abstractmethod
    def from_wire_body(cls: Type[OpT], source_account: Optional[MuxedAccount], body: Any) -> OpT:
        """
        Rebuild the variant from its decoded source account and body arm.

        Raises:
            DecodingError: If a body field violates a protocol constraint
        """


class BaseOperationBuilder(Generic[OpT], ABC):
    """
    Base class for all operation builders.

    Generic over OpT = the variant type produced by build().
    """

    required_fields: ClassVar[Tuple[str, ...]] = ()

    def __init__(self):
        """Initialize the builder with every field unset."""
        self._fields: Dict[str, Any] = {}
        self._consumed = False

    @property
    @abstractmethod
    def op_cls(self) -> Type[OpT]:
        """Get the variant class this builder produces."""

    def with_field(self, name: str, value: Any) -> BaseOperationBuilder[OpT]:
        """
        Set a field value (chainable).

        Args:
            name: Field name
            value: Field value

        Returns:
            Self for chaining
        """
        if self._consumed:
            raise ConstructionError(f"{self.__class__.__name__} has already been built")
        self._fields[name] = value
        return self

    def with_source_account(self, account: Union[MuxedAccount, str]) -> BaseOperationBuilder[OpT]:
        """Set the account that authorizes this operation (G... or M... text accepted)."""
        return self.with_field("source_account", account)

    def missing_fields(self) -> List[str]:
        return [name for name in self.required_fields if self._fields.get(name) is None]

    def build(self) -> OpT:
        """
        Finalize the builder.

        Returns:
            Immutable variant

        Raises:
            ConstructionError: If a required field is unset, a value is invalid
                or the builder was already used
        """
        if self._consumed:
            raise ConstructionError(f"{self.__class__.__name__} has already been built")

        missing = self.missing_fields()
        if missing:
            raise ConstructionError(
                f"{self.op_cls.__name__} is missing required field(s): {', '.join(missing)}",
                details={"missing": missing},
            )

        try:
            op = self.op_cls.model_validate(self._fields)
        except (ValidationError, StellarError) as e:
            raise ConstructionError(f"Invalid {self.op_cls.__name__} fields", cause=e)

        self._consumed = True
        return op

    def build_operation(self) -> "Operation":
        """Finalize the builder and wrap the variant in an Operation."""
        from .operation import Operation
        return Operation.wrap(self.build())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(fields={list(self._fields.keys())})"


__all__ = [
    "BaseOperation",
    "BaseOperationBuilder",
]

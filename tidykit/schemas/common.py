"""
Common schemas shared across utilities.

**Domain Coverage**:
- Success / Failure: the two variants returned by try_catch()
- TryCatchResult: union of both variants

**Design Notes**:
- The field a variant does not carry is typed None, so a result can never
  hold both data and error
- Models are frozen; values are stored as-is (no copy) since the type
  parameters are unconstrained
"""
# Postpones evaluation of type hints to improve imports and performance. Also avoid circular import issues.
from __future__ import annotations

from typing import Generic, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

# Value produced by the wrapped computation
T = TypeVar('T')
# Error raised by the wrapped computation
E = TypeVar('E', bound=BaseException)


class Success(BaseModel, Generic[T]):
    """
    Successful outcome of a wrapped computation.

    Examples:
        >>> result = Success(data=42)
        >>> result.data, result.error, result.ok
        (42, None, True)
    """
    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    data: T = Field(..., description="Value the computation resolved to")
    error: None = Field(None, description="Always None on success")

    @property
    def ok(self) -> bool:
        return True


class Failure(BaseModel, Generic[E]):
    """
    Failed outcome of a wrapped computation.

    Examples:
        >>> result = Failure(error=ValueError("boom"))
        >>> result.data is None, result.ok
        (True, False)
    """
    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    data: None = Field(None, description="Always None on failure")
    error: E = Field(..., description="Exception raised by the computation")

    @property
    def ok(self) -> bool:
        return False


TryCatchResult = Union[Success[T], Failure[E]]

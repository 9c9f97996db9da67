"""
Base class for validated entities.
"""
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from gamereview.core.exceptions import (
    AppException,
    InvalidArgumentException,
    TypeMismatchException,
)
from gamereview.core.result import Result

EntityT = TypeVar("EntityT", bound="EntityModel")

# pydantic error types that describe the shape of the input rather than a field value
_SHAPE_ERRORS = {
    "missing": (InvalidArgumentException, "is required"),
    "extra_forbidden": (InvalidArgumentException, "is not a known field"),
    "model_type": (TypeMismatchException, "must be a mapping of fields"),
    "model_attributes_type": (TypeMismatchException, "must be a mapping of fields"),
}


def to_app_exception(error: ValidationError) -> AppException:
    """Map the first error of a pydantic ValidationError onto a data layer exception."""
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"]) or "entity"
    exception_class, reason = _SHAPE_ERRORS.get(
        first["type"], (InvalidArgumentException, "is invalid")
    )
    return exception_class(
        f"{field.replace('_', ' ')} {reason}",
        details={"field": field, "type": first["type"]},
    )


class EntityModel(BaseModel):
    """
    Validate-then-freeze entity.

    Fields are validated in declaration order and the first failure aborts
    construction. Assigning a field re-runs its validator; a rejected value
    leaves the old one in place. Missing or unknown fields raise the same
    exception kinds as bad values.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )

    @model_validator(mode="wrap")
    @classmethod
    def check_shape(cls, data: Any, handler: Any) -> Any:
        try:
            return handler(data)
        except ValidationError as e:
            # frozen ids and other assignment errors keep pydantic's own error
            if e.errors()[0]["type"] not in _SHAPE_ERRORS:
                raise
            raise to_app_exception(e) from e

    @classmethod
    def try_create(
        cls: Type[EntityT], context: Optional[Dict[str, Any]] = None, **fields: Any
    ) -> Result[EntityT]:
        """Build an entity, returning a Result instead of raising on bad input."""
        try:
            return Result.success(cls.model_validate(fields, context=context))
        except AppException as e:
            return Result.failure(e)
        except ValidationError as e:
            return Result.failure(to_app_exception(e))

    def revalidated(self: EntityT) -> EntityT:
        """Re-run every field rule over the current values and return a fresh copy."""
        return type(self).model_validate(self.model_dump())

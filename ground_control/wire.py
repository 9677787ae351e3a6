"""Base model for entities built from camelCase wire objects."""

from collections.abc import Mapping
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from ground_control.logging import get_logger

logger = get_logger(__name__)


class WireModel(BaseModel):
    """Immutable model populated from a deserialized wire object.

    Wire keys are camelCase; snake_case attribute names are accepted too.
    A ``null`` on the wire is treated as an absent key so field defaults apply,
    and so is a value that cannot be coerced to the field's type.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data: Any) -> Any:
        """Remove keys whose value is None."""
        if isinstance(data, Mapping):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @field_validator("*", mode="wrap")
    @classmethod
    def default_on_invalid(cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo) -> Any:
        """Fall back to the field default when the wire value does not fit."""
        try:
            return handler(value)
        except ValidationError:
            logger.debug(
                "Defaulting field with unexpected wire value",
                extra={
                    "model": cls.__name__,
                    "field": info.field_name,
                    "value_type": type(value).__name__,
                },
            )
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)

    @classmethod
    def from_wire_object(cls, raw: Any, **kwargs: Any) -> Any:
        """Validate a raw wire object, treating anything but a mapping as empty."""
        if raw is not None and not isinstance(raw, Mapping):
            logger.warning(
                "Ignoring wire object that is not a mapping",
                extra={"model": cls.__name__, "value_type": type(raw).__name__},
            )
        return cls.model_validate(raw if isinstance(raw, Mapping) else {}, **kwargs)

    def to_wire(self) -> dict[str, Any]:
        """Convert back to the camelCase wire layout."""
        return self.model_dump(by_alias=True, mode="json")


class Coordinate(WireModel):
    """Geographic point in decimal degrees."""

    latitude: float = 0.0
    longitude: float = 0.0

    def __str__(self) -> str:
        return f"({self.latitude:.6f}, {self.longitude:.6f})"

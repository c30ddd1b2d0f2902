"""
Strict Base Models for Journal Data

This module provides base classes with strict validation settings shared by
every model in the package.

MOTIVATION:
    Records reach the analytics engine already deserialized. Validating at
    construction time means the engine itself never has to check input:
    - Unknown fields are rejected (extra="forbid")
    - Type mismatches fail fast with a pydantic ValidationError
    - Records and reports are frozen, so a snapshot cannot change under
      a running aggregation

Usage:
    # For input from the logging form (strictest validation)
    class RecordCreate(StrictRequest):
        style: str

    # For immutable values (records, windows, report parts)
    class PracticeRecord(FrozenModel):
        id: str
"""

from pydantic import BaseModel, ConfigDict


class StrictRequest(BaseModel):
    """
    Base model for caller-supplied input with strict validation.

    Features:
        - extra="forbid": Unknown fields raise ValidationError
        - validate_default=True: Validates default values
        - str_strip_whitespace=True: Trims whitespace from strings
        - from_attributes=True: Allows conversion from plain objects

    Example:
        >>> class ItemCreate(StrictRequest):
        ...     name: str
        >>>
        >>> ItemCreate(name="Widget")  # OK
        >>> ItemCreate(nmae="Widget")  # Raises ValidationError
    """

    model_config = ConfigDict(
        extra="forbid",  # Reject unknown fields
        validate_default=True,  # Validate defaults
        str_strip_whitespace=True,  # Clean string inputs
        from_attributes=True,  # Enable object conversion
    )


class FrozenModel(BaseModel):
    """
    Base model for immutable values.

    Instances cannot be modified after creation; "edits" are expressed
    by building a new instance (model_copy).

    Features:
        - frozen=True: Attribute assignment raises ValidationError
        - extra="forbid": Unknown fields raise ValidationError
        - from_attributes=True: Allows conversion from plain objects
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        from_attributes=True,
    )

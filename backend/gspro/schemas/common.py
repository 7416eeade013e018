"""
Shared base for partial-update (PATCH) request bodies.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, model_validator


class PartialUpdate(BaseModel):
    """
    PATCH body where every field is optional.

    Fields named in ``non_nullable`` map to NOT NULL columns: they may be
    left out of the body but not sent as ``null``.
    """

    non_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def reject_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            nulls = [name for name in cls.non_nullable if name in data and data[name] is None]
            if nulls:
                raise ValueError(f"Campos obrigatórios não podem ser nulos: {', '.join(nulls)}")
        return data

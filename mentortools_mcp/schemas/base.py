"""
Building blocks for tool input contracts.

A contract is a closed pydantic model: fields that are not declared are
rejected. New contracts are derived from existing ones by plain operations
over their field definitions rather than by subclassing:

    extend(base, "Name", field=(type, Field(...)))   base fields + overrides
    pick(base, "Name", "a", "b")                     a subset of base fields
    merge("Name", first, second, ...)                union, later wins
"""

from copy import deepcopy
from typing import Annotated, Any, Dict, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, create_model
from pydantic.fields import FieldInfo

from ..library.constants import DEFAULT_LIMIT, DEFAULT_OFFSET, MAX_LIMIT

FieldDefinition = Tuple[Any, FieldInfo]

# Scalars. Integers and booleans are strict so "5", 5.5 and "true" are rejected.
StrictInteger = Annotated[int, Field(strict=True)]
StrictBoolean = Annotated[bool, Field(strict=True)]
PositiveId = Annotated[int, Field(strict=True, gt=0)]
Timestamp = Annotated[int, Field(strict=True, description="Timestamp in milliseconds")]
Title = Annotated[str, Field(min_length=1, max_length=255)]


class Contract(BaseModel):
    """Base for every tool input: unknown fields are an error."""

    model_config = ConfigDict(extra="forbid")

    def to_payload(self, *exclude: str) -> Dict[str, Any]:
        """
        Request body for this input: unset optional fields are left out
        entirely instead of being sent as null.
        """
        return self.model_dump(exclude_none=True, exclude=set(exclude) or None)


def fields_of(model: Type[BaseModel]) -> Dict[str, FieldDefinition]:
    """Field definitions of ``model`` in the form ``create_model`` accepts."""
    return {
        name: (info.annotation, deepcopy(info))
        for name, info in model.model_fields.items()
    }


def build_contract(name: str, fields: Dict[str, FieldDefinition], doc: Optional[str] = None) -> Type[Contract]:
    return create_model(name, __base__=Contract, __doc__=doc, **fields)


def extend(base: Type[BaseModel], name: str, doc: Optional[str] = None, **overrides: FieldDefinition) -> Type[Contract]:
    """New contract with the fields of ``base`` plus ``overrides`` (overrides win)."""
    fields = fields_of(base)
    fields.update(overrides)
    return build_contract(name, fields, doc or base.__doc__)


def pick(base: Type[BaseModel], name: str, *field_names: str, doc: Optional[str] = None) -> Type[Contract]:
    """New contract holding only ``field_names`` from ``base``."""
    available = fields_of(base)
    missing = [field for field in field_names if field not in available]
    if missing:
        raise KeyError(f"{base.__name__} has no field(s): {', '.join(missing)}")
    return build_contract(name, {field: available[field] for field in field_names}, doc)


def merge(name: str, *models: Type[BaseModel], doc: Optional[str] = None) -> Type[Contract]:
    """New contract with the fields of all ``models``; later models win on clashes."""
    fields: Dict[str, FieldDefinition] = {}
    for model in models:
        fields.update(fields_of(model))
    return build_contract(name, fields, doc)


class PaginationInput(Contract):
    """Pagination shared by every list operation."""

    limit: int = Field(
        default=DEFAULT_LIMIT, strict=True, ge=1, le=MAX_LIMIT,
        description="Maximum results to return",
    )
    offset: int = Field(
        default=DEFAULT_OFFSET, strict=True, ge=0,
        description="Number of results to skip for pagination",
    )


class EmptyInput(Contract):
    """Input for operations that take no arguments."""

"""
subspace_core.schema
--------------------
Declarative module definitions.

A new operation module is described as JSON and turned into an
OperationModule at load time; record classes are generated dataclasses,
nothing is written to disk. Declarations are validated with pydantic models
and any invalid input surfaces as SchemaError.

    {
      "name": "voting",
      "package": "cip10",
      "description": "...",
      "events": [
        {
          "name": "Ballot",
          "operation": "ballot",
          "kind": 31000,
          "fields": [
            {"name": "proposal_id", "tag": "proposal_id", "required": true},
            {"name": "choices", "multiple": true},
            {"name": "weights", "type": "map"}
          ]
        }
      ]
    }

Field "type" is "string" (default) or "map" ("k:v,k:v" in one tag);
"multiple": true makes a string field a list carried in one tag.
"""

from __future__ import annotations
import json
import keyword
from dataclasses import make_dataclass
from pathlib import Path
from typing import Any, Dict, List, Literal, Type, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
    model_validator,
)

from .constants import TAG_AUTH, TAG_MARKER, TAG_OPERATION, TAG_SUBSPACE_ID
from .dispatch import OperationModule
from .errors import SchemaError
from .logger import get_logger
from .operation import LIST, PAIRS, SCALAR, OperationRecord, tag_field

log = get_logger("Subspace.Schema")

_RESERVED_TAGS = {TAG_SUBSPACE_ID, TAG_AUTH, TAG_MARKER, TAG_OPERATION}
_RESERVED_NAMES = {"header", "content", "OPERATION"} | set(dir(OperationRecord))


def _check_identifier(value: str) -> str:
    if not value.isidentifier() or keyword.iskeyword(value):
        raise ValueError(f"{value!r} is not a valid identifier")
    return value


class FieldSchema(BaseModel):
    name: StrictStr
    tag: StrictStr = ""          # defaults to name
    type: Literal["string", "map"] = "string"
    required: StrictBool = False
    multiple: StrictBool = False

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        _check_identifier(value)
        if value in _RESERVED_NAMES:
            raise ValueError(f"field name {value!r} is reserved")
        return value

    @model_validator(mode="after")
    def resolve_tag(self) -> "FieldSchema":
        if not self.tag:
            self.tag = self.name
        if self.tag in _RESERVED_TAGS:
            raise ValueError(f"tag {self.tag!r} is reserved")
        return self

    @property
    def shape(self) -> str:
        if self.type == "map":
            return PAIRS
        return LIST if self.multiple else SCALAR


class EventSchema(BaseModel):
    name: StrictStr
    operation: StrictStr = Field(min_length=1)
    kind: StrictInt = Field(ge=0)
    description: StrictStr = ""
    payload: List[FieldSchema] = Field(default_factory=list, alias="fields")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        return _check_identifier(value)

    @model_validator(mode="after")
    def check_unique_fields(self) -> "EventSchema":
        names = [f.name for f in self.payload]
        tags = [f.tag for f in self.payload]
        if len(set(names)) != len(names):
            raise ValueError(f"event {self.name}: duplicate field name")
        if len(set(tags)) != len(tags):
            raise ValueError(f"event {self.name}: duplicate field tag")
        return self


class ModuleSchema(BaseModel):
    name: StrictStr = Field(min_length=1)
    package: StrictStr = Field(min_length=1)
    description: StrictStr = ""
    events: List[EventSchema] = Field(min_length=1)

    @model_validator(mode="after")
    def check_unique_events(self) -> "ModuleSchema":
        kinds = [e.kind for e in self.events]
        operations = [e.operation for e in self.events]
        if len(set(kinds)) != len(kinds):
            raise ValueError(f"module {self.name}: kind declared twice")
        if len(set(operations)) != len(operations):
            raise ValueError(f"module {self.name}: operation declared twice")
        return self


def parse_module_schema(data: Any) -> ModuleSchema:
    try:
        return ModuleSchema.model_validate(data)
    except ValidationError as e:
        raise SchemaError(f"invalid module schema: {e}") from e


def _field_type(declared: FieldSchema) -> Any:
    if declared.shape == LIST:
        return List[str]
    if declared.shape == PAIRS:
        return Dict[str, str]
    return str


def build_record(event: EventSchema) -> Type[OperationRecord]:
    """Generate the OperationRecord subclass for one event declaration."""
    return make_dataclass(
        event.name,
        [
            (f.name, _field_type(f), tag_field(f.tag, shape=f.shape, required=f.required))
            for f in event.payload
        ],
        bases=(OperationRecord,),
        namespace={"OPERATION": event.operation, "__doc__": event.description or None},
    )


def module_from_schema(data: Union[Dict[str, Any], ModuleSchema]) -> OperationModule:
    schema = data if isinstance(data, ModuleSchema) else parse_module_schema(data)
    return OperationModule(
        name=schema.name,
        package=schema.package,
        description=schema.description,
        kinds={e.kind: e.operation for e in schema.events},
        records=tuple(build_record(e) for e in schema.events),
    )


def load_module_schema(path: Union[str, Path]) -> OperationModule:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except ValueError as e:
        raise SchemaError(f"{path}: invalid JSON: {e}") from e
    module = module_from_schema(data)
    log.info(f"module schema loaded: '{module.name}' from {path}")
    return module

"""Base model for records that cross the UI boundary."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


def match_field_keys(model: type, data: Dict[str, Any]) -> Dict[str, Any]:
    """Rewrite incoming keys to the model's wire names, ignoring case and underscores.

    ``Id``, ``id``, ``min_host_version`` and ``MinHostVersion`` all land on
    the same field. Unknown keys are passed through untouched.
    """
    lookup = {}
    for name, field in model.model_fields.items():
        wire = field.alias or name
        lookup[name.replace("_", "").lower()] = wire
        lookup[wire.replace("_", "").lower()] = wire

    matched = {}
    for key, value in data.items():
        if isinstance(key, str):
            key = lookup.get(key.replace("_", "").lower(), key)
        matched[key] = value
    return matched


class WireModel(BaseModel):
    """Immutable record serialized with camelCase keys.

    Both python attribute names and wire names are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @model_validator(mode="before")
    @classmethod
    def match_wire_keys(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return match_field_keys(cls, data)
        return data

    def to_wire(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dict keyed by wire names."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_wire(cls, data: Dict[str, Any]):
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, raw: str):
        return cls.model_validate_json(raw)

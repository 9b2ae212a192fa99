"""
Field data model.

FieldDefinition describes a field shared by every bundle, FieldInstance binds
it to one bundle together with its widget assignment. Items are plain dicts
mapping storage column to value; the delta is the item's list position.

Emptiness rules are per field type and decide which submitted items are
dropped during extraction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol

logger = logging.getLogger(__name__)

CARDINALITY_UNLIMITED = -1

Item = Dict[str, Any]

# (item, field) -> True when the item holds no value
EmptinessCheck = Callable[[Any, 'FieldDefinition'], bool]


@dataclass(frozen=True)
class FieldDefinition:
    """Immutable description of a field, shared across bundles."""
    field_name: str
    type: str
    cardinality: int = 1
    columns: Mapping[str, Mapping[str, Any]] = field(default_factory=lambda: {"value": {}})
    settings: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_unlimited(self) -> bool:
        return self.cardinality == CARDINALITY_UNLIMITED

    @property
    def is_multiple(self) -> bool:
        """True when the field stores more than one value."""
        return self.is_unlimited or self.cardinality > 1


@dataclass
class WidgetSettings:
    """Widget assignment of a field instance."""
    type: str
    settings: Dict[str, Any] = field(default_factory=dict)
    weight: int = 0


@dataclass
class FieldInstance:
    """A field bound to one entity bundle."""
    field_name: str
    entity_type: str
    bundle: str
    label: str = ""
    description: str = ""
    required: bool = False
    settings: Dict[str, Any] = field(default_factory=dict)
    widget: Optional[WidgetSettings] = None


class FieldableEntity(Protocol):
    """What the widget layer reads from an entity."""

    entity_type: str
    bundle: str
    field_ui_default_value: bool


@dataclass
class Entity:
    """Minimal fieldable entity."""
    entity_type: str
    bundle: str
    field_ui_default_value: bool = False


# ========== EMPTINESS RULES ==========

def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def columns_empty(item: Any, field_def: FieldDefinition) -> bool:
    """Default rule: every storage column of the item is blank."""
    if not isinstance(item, Mapping):
        return _is_blank(item)
    return all(_is_blank(item.get(column)) for column in field_def.columns)


def value_empty(item: Any, field_def: FieldDefinition) -> bool:
    """Rule for types keyed on a single ``value`` column (0 is not empty)."""
    if not isinstance(item, Mapping):
        return _is_blank(item)
    return _is_blank(item.get("value"))


EMPTINESS_RULES: Dict[str, EmptinessCheck] = {
    "text": value_empty,
    "text_long": value_empty,
    "text_with_summary": value_empty,
    "number_integer": value_empty,
    "number_decimal": value_empty,
    "number_float": value_empty,
    "list_text": value_empty,
    "list_integer": value_empty,
}


def register_field_type(field_type: str, is_empty: EmptinessCheck) -> None:
    """Register the emptiness rule of a field type.

    Args:
        field_type: Field type name
        is_empty: Callable taking (item, field) returning True for empty items
    """
    if field_type in EMPTINESS_RULES:
        logger.warning(f"Emptiness rule for field type '{field_type}' overwritten")
    EMPTINESS_RULES[field_type] = is_empty


def is_empty_item(item: Any, field_def: FieldDefinition) -> bool:
    check = EMPTINESS_RULES.get(field_def.type, columns_empty)
    return check(item, field_def)


def filter_items(field_def: FieldDefinition, items: List[Any]) -> List[Any]:
    """Return the items that are not empty, in order."""
    return [item for item in items if not is_empty_item(item, field_def)]

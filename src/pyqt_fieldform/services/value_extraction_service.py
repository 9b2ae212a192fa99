"""
Submitted value extraction.

Turns the values submitted for a field back into field items:

1. locate the field's values in FormState.values
2. drop the "add another item" button value
3. capture per-row weights
4. let the widget type massage the raw shape into items
5. stamp weights and submitted deltas back onto the items
6. sort by weight (drag-and-drop reordering)
7. drop empty items
8. renumber and record original_deltas for error flagging
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Tuple

from pyqt_fieldform.core.sort_utils import WEIGHT_KEY, weight_sort
from pyqt_fieldform.forms.field_types import FieldDefinition, Item, filter_items
from pyqt_fieldform.forms.form_state import (
    FieldRenderState, FormState, get_field_state, set_field_state,
)
from pyqt_fieldform.forms.render_tree import RenderElement, get_nested_value

if TYPE_CHECKING:
    from pyqt_fieldform.forms.field_widget import FieldWidget

logger = logging.getLogger(__name__)

ADD_MORE_KEY = "add_more"
ORIGINAL_DELTA_KEY = "_original_delta"


def _delta_key(key: Any) -> Any:
    # Submitted deltas may arrive as strings
    if isinstance(key, str) and key.isdigit():
        return int(key)
    return key


def _iter_deltas(values: Any) -> Iterator[Tuple[Any, Any]]:
    if isinstance(values, dict):
        return iter(values.items())
    if isinstance(values, (list, tuple)):
        return enumerate(values)
    return iter(())


class ValueExtractionService:
    """
    Stateless extraction pipeline shared by every widget type.

    Examples:
        widget.extract_form_values(entity, "und", items, form, form_state)
        # items now holds the sorted, non-empty submitted items
    """

    @staticmethod
    def extract_form_values(widget: 'FieldWidget', langcode: str, items: List[Item],
                            form: RenderElement, form_state: FormState) -> List[Item]:
        field_name = widget.field.field_name
        parents = list(form.get("#parents", []))

        path = parents + [field_name, langcode]
        values, key_exists = get_nested_value(form_state.values, path)
        if not key_exists:
            logger.debug(f"No submitted values at {path}, keeping {len(items)} item(s)")
            return items

        if isinstance(values, dict):
            values = {_delta_key(key): value for key, value in values.items() if key != ADD_MORE_KEY}

        weights = ValueExtractionService.capture_weights(values)
        massaged = widget.massage_form_values(values, form, form_state)

        extracted: List[Any] = []
        for delta, item in _iter_deltas(massaged):
            if isinstance(item, dict):
                item = dict(item)
                if delta in weights:
                    item[WEIGHT_KEY] = weights[delta]
                # Deltas are reshuffled below; keep the submitted one for flag_errors()
                item[ORIGINAL_DELTA_KEY] = delta
            extracted.append(item)

        extracted = ValueExtractionService.sort_items(widget.field, extracted)
        extracted = filter_items(widget.field, extracted)

        field_state = get_field_state(parents, field_name, langcode, form_state)
        if field_state is None:
            # Submitted without a build in this cycle (programmatic submit)
            field_state = FieldRenderState(
                field=widget.field, instance=widget.instance, items_count=len(extracted),
            )
        field_state.original_deltas = {}
        for new_delta, item in enumerate(extracted):
            if isinstance(item, dict):
                field_state.original_deltas[new_delta] = item.pop(ORIGINAL_DELTA_KEY, new_delta)
            else:
                field_state.original_deltas[new_delta] = new_delta
        set_field_state(parents, field_name, langcode, form_state, field_state)

        logger.debug(f"Extracted {len(extracted)} item(s) for {field_name}/{langcode}, "
                     f"original deltas {field_state.original_deltas}")
        items[:] = extracted
        return items

    @staticmethod
    def capture_weights(values: Any) -> Dict[Any, Any]:
        """Per-delta '_weight' values, when the first submitted row carries one."""
        first, exists = get_nested_value(values, [0])
        if not exists or not isinstance(first, dict) or WEIGHT_KEY not in first:
            return {}
        return {
            delta: value[WEIGHT_KEY]
            for delta, value in _iter_deltas(values)
            if isinstance(value, dict) and WEIGHT_KEY in value
        }

    @staticmethod
    def sort_items(field: FieldDefinition, items: List[Any]) -> List[Any]:
        """
        Order items by drag-and-drop weight and strip the weights.

        Only multiple-value fields whose first item carries a weight are sorted.
        """
        if field.is_multiple and items and isinstance(items[0], dict) and WEIGHT_KEY in items[0]:
            items = weight_sort(items)
            logger.debug(f"Sorted {len(items)} item(s) of {field.field_name} by weight")
        for item in items:
            if isinstance(item, dict):
                item.pop(WEIGHT_KEY, None)
        return items

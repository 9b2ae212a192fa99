"""
Validation error flagging.

Errors are recorded per delta in FieldRenderState.errors by whoever validated
the extracted items, so their deltas are post-extraction deltas. The rendered
form still has the slots at their submitted positions; original_deltas maps
one onto the other.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pyqt_fieldform.forms.form_state import FormState, get_field_state, set_field_state
from pyqt_fieldform.forms.render_tree import RenderElement, get_nested_value

if TYPE_CHECKING:
    from pyqt_fieldform.forms.field_widget import FieldWidget

logger = logging.getLogger(__name__)


class ErrorFlaggingService:
    """Reports recorded field errors on the elements of the complete form."""

    @staticmethod
    def flag_errors(widget: 'FieldWidget', langcode: str, form: RenderElement,
                    form_state: FormState) -> None:
        field_name = widget.field.field_name
        parents = list(form.get("#parents", []))

        field_state = get_field_state(parents, field_name, langcode, form_state)
        if field_state is None or not field_state.errors:
            return

        if not field_state.array_parents:
            logger.warning(f"{field_name}/{langcode} has errors but was never placed "
                           f"in a finalized form; errors kept")
            return

        element, exists = get_nested_value(form_state.complete_form, field_state.array_parents)
        if not exists or not isinstance(element, dict):
            logger.warning(f"No element at {field_state.array_parents} for {field_name}; errors kept")
            return

        # Inaccessible elements never show errors
        if element.get("#access", True) is False:
            logger.debug(f"{field_name} is not accessible, skipping error flagging")
            return

        is_multiple = widget.definition.multiple_values
        for delta, delta_errors in field_state.errors.items():
            # Multiple-values widgets get every error on the main element,
            # single-value widgets get them on the slot the item was submitted from.
            if is_multiple:
                delta_element = element
            else:
                original_delta = field_state.original_deltas.get(delta, delta)
                delta_element = element.get(original_delta)
                if not isinstance(delta_element, dict):
                    logger.warning(f"No slot {original_delta} for {field_name} delta {delta}, "
                                   f"reporting on the whole widget")
                    delta_element = element
            for error in delta_errors:
                error_element = widget.error_element(delta_element, error, form, form_state)
                form_state.set_error(error_element, error.message)

        # Reinitialize the errors list for the next submit
        field_state.errors = {}
        set_field_state(parents, field_name, langcode, form_state, field_state)

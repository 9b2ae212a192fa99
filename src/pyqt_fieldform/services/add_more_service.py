"""
"Add another item" button handling and widget after-build bookkeeping.
"""

import logging
from typing import Any, Dict

from pyqt_fieldform.exceptions import FieldStateError
from pyqt_fieldform.forms.field_types import CARDINALITY_UNLIMITED
from pyqt_fieldform.forms.form_state import FormState, get_field_state, set_field_state
from pyqt_fieldform.forms.render_tree import RenderElement, get_nested_value

logger = logging.getLogger(__name__)

NEW_CONTENT_PREFIX = '<div class="ajax-new-content">'


class AddMoreService:
    """
    Callbacks referenced from built widget elements.

    Examples:
        # After finalize_form(), when the add-more button was pressed:
        form_state.triggering_element = form["field_tags"]["und"]["add_more"]
        AddMoreService.submit(form, form_state)   # items_count += 1, rebuild
        wrapper = AddMoreService.ajax(form, form_state)
    """

    @staticmethod
    def element_after_build(element: RenderElement, form_state: FormState) -> RenderElement:
        """Record where the widget elements ended up in the complete form."""
        parents = element["#field_parents"]
        field_name = element["#field_name"]
        langcode = element["#language"]

        field_state = get_field_state(parents, field_name, langcode, form_state)
        if field_state is None:
            logger.warning(f"After-build of {field_name}/{langcode} without render state")
            return element
        field_state.array_parents = list(element["#array_parents"])
        set_field_state(parents, field_name, langcode, form_state, field_state)
        return element

    @staticmethod
    def _button_container(form: RenderElement, form_state: FormState) -> Dict[Any, Any]:
        button = form_state.triggering_element
        if button is None or "#array_parents" not in button:
            raise FieldStateError("No finalized triggering element in form state")
        # One level up from the button: the widget elements
        element, exists = get_nested_value(form, button["#array_parents"][:-1])
        if not exists:
            raise FieldStateError(f"No widget elements at {button['#array_parents'][:-1]}")
        return element

    @staticmethod
    def submit(form: RenderElement, form_state: FormState) -> None:
        """Add one slot to an unlimited field and request a rebuild."""
        element = AddMoreService._button_container(form, form_state)
        field_name = element["#field_name"]
        langcode = element["#language"]
        parents = element["#field_parents"]

        field_state = get_field_state(parents, field_name, langcode, form_state)
        if field_state is None:
            raise FieldStateError(f"No render state for {field_name}/{langcode}")
        field_state.items_count += 1
        set_field_state(parents, field_name, langcode, form_state, field_state)
        form_state.rebuild = True
        logger.debug(f"{field_name}/{langcode} now renders {field_state.items_count} slot(s)")

    @staticmethod
    def ajax(form: RenderElement, form_state: FormState) -> Any:
        """Return the rebuilt widget elements with the new slot marked as new content."""
        element = AddMoreService._button_container(form, form_state)
        if element.get("#cardinality") != CARDINALITY_UNLIMITED:
            return None

        delta = element["#max_delta"]
        if delta in element:
            new_slot = element[delta]
            new_slot["#prefix"] = NEW_CONTENT_PREFIX + new_slot.get("#prefix", "")
            new_slot["#suffix"] = new_slot.get("#suffix", "") + "</div>"
        return element

"""
Configured field widget.

FieldWidget binds a registered widget type to a field instance and runs the
shared algorithms against the widget type's capability ABCs:

- build_form(): one element per delta (or one element for every value),
  weight controls, reorderable table wrapper, "add another item" button
- extract_form_values(): see ValueExtractionService
- flag_errors(): see ErrorFlaggingService

Widget types never subclass FieldWidget; they only implement capabilities.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

# Registers the built-in widget types
import pyqt_fieldform.widgets  # noqa: F401
from pyqt_fieldform.protocols.form_config import get_form_config
from pyqt_fieldform.services.add_more_service import AddMoreService
from pyqt_fieldform.services.error_flagging_service import ErrorFlaggingService
from pyqt_fieldform.services.value_extraction_service import ValueExtractionService

from .alter_hooks import WIDGET_FORM_HOOK, WidgetAlterContext, WidgetAlterRegistry, widget_type_hook
from .field_types import FieldDefinition, FieldInstance, FieldableEntity, Item
from .form_state import FieldError, FieldRenderState, FormState, get_field_state, set_field_state
from .render_tree import RenderElement, check_plain, html_class
from .widget_dispatcher import WidgetDispatcher
from .widget_registry import WidgetDefinition, get_widget_definition

logger = logging.getLogger(__name__)

# Theme of the reorderable multi-value table
MULTIPLE_VALUE_THEME = "field_multiple_value_form"


class FieldWidget:
    """A widget type configured for one field instance."""

    def __init__(self, plugin_id: str, field: FieldDefinition, instance: FieldInstance,
                 settings: Optional[Dict[str, Any]] = None, weight: int = 0):
        self.plugin_id = plugin_id
        self.definition: WidgetDefinition = get_widget_definition(plugin_id)
        self.field = field
        self.instance = instance
        self.settings = dict(settings or {})
        self.weight = weight
        self.implementation = self.definition.widget_class()

    @classmethod
    def from_instance(cls, field: FieldDefinition, instance: FieldInstance) -> 'FieldWidget':
        """Create the widget assigned to an instance."""
        if instance.widget is None:
            raise ValueError(f"Field instance '{instance.field_name}' has no widget assigned")
        widget = instance.widget
        return cls(widget.type, field, instance, widget.settings, widget.weight)

    # ========== SETTINGS ==========

    def get_settings(self) -> Dict[str, Any]:
        """Widget settings merged over the widget type defaults."""
        merged = dict(self.definition.default_settings)
        merged.update(self.settings)
        return merged

    def get_setting(self, key: str, default: Any = None) -> Any:
        return self.get_settings().get(key, default)

    # ========== CAPABILITY DISPATCH ==========

    def form_element(self, items: List[Item], delta: int, element: RenderElement, langcode: str,
                     form: RenderElement, form_state: FormState) -> Optional[RenderElement]:
        return WidgetDispatcher.form_element(
            self.implementation, self, items, delta, element, langcode, form, form_state
        )

    def settings_form(self, form: RenderElement, form_state: FormState) -> RenderElement:
        return WidgetDispatcher.settings_form(self.implementation, self, form, form_state)

    def error_element(self, element: RenderElement, error: FieldError, form: RenderElement,
                      form_state: FormState) -> RenderElement:
        return WidgetDispatcher.error_element(
            self.implementation, self, element, error, form, form_state
        )

    def massage_form_values(self, values: Any, form: RenderElement, form_state: FormState) -> Any:
        return WidgetDispatcher.massage_form_values(
            self.implementation, self, values, form, form_state
        )

    # ========== BUILD ==========

    def build_form(self, entity: FieldableEntity, langcode: str, items: List[Item],
                   form: RenderElement, form_state: FormState,
                   get_delta: Optional[int] = None) -> RenderElement:
        """
        Build the widget container for the field.

        Args:
            entity: Entity being edited
            langcode: Language of the values
            items: Stored items
            form: Form the widget is built into (must carry ``#parents``)
            form_state: State of the current cycle
            get_delta: Build only this delta

        Returns:
            ``{field_name: container}``
        """
        field_name = self.field.field_name
        parents = form.setdefault("#parents", [])

        if get_field_state(parents, field_name, langcode, form_state) is None:
            field_state = FieldRenderState(
                field=self.field,
                instance=self.instance,
                items_count=max(len(items), 1),
            )
            set_field_state(parents, field_name, langcode, form_state, field_state)
            logger.debug(f"Created render state for {field_name}/{langcode} "
                         f"with {field_state.items_count} item(s)")

        elements: RenderElement = {}

        # The widget handles every value itself, or one delta was requested:
        # build a single element.
        if get_delta is not None or self.definition.multiple_values:
            delta = get_delta if get_delta is not None else 0
            element = {
                "#title": check_plain(self.instance.label),
                "#description": self._description(),
            }
            element = self._form_single_element(entity, items, delta, langcode, element, form, form_state)
            if element:
                if get_delta is not None:
                    elements[delta] = element
                else:
                    # Structure is owned by the widget type, merge it as is
                    elements = element
        else:
            elements = self._form_multiple_elements(entity, items, langcode, form, form_state)

        elements.setdefault("#after_build", []).append(AddMoreService.element_after_build)
        elements["#field_name"] = field_name
        elements["#language"] = langcode
        elements["#field_parents"] = list(parents)

        container: RenderElement = {
            "#type": "container",
            "#attributes": {
                "class": [
                    "field-type-" + html_class(self.field.type),
                    "field-name-" + html_class(field_name),
                    "field-widget-" + html_class(self.plugin_id),
                ],
            },
            "#weight": self.weight,
            "#tree": True,
            # Access the field's elements when the langcode is unknown
            "#language": langcode,
            langcode: elements,
            "#access": self._check_access(entity),
        }
        return {field_name: container}

    def _form_multiple_elements(self, entity: FieldableEntity, items: List[Item], langcode: str,
                                form: RenderElement, form_state: FormState) -> RenderElement:
        """
        Build one element per delta.

        Handles generic features of multiple fields:
        - number of slots
        - "add another item" button
        - table display and drag-and-drop reordering
        """
        config = get_form_config()
        field_name = self.field.field_name
        parents = form["#parents"]

        if self.field.is_unlimited:
            field_state = get_field_state(parents, field_name, langcode, form_state)
            slot_count = max(field_state.items_count, 1)
        else:
            slot_count = max(self.field.cardinality, 1)
        max_delta = slot_count - 1
        is_multiple = self.field.is_multiple

        id_prefix = "-".join(str(part) for part in list(parents) + [field_name])
        wrapper_id = form_state.html_id(id_prefix + "-add-more-wrapper")

        title = check_plain(self.instance.label)
        description = self._description()

        elements: RenderElement = {}
        for delta in range(slot_count):
            # Title and description of multiple fields belong to the table
            element = {
                "#title": "" if is_multiple else title,
                "#description": "" if is_multiple else description,
            }
            if is_multiple:
                element["#required"] = False
            element = self._form_single_element(entity, items, delta, langcode, element, form, form_state)
            if not element:
                continue

            if is_multiple:
                # '_weight' avoids clashing with elements defined by the widget
                default_weight = delta
                if delta < len(items) and isinstance(items[delta], dict) and "_weight" in items[delta]:
                    default_weight = items[delta]["_weight"]
                element["_weight"] = {
                    "#type": "weight",
                    "#title": config.weight_title_template.format(number=delta + 1),
                    "#title_display": "invisible",
                    # Range of the weight select
                    "#delta": max_delta,
                    "#default_value": default_weight,
                    "#weight": 100,
                }
            elements[delta] = element

        if not elements:
            return elements

        elements.update({
            "#theme": MULTIPLE_VALUE_THEME,
            "#field_name": field_name,
            "#cardinality": self.field.cardinality,
            "#required": self.instance.required,
            "#title": title,
            "#description": description,
            "#prefix": f'<div id="{wrapper_id}">',
            "#suffix": "</div>",
            "#max_delta": max_delta,
        })

        if self.field.is_unlimited and not form_state.programmed:
            elements["add_more"] = {
                "#type": "submit",
                "#name": id_prefix.replace("-", "_") + "_add_more",
                "#value": config.add_more_label,
                "#attributes": {"class": ["field-add-more-submit"]},
                "#limit_validation_errors": [list(parents) + [field_name, langcode]],
                "#submit": [AddMoreService.submit],
                "#ajax": {
                    "callback": AddMoreService.ajax,
                    "wrapper": wrapper_id,
                    "effect": "fade",
                },
            }

        return elements

    def _form_single_element(self, entity: FieldableEntity, items: List[Item], delta: int,
                             langcode: str, element: RenderElement, form: RenderElement,
                             form_state: FormState) -> Optional[RenderElement]:
        """Build the element of one slot and run the alter hooks on it."""
        defaults = {
            "#entity_type": entity.entity_type,
            "#bundle": entity.bundle,
            "#entity": entity,
            "#field_name": self.field.field_name,
            "#language": langcode,
            "#field_parents": list(form["#parents"]),
            "#columns": list(self.field.columns),
            # Only the first slot is required
            "#required": delta == 0 and self.instance.required,
            "#delta": delta,
            "#weight": delta,
        }
        for key, value in defaults.items():
            element.setdefault(key, value)

        element = self.form_element(items, delta, element, langcode, form, form_state)
        if not element:
            return None

        context = WidgetAlterContext(
            form=form,
            field=self.field,
            instance=self.instance,
            langcode=langcode,
            items=items,
            delta=delta,
            is_default_value_form=bool(getattr(entity, "field_ui_default_value", False)),
        )
        return WidgetAlterRegistry.alter(
            [WIDGET_FORM_HOOK, widget_type_hook(self.plugin_id)], element, form_state, context
        )

    def _description(self) -> str:
        description_filter = get_form_config().description_filter
        description = self.instance.description or ""
        return description_filter(description) if description_filter else description

    def _check_access(self, entity: FieldableEntity) -> bool:
        field_access = get_form_config().field_access
        if field_access is None:
            return True
        return bool(field_access("edit", self.field, entity))

    # ========== SUBMIT ==========

    def extract_form_values(self, entity: FieldableEntity, langcode: str, items: List[Item],
                            form: RenderElement, form_state: FormState) -> List[Item]:
        """Replace ``items`` in place with the submitted items; returns ``items``."""
        return ValueExtractionService.extract_form_values(self, langcode, items, form, form_state)

    def flag_errors(self, entity: FieldableEntity, langcode: str, items: List[Item],
                    form: RenderElement, form_state: FormState) -> None:
        """Report recorded validation errors on the rendered slots."""
        ErrorFlaggingService.flag_errors(self, langcode, form, form_state)

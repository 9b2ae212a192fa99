"""
Widget type capability ABCs.

Defines explicit contracts that field widget types implement, eliminating duck
typing in favor of fail-loud inheritance-based architecture.

Design Philosophy:
- Explicit inheritance over duck typing
- Fail-loud over fail-silent
- Multiple inheritance for composable capabilities

A widget type only supplies the per-slot pieces. The shared multi-value build,
value extraction and error flagging algorithms live in
``pyqt_fieldform.forms.field_widget.FieldWidget`` and the services layer, and
talk to widget types exclusively through these ABCs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from pyqt_fieldform.forms.field_widget import FieldWidget
    from pyqt_fieldform.forms.form_state import FieldError, FormState


class SlotElementBuilder(ABC):
    """
    ABC for widget types that render one form slot.

    Every registered widget type must implement this.
    """

    @abstractmethod
    def form_element(
        self,
        widget: 'FieldWidget',
        items: List[Dict[str, Any]],
        delta: int,
        element: Dict[str, Any],
        langcode: str,
        form: Dict[str, Any],
        form_state: 'FormState',
    ) -> Optional[Dict[str, Any]]:
        """
        Build the render element for one delta.

        Args:
            widget: The configured field widget (field, instance, settings)
            items: Stored items of the field
            delta: Slot being rendered; for multiple-values widget types the
                whole item list is rendered into this one element
            element: Base element already carrying the shared properties
                (``#title``, ``#required``, ``#delta`` ...)
            langcode: Language of the field values
            form: The form the element is being built into
            form_state: State of the current build cycle

        Returns:
            The element, or None/empty dict to omit the slot.
        """
        pass


class SettingsFormProvider(ABC):
    """
    ABC for widget types exposing a configuration form.

    Widget types without this capability get an empty settings form.
    """

    @abstractmethod
    def settings_form(
        self,
        widget: 'FieldWidget',
        form: Dict[str, Any],
        form_state: 'FormState',
    ) -> Dict[str, Any]:
        """
        Build the widget settings form.

        Returns:
            Render tree of settings elements keyed by setting name.
        """
        pass


class ErrorElementLocator(ABC):
    """
    ABC for widget types that narrow a validation error to a sub-element.

    Widget types without this capability report errors on the whole slot.
    """

    @abstractmethod
    def error_element(
        self,
        widget: 'FieldWidget',
        element: Dict[str, Any],
        error: 'FieldError',
        form: Dict[str, Any],
        form_state: 'FormState',
    ) -> Dict[str, Any]:
        """
        Pick the element an error should be reported on.

        Args:
            element: The slot element (or the whole element for
                multiple-values widget types)
            error: The validation error being reported

        Returns:
            ``element`` or one of its children.
        """
        pass


class FormValueMassager(ABC):
    """
    ABC for widget types whose submitted shape differs from the item shape.

    Widget types without this capability pass submitted values through.
    """

    @abstractmethod
    def massage_form_values(
        self,
        widget: 'FieldWidget',
        values: Any,
        form: Dict[str, Any],
        form_state: 'FormState',
    ) -> Any:
        """
        Turn raw submitted values into field items.

        Returns:
            A list of items, or a mapping of delta to item.
        """
        pass

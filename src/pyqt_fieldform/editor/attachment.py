"""
Editor attachment controller.

For every format selector in a scope, attaches the editor configured for the
selected format to the selector's text field, switches editors when the
selection changes and serializes editor content when the enclosing form is
submitted.

Per control, the controller is a two-state machine: no editor, or the editor
of the active format. Activation state lives on the control itself
(``FormatSelector.editor_state``), so re-running attach() on the same scope
never attaches a second editor.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional

from PyQt6.QtWidgets import QWidget

from pyqt_fieldform.protocols.editor_protocols import (
    ChangeSignalEmitter, DetachTrigger, FormatSelector,
)

from .dispatch import editor_attach, editor_detach
from .form import EditorForm, SubmitEvent, enclosing_form
from .settings import EditorSettings

logger = logging.getLogger(__name__)

# Debug flag for verbose attach/detach logging
DEBUG_EDITOR = False


@dataclass
class ControlState:
    """Activation state of one format selector."""
    field: QWidget
    active_format_id: Optional[str]
    settings: EditorSettings
    on_change: Optional[Callable[[Any], None]] = None
    form: Optional[EditorForm] = None
    on_submit: Optional[Callable[[SubmitEvent], None]] = None


class EditorAttachmentController:
    """Singleton behavior binding editors to text fields."""

    _instance = None

    @classmethod
    def instance(cls) -> 'EditorAttachmentController':
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    # ========== BEHAVIOR ==========

    def attach(self, context: QWidget, settings: Optional[Mapping[str, Any]]) -> None:
        """Activate every format selector in context that is not active yet."""
        editor_settings = EditorSettings.from_settings(settings)
        # No editor settings, no editors to enable
        if editor_settings is None:
            return

        for control in self.find_format_selectors(context):
            if control.editor_state is not None:
                continue
            self._activate(control, editor_settings)

    def detach(self, context: QWidget, settings: Optional[Mapping[str, Any]],
               trigger: Optional[str] = None) -> None:
        """
        Detach the editors of the active format selectors in context.

        Args:
            trigger: None destroys the editors and deactivates the selectors;
                "serialize" only flushes editor content into the fields
        """
        editor_settings = EditorSettings.from_settings(settings)
        serialize = trigger == DetachTrigger.SERIALIZE

        for control in self.find_format_selectors(context):
            state = control.editor_state
            if state is None:
                continue
            if not serialize:
                self._deactivate(control)
            formats = editor_settings or state.settings
            if DEBUG_EDITOR:
                logger.info(f"DETACH {state.field.objectName()} format={state.active_format_id} "
                            f"trigger={trigger}")
            editor_detach(state.field, formats.format_config(state.active_format_id), trigger)

    # ========== LOOKUPS ==========

    @staticmethod
    def find_format_selectors(context: QWidget) -> List[FormatSelector]:
        """Format selectors among the descendants of context."""
        return [child for child in context.findChildren(QWidget) if isinstance(child, FormatSelector)]

    @staticmethod
    def find_field_for_format_selector(control: FormatSelector) -> Optional[QWidget]:
        """Text field whose object name the selector references."""
        field_id = control.editor_for()
        if not field_id:
            return None
        return control.window().findChild(QWidget, field_id)

    # ========== STATE TRANSITIONS ==========

    def _activate(self, control: FormatSelector, settings: EditorSettings) -> None:
        field = self.find_field_for_format_selector(control)
        if field is None:
            logger.warning(f"No text field '{control.editor_for()}' for format selector "
                           f"{type(control).__name__}, leaving it inactive")
            return

        state = ControlState(field=field, active_format_id=control.get_format_id(), settings=settings)
        control.editor_state = state
        if DEBUG_EDITOR:
            logger.info(f"ATTACH {field.objectName()} format={state.active_format_id}")

        # Attach right away when the active format has an editor
        editor_attach(field, settings.format_config(state.active_format_id))

        if isinstance(control, ChangeSignalEmitter):
            state.on_change = lambda new_format_id: self._on_format_change(control, new_format_id)
            control.connect_change_signal(state.on_change)

        form = enclosing_form(control)
        if form is not None:
            state.form = form
            state.on_submit = lambda event: self._on_form_submit(control, event)
            form.submitted.connect(state.on_submit)

    def _deactivate(self, control: FormatSelector) -> None:
        state = control.editor_state
        if state.on_change is not None and isinstance(control, ChangeSignalEmitter):
            control.disconnect_change_signal(state.on_change)
        if state.form is not None and state.on_submit is not None:
            try:
                state.form.submitted.disconnect(state.on_submit)
            except TypeError:
                # Signal not connected - ignore
                pass
        control.editor_state = None

    def _on_format_change(self, control: FormatSelector, new_format_id: Optional[str]) -> None:
        state = control.editor_state
        if state is None:
            return
        # A manually re-emitted change must not attach twice
        if new_format_id == state.active_format_id:
            return

        if DEBUG_EDITOR:
            logger.info(f"SWITCH {state.field.objectName()} "
                        f"{state.active_format_id} -> {new_format_id}")
        editor_detach(state.field, state.settings.format_config(state.active_format_id))
        state.active_format_id = new_format_id
        editor_attach(state.field, state.settings.format_config(new_format_id))

    def _on_form_submit(self, control: FormatSelector, event: SubmitEvent) -> None:
        # Cancelled submits keep the editor as is
        if event.default_prevented:
            return
        state = control.editor_state
        if state is None:
            return
        editor_detach(
            state.field,
            state.settings.format_config(state.active_format_id),
            DetachTrigger.SERIALIZE,
        )

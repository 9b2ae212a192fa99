"""
Editor attachment.

Attaches the rich-text editor configured for the selected text format to
each text field, switches editors when the format changes and serializes
editor content before the enclosing form submits.

Importing this package registers the attachment controller as the
``editor`` behavior.
"""

from .attachment import ControlState, EditorAttachmentController
from .behaviors import BEHAVIORS, attach_behaviors, detach_behaviors, register_behavior
from .dispatch import editor_attach, editor_detach
from .editors import RichTextEditor
from .form import EditorForm, SubmitEvent, enclosing_form
from .registry import EDITOR_IMPLEMENTATIONS, get_editor, register_editor
from .settings import EditorSettings

register_behavior("editor", EditorAttachmentController.instance())

__all__ = [
    "BEHAVIORS",
    "ControlState",
    "EDITOR_IMPLEMENTATIONS",
    "EditorAttachmentController",
    "EditorForm",
    "EditorSettings",
    "RichTextEditor",
    "SubmitEvent",
    "attach_behaviors",
    "detach_behaviors",
    "editor_attach",
    "editor_detach",
    "enclosing_form",
    "get_editor",
    "register_behavior",
    "register_editor",
]

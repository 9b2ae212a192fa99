"""
Per-cycle form state.

FormState is the explicit state context of one build/submit cycle. It is
passed to every operation and discarded with the request. Field render state
lives inside it, keyed by (form parents, field name, language).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence, Tuple

from .render_tree import RenderElement, element_children, unique_html_id

if TYPE_CHECKING:
    from .field_types import FieldDefinition, FieldInstance

logger = logging.getLogger(__name__)

FieldStateKey = Tuple[Tuple[Any, ...], str, str]


@dataclass
class FieldError:
    """A validation error recorded against one delta."""
    code: str
    message: str


@dataclass
class FieldRenderState:
    """Render bookkeeping of one field within one form."""
    field: 'FieldDefinition'
    instance: 'FieldInstance'
    items_count: int = 0
    # Location of the widget elements in the complete form, set after build
    array_parents: List[Any] = field(default_factory=list)
    errors: Dict[int, List[FieldError]] = field(default_factory=dict)
    # post-extraction delta -> submitted delta
    original_deltas: Dict[int, int] = field(default_factory=dict)

    def add_error(self, delta: int, error: FieldError) -> None:
        self.errors.setdefault(delta, []).append(error)


@dataclass
class FormState:
    """State of one build/submit cycle."""
    values: Dict[Any, Any] = field(default_factory=dict)
    programmed: bool = False
    rebuild: bool = False
    complete_form: RenderElement = field(default_factory=dict)
    triggering_element: Optional[RenderElement] = None
    # Reported errors keyed by element name ("a][b][0")
    errors: Dict[str, str] = field(default_factory=dict)
    field_states: Dict[FieldStateKey, FieldRenderState] = field(default_factory=dict)
    html_ids: Dict[str, int] = field(default_factory=dict)

    def set_error(self, element: RenderElement, message: str) -> None:
        """Report an error against an element. The first error per element wins."""
        name = "][".join(str(part) for part in element.get("#parents", []))
        if name in self.errors:
            logger.debug(f"Error already set for '{name}', ignoring: {message}")
            return
        self.errors[name] = message
        logger.debug(f"Form error on '{name}': {message}")

    def get_errors(self) -> Dict[str, str]:
        return dict(self.errors)

    def html_id(self, name: str) -> str:
        return unique_html_id(self.html_ids, name)


def _state_key(parents: Sequence[Any], field_name: str, langcode: str) -> FieldStateKey:
    return tuple(parents), field_name, langcode


def get_field_state(parents: Sequence[Any], field_name: str, langcode: str,
                    form_state: FormState) -> Optional[FieldRenderState]:
    """Return the render state of a field, or None before its first build."""
    return form_state.field_states.get(_state_key(parents, field_name, langcode))


def set_field_state(parents: Sequence[Any], field_name: str, langcode: str,
                    form_state: FormState, field_state: FieldRenderState) -> None:
    form_state.field_states[_state_key(parents, field_name, langcode)] = field_state


# ========== FORM FINALIZATION ==========

def finalize_form(form: RenderElement, form_state: FormState) -> RenderElement:
    """
    Finalize a built form tree.

    Assigns ``#parents`` and ``#array_parents`` to every element, propagates a
    denied ``#access`` to children, runs ``#after_build`` callbacks bottom-up
    and stores the result as ``form_state.complete_form``.
    """
    form.setdefault("#parents", [])
    form.setdefault("#array_parents", [])
    form = _process_element(form, form_state)
    form_state.complete_form = form
    return form


def _process_element(element: RenderElement, form_state: FormState) -> RenderElement:
    for key in element_children(element):
        child = element[key]
        if not isinstance(child, dict):
            continue
        child["#array_parents"] = element["#array_parents"] + [key]
        if "#parents" not in child:
            if element.get("#tree"):
                child["#parents"] = element["#parents"] + [key]
            else:
                child["#parents"] = [key]
        if "#tree" not in child and element.get("#tree"):
            child["#tree"] = True
        if element.get("#access") is False and "#access" not in child:
            child["#access"] = False
        element[key] = _process_element(child, form_state)

    for callback in element.get("#after_build", []):
        element = callback(element, form_state)
    return element

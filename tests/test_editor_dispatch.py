"""Tests for the editor registry, dispatch, settings and behaviors."""

import pytest
from PyQt6.QtWidgets import QWidget

from pyqt_fieldform.editor import (
    BEHAVIORS, EDITOR_IMPLEMENTATIONS, EditorAttachmentController, EditorForm, EditorSettings,
    attach_behaviors, detach_behaviors, editor_attach, editor_detach, enclosing_form, get_editor,
    register_editor,
)
from pyqt_fieldform.protocols import TextEditor


class RecordingEditor(TextEditor):
    def __init__(self):
        self.calls = []

    def attach(self, field, format_config):
        self.calls.append(("attach", field, format_config))

    def detach(self, field, format_config, trigger=None):
        self.calls.append(("detach", field, format_config, trigger))


class RecordingBehavior:
    def __init__(self):
        self.calls = []

    def attach(self, context, settings):
        self.calls.append(("attach", context, settings))

    def detach(self, context, settings, trigger=None):
        self.calls.append(("detach", context, settings, trigger))


@pytest.fixture
def recorder(monkeypatch):
    editor = RecordingEditor()
    monkeypatch.setitem(EDITOR_IMPLEMENTATIONS, "recording", editor)
    return editor


def test_register_editor_requires_text_editor():
    with pytest.raises(TypeError):
        register_editor("broken", object())

    assert get_editor("broken") is None


def test_register_editor(monkeypatch):
    monkeypatch.delitem(EDITOR_IMPLEMENTATIONS, "test_registered", raising=False)
    editor = RecordingEditor()

    register_editor("test_registered", editor)
    try:
        assert get_editor("test_registered") is editor
    finally:
        del EDITOR_IMPLEMENTATIONS["test_registered"]


def test_attach_dispatches_to_named_editor(recorder):
    config = {"editor": "recording", "toolbar": "full"}

    editor_attach("field", config)
    editor_detach("field", config, "serialize")
    editor_detach("field", config)

    assert recorder.calls == [
        ("attach", "field", config),
        ("detach", "field", config, "serialize"),
        ("detach", "field", config, None),
    ]


@pytest.mark.parametrize("config", [None, {}, {"editor": ""}, {"editor": "not_registered"}])
def test_dispatch_without_usable_editor_does_nothing(recorder, config):
    editor_attach("field", config)
    editor_detach("field", config)

    assert recorder.calls == []


def test_settings_parsing():
    assert EditorSettings.from_settings(None) is None
    assert EditorSettings.from_settings({}) is None
    assert EditorSettings.from_settings({"other": 1}) is None

    settings = EditorSettings.from_settings({"editor": {"formats": {"full_html": {"editor": "x"}}}})
    assert settings.format_config("full_html") == {"editor": "x"}
    assert settings.format_config("plain_text") is None
    assert settings.format_config(None) is None

    assert EditorSettings.from_settings({"editor": settings}) is settings


def test_editor_behavior_is_registered():
    assert BEHAVIORS["editor"] is EditorAttachmentController.instance()


def test_behaviors_run_in_registration_order(qapp, monkeypatch):
    first, second = RecordingBehavior(), RecordingBehavior()
    monkeypatch.setitem(BEHAVIORS, "test_first", first)
    monkeypatch.setitem(BEHAVIORS, "test_second", second)
    context = QWidget()
    settings = {"some": "settings"}

    attach_behaviors(context, settings)
    detach_behaviors(context, settings, "serialize")

    assert first.calls == [("attach", context, settings), ("detach", context, settings, "serialize")]
    assert second.calls == first.calls


def test_enclosing_form(qapp):
    form = EditorForm()
    inner = QWidget(form)
    leaf = QWidget(inner)

    assert enclosing_form(leaf) is form
    assert enclosing_form(form) is None
    assert enclosing_form(QWidget()) is None


def test_form_submit_can_be_cancelled(qapp):
    form = EditorForm()
    accepted = []
    form.accepted.connect(lambda: accepted.append(True))

    assert form.submit() is True
    form.submitted.connect(lambda event: event.prevent_default())
    assert form.submit() is False
    assert accepted == [True]

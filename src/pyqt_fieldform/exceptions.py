"""Package exceptions."""


class WidgetRegistrationError(TypeError):
    """Raised when a widget type class cannot be registered."""


class UnknownWidgetError(KeyError):
    """Raised when no widget type is registered under the requested id."""


class FieldStateError(LookupError):
    """Raised when a field has no render state in the current form state."""

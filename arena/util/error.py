"""Errors raised while wiring the application together."""


class UtilError(Exception):
    """Base error for the util layer."""


class DependencyInjectionError(UtilError):
    """No provider implementation is registered for a component."""

    def __init__(self, component: str, kind: str):
        self.component = component
        self.kind = kind
        super().__init__(f"No {kind} provider registered for component '{component}'")

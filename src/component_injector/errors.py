"""Exceptions raised while indexing components and dispatching targets."""

from typing import Optional

from component_injector.domain import Handler

__all__ = [
    "DispatchError",
    "UnresolvedTargetType",
    "InvocationFailure",
    "AmbiguousHandlerError",
]


class DispatchError(Exception):
    """Base class for failures of a single dispatch call.

    Attributes:
        kind: Short machine-readable description of the failure.
        target_type: The concrete runtime type of the dispatched target.
        component_type: The type of the component the handler was sought on.
    """

    kind = "dispatch error"

    def __init__(self, message: str, target_type: type, component_type: type):
        super().__init__(message)
        self.target_type = target_type
        self.component_type = component_type


class UnresolvedTargetType(DispatchError):
    """Raised when neither the target's type nor any of its ancestors has a handler."""

    kind = "unresolved target type"

    def __init__(self, target_type: type, component_type: type):
        super().__init__(
            f"No {target_type!r} injecting method exists in {component_type!r} component",
            target_type,
            component_type,
        )


class InvocationFailure(DispatchError):
    """Raised when the resolved handler raised while being invoked.

    Attributes:
        handler: The handler that raised.
        handler_name: Its name on the component.

    The original exception is available as ``__cause__``.
    """

    kind = "invocation failed"

    def __init__(
        self,
        handler: Handler,
        target_type: type,
        component_type: type,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(
            f"Handler {handler.name} of {component_type!r} failed for {target_type!r}: {cause!r}",
            target_type,
            component_type,
        )
        self.handler = handler
        self.handler_name = handler.name


class AmbiguousHandlerError(Exception):
    """Raised at construction when two handlers accept the same type and duplicates are rejected."""

    pass

"""Domain models used throughout the package."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable


class Binding(Enum):
    """How a handler's underlying function receives the component."""

    INSTANCE = "instance"
    STATIC = "static"
    CLASS = "class"
    EXPLICIT = "explicit"


@dataclass(frozen=True)
class Handler:
    """A single-argument operation eligible for dispatch.

    Attributes:
        name: The attribute name on the component type, or the function name for
            explicitly registered handlers.
        accepted_type: The declared type of the handler's single parameter.
        function: The raw function, unbound from any instance.
        binding: How ``function`` receives the component when invoked.
    """

    name: str
    accepted_type: type
    function: Callable
    binding: Binding

    def invoke(self, component: Any, target: Any) -> Any:
        if self.binding is Binding.STATIC:
            return self.function(target)
        if self.binding is Binding.EXPLICIT:
            return self.function(component, target)
        # Bound through the instance, picking up overrides on its class.
        return getattr(component, self.name)(target)

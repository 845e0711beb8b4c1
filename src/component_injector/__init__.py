"""Dispatch objects to the most specific handler a component declares for them.

A component is any object whose methods take a single, type-annotated argument,
for example a dependency injection component with one ``inject`` method per
concrete screen or activity class. :class:`ComponentInjector` indexes those methods
once and, given a target, invokes the handler declared for the target's runtime
type or, failing that, for its nearest ancestor. Injection code can then live in
a common base class instead of being repeated in every subclass.

Basic Usage:
    >>> from component_injector import ComponentInjector
    >>>
    >>> class AppComponent:
    ...     def inject(self, screen: MainScreen) -> None:
    ...         screen.repository = Repository()
    >>>
    >>> injector = ComponentInjector(AppComponent, AppComponent())
    >>> injector.inject(SubclassOfMainScreen())  # uses AppComponent.inject

The package consists of these modules:
    - injector: the injector itself and the abstract Injector interface
    - method_index: handler discovery and explicit handler tables
    - lineage: cached ancestry of target types
    - domain: the Handler model
    - config: indexing settings
    - errors: package exceptions
"""

from component_injector.config import InjectorConfig
from component_injector.domain import Binding, Handler
from component_injector.errors import (
    AmbiguousHandlerError,
    DispatchError,
    InvocationFailure,
    UnresolvedTargetType,
)
from component_injector.injector import ComponentInjector, Injector
from component_injector.method_index import HandlerTable, index_component_methods

__all__ = [
    "AmbiguousHandlerError",
    "Binding",
    "ComponentInjector",
    "DispatchError",
    "Handler",
    "HandlerTable",
    "Injector",
    "InjectorConfig",
    "InvocationFailure",
    "UnresolvedTargetType",
    "index_component_methods",
]

"""Dispatch of target objects to the most specific handler on a component.

Example:
    >>> class Component:
    ...     def inject_main(self, screen: MainScreen) -> None: ...
    >>>
    >>> class BaseScreen:
    ...     def on_create(self, injector: Injector):
    ...         injector.inject(self)
    >>>
    >>> class MainScreen(BaseScreen): ...
    >>> class DetailScreen(MainScreen): ...
    >>>
    >>> injector = ComponentInjector(Component, Component())
    >>> DetailScreen().on_create(injector)  # handled by inject_main
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar, Union

from component_injector.config import InjectorConfig
from component_injector.domain import Handler
from component_injector.errors import InvocationFailure, UnresolvedTargetType
from component_injector.lineage import type_lineage
from component_injector.method_index import (
    HandlerIndex,
    HandlerTable,
    index_component_methods,
)

__all__ = ["Injector", "ComponentInjector"]

T = TypeVar("T")


class Injector(ABC):
    """Something that can inject into a target object."""

    @abstractmethod
    def inject(self, target: Any) -> Any:
        pass


class ComponentInjector(Injector, Generic[T]):
    """Registry of a component's handlers, dispatching targets by runtime type.

    The handler index is built once, on construction, and never changes. Each call
    to :meth:`inject` walks the target's type and its ancestors, nearest first, and
    invokes the first handler found with the target as its only argument.

    Construction never fails with the default configuration: a component without
    eligible methods yields an empty injector, and failures surface on dispatch.

    Args:
        component_type: The class used to enumerate handler methods.
        component: The instance handlers are invoked against.
        config: Indexing settings; defaults to :class:`InjectorConfig()`.
        handlers: An explicit handler table, or a mapping of accepted type to
            ``function(component, target)``, used instead of
            enumerating ``component_type``'s methods.
    """

    def __init__(
        self,
        component_type: type[T],
        component: T,
        *,
        config: Optional[InjectorConfig] = None,
        handlers: Optional[Union[HandlerTable, Mapping[type, Callable]]] = None,
    ):
        self._component_type = component_type
        self._component = component
        self._handlers = _make_index(component_type, config, handlers)

    @classmethod
    def from_component(
        cls, component: T, *, config: Optional[InjectorConfig] = None
    ) -> "ComponentInjector[T]":
        """Create an injector that indexes the runtime type of ``component``."""
        return cls(type(component), component, config=config)

    @property
    def component(self) -> T:
        return self._component

    def get_component(self) -> T:
        return self._component

    @property
    def component_type(self) -> type[T]:
        return self._component_type

    @property
    def handled_types(self) -> frozenset[type]:
        return frozenset(self._handlers)

    def resolve(self, target_type: type) -> Handler:
        """Find the handler for the nearest type in ``target_type``'s lineage.

        Raises:
            UnresolvedTargetType: If no type in the lineage has a handler.
        """
        for candidate in type_lineage(target_type):
            handler = self._handlers.get(candidate)
            if handler is not None:
                return handler
        raise UnresolvedTargetType(target_type, self._component_type)

    def handles(self, target_type: type) -> bool:
        return any(t in self._handlers for t in type_lineage(target_type))

    def inject(self, target: Any) -> Any:
        """Invoke the most specific handler for ``target``'s runtime type.

        Args:
            target: The object to dispatch. Passed through to the handler unchanged.

        Returns:
            Whatever the handler returns.

        Raises:
            UnresolvedTargetType: If no handler accepts the target's type or any of
                its ancestors.
            InvocationFailure: If the handler raised. The original exception is
                chained as the cause; no other handler is tried.
        """
        target_type = type(target)
        handler = self.resolve(target_type)
        try:
            return handler.invoke(self._component, target)
        except Exception as e:
            raise InvocationFailure(
                handler, target_type, self._component_type, e
            ) from e

    dispatch = inject

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._component_type.__name__}, "
            f"handlers={len(self._handlers)})"
        )


def _make_index(
    component_type: type,
    config: Optional[InjectorConfig],
    handlers: Optional[Union[HandlerTable, Mapping[type, Callable]]],
) -> HandlerIndex:
    if handlers is None:
        return index_component_methods(component_type, config)
    if isinstance(handlers, HandlerTable):
        return handlers.build()
    return HandlerTable.from_mapping(handlers, config).build()

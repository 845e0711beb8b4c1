"""Construction-time indexing of a component's handler methods.

A handler is any callable attribute of the component type that takes exactly one
positional argument besides the bound ``self``/``cls``. The index maps the declared
type of that argument to the handler, so that dispatch can look handlers up by the
runtime type of a target.

Handlers can also be declared explicitly through a :class:`HandlerTable` when the
component does not annotate its methods, or when handlers live outside the component.
"""

import inspect
import logging
from types import MappingProxyType
from typing import (
    Annotated,
    Any,
    Callable,
    Mapping,
    Optional,
    get_args,
    get_origin,
    get_type_hints,
)

from component_injector.config import InjectorConfig
from component_injector.domain import Binding, Handler
from component_injector.errors import AmbiguousHandlerError

__all__ = ["HandlerIndex", "HandlerTable", "index_component_methods"]

logger = logging.getLogger(__name__)

HandlerIndex = Mapping[type, Handler]

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def index_component_methods(
    component_type: type, config: Optional[InjectorConfig] = None
) -> HandlerIndex:
    """Build the handler index for a component type.

    Inherited methods are indexed and overriding definitions shadow the ones they
    override. When two handlers accept the same type, the one encountered later
    (declared later, or first declared on a more derived class) is kept unless
    ``config.duplicates`` rejects duplicates.

    Args:
        component_type: The class whose methods are enumerated.
        config: Indexing settings; defaults to :class:`InjectorConfig()`.

    Returns:
        A read-only mapping from accepted type to :class:`Handler`. Empty if the
        component has no eligible methods.

    Raises:
        AmbiguousHandlerError: If two handlers accept the same type and
            ``config.duplicates`` is ``"error"``.

    Example:
        >>> class Component:
        ...     def inject(self, target: Activity) -> None: ...
        >>> index_component_methods(Component)[Activity].name  # "inject"
    """
    config = config or InjectorConfig()
    index: dict[type, Handler] = {}
    for name, attribute in _public_attributes(component_type, config.include_private):
        handler = _make_handler(component_type, name, attribute)
        if handler is not None:
            _add_handler(index, handler, component_type, config.duplicates)

    logger.debug("Indexed %d handlers on %r", len(index), component_type)
    return MappingProxyType(index)


class HandlerTable:
    """Explicit ``type -> handler`` registration table.

    Registered functions take the component as their first argument and the
    target as their second, the same shape as an unbound method.

    Example:
        >>> table = HandlerTable()
        >>> @table.handles(Activity)
        ... def inject_activity(component, activity):
        ...     component.inject(activity)
        >>> injector = ComponentInjector(Component, component, handlers=table)
    """

    def __init__(self, config: Optional[InjectorConfig] = None):
        self._config = config or InjectorConfig()
        self._handlers: dict[type, Handler] = {}

    @classmethod
    def from_mapping(
        cls, functions: Mapping[type, Callable], config: Optional[InjectorConfig] = None
    ) -> "HandlerTable":
        table = cls(config)
        for accepted_type, function in functions.items():
            table.register(accepted_type, function)
        return table

    def register(
        self, accepted_type: type, function: Callable, name: Optional[str] = None
    ) -> "HandlerTable":
        """Register ``function`` as the handler for ``accepted_type``.

        Returns:
            This table, so registrations can be chained.

        Raises:
            TypeError: If ``accepted_type`` is not a class.
            AmbiguousHandlerError: If ``accepted_type`` already has a handler and
                duplicates are rejected.
        """
        if not inspect.isclass(accepted_type):
            raise TypeError(f"{accepted_type!r} is not a class")
        handler = Handler(
            name or getattr(function, "__name__", repr(function)),
            accepted_type,
            function,
            Binding.EXPLICIT,
        )
        _add_handler(self._handlers, handler, None, self._config.duplicates)
        return self

    def handles(self, accepted_type: type) -> Callable:
        """Decorator form of :meth:`register`."""

        def decorator(function: Callable) -> Callable:
            self.register(accepted_type, function)
            return function

        return decorator

    def build(self) -> HandlerIndex:
        return MappingProxyType(dict(self._handlers))

    def __len__(self) -> int:
        return len(self._handlers)


def _public_attributes(component_type: type, include_private: bool):
    """Yield the component's attributes, base classes first.

    Overrides replace the attribute of the same name but keep its position, so
    methods first declared on a subclass are encountered after inherited ones.
    """
    resolved: dict[str, Any] = {}
    for cls in reversed(component_type.__mro__):
        if cls is object:
            continue
        resolved.update(vars(cls))

    for name, attribute in resolved.items():
        if name.startswith("__"):
            continue
        if name.startswith("_") and not include_private:
            continue
        yield name, attribute


def _make_handler(component_type: type, name: str, attribute: Any) -> Optional[Handler]:
    """Create a handler from a raw class attribute, or return None if it is not eligible."""
    if isinstance(attribute, staticmethod):
        function, binding = attribute.__func__, Binding.STATIC
    elif isinstance(attribute, classmethod):
        function, binding = attribute.__func__, Binding.CLASS
    elif inspect.isfunction(attribute):
        function, binding = attribute, Binding.INSTANCE
    else:
        return None

    try:
        parameters = list(inspect.signature(function).parameters.values())
    except (TypeError, ValueError):
        return None
    if binding is not Binding.STATIC:
        parameters = parameters[1:]

    if len(parameters) != 1 or parameters[0].kind not in _POSITIONAL:
        return None

    accepted_type = _accepted_type(function, parameters[0].name)
    if accepted_type is None:
        logger.debug(
            "Skipping %s.%s: parameter %r is not annotated with a class",
            component_type.__name__,
            name,
            parameters[0].name,
        )
        return None
    return Handler(name, accepted_type, function, binding)


def _accepted_type(function: Callable, parameter_name: str) -> Optional[type]:
    try:
        hints = get_type_hints(function, include_extras=True)
    except (NameError, TypeError):
        # Unresolvable forward references; fall back to the raw annotation.
        hints = getattr(function, "__annotations__", {})

    annotation = hints.get(parameter_name)
    if get_origin(annotation) is Annotated:
        annotation = get_args(annotation)[0]
    if inspect.isclass(annotation) and get_origin(annotation) is None:
        return annotation
    return None


def _add_handler(
    index: dict[type, Handler],
    handler: Handler,
    component_type: Optional[type],
    duplicates: str,
) -> None:
    existing = index.get(handler.accepted_type)
    if existing is not None:
        owner = f" on {component_type!r}" if component_type else ""
        message = (
            f"Handlers {existing.name} and {handler.name}{owner} "
            f"both accept {handler.accepted_type!r}"
        )
        if duplicates == "error":
            raise AmbiguousHandlerError(message)
        if duplicates == "warn":
            logger.warning("%s; keeping %s", message, handler.name)
        else:
            logger.debug("%s; keeping %s", message, handler.name)
    index[handler.accepted_type] = handler

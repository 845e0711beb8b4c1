"""Ordered ancestry of a type, used to find the most specific handler."""

__all__ = ["type_lineage"]


def type_lineage(cls: type) -> tuple[type, ...]:
    """Return ``cls`` followed by each of its ancestors, nearest first.

    The order is the method resolution order, so it always ends with ``object``
    and every type appears once. It is computed once, when the class is created,
    and stored on the class itself, so no cache outlives the type.

    Example:
        >>> class A: ...
        >>> class B(A): ...
        >>> type_lineage(B)  # (B, A, object)
    """
    return cls.__mro__

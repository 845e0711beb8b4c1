import gc
import weakref

from component_injector.lineage import type_lineage


class A:
    pass


class B(A):
    pass


class C(B):
    pass


class Mixin:
    pass


class D(Mixin, C):
    pass


def test_lineage_starts_with_the_type_and_ends_with_object():
    assert type_lineage(C) == (C, B, A, object)


def test_lineage_of_object():
    assert type_lineage(object) == (object,)


def test_lineage_follows_method_resolution_order():
    assert type_lineage(D) == (D, Mixin, C, B, A, object)


def test_lineage_is_stable():
    assert type_lineage(C) is type_lineage(C)


def test_lineage_does_not_keep_types_alive():
    def make_type():
        class Transient(B):
            pass

        assert type_lineage(Transient) == (Transient, B, A, object)
        return weakref.ref(Transient)

    reference = make_type()
    gc.collect()

    assert reference() is None

import pytest

from continuum_mechanics_base.registry import DispatchRegistry


class Base:
    pass


class Derived(Base):
    pass


class Other:
    pass


def test_resolve_walks_mro():
    reg = DispatchRegistry("demo", arity=1)

    @reg.register(Base)
    def base_impl(obj):
        return "base"

    assert reg.resolve(Derived()) is base_impl
    assert reg.resolve(Other()) is None
    assert reg.supports(Base())
    assert not reg.supports(Other())


def test_first_argument_takes_precedence():
    reg = DispatchRegistry("demo", arity=2)
    reg.register(Derived, object)(lambda a, b: "derived-any")
    reg.register(Base, Other)(lambda a, b: "base-other")

    assert reg.resolve(Derived(), Other())(None, None) == "derived-any"
    assert reg.resolve(Base(), Other())(None, None) == "base-other"
    assert reg.resolve(Base(), 1) is None


def test_reregistration_replaces_and_unregister_removes():
    reg = DispatchRegistry("demo", arity=1)
    reg.register(Base)(lambda obj: 1)
    reg.register(Base)(lambda obj: 2)
    assert reg.resolve(Base())(None) == 2
    assert reg.registered() == ((Base,),)

    reg.unregister(Base)
    assert reg.resolve(Base()) is None


def test_register_validates_keys():
    reg = DispatchRegistry("demo", arity=2)
    with pytest.raises(TypeError):
        reg.register(Base)
    with pytest.raises(TypeError):
        reg.register(Base, "not a class")
    with pytest.raises(TypeError):
        reg.resolve(Base())
    with pytest.raises(ValueError):
        DispatchRegistry("demo", arity=0)

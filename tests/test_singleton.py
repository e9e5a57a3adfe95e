import pytest

from gltfwriter.singleton import AutoSingleton, Singleton, SingletonError


def test_auto_singleton_created_on_first_access():
    class Registry(AutoSingleton):
        def __init__(self):
            self.items = []

    assert Registry.is_null()
    first = Registry.instance()
    assert not Registry.is_null()
    assert Registry.instance() is first
    assert isinstance(first, Registry)
    assert AutoSingleton.is_null()


def test_auto_singleton_keeps_state():
    class Registry(AutoSingleton):
        def __init__(self):
            self.items = []

    Registry.instance().items.append("a")
    assert Registry.instance().items == ["a"]
    assert AutoSingleton.is_null()


def test_auto_singleton_subclasses_are_separate():
    class Registry(AutoSingleton):
        def __init__(self):
            self.items = []

    class Child(Registry):
        pass

    parent_instance = Registry.instance()
    assert Child.is_null()
    child_instance = Child.instance()
    assert child_instance is not parent_instance
    assert isinstance(child_instance, Child)
    assert AutoSingleton.is_null()


def test_explicit_singleton_lifecycle():
    class Manager(Singleton):
        def __init__(self):
            self.count = 0

    assert Manager.is_null()
    Manager.create_instance()
    assert not Manager.is_null()
    assert Singleton.is_null()
    inst = Manager.instance()
    assert Manager.instance() is inst
    Manager.destroy_instance()
    assert Manager.is_null()


def test_explicit_singleton_double_create_raises():
    class Manager(Singleton):
        def __init__(self):
            self.count = 0

    Manager.create_instance()
    with pytest.raises(SingletonError):
        Manager.create_instance()
    assert Singleton.is_null()


def test_explicit_singleton_instance_before_create_raises():
    class Manager(Singleton):
        def __init__(self):
            self.count = 0

    with pytest.raises(SingletonError):
        Manager.instance()
    with pytest.raises(SingletonError):
        Singleton.instance()


def test_destroy_without_instance_leaves_null():
    class Manager(Singleton):
        def __init__(self):
            self.count = 0

    Manager.destroy_instance()
    assert Manager.is_null()
    assert Singleton.is_null()


def test_recreate_after_destroy_gives_new_object():
    class Manager(Singleton):
        def __init__(self):
            self.count = 0

    Manager.create_instance()
    first = Manager.instance()
    Manager.destroy_instance()
    Manager.create_instance()
    assert Manager.instance() is not first
    assert Singleton.is_null()
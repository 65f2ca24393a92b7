from collections import OrderedDict

import pytest

from object_compare import reflection
from object_compare.errors import InstanceCreationError, MemberNotFoundError


class Profile:
    def __init__(self, name: str = "", age: int = 0) -> None:
        self.name = name
        self.age = age

    @property
    def label(self) -> str:
        return f"{self.name} ({self.age})"


class Strict:
    def __init__(self, required: int) -> None:
        self.required = required


def test_get_property_value_is_case_insensitive():
    profile = Profile("ada", 36)
    assert reflection.get_property_value(profile, "NAME") == "ada"
    assert reflection.get_property_value(profile, "Label") == "ada (36)"


def test_missing_member_raises():
    with pytest.raises(MemberNotFoundError):
        reflection.get_property_value(Profile(), "email")


def test_set_property_value():
    profile = Profile()
    reflection.set_property_value(profile, "Age", 41)
    assert profile.age == 41


def test_copy_properties_skips_read_only_members():
    source = Profile("grace", 85)
    destination = Profile()
    copied = reflection.copy_properties(source, destination)
    assert copied == ["name", "age"]
    assert destination.name == "grace"
    assert destination.age == 85


def test_copy_properties_rejects_none():
    with pytest.raises(ValueError):
        reflection.copy_properties(None, Profile())


def test_type_resolution_and_instance_creation():
    assert reflection.get_type_from_name("collections.OrderedDict") is OrderedDict
    assert reflection.get_type_from_name("collections:OrderedDict") is OrderedDict
    assert reflection.get_type_from_name("int") is int
    assert reflection.get_type_from_name("no.such.Type") is None
    assert reflection.create_instance_from_name("collections.OrderedDict") == OrderedDict()
    instance = reflection.create_instance_from_name(f"{__name__}.Profile", "ada", age=3)
    assert (instance.name, instance.age) == ("ada", 3)


def test_instance_creation_without_arguments_falls_back_to_uninitialised():
    instance = reflection.create_instance(Strict)
    assert isinstance(instance, Strict)
    assert not hasattr(instance, "required")


def test_instance_creation_errors():
    with pytest.raises(InstanceCreationError):
        reflection.create_instance_from_name("no.such.Type")
    with pytest.raises(InstanceCreationError):
        reflection.create_instance(Strict, 1, 2)


def test_has_value_and_base_types():
    assert reflection.has_value(0)
    assert not reflection.has_value(None)
    assert reflection.base_types(bool) == (int, object)

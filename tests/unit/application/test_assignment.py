"""Unit tests for NestedAssigner."""

from __future__ import annotations

import pytest

from mp_value_objects.application.assignment import DUMMY_INDEX, NestedAssigner, parse_index_key
from mp_value_objects.kernel.errors import (
    InvalidIndexKeyError,
    TypeMismatchError,
    UnknownAttributeError,
)
from mp_value_objects.kernel.model import Attribute, AttributeSchema, Collection, ValueObject
from mp_value_objects.kernel.validation import PresenceRule, ValidDelegationRule


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


class Address(ValueObject):
    schema = AttributeSchema.of("country", "zip", "city")
    rules = (PresenceRule("city"),)


class Addresses(Collection[Address]):
    element_type = Address


class Person(ValueObject):
    schema = AttributeSchema.of(
        "name",
        Attribute("home", type=Address),
        Attribute("addresses", type=Addresses),
    )
    rules = (ValidDelegationRule("home", "addresses"),)


@pytest.fixture
def assigner() -> NestedAssigner:
    return NestedAssigner()


def cities(collection: Addresses) -> list[str | None]:
    return [address.city for address in collection]


# ---------------------------------------------------------------------------
# Index keys
# ---------------------------------------------------------------------------


class TestParseIndexKey:
    @pytest.mark.parametrize(("key", "expected"), [("0", 0), ("12", 12), (3, 3), ("007", 7)])
    def test_valid(self, key: object, expected: int) -> None:
        assert parse_index_key(key) == expected

    @pytest.mark.parametrize("key", ["-2", "a", "1.5", "", " 1", -3, True, None])
    def test_invalid(self, key: object) -> None:
        with pytest.raises(InvalidIndexKeyError):
            parse_index_key(key)

    def test_dummy_constant(self) -> None:
        assert DUMMY_INDEX == "-1"


# ---------------------------------------------------------------------------
# Value object targets
# ---------------------------------------------------------------------------


class TestScalarAssignment:
    def test_sets_known_attributes(self, assigner: NestedAssigner) -> None:
        address = Address(city="Tokyo", zip="1")
        result = assigner.assign(address, {"city": "Osaka", "country": "JP"})
        assert result is address
        assert address == Address(city="Osaka", zip="1", country="JP")

    def test_unknown_attribute_leaves_target_untouched(self, assigner: NestedAssigner) -> None:
        address = Address(city="Tokyo")
        with pytest.raises(UnknownAttributeError):
            assigner.assign(address, {"city": "Osaka", "bogus": 1})
        assert address.city == "Tokyo"

    def test_non_mapping_rejected(self, assigner: NestedAssigner) -> None:
        with pytest.raises(TypeMismatchError):
            assigner.assign(Address(), ["Tokyo"])

    def test_clears_errors(self, assigner: NestedAssigner) -> None:
        address = Address()
        address.is_valid()
        assigner.assign(address, {"city": "Tokyo"})
        assert not address.errors

    def test_nested_value_object_created(self, assigner: NestedAssigner) -> None:
        person = Person(name="Ann")
        assigner.assign(person, {"home": {"city": "Kobe"}})
        assert person.home == Address(city="Kobe")

    def test_nested_value_object_updated_in_place(self, assigner: NestedAssigner) -> None:
        person = Person(name="Ann", home={"city": "Kobe", "zip": "650"})
        home = person.home
        assigner.assign(person, {"home": {"city": "Nara"}})
        assert person.home is home
        assert person.home == Address(city="Nara", zip="650")

    def test_nested_collection_from_index_mapping(self, assigner: NestedAssigner) -> None:
        person = Person(name="Ann")
        assigner.assign(person, {"addresses": {"1": {"city": "B"}, "0": {"city": "A"}, "-1": {}}})
        assert cities(person.addresses) == ["A", "B"]

    def test_nested_none_clears_slot(self, assigner: NestedAssigner) -> None:
        person = Person(name="Ann", home={"city": "Kobe"})
        assigner.assign(person, {"home": None})
        assert person.home is None

    def test_nested_instance_assigned_directly(self, assigner: NestedAssigner) -> None:
        person = Person()
        home = Address(city="Kobe")
        assigner.assign(person, {"home": home})
        assert person.home is home

    def test_sibling_collection_class_assigned_directly(self, assigner: NestedAssigner) -> None:
        person = Person()
        sibling = Collection.of(Address)([{"city": "A"}])
        assigner.assign(person, {"addresses": sibling})
        assert type(person.addresses) is Addresses
        assert cities(person.addresses) == ["A"]

    def test_wrong_composite_rejected_before_changes(self, assigner: NestedAssigner) -> None:
        person = Person(name="Ann")
        with pytest.raises(TypeMismatchError):
            assigner.assign(person, {"name": "Bob", "home": Addresses()})
        assert person.name == "Ann"

    def test_collection_default_assigned_into(self, assigner: NestedAssigner) -> None:
        class Roster(ValueObject):
            schema = AttributeSchema.of("name", Attribute("addresses", type=Addresses, default=[]))

        roster = Roster()
        assert isinstance(roster.addresses, Addresses)
        assigner.assign(roster, {"name": "Ann", "addresses": {"0": {"city": "A"}}})
        assert roster.name == "Ann"
        assert cities(roster.addresses) == ["A"]

    def test_nested_unknown_attribute_is_atomic(self, assigner: NestedAssigner) -> None:
        person = Person(name="Ann")
        with pytest.raises(UnknownAttributeError):
            assigner.assign(person, {"name": "Bob", "addresses": {"0": {"city": "A", "bogus": 1}}})
        assert person.name == "Ann"
        assert person.addresses is None


# ---------------------------------------------------------------------------
# Collection targets
# ---------------------------------------------------------------------------


class TestCollectionAssignment:
    def test_dummy_entry_dropped(self, assigner: NestedAssigner) -> None:
        addresses = assigner.assign(Addresses(), {"0": {"city": "A"}, "-1": {"city": "B"}})
        assert cities(addresses) == ["A"]

    def test_only_dummy_yields_empty(self, assigner: NestedAssigner) -> None:
        addresses = Addresses([{"city": "A"}, {"city": "B"}])
        assigner.assign(addresses, {"-1": {"city": ""}})
        assert len(addresses) == 0

    def test_sparse_keys_sorted_numerically(self, assigner: NestedAssigner) -> None:
        addresses = assigner.assign(Addresses(), {"5": {"city": "X"}, "1": {"city": "Y"}})
        assert cities(addresses) == ["Y", "X"]

    def test_numeric_not_lexicographic_order(self, assigner: NestedAssigner) -> None:
        data = {"10": {"city": "ten"}, "9": {"city": "nine"}, "2": {"city": "two"}}
        addresses = assigner.assign(Addresses(), data)
        assert cities(addresses) == ["two", "nine", "ten"]

    def test_existing_elements_mutated_by_position(self, assigner: NestedAssigner) -> None:
        addresses = Addresses([{"city": "A", "zip": "1"}, {"city": "B", "zip": "2"}])
        first, second = addresses[0], addresses[1]
        assigner.assign(addresses, {"7": {"city": "Y"}, "3": {"city": "X"}})
        assert addresses[0] is first and addresses[1] is second
        assert [(a.city, a.zip) for a in addresses] == [("X", "1"), ("Y", "2")]

    def test_grows_as_needed(self, assigner: NestedAssigner) -> None:
        addresses = Addresses([{"city": "A"}])
        assigner.assign(addresses, {"0": {"city": "A2"}, "1": {"city": "B"}})
        assert cities(addresses) == ["A2", "B"]

    def test_excess_elements_removed(self, assigner: NestedAssigner) -> None:
        addresses = Addresses([{"city": "A"}, {"city": "B"}, {"city": "C"}])
        assigner.assign(addresses, {"0": {"city": "Z"}})
        assert cities(addresses) == ["Z"]

    def test_list_input_accepted(self, assigner: NestedAssigner) -> None:
        addresses = assigner.assign(Addresses(), [{"city": "A"}, {"city": "B"}])
        assert cities(addresses) == ["A", "B"]

    def test_integer_keys_accepted(self, assigner: NestedAssigner) -> None:
        addresses = assigner.assign(Addresses(), {1: {"city": "B"}, 0: {"city": "A"}, -1: {}})
        assert cities(addresses) == ["A", "B"]

    def test_invalid_key_leaves_collection_untouched(self, assigner: NestedAssigner) -> None:
        addresses = Addresses([{"city": "A"}])
        with pytest.raises(InvalidIndexKeyError):
            assigner.assign(addresses, {"0": {"city": "Z"}, "first": {"city": "Y"}})
        assert cities(addresses) == ["A"]

    def test_duplicate_numeric_keys_rejected(self, assigner: NestedAssigner) -> None:
        with pytest.raises(InvalidIndexKeyError, match="duplicates"):
            assigner.assign(Addresses(), {"1": {"city": "A"}, "01": {"city": "B"}})

    def test_entry_must_be_mapping(self, assigner: NestedAssigner) -> None:
        with pytest.raises(TypeMismatchError):
            assigner.assign(Addresses(), {"0": "Tokyo"})

    def test_unknown_attribute_in_entry(self, assigner: NestedAssigner) -> None:
        with pytest.raises(UnknownAttributeError):
            assigner.assign(Addresses(), {"0": {"bogus": 1}})

    def test_validity_after_assignment(self, assigner: NestedAssigner) -> None:
        addresses = assigner.assign(Addresses(), {"0": {"city": "A"}, "1": {"city": ""}})
        assert not addresses.is_valid()
        assert addresses.get(1).errors["city"] == ["can't be blank"]


# ---------------------------------------------------------------------------
# Bulk-assignment surface
# ---------------------------------------------------------------------------


class TestAssignAttribute:
    def test_creates_collection_in_empty_slot(self, assigner: NestedAssigner) -> None:
        person = Person(name="Ann")
        result = assigner.assign_attribute(person, "addresses", {"0": {"city": "A"}, "-1": {}})
        assert result is person.addresses
        assert cities(person.addresses) == ["A"]

    def test_updates_existing_value_object(self, assigner: NestedAssigner) -> None:
        person = Person(home={"city": "Kobe"})
        assigner.assign_attribute(person, "home", {"zip": "650"})
        assert person.home == Address(city="Kobe", zip="650")

    def test_clears_parent_errors(self, assigner: NestedAssigner) -> None:
        person = Person(home={"city": ""})
        assert not person.is_valid()
        assigner.assign_attribute(person, "home", {"city": "Kobe"})
        assert not person.errors
        assert person.is_valid()

    def test_unknown_slot(self, assigner: NestedAssigner) -> None:
        with pytest.raises(UnknownAttributeError):
            assigner.assign_attribute(Person(), "offices", {})

    def test_untyped_slot(self, assigner: NestedAssigner) -> None:
        with pytest.raises(TypeMismatchError):
            assigner.assign_attribute(Person(), "name", {"0": {}})

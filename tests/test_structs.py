"""
Tests for record validation and nested composition.
"""

import pytest

from conftest import Address, Company, Employee, User
from valtree.errors import Error, Errors
from valtree.validation import (
    FieldAccessor,
    MapValidator,
    SliceValidator,
    StructValidator,
    field,
    item,
    map_field,
    maps,
    not_zero,
    numbers,
    required,
    slice_field,
    slices,
    stop_on_error,
    strings,
    struct_field,
)


@pytest.fixture
def user_validator():
    return StructValidator(
        field("Name", lambda u: u.name, required(), strings.max_length(50)),
        field("Age", lambda u: u.age, numbers.min(18)),
        field("Email", lambda u: u.email, strings.matches_regex(r"^[^@]+@[^@]+$")),
        slice_field("Tags", lambda u: u.tags, slices.for_each(strings.not_empty())),
        map_field("Settings", lambda u: u.settings, maps.max_keys(2)),
    )


@pytest.fixture
def employee_validator():
    address = StructValidator(
        field("Street", lambda a: a.street, required()),
        field("City", lambda a: a.city, required()),
    )
    company = StructValidator(
        field("Name", lambda c: c.name, required()),
        struct_field("Address", lambda c: c.address, address),
    )
    return StructValidator(
        field("Name", lambda e: e.name, required()),
        struct_field("Company", lambda e: e.company, company),
    )


class TestStructValidator:
    """Test record validation."""

    def test_valid_user(self, user_validator, valid_user):
        assert user_validator.validate(valid_user) == []

    def test_collects_every_field(self, user_validator, invalid_user):
        errors = user_validator.validate(invalid_user)
        assert [(e.code, e.field) for e in errors] == [
            ("required", "Name"),
            ("min", "Age"),
            ("regex", "Email"),
            ("not_empty", "Tags.1"),
            ("max", "Settings"),
        ]

    def test_age_scenario(self):
        validator = StructValidator(field("Age", lambda u: u.age, numbers.min(18)))
        errors = validator.validate(User(age=15))
        assert errors == [Error("min", field="Age", params={"min": 18, "actual": 15})]

    def test_settings_scenario(self):
        validator = StructValidator(map_field("Settings", lambda u: u.settings, maps.max_keys(2)))
        errors = validator.validate(User(settings={"a": 1, "b": 2, "c": 3}))
        assert errors == [Error("max", field="Settings", params={"max": 2, "actual": 3})]

    def test_described_output(self):
        validator = StructValidator(
            field("Name", lambda u: u.name, not_zero()),
            field("Age", lambda u: u.age, numbers.min(18)),
        )
        errors = validator.validate(User(name="", age=15))
        assert errors.describe() == "zero (field: Name); min (field: Age) {actual: 15, min: 18}"

    def test_fatal_does_not_skip_sibling_fields(self):
        validator = StructValidator(
            field("First", lambda u: u.name, stop_on_error(required()), strings.min_length(3)),
            field("Second", lambda u: u.age, numbers.min(100)),
        )
        errors = validator.validate(User(name="", age=1))
        assert [(e.code, e.field, e.fatal) for e in errors] == [
            ("required", "First", True),
            ("min", "Second", False),
        ]

    def test_validate_equals_empty_prefix(self, user_validator, invalid_user):
        assert user_validator.validate(invalid_user) == user_validator.validate_with_prefix(invalid_user, "")

    def test_prefix(self):
        validator = StructValidator(field("Street", lambda a: a.street, required()))
        errors = validator.validate_with_prefix(Address(), "Home")
        assert errors[0].field == "Home.Street"

    def test_empty_struct_validator(self):
        assert StructValidator().validate(User()) == []

    def test_getter_errors_propagate(self):
        def broken(u):
            raise LookupError("no such field")

        with pytest.raises(LookupError):
            StructValidator(field("Name", broken, required())).validate(User())


class TestNesting:
    """Test nested struct, slice and map composition."""

    def test_nested_street(self, employee_validator, employee):
        errors = employee_validator.validate(employee)
        assert errors == [Error("required", field="Company.Address.Street")]

    def test_nested_under_prefix(self, employee_validator, employee):
        errors = employee_validator.validate_with_prefix(employee, "Staff.0")
        assert errors[0].field == "Staff.0.Company.Address.Street"

    def test_nested_fatal_scoped_to_inner_field(self):
        inner = StructValidator(
            field("Street", lambda a: a.street, stop_on_error(required()), strings.min_length(5)),
            field("City", lambda a: a.city, required()),
        )
        validator = StructValidator(struct_field("Address", lambda c: c.address, inner))
        errors = validator.validate(Company())
        assert [e.field for e in errors] == ["Address.Street", "Address.City"]

    def test_struct_field_accepts_slice_validator(self):
        validator = StructValidator(
            struct_field("Tags", lambda u: u.tags, SliceValidator(slices.min_length(1))),
        )
        assert validator.validate(User())[0].field == "Tags"

    def test_struct_field_accepts_map_validator(self):
        validator = StructValidator(
            struct_field("Settings", lambda u: u.settings, MapValidator(maps.key("theme"))),
        )
        assert validator.validate(User()) == [Error("not_found", field="Settings", params={"key": "theme"})]

    def test_slice_of_structs(self):
        address = StructValidator(field("Street", lambda a: a.street, required()))
        validator = StructValidator(
            slice_field("Addresses", lambda r: r["addresses"], _each(address)),
        )
        errors = validator.validate({"addresses": [Address(street="Main"), Address()]})
        assert errors == [Error("required", field="Addresses.1.Street")]


def _each(validator):
    """Slice rule running a nested validator on each element."""
    def check(values):
        out = []
        for i, value in enumerate(values):
            out.extend(validator.validate_with_prefix(value, str(i)))
        return Errors(out)
    return check


class TestFieldAccessor:
    """Test field accessor construction and getters."""

    def test_path(self):
        accessor = field("Age", lambda u: u.age)
        assert accessor.path("") == "Age"
        assert accessor.path("User") == "User.Age"

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            field("", lambda u: u.age)

    def test_rules_and_inner_rejected(self):
        with pytest.raises(ValueError):
            FieldAccessor("Tags", lambda u: u.tags, rules=(required(),), inner=SliceValidator())

    def test_rules_overwrite_field(self):
        def tagged(value):
            return Error("custom", field="ignored")

        errors = StructValidator(field("Name", lambda u: u.name, tagged)).validate(User())
        assert errors[0].field == "Name"

    def test_standalone_accessor(self):
        errors = field("Age", lambda u: u.age, numbers.min(18)).validate(User(age=3))
        assert errors[0].field == "Age"

    def test_attribute_name_getter(self):
        validator = StructValidator(field("Street", "company.address.street", required()))
        assert validator.validate(Employee())[0].field == "Street"
        assert validator.validate(Employee(company=Company(address=Address(street="Main")))) == []

    def test_item_getter(self):
        validator = StructValidator(field("name", item("name"), required()))
        assert validator.validate({"name": ""}) == [Error("required", field="name")]

    def test_is_immutable(self):
        accessor = field("Age", lambda u: u.age)
        with pytest.raises(AttributeError):
            accessor.name = "Other"

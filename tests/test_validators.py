import pytest

from teapots.schemas.teapot import TeapotMapping
from teapots.validators import validate_teapot


def test_valid_teapot_has_no_errors() -> None:
    body = TeapotMapping(id="mouse", name="Mouse", brand="Tefal", capacity=0.3)
    assert validate_teapot(body) == []


def test_missing_fields_are_required() -> None:
    assert validate_teapot(TeapotMapping()) == [
        "id is required",
        "name is required",
        "brand is required",
        "capacity is required",
    ]


@pytest.mark.parametrize("capacity", [0.3, 3, 10])
def test_allowed_capacities(capacity: float) -> None:
    body = TeapotMapping(id="t", name="T", brand="B", capacity=capacity)
    assert validate_teapot(body) == []


@pytest.mark.parametrize("capacity", [0, 0.5, 2.9999, 11, -3])
def test_other_capacities_are_rejected(capacity: float) -> None:
    body = TeapotMapping(id="t", name="T", brand="B", capacity=capacity)
    (error,) = validate_teapot(body)
    assert error.startswith("capacity must be one of 0.3, 3, 10 liters")


def test_blank_strings_are_empty() -> None:
    body = TeapotMapping(id="", name="  ", brand="B", capacity=3)
    assert validate_teapot(body) == ["id must not be empty", "name must not be empty"]


def test_partial_checks_only_present_fields() -> None:
    assert validate_teapot(TeapotMapping(name="Mouse2"), partial=True) == []


def test_partial_rejects_present_null_and_bad_capacity() -> None:
    body = TeapotMapping.model_validate({"name": None, "capacity": 5})
    errors = validate_teapot(body, partial=True)
    assert errors[0] == "name is required"
    assert errors[1].startswith("capacity must be one of")
    assert len(errors) == 2


def test_fields_longer_than_their_column_are_rejected() -> None:
    body = TeapotMapping(id="x" * 65, name="n" * 101, brand="b" * 100, capacity=3)
    assert validate_teapot(body) == [
        "id must be at most 64 characters",
        "name must be at most 100 characters",
    ]


def test_partial_checks_length_of_present_fields() -> None:
    body = TeapotMapping(brand="b" * 101)
    assert validate_teapot(body, partial=True) == ["brand must be at most 100 characters"]

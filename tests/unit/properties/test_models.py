from __future__ import annotations

import pytest

from openfolder.properties import PropertyBag


def test_bag_is_read_only() -> None:
    bag = PropertyBag({"FullPath": "/proj/app.proj"})

    with pytest.raises(TypeError):
        bag["FullPath"] = "/elsewhere"  # type: ignore[index]


def test_bag_does_not_follow_changes_to_source_mapping() -> None:
    source = {"FullPath": "/proj/app.proj"}
    bag = PropertyBag(source)

    source["FullPath"] = "/elsewhere"

    assert bag["FullPath"] == "/proj/app.proj"


def test_first_present_follows_key_order() -> None:
    bag = PropertyBag({"ProjectFile": "c", "FullPath": "b"})

    assert bag.first_present(("FullProjectFileName", "FullPath", "ProjectFile")) == "FullPath"
    assert bag.first_present(("Missing",)) is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("app.proj", "app.proj"),
        (None, ""),
        (True, "True"),
        (False, "False"),
        (3, "3"),
    ],
)
def test_text_renders_values(value: object, expected: str) -> None:
    assert PropertyBag({"Key": value}).text("Key") == expected


def test_nested_returns_none_for_plain_values() -> None:
    bag = PropertyBag({"ActiveConfiguration": "Debug"})

    assert bag.nested("ActiveConfiguration") is None
    assert bag.nested("Missing") is None

"""Tests for selector_builder.parts."""

import pytest

from selector_builder.parts import Combinator, PartKind


class TestPartKindOrder:
    def test_declared_in_canonical_order(self):
        assert [k.value for k in PartKind] == [
            "element",
            "id",
            "class",
            "attribute",
            "pseudo-class",
            "pseudo-element",
        ]

    def test_later_kinds_of_element(self):
        assert PartKind.ELEMENT.later_kinds() == (
            PartKind.ID,
            PartKind.CLASS,
            PartKind.ATTRIBUTE,
            PartKind.PSEUDO_CLASS,
            PartKind.PSEUDO_ELEMENT,
        )

    def test_later_kinds_of_last(self):
        assert PartKind.PSEUDO_ELEMENT.later_kinds() == ()


class TestPartKindRender:
    @pytest.mark.parametrize(
        "kind, expected",
        [
            (PartKind.ELEMENT, "x"),
            (PartKind.ID, "#x"),
            (PartKind.CLASS, ".x"),
            (PartKind.ATTRIBUTE, "[x]"),
            (PartKind.PSEUDO_CLASS, ":x"),
            (PartKind.PSEUDO_ELEMENT, "::x"),
        ],
    )
    def test_render(self, kind, expected):
        assert kind.render("x") == expected

    def test_attribute_marker_is_open_bracket(self):
        assert PartKind.ATTRIBUTE.marker == "["

    def test_unique_kinds(self):
        assert {k for k in PartKind if k.unique} == {
            PartKind.ELEMENT,
            PartKind.ID,
            PartKind.PSEUDO_ELEMENT,
        }


class TestCombinator:
    def test_values(self):
        assert {c.value for c in Combinator} == {" ", "+", "~", ">"}

    def test_is_valid(self):
        assert Combinator.is_valid(">")
        assert not Combinator.is_valid(">>")
        assert not Combinator.is_valid("")

"""Tests for the TreePath value type."""

import dataclasses

import pytest

from treepath.path import (
    AboveRootError,
    COMPONENT_FLAVOR,
    ErrorKind,
    InvalidCharacterError,
    InvalidSegmentError,
    PathFlavor,
    TreePath,
    component_path,
)


class TestParse:
    """Test construction from raw strings."""

    def test_absolute_path(self):
        path = component_path("/bodyset/pelvis")
        assert path.segments == ("bodyset", "pelvis")
        assert path.is_absolute
        assert path.num_levels == 2
        assert path.flavor is COMPONENT_FLAVOR

    def test_relative_path(self):
        path = component_path("forceset/./muscle/")
        assert path.segments == ("forceset", "muscle")
        assert not path.is_absolute

    def test_root(self):
        root = component_path("/")
        assert root.segments == ()
        assert root.is_absolute
        assert root.is_root
        assert str(root) == "/"

    def test_empty_relative(self):
        path = component_path("")
        assert path.segments == ()
        assert not path.is_absolute
        assert not path.is_root
        assert str(path) == ""

    def test_string_round_trip(self):
        for raw in ["/a/b/c", "a/b", "/", "", "x"]:
            assert str(component_path(raw)) == raw

    def test_string_form_is_canonical(self):
        assert component_path("//a/./b/../c/").to_string() == "/a/c"

    def test_invalid_character(self):
        with pytest.raises(InvalidCharacterError):
            component_path("/a/b+c")

    def test_above_root(self):
        with pytest.raises(AboveRootError):
            TreePath.parse("/a/../..")

    def test_parse_with_custom_flavor(self):
        flavor = PathFlavor(name="dotted", separator="|", invalid_chars=frozenset(" "))
        path = TreePath.parse("|a||b|", flavor)
        assert path.segments == ("a", "b")
        assert path.is_absolute
        assert str(path) == "|a|b"


class TestFromSegments:
    """Test construction from segment sequences."""

    def test_accepts_legal_segments(self):
        path = TreePath.from_segments(["a", "b"], True)
        assert path == component_path("/a/b")

    def test_accepts_leading_parents_on_relative(self):
        path = TreePath.from_segments(["..", "..", "d"], False)
        assert str(path) == "../../d"

    @pytest.mark.parametrize(
        "segments, is_absolute",
        [
            (["..", "a"], True),
            (["a", "..", "b"], False),
            (["a", "."], False),
            (["a", ""], True),
            (["a/b"], True),
            (["a b"], False),
            (["*"], False),
        ],
    )
    def test_rejects_illegal_segments(self, segments, is_absolute):
        with pytest.raises(InvalidSegmentError, match="illegal path element") as exc_info:
            TreePath.from_segments(segments, is_absolute)
        assert exc_info.value.kind is ErrorKind.INVALID_SEGMENT

    def test_constructor_checks_segments(self):
        """The bare constructor enforces the same rules as from_segments."""
        with pytest.raises(InvalidSegmentError, match="illegal path element"):
            TreePath(("..", "a/b", ""), True)
        with pytest.raises(InvalidSegmentError):
            TreePath(("a", "."), False)

    def test_constructor_coerces_segments_to_tuple(self):
        path = TreePath(["a", "b"], True)  # type: ignore[arg-type]
        assert path.segments == ("a", "b")
        assert path == component_path("/a/b")


class TestValueSemantics:
    """Test immutability, equality and hashing."""

    def test_equality(self):
        assert component_path("/a/b") == component_path("/a/./b/")
        assert component_path("/a/b") != component_path("a/b")
        assert component_path("") != component_path("/")

    def test_hashable(self):
        seen = {component_path("/a/b"), component_path("//a//b"), component_path("a/b")}
        assert len(seen) == 2

    def test_frozen(self):
        path = component_path("/a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            path.is_absolute = False  # type: ignore[misc]

    def test_flavor_participates_in_equality(self):
        other = PathFlavor(name="other", separator="/", invalid_chars=frozenset())
        assert TreePath.parse("/a", other) != component_path("/a")

    def test_repr(self):
        assert repr(component_path("/a/b")) == "TreePath('/a/b', flavor='component')"

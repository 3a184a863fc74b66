"""Tests for listing and render."""

import json
from datetime import date

import pytest
import yaml

from canon.listing import listing, render, to_json_safe
from canon.registry import Registry
from canon.sources.literal import LiteralDataSource


class TestListing:
    """Tests for listing()."""

    def test_listing_is_transformed_contents(self, errors: Registry) -> None:
        """listing() contains every record with the transform applied."""
        data = listing(errors)

        assert list(data) == ["not_authorized", "not_found", "rate_limited"]
        assert data["not_found"] == {
            "message": "Not found",
            "explanation": "Nothing lives at this address.",
        }

    def test_dates_become_iso_strings(self) -> None:
        """Values JSON cannot encode are rendered as ISO strings."""
        registry = Registry(LiteralDataSource({"v1": {"released": date(2024, 3, 1)}}))

        assert listing(registry) == {"v1": {"released": "2024-03-01"}}

    def test_to_json_safe_converts_tuples(self) -> None:
        """Tuples become lists."""
        assert to_json_safe({"a": (1, (2, 3))}) == {"a": [1, [2, 3]]}

    def test_to_json_safe_sorts_sets(self) -> None:
        """Sets become sorted lists."""
        assert to_json_safe({"a": {3, 1, 2}}) == {"a": [1, 2, 3]}

    def test_to_json_safe_handles_mixed_type_sets(self) -> None:
        """Sets mixing types that cannot be compared still convert deterministically."""
        first = to_json_safe(frozenset({"b", 2, None}))
        second = to_json_safe(frozenset({None, 2, "b"}))

        assert sorted(first, key=repr) == first
        assert first == second
        assert set(map(repr, first)) == {"'b'", "2", "None"}


class TestRender:
    """Tests for render()."""

    def test_json_round_trips_to_listing(self, errors: Registry) -> None:
        """The JSON document parses back to the listing, order included."""
        document = render(errors, "json")

        parsed = json.loads(document)
        assert parsed == listing(errors)
        assert list(parsed) == list(errors.keys())

    def test_yaml_round_trips_to_listing(self, errors: Registry) -> None:
        """The YAML document parses back to the listing."""
        document = render(errors, "yaml")

        assert yaml.safe_load(document) == listing(errors)
        assert document.index("not_authorized") < document.index("rate_limited")

    def test_render_is_deterministic(self, errors: Registry) -> None:
        """Repeated renders are identical."""
        assert render(errors) == render(errors)

    def test_render_empty_registry(self) -> None:
        """An empty registry renders an empty document."""
        registry = Registry(LiteralDataSource({}))

        assert json.loads(render(registry)) == {}

    def test_unknown_format_raises(self, errors: Registry) -> None:
        """Only json and yaml are supported."""
        with pytest.raises(ValueError, match="Unknown listing format 'xml'"):
            render(errors, "xml")

    def test_render_keeps_non_ascii(self) -> None:
        """Non-ASCII text is written as-is."""
        registry = Registry(LiteralDataSource({"hi": {"message": "héllo"}}))

        assert "héllo" in render(registry, "json")
        assert "héllo" in render(registry, "yaml")

    def test_render_does_not_change_registry(self, errors: Registry) -> None:
        """Rendering is read-only."""
        before = errors.list_all()

        render(errors, "json")
        render(errors, "yaml")

        assert errors.list_all() == before

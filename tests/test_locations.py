"""
Tests for Location, FilesystemLocation and the Locations collection.
"""

import pytest

from viewkit.exceptions import InvalidLocation
from viewkit.location import FilesystemLocation, Locations


# =============================================================================
# Locations collection
# =============================================================================


class TestLocations:
    """Ordered, duplicate-free collection behavior."""

    def test_add_appends_and_reports_added(self, tmp_path):
        locations = Locations()
        location = FilesystemLocation(tmp_path, ['.html'])

        assert locations.add(location) is True
        assert len(locations) == 1
        assert list(locations) == [location]

    def test_add_is_idempotent_for_equal_locations(self, tmp_path):
        locations = Locations()

        assert locations.add(FilesystemLocation(tmp_path, ['.html'])) is True
        assert locations.add(FilesystemLocation(tmp_path, ['.html'])) is False
        assert len(locations) == 1

    def test_same_path_with_other_extensions_is_distinct(self, tmp_path):
        locations = Locations()

        assert locations.add(FilesystemLocation(tmp_path, ['.html']))
        assert locations.add(FilesystemLocation(tmp_path, ['.txt']))
        assert len(locations) == 2

    def test_insertion_order_is_preserved(self, tmp_path):
        first = FilesystemLocation(tmp_path / "a", ['.html'])
        second = FilesystemLocation(tmp_path / "b", ['.html'])
        third = FilesystemLocation(tmp_path / "c", ['.html'])
        locations = Locations()

        for location in (first, second, third, second, first):
            locations.add(location)

        assert list(locations) == [first, second, third]

    def test_no_duplicates_after_many_adds(self, tmp_path):
        locations = Locations()
        for i in range(20):
            locations.add(FilesystemLocation(tmp_path / str(i % 4), ['.html']))

        items = list(locations)
        assert len(items) == 4
        for i, left in enumerate(items):
            for right in items[i + 1:]:
                assert left != right

    def test_has_location_after_add(self, tmp_path):
        locations = Locations()
        locations.add(FilesystemLocation(tmp_path, ['.html']))

        assert locations.has_location(FilesystemLocation(tmp_path, ['.html']))
        assert not locations.has_location(FilesystemLocation(tmp_path, ['.txt']))

    @pytest.mark.parametrize("value", [42, "views", None, ["views"]])
    def test_invalid_values_raise(self, value):
        locations = Locations()

        with pytest.raises(InvalidLocation):
            locations.add(value)
        with pytest.raises(InvalidLocation):
            locations.has_location(value)
        assert len(locations) == 0

    def test_contains_does_not_raise(self, tmp_path):
        locations = Locations([FilesystemLocation(tmp_path, ['.html'])])

        assert FilesystemLocation(tmp_path, ['.html']) in locations
        assert 42 not in locations


# =============================================================================
# FilesystemLocation
# =============================================================================


class TestFilesystemLocation:
    """Template lookup on disk."""

    def test_extensions_are_normalized(self, tmp_path):
        location = FilesystemLocation(tmp_path, ['html', '.txt', 'html'])

        assert location.extensions == ('.html', '.txt')

    def test_equality_uses_path_and_extensions(self, tmp_path):
        assert FilesystemLocation(tmp_path, ['.html']) == FilesystemLocation(str(tmp_path), 'html')
        assert FilesystemLocation(tmp_path, ['.html']) != FilesystemLocation(tmp_path, ['.txt'])
        assert hash(FilesystemLocation(tmp_path, ['.html'])) == hash(FilesystemLocation(tmp_path, ['.html']))

    def test_get_uri_appends_extensions_in_order(self, tmp_path):
        (tmp_path / "home.txt").write_text("text")
        (tmp_path / "home.html").write_text("html")

        assert FilesystemLocation(tmp_path, ['.html', '.txt']).get_uri(['home']) == str(tmp_path / "home.html")
        assert FilesystemLocation(tmp_path, ['.txt', '.html']).get_uri(['home']) == str(tmp_path / "home.txt")

    def test_get_uri_accepts_full_filename(self, tmp_path):
        (tmp_path / "home.html").write_text("html")

        assert FilesystemLocation(tmp_path, ['.html']).get_uri(['home.html']) == str(tmp_path / "home.html")
        assert FilesystemLocation(tmp_path).get_uri(['home.html']) == str(tmp_path / "home.html")

    def test_get_uri_tries_criteria_in_order(self, tmp_path):
        (tmp_path / "fallback.html").write_text("html")

        location = FilesystemLocation(tmp_path, ['.html'])

        assert location.get_uri(['missing', 'fallback']) == str(tmp_path / "fallback.html")

    def test_get_uri_returns_none_when_missing(self, tmp_path):
        location = FilesystemLocation(tmp_path, ['.html'])

        assert location.get_uri(['missing']) is None
        assert location.get_uri([]) is None

    def test_directories_do_not_match(self, tmp_path):
        (tmp_path / "pages.html").mkdir()

        assert FilesystemLocation(tmp_path, ['.html']).get_uri(['pages']) is None

    def test_get_uri_stays_under_root(self, tmp_path):
        root = tmp_path / "views"
        (root / "pages").mkdir(parents=True)
        (root / "home.html").write_text("html")
        (tmp_path / "secret.html").write_text("secret")

        location = FilesystemLocation(root, ['.html'])

        assert location.get_uri(['../secret']) is None
        assert location.get_uri([str(tmp_path / "secret")]) is None
        assert location.get_uri(['pages/../home']) == str(root / "pages/../home.html")

"""
Tests for the ViewBuilder resolution pipeline.
"""

import threading

import pytest

from viewkit.defaults import DEFAULT_VIEW_CONFIG
from viewkit.engine import JinjaEngine, NullEngine, PythonFormatEngine
from viewkit.exceptions import FailedToInstantiateView, FailedToProcessConfig, InvalidLocation
from viewkit.finder import EngineFinder, ViewFinder
from viewkit.location import FilesystemLocation
from viewkit.support import ClassLoader, Config
from viewkit.view import BaseView, NullView, View
from viewkit.view_builder import ViewBuilder


class JsonView(BaseView):
    """View registered through a configured alias."""


class RawJsonView(BaseView):
    """View registered under the bare alias name."""


class NotAView:
    def __init__(self, uri, engine):
        self.uri = uri


class CallableView(BaseView):
    """A View that is also callable; it must never be invoked by the builder."""

    def __call__(self, *args):
        raise AssertionError("resolved view instances must not be invoked")


def make_config(views=None):
    return Config.merged(DEFAULT_VIEW_CONFIG, {'ViewFinder': {'Views': views or {}}})


# =============================================================================
# Location scanning
# =============================================================================


class TestScanLocations:

    def test_first_matching_location_wins(self, static_location):
        builder = ViewBuilder()
        first = static_location('a', {'home': 'a/home.php'})
        second = static_location('b', {'home': 'b/home.php'})
        builder.add_location(first)
        builder.add_location(second)

        assert builder.scan_locations(['home']) == 'a/home.php'
        assert first.calls == [['home']]
        assert second.calls == []

    def test_falls_through_to_later_locations(self, static_location):
        builder = ViewBuilder()
        builder.add_location(static_location('a', {}))
        builder.add_location(static_location('b', {'home': 'b/home.php'}))

        assert builder.scan_locations(['home']) == 'b/home.php'

    def test_no_match_returns_none(self, static_location):
        builder = ViewBuilder()
        builder.add_location(static_location('a', {}))

        assert builder.scan_locations(['home']) is None
        assert ViewBuilder().scan_locations(['home']) is None

    def test_add_location_deduplicates(self, tmp_path):
        builder = ViewBuilder()

        assert builder.add_location(FilesystemLocation(tmp_path, ['.html'])) is True
        assert builder.add_location(FilesystemLocation(tmp_path, ['.html'])) is False
        assert len(builder.locations) == 1

    def test_add_location_rejects_non_locations(self):
        with pytest.raises(InvalidLocation):
            ViewBuilder().add_location('views/')


# =============================================================================
# create()
# =============================================================================


class TestCreate:

    def test_create_uses_view_finder(self, builder, views_dir):
        view = builder.create('pages/home')

        assert isinstance(view, BaseView)
        assert view.uri == str(views_dir / "pages" / "home.html")
        assert isinstance(view.engine, JinjaEngine)
        assert view.builder is builder

    def test_engine_follows_extension(self, builder):
        view = builder.create('mail')

        assert isinstance(view.engine, PythonFormatEngine)

    def test_missing_view_returns_null_object(self, builder):
        view = builder.create('missing')

        assert isinstance(view, NullView)
        assert view is builder.get_view_finder().get_null_object()
        assert view.render({'title': 'x'}) == ''

    def test_missing_view_never_resolves_type(self, builder):
        view = builder.create('missing', 'no.such.ViewClass')

        assert isinstance(view, NullView)

    def test_engine_finder_is_asked_even_without_uri(self, builder):
        seen = []

        class RecordingEngineFinder(EngineFinder):
            def find(self, criteria, engine=None):
                seen.append(list(criteria))
                return super().find(criteria, engine)

        builder.engine_finder = RecordingEngineFinder(builder.config.get_sub_config('EngineFinder'))
        builder.create('missing')

        assert seen == [[None]]

    def test_get_engine_for_missing_uri_is_null_engine(self, builder):
        assert isinstance(builder.get_engine(None), NullEngine)


# =============================================================================
# Type resolution
# =============================================================================


class TestResolveType:

    def test_configured_alias_beats_class_name(self, views_dir):
        ClassLoader.register('JsonView', JsonView)
        ClassLoader.register('json', RawJsonView)
        builder = ViewBuilder(make_config({'json': 'JsonView'}))
        builder.add_location(FilesystemLocation(views_dir, ['.html']))

        view = builder.create('pages/home', 'json')

        assert type(view) is JsonView

    def test_unmapped_string_is_class_name(self, builder):
        ClassLoader.register('json', RawJsonView)

        assert type(builder.create('pages/home', 'json')) is RawJsonView
        assert type(builder.create('pages/home', 'viewkit.view.BaseView')) is BaseView

    def test_class_is_called_with_uri_and_engine(self, builder, views_dir):
        view = builder.create('pages/home', JsonView)

        assert type(view) is JsonView
        assert view.uri == str(views_dir / "pages" / "home.html")
        assert isinstance(view.engine, JinjaEngine)

    def test_factory_is_called_with_uri_and_engine(self, builder):
        calls = []

        def factory(uri, engine):
            calls.append((uri, engine))
            return JsonView(uri, engine)

        view = builder.create('pages/home', factory)

        assert type(view) is JsonView
        assert len(calls) == 1

    def test_resolved_callable_instance_is_not_invoked(self, builder):
        ClassLoader.register('callable', CallableView)

        assert type(builder.create('pages/home', 'callable')) is CallableView

    def test_view_instance_is_returned_as_is(self, builder, views_dir):
        instance = JsonView(str(views_dir / "pages" / "home.html"), NullEngine())

        assert builder.get_view(instance.uri, NullEngine(), instance) is instance

    @pytest.mark.parametrize("bad_type", [
        42, 'NoSuchView', 'viewkit.view.NoSuchView', '.json', 'viewkit.support.Config', NotAView,
    ])
    def test_failure_carries_type(self, builder, bad_type):
        with pytest.raises(FailedToInstantiateView) as exc_info:
            builder.create('pages/home', bad_type)

        assert exc_info.value.view_type is bad_type
        assert repr(bad_type) in str(exc_info.value)

    def test_alias_lookup_is_case_sensitive(self, views_dir):
        ClassLoader.register('JsonView', JsonView)
        ClassLoader.register('JSON', RawJsonView)
        builder = ViewBuilder(make_config({'json': 'JsonView'}))
        builder.add_location(FilesystemLocation(views_dir, ['.html']))

        assert type(builder.create('pages/home', 'JSON')) is RawJsonView
        assert type(builder.create('pages/home', 'json')) is JsonView

    def test_factory_with_wrong_signature_fails(self, builder):
        def factory(uri):
            return JsonView(uri, None)

        with pytest.raises(FailedToInstantiateView) as exc_info:
            builder.create('pages/home', factory)

        assert exc_info.value.view_type is factory

    def test_alias_pointing_nowhere_fails(self, views_dir):
        builder = ViewBuilder(make_config({'json': 'myapp.views.Missing'}))
        builder.add_location(FilesystemLocation(views_dir, ['.html']))

        with pytest.raises(FailedToInstantiateView):
            builder.create('pages/home', 'json')


# =============================================================================
# Lazy finders
# =============================================================================


class TestFinders:

    def test_finders_are_built_from_config(self):
        builder = ViewBuilder()

        assert builder.view_finder is None
        assert builder.engine_finder is None
        assert isinstance(builder.get_view_finder(), ViewFinder)
        assert isinstance(builder.get_engine_finder(), EngineFinder)

    def test_finders_are_singletons(self):
        builder = ViewBuilder()

        assert builder.get_view_finder() is builder.get_view_finder()
        assert builder.get_engine_finder() is builder.get_engine_finder()
        assert builder.get_finder('view_finder', 'ViewFinder') is builder.get_view_finder()

    def test_injected_finders_are_used(self):
        view_finder = ViewFinder(Config(DEFAULT_VIEW_CONFIG['ViewFinder']))
        builder = ViewBuilder(view_finder=view_finder)

        assert builder.get_view_finder() is view_finder

    def test_finder_sub_config_is_passed(self):
        builder = ViewBuilder()

        assert builder.get_view_finder().config.get_key('ClassName') == 'viewkit.finder.ViewFinder'

    def test_concurrent_access_builds_one_finder(self):
        builder = ViewBuilder()
        results = []

        def worker():
            results.append(builder.get_engine_finder())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len({id(finder) for finder in results}) == 1

    def test_missing_finder_config_raises(self):
        builder = ViewBuilder({'ViewFinder': {}})

        with pytest.raises(FailedToProcessConfig):
            builder.get_view_finder()
        with pytest.raises(FailedToProcessConfig):
            builder.get_engine_finder()

    def test_unloadable_finder_class_raises(self):
        builder = ViewBuilder({'EngineFinder': {'ClassName': 'viewkit.finder.NoSuchFinder'}})

        with pytest.raises(FailedToProcessConfig):
            builder.get_engine_finder()

    def test_invalid_config_type_raises(self):
        with pytest.raises(FailedToProcessConfig):
            ViewBuilder(config=42)

    def test_mapping_config_is_accepted(self):
        builder = ViewBuilder(DEFAULT_VIEW_CONFIG)

        assert isinstance(builder.config, Config)
        assert isinstance(builder.create('anything'), View)

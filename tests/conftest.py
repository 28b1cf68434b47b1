"""
Shared fixtures for the viewkit tests.
"""

import pytest

from viewkit import Views
from viewkit.defaults import DEFAULT_VIEW_CONFIG
from viewkit.location import FilesystemLocation, Location
from viewkit.support import ClassLoader, Config
from viewkit.view_builder import ViewBuilder


class StaticLocation(Location):
    """Location answering from a fixed id -> uri table, without touching disk."""

    def __init__(self, path, uris, extensions=('.html',)):
        self._path = path
        self._uris = dict(uris)
        self._extensions = tuple(extensions)
        self.calls = []

    @property
    def path(self):
        return self._path

    @property
    def extensions(self):
        return self._extensions

    def get_uri(self, criteria):
        self.calls.append(list(criteria))
        for criterion in criteria:
            if criterion in self._uris:
                return self._uris[criterion]
        return None


@pytest.fixture(autouse=True)
def reset_shared_state():
    """Keep facade and class registry state from leaking between tests."""
    Views.reset()
    ClassLoader.clear_registry()
    yield
    Views.reset()
    ClassLoader.clear_registry()


@pytest.fixture
def views_dir(tmp_path):
    """Directory with a handful of templates."""
    root = tmp_path / "views"
    (root / "pages").mkdir(parents=True)
    (root / "partials").mkdir()

    (root / "pages" / "home.html").write_text(
        "<h1>{{ title }}</h1>{{ partial('partials/footer') }}"
    )
    (root / "partials" / "footer.html").write_text("<footer>{{ title }}</footer>")
    (root / "pages" / "escaped.html").write_text("{{ body }}")
    (root / "mail.txt").write_text("Hello {name}, you have {count} messages.")
    return root


@pytest.fixture
def config():
    return Config(DEFAULT_VIEW_CONFIG)


@pytest.fixture
def builder(views_dir, config):
    builder = ViewBuilder(config)
    builder.add_location(FilesystemLocation(views_dir, ['.html', '.txt']))
    return builder


@pytest.fixture
def static_location():
    return StaticLocation

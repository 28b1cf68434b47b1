"""
Jinja Engine
Renders view templates with Jinja2
"""
from typing import Any, Mapping, Optional

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape
from markupsafe import Markup

from viewkit.defaults import DEFAULT_JINJA_AUTOESCAPE, DEFAULT_JINJA_EXTENSIONS
from viewkit.engine.engine import AbstractEngine, RenderCallback
from viewkit.exceptions import FailedToLoadView
from viewkit.logging import getLogger

logger = getLogger(__name__)


class JinjaEngine(AbstractEngine):
    """
    Jinja2 rendering engine

    The template directory of each URI is used as loader root, so
    `{% include %}` and `{% extends %}` resolve relative to the template.
    Templates get the render context plus:
        view: the view being rendered
        partial: renders another view through the view's builder

    Example:
        {{ partial('partials/header', {'title': title}) }}
    """

    extensions = DEFAULT_JINJA_EXTENSIONS

    def __init__(self, config=None):
        super().__init__(config)
        self.autoescape = tuple(
            self.config.get_key('Autoescape', default=DEFAULT_JINJA_AUTOESCAPE)
        )
        self.trim_blocks = bool(self.config.get_key('TrimBlocks', default=True))
        self.lstrip_blocks = bool(self.config.get_key('LstripBlocks', default=True))

    def make_environment(self, template_dir: str) -> Environment:
        """Build the Jinja2 environment for a template directory"""
        return Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(list(self.autoescape)),
            trim_blocks=self.trim_blocks,
            lstrip_blocks=self.lstrip_blocks,
        )

    def get_render_callback(self, uri: str, context: Optional[Mapping[str, Any]] = None) -> RenderCallback:
        path = self.check_uri(uri)
        context = dict(context or {})

        def render(view=None) -> str:
            environment = self.make_environment(str(path.parent))
            try:
                template = environment.get_template(path.name)
            except TemplateNotFound as e:
                raise FailedToLoadView(f'Could not load view "{uri}".', uri=uri) from e

            variables = dict(context)
            if view is not None:
                variables.setdefault('view', view)
                variables.setdefault('partial', _partial_helper(view))

            logger.debug("Rendering Jinja template", extra={'uri': uri})
            return template.render(variables)

        return render


def _partial_helper(view):
    def partial(view_id: str, context: Optional[Mapping[str, Any]] = None, type=None) -> Markup:
        return Markup(view.render_part(view_id, context, type))
    return partial

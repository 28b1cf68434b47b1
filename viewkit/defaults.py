"""
View Component Default Values
All hardcoded values should be defined here and accessed through Config
These defaults can be overridden by passing a config mapping or module to the builder
"""

# ============================================================================
# CONFIG ROOT KEYS
# ============================================================================

ENGINE_FINDER_KEY = 'EngineFinder'
VIEW_FINDER_KEY = 'ViewFinder'

CLASS_NAME_KEY = 'ClassName'
ENGINES_KEY = 'Engines'
VIEWS_KEY = 'Views'
NULL_OBJECT_KEY = 'NullObject'
EXTENSIONS_KEY = 'Extensions'

# ============================================================================
# ENGINE DEFAULTS
# ============================================================================

DEFAULT_JINJA_EXTENSIONS = ('.html.j2', '.j2', '.jinja', '.jinja2', '.html')
DEFAULT_JINJA_AUTOESCAPE = ('html', 'xml', 'j2')
DEFAULT_FORMAT_EXTENSIONS = ('.txt',)
DEFAULT_TEMPLATE_ENCODING = 'utf-8'

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOG_FORMAT = 'text'
DEFAULT_LOG_ENVIRONMENT = 'local'
DEFAULT_LOG_TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# ============================================================================
# VIEW CONFIG
# ============================================================================

DEFAULT_VIEW_CONFIG = {
    ENGINE_FINDER_KEY: {
        CLASS_NAME_KEY: 'viewkit.finder.EngineFinder',
        ENGINES_KEY: {
            'JinjaEngine': 'viewkit.engine.JinjaEngine',
            'PythonFormatEngine': 'viewkit.engine.PythonFormatEngine',
        },
        NULL_OBJECT_KEY: 'viewkit.engine.NullEngine',
    },
    VIEW_FINDER_KEY: {
        CLASS_NAME_KEY: 'viewkit.finder.ViewFinder',
        VIEWS_KEY: {
            'BaseView': 'viewkit.view.BaseView',
        },
        NULL_OBJECT_KEY: 'viewkit.view.NullView',
    },
}

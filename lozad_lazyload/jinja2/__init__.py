from jinja2.ext import Extension

from . import lazy_load  # noqa: F401, imported for side effects
from . import registry


class LozadExtension(Extension):
    def __init__(self, env):
        super(LozadExtension, self).__init__(env)
        env.globals.update(registry.globals)
        env.filters.update(registry.filters)

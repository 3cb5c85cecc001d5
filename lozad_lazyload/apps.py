from django.apps import AppConfig
from django.utils.translation import gettext_lazy


class LozadLazyLoadConfig(AppConfig):
    name = 'lozad_lazyload'
    verbose_name = gettext_lazy('Lozad Lazy Load')

    def ready(self):
        # noinspection PyUnresolvedReferences
        from . import jinja2  # noqa: F401, imported for side effects

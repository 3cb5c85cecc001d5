from markupsafe import Markup

from lozad_lazyload.assets import lozad_assets
from lozad_lazyload.converter import LozadConverter
from . import registry


@registry.filter
def lazy_load(value):
    if value is None:
        return ''
    return Markup(LozadConverter().lazy_load(str(value)))


@registry.filter
def lazy_load_content(value, context):
    if value is None:
        return ''
    return Markup(LozadConverter().edit_post_content(str(value), context))


@registry.function
def lozad_script(url):
    return Markup(LozadConverter().convert_html(None, 'script', url=url) or '')


registry.function('lozad_assets', lozad_assets)

from django.templatetags.static import static
from django.utils.html import format_html
from django.utils.safestring import mark_safe

from lozad_lazyload.conf import Policy, get_setting

INIT_SCRIPT = '''\
lozad('.%(lazy_class)s', {
    rootMargin: '%(root_margin)s',
    loaded: function (el) {
        el.classList.add('is-loaded');
    }
}).observe();'''


def asset_url(path):
    if path.startswith(('http://', 'https://', '//')):
        return path
    return static(path)


def lozad_init_script(policy=None):
    policy = policy or Policy.from_settings()
    return mark_safe(INIT_SCRIPT % {
        'lazy_class': policy.lazy_class,
        'root_margin': get_setting('LOZAD_LAZYLOAD_ROOT_MARGIN'),
    })


def lozad_assets(policy=None):
    policy = policy or Policy.from_settings()
    if not policy.enabled:
        return ''
    # lozad needs the observer polyfill, and postscribe to expand script placeholders.
    return format_html(
        '<link rel="stylesheet" href="{}">\n'
        '<script src="{}"></script>\n'
        '<script src="{}"></script>\n'
        '<script src="{}"></script>\n'
        '<script>\n{}\n</script>',
        asset_url(get_setting('LOZAD_LAZYLOAD_CSS')),
        asset_url(get_setting('LOZAD_LAZYLOAD_POLYFILL_JS')),
        asset_url(get_setting('LOZAD_LAZYLOAD_POSTSCRIBE_JS')),
        asset_url(get_setting('LOZAD_LAZYLOAD_LOZAD_JS')),
        lozad_init_script(policy),
    )

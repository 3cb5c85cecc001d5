from collections import namedtuple

from django.conf import settings

DEFAULTS = {
    'LOZAD_LAZYLOAD_ENABLED': True,
    'LOZAD_LAZYLOAD_IMAGES': True,
    'LOZAD_LAZYLOAD_IFRAMES': True,
    'LOZAD_LAZYLOAD_POST_TYPES': ('post',),
    'LOZAD_LAZYLOAD_OPT_OUT_META_KEY': 'lazy_load_disabled',
    'LOZAD_LAZYLOAD_EXCLUDE_CLASS': 'no-lazy',
    'LOZAD_LAZYLOAD_CLASS': 'lazy-load',
    'LOZAD_LAZYLOAD_SCRIPT_CLASS': 'lozad',
    'LOZAD_LAZYLOAD_ROOT_MARGIN': '300px 0px',
    'LOZAD_LAZYLOAD_LOZAD_JS': 'https://cdn.jsdelivr.net/npm/lozad/dist/lozad.min.js',
    'LOZAD_LAZYLOAD_POSTSCRIBE_JS': 'https://cdnjs.cloudflare.com/ajax/libs/postscribe/2.0.8/postscribe.min.js',
    'LOZAD_LAZYLOAD_POLYFILL_JS': 'https://cdn.jsdelivr.net/npm/intersection-observer@0.12.2/intersection-observer.js',
    'LOZAD_LAZYLOAD_CSS': 'lozad_lazyload/css/lozad-lazyload.css',
}

TRUE_STRINGS = frozenset(('1', 'true', 'yes', 'on'))


def get_setting(name):
    return getattr(settings, name, DEFAULTS[name])


def as_bool(value):
    # Option stores tend to hand back strings, so 'false' must not be truthy.
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return bool(value)


class Policy(namedtuple('Policy', 'enabled images iframes post_types exclude_class lazy_class script_class')):
    """Read-only lazy loading policy for a single invocation.

    ``enabled`` is the master switch, ``images`` and ``iframes`` gate the individual
    transforms and ``post_types`` is the whitelist of content types eligible for
    whole-document rewriting.
    """
    __slots__ = ()

    def __new__(cls, enabled=True, images=True, iframes=True, post_types=DEFAULTS['LOZAD_LAZYLOAD_POST_TYPES'],
                exclude_class=DEFAULTS['LOZAD_LAZYLOAD_EXCLUDE_CLASS'], lazy_class=DEFAULTS['LOZAD_LAZYLOAD_CLASS'],
                script_class=DEFAULTS['LOZAD_LAZYLOAD_SCRIPT_CLASS']):
        if isinstance(post_types, str):
            post_types = [post_type.strip() for post_type in post_types.split(',') if post_type.strip()]
        return super(Policy, cls).__new__(cls, enabled, images, iframes, frozenset(post_types),
                                          exclude_class, lazy_class, script_class)

    @classmethod
    def from_settings(cls):
        return cls(
            enabled=as_bool(get_setting('LOZAD_LAZYLOAD_ENABLED')),
            images=as_bool(get_setting('LOZAD_LAZYLOAD_IMAGES')),
            iframes=as_bool(get_setting('LOZAD_LAZYLOAD_IFRAMES')),
            post_types=get_setting('LOZAD_LAZYLOAD_POST_TYPES'),
            exclude_class=get_setting('LOZAD_LAZYLOAD_EXCLUDE_CLASS'),
            lazy_class=get_setting('LOZAD_LAZYLOAD_CLASS'),
            script_class=get_setting('LOZAD_LAZYLOAD_SCRIPT_CLASS'),
        )

    def allows_post_type(self, post_type):
        return post_type is not None and post_type in self.post_types

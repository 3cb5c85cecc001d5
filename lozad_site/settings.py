"""
Django settings for the lozad_lazyload host project.

For the full list of settings and their values, see
https://docs.djangoproject.com/en/stable/ref/settings/
"""

import os

from django_jinja.builtins import DEFAULT_EXTENSIONS

BASE_DIR = os.path.dirname(os.path.dirname(__file__))

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = 'lozad-lazyload-development-key-do-not-use-in-production'

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = True

ALLOWED_HOSTS = []

# Lazy loading
LOZAD_LAZYLOAD_ENABLED = True
LOZAD_LAZYLOAD_IMAGES = True
LOZAD_LAZYLOAD_IFRAMES = True
LOZAD_LAZYLOAD_POST_TYPES = ('post', 'page')
LOZAD_LAZYLOAD_OPT_OUT_META_KEY = 'lazy_load_disabled'
LOZAD_LAZYLOAD_ROOT_MARGIN = '300px 0px'

INSTALLED_APPS = (
    'lozad_lazyload',
)

TEMPLATES = [
    {
        'BACKEND': 'django_jinja.backend.Jinja2',
        'DIRS': [
            os.path.join(BASE_DIR, 'templates'),
        ],
        'APP_DIRS': False,
        'OPTIONS': {
            'match_extension': ('.html', '.txt'),
            'trim_blocks': True,
            'lstrip_blocks': True,
            'extensions': DEFAULT_EXTENSIONS + [
                'lozad_lazyload.jinja2.LozadExtension',
            ],
        },
    },
]

DATABASES = {}

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = '/static/'

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(levelname)s %(asctime)s %(module)s %(message)s',
        },
    },
    'handlers': {
        'console': {
            'level': 'DEBUG',
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        # HTML parsing errors while rewriting content.
        'lozad_lazyload.html': {
            'handlers': ['console'],
            'level': 'WARNING',
        },
        # Document scope decisions.
        'lozad_lazyload.content': {
            'handlers': ['console'],
            'level': 'INFO',
        },
    },
}

try:
    with open(os.path.join(os.path.dirname(__file__), 'local_settings.py')) as f:
        exec(f.read(), globals())
except IOError:
    pass

"""
Shared pytest fixtures for the lozad_lazyload tests.

The Django settings are provided by pytest-django from ``lozad_site.settings``.
"""
import pytest

from lozad_lazyload.conf import Policy
from lozad_lazyload.converter import DocumentContext, LozadConverter


@pytest.fixture
def policy():
    """
    Provide a policy with every transform enabled for posts only.

    Returns:
        Policy: An immutable lazy loading policy.
    """
    return Policy(post_types=('post',))


@pytest.fixture
def converter(policy):
    """
    Provide a converter bound to the ``policy`` fixture.

    Example:
        def test_img(converter):
            assert 'data-src' in converter.convert_html('<img src="a.jpg">', 'img')
    """
    return LozadConverter(policy)


@pytest.fixture
def post_context():
    """
    Provide the context of a single post view.

    Returns:
        DocumentContext: A singular, non-feed context for a ``post``.
    """
    return DocumentContext('post')


@pytest.fixture
def make_context():
    """
    Provide a factory building document contexts with keyword overrides.

    Example:
        def test_feed(make_context):
            context = make_context(is_singular=False, is_feed=True, query_post_type='post')
    """
    def _make_context(post_type='post', **kwargs):
        return DocumentContext(post_type, **kwargs)

    return _make_context

import logging
from collections.abc import Mapping

from lozad_lazyload.conf import Policy, as_bool, get_setting
from lozad_lazyload.lazy_load import rewrite_iframes, rewrite_images, script_placeholder
from lozad_lazyload.lxml_tree import ParseStatus

logger = logging.getLogger('lozad_lazyload.content')


class DocumentContext:
    """What the rendering layer knows about the document whose body is being filtered."""

    def __init__(self, post_type=None, is_singular=True, is_feed=False, is_admin=False, query_post_type=None,
                 meta=None):
        self.post_type = post_type
        self.is_singular = is_singular
        self.is_feed = is_feed
        self.is_admin = is_admin
        self.query_post_type = query_post_type
        self.meta = meta or {}

    def __repr__(self):
        return '<DocumentContext %s singular=%s feed=%s>' % (self.post_type, self.is_singular, self.is_feed)

    @property
    def resolved_post_type(self):
        # Feeds have no current document, so the type comes from the query being rendered.
        if self.is_feed:
            return self.query_post_type
        return self.post_type

    @property
    def opted_out(self):
        return as_bool(self.meta.get(get_setting('LOZAD_LAZYLOAD_OPT_OUT_META_KEY'), False))


class LozadConverter:
    """Rewrites markup so that lozad can load images, iframes and scripts on demand.

    A converter holds nothing but its read-only policy, so one instance can be shared
    by every request. When no policy is given the current Django settings are used.
    """

    def __init__(self, policy=None):
        self.policy = policy if policy is not None else Policy.from_settings()

    def convert_html(self, markup, html_tag, url=None):
        """Converts markup of a single kind of tag.

        ``html_tag`` is one of ``'img'``, ``'iframe'`` or ``'script'``; any other kind
        is returned untouched. Script markup is never parsed: it is replaced with a
        placeholder element that the client side expands once it scrolls into view,
        taking the script location from ``url`` or from a ``{'url': ...}`` mapping.
        """
        policy = self.policy
        if not policy.enabled:
            return markup

        html_tag = (html_tag or '').lower()
        if html_tag == 'script':
            if url is None and isinstance(markup, Mapping):
                url = markup.get('url')
            return script_placeholder(url, policy)
        elif html_tag == 'img':
            if not policy.images:
                return markup
            result, status = rewrite_images(markup, policy)
            return result
        elif html_tag == 'iframe':
            return rewrite_iframes(markup) if policy.iframes else markup
        return markup

    def lazy_load(self, markup):
        policy = self.policy
        if not policy.enabled:
            return markup

        result = markup
        if policy.images:
            result, status = rewrite_images(result, policy)
            if status == ParseStatus.UNPARSEABLE:
                return markup
        if policy.iframes:
            result = rewrite_iframes(result)
        return result

    def is_eligible(self, context):
        policy = self.policy
        if not policy.enabled:
            return False
        if context.is_admin:
            return False
        if not context.is_singular and not context.is_feed:
            return False
        if not policy.allows_post_type(context.resolved_post_type):
            logger.debug('Not lazy loading content of type %r', context.resolved_post_type)
            return False
        if context.opted_out:
            logger.debug('Lazy loading disabled for %r by document metadata', context)
            return False
        return True

    def edit_post_content(self, content, context):
        if not content or not self.is_eligible(context):
            return content
        return self.lazy_load(content)

import logging
import re
from enum import IntEnum

from lxml import html
from lxml.etree import ParserError, XMLSyntaxError

logger = logging.getLogger('lozad_lazyload.html')

FULL_DOCUMENT = re.compile(r'^\s*<(?:!doctype|html)[\s>]', re.IGNORECASE)
LEADING_DOCTYPE = re.compile(r'^<!DOCTYPE.+?>', re.IGNORECASE)
WRAPPER_TAGS = ('<html>', '</html>', '<body>', '</body>')


class ParseStatus(IntEnum):
    UNPARSEABLE = 0
    RECOVERED = 1
    PARSED = 2


def strip_wrappers(text):
    for tag in WRAPPER_TAGS:
        text = text.replace(tag, '')
    return LEADING_DOCTYPE.sub('', text)


class ParsedFragment:
    """Result of tolerantly parsing a piece of markup.

    ``tree`` is the element holding the parsed content (the ``body`` of the wrapper
    document for fragments, the root ``html`` element for full documents), or ``None``
    when there was nothing to parse or the parser gave up. ``source`` is always the
    original markup so callers can fall back to it.
    """

    def __init__(self, source, tree=None, status=ParseStatus.PARSED):
        self.source = source
        self.tree = tree
        self.status = status

    def __repr__(self):
        return '<ParsedFragment %s>' % self.status.name

    def serialize(self):
        if self.tree is None:
            return self.source
        return strip_wrappers(html.tostring(self.tree, encoding='unicode', with_tail=False))


def parse_fragment(markup):
    if not markup or not markup.strip():
        return ParsedFragment(markup)

    # A fresh parser per call keeps the error log private to this parse.
    parser = html.HTMLParser(recover=True)
    try:
        if FULL_DOCUMENT.match(markup):
            tree = html.document_fromstring(markup, parser=parser)
        else:
            document = html.document_fromstring('<html><body>%s</body></html>' % markup, parser=parser)
            tree = document.find('body')
            if tree is None:
                tree = document
    except (XMLSyntaxError, ParserError, ValueError) as e:
        if not isinstance(e, ParserError) or e.args[0] != 'Document is empty':
            logger.exception('Failed to parse HTML string')
        return ParsedFragment(markup, status=ParseStatus.UNPARSEABLE)

    if len(parser.error_log):
        logger.debug('Recovered from malformed HTML: %s', parser.error_log.last_error.message)
        return ParsedFragment(markup, tree, ParseStatus.RECOVERED)
    return ParsedFragment(markup, tree, ParseStatus.PARSED)

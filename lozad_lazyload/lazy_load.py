import re
from copy import deepcopy

from django.utils.html import format_html
from lxml import html

from lozad_lazyload.lxml_tree import parse_fragment

IFRAME_START_TAG = re.compile(r'''<iframe(?=[\s/>])((?:[^>"']|"[^"]*"|'[^']*')*)>''', re.IGNORECASE)
ATTRIBUTE_TOKEN = re.compile(r'''(\s*)(?:([^\s"'>/=]+)(\s*=\s*(?:"[^"]*"|'[^']*'|[^\s"'>]*))?|("[^"]*"|'[^']*'|.))''',
                             re.DOTALL)


def has_class(element, token):
    return token in element.get('class', '').split()


def rename_attribute(element, old, new):
    """Renames an attribute in place, keeping its position among the others."""
    attrib = element.attrib
    if old not in attrib:
        return False
    items = [(new if name == old else name, value) for name, value in attrib.items() if name != new]
    attrib.clear()
    for name, value in items:
        attrib[name] = value
    return True


def is_lazy(img, policy):
    return (has_class(img, policy.lazy_class) or
            ('data-src' in img.attrib and 'src' not in img.attrib) or
            next(img.iterancestors('noscript'), None) is not None)


def lazy_load_images(tree, policy):
    count = 0
    for img in tree.xpath('.//img'):
        if has_class(img, policy.exclude_class) or is_lazy(img, policy):
            continue

        fallback = deepcopy(img)
        fallback.tail = ''

        if not rename_attribute(img, 'src', 'data-src'):
            img.set('data-src', '')
        rename_attribute(img, 'srcset', 'data-srcset')
        img.set('class', img.get('class') + ' ' + policy.lazy_class if img.get('class') else policy.lazy_class)

        noscript = html.Element('noscript')
        noscript.append(fallback)
        img.addprevious(noscript)
        count += 1
    return count


def rewrite_images(markup, policy):
    fragment = parse_fragment(markup)
    if fragment.tree is None or not lazy_load_images(fragment.tree, policy):
        return markup, fragment.status
    return fragment.serialize(), fragment.status


def _lazy_iframe_attributes(attrs):
    tokens = ATTRIBUTE_TOKEN.findall(attrs)
    if any(name.lower() == 'data-src' for space, name, value, junk in tokens):
        return attrs

    # The tokens cover every character of the attribute text, so joining them back is lossless.
    result = []
    for space, name, value, junk in tokens:
        if name.lower() == 'src' and value:
            name = 'data-' + name
        result.append(space + name + value + junk)
    return ''.join(result)


def rewrite_iframes(markup):
    if not markup:
        return markup
    return IFRAME_START_TAG.sub(lambda match: '<%s%s>' % (match.group(0)[1:7], _lazy_iframe_attributes(match.group(1))),
                                markup)


def script_placeholder(url, policy):
    return format_html('<div class="{}" data-src="{}"></div>', policy.script_class, url or '')

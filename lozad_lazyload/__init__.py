from lozad_lazyload.conf import Policy
from lozad_lazyload.converter import DocumentContext, LozadConverter
from lozad_lazyload.lxml_tree import ParseStatus

__all__ = ['DocumentContext', 'LozadConverter', 'ParseStatus', 'Policy']

"""
Final encoding of a rendered tree: raw text or an HTML fragment for an image
renderer.
"""

import abc
import html
import logging
from . import errors, layout

__public__ = ['ImageRenderer', 'OutputFormatter']

logger = logging.getLogger(__name__)


class ImageRenderer(abc.ABC):
    """ Rasterizes an HTML fragment.  Implementations usually drive a
    headless browser so `render` is a coroutine. """

    @abc.abstractmethod
    async def render(self, markup):
        """ Return the image for `markup` (usually PNG bytes). """
        pass


class OutputFormatter(object):
    """ Produce the text or markup form of a tree.  The image renderer is
    optional; it is only needed to `rasterize`. """

    document_fmt = '<html><pre style="%s">%s</pre></html>'

    def __init__(self, css=None, renderer=None):
        self.css_properties = dict(css or {})
        self.renderer = renderer

    def css(self):
        return ' '.join('%s: %s;' % x for x in self.css_properties.items())

    def format_text(self, tree, style, max_depth, filtering=False):
        highlight = layout.Highlight.marker if filtering else \
            layout.Highlight.none
        return layout.render_tree(tree, style, max_depth=max_depth,
                                  highlight=highlight)

    def format_markup(self, tree, style, max_depth, filtering=False):
        highlight = layout.Highlight.emphasis if filtering else \
            layout.Highlight.none
        body = layout.render_tree(tree, style, max_depth=max_depth,
                                  highlight=highlight,
                                  encoding=layout.Encoding.markup)
        return self.document_fmt % (html.escape(self.css()), body)

    def format(self, tree, style, max_depth, image=False, filtering=False):
        fmt = self.format_markup if image else self.format_text
        return fmt(tree, style, max_depth, filtering=filtering)

    def check_renderer(self):
        if self.renderer is None:
            raise errors.RenderingUnavailable()

    async def rasterize(self, markup):
        self.check_renderer()
        logger.debug('Rasterizing %d bytes of markup with %s', len(markup),
                     type(self.renderer).__name__)
        return await self.renderer.render(markup)

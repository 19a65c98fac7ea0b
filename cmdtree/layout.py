"""
Tree layout.
"""

import enum
import html

__public__ = ['Highlight', 'Encoding', 'TreeRenderer', 'render_tree']

Highlight = enum.Enum('Highlight', 'none marker emphasis')
Encoding = enum.Enum('Encoding', 'text markup')


class TreeRenderer(object):
    """ Draw a `CommandTree` with the glyphs of a `StyleSpec`.

    Matched nodes are either prefixed with a literal marker or wrapped in an
    emphasis tag depending on `highlight`.  The `markup` encoding escapes all
    text and breaks lines with `<br/>` so the output can be embedded in an
    HTML document. """

    marker = '(*) '
    ellipsis = '...'
    emphasis_fmt = '<strong style="color: red;">%s</strong>'
    linebreaks = {
        Encoding.text: '\n',
        Encoding.markup: '<br/>',
    }

    def __init__(self, style, max_depth=10, highlight=Highlight.none,
                 encoding=Encoding.text):
        if max_depth < 0:
            raise ValueError('max_depth must not be negative: %d' % max_depth)
        self.style = style
        self.max_depth = max_depth
        self.highlight = highlight
        self.encoding = encoding

    def escape(self, text):
        if self.encoding is Encoding.markup:
            return html.escape(text, quote=False)
        return text

    def header(self, node):
        text = node.display
        if node.description:
            text = '%s: %s' % (text, node.description)
        if node.is_match and self.highlight is Highlight.marker:
            text = self.marker + text
        text = self.escape(text)
        if node.is_match and self.highlight is Highlight.emphasis:
            text = self.emphasis_fmt % text
        return text

    def render_node(self, node, indent='', depth=0):
        """ Yield the lines for a node and its visible descendants.  The
        first line is the bare header; callers add the connector. """
        yield self.header(node)
        if depth >= self.max_depth or not node.children:
            return
        items = list(node.children)
        if node.truncated:
            items.append(None)
        end = len(items) - 1
        for i, x in enumerate(items):
            if i == end:
                connector = self.style.last_branch
                carry = indent + self.style.filler
            else:
                connector = self.style.branch
                carry = indent + self.style.bar
            prefix = self.escape(indent + connector)
            if x is None:
                yield prefix + self.ellipsis
            else:
                lines = self.render_node(x, carry, depth + 1)
                yield prefix + next(lines)
                yield from lines

    def render(self, tree):
        lines = list(self.render_node(tree))
        if not lines[0]:
            # Nameless root; its children start the output.
            del lines[0]
        return self.linebreaks[self.encoding].join(lines)


def render_tree(tree, style, max_depth=10, highlight=Highlight.none,
                encoding=Encoding.text):
    """ Render a `CommandTree` to a string. """
    return TreeRenderer(style, max_depth=max_depth, highlight=highlight,
                        encoding=encoding).render(tree)

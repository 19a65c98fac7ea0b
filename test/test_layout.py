import cmdtree
import unittest
from cmdtree import layout as L

ASCII = cmdtree.resolve_style('ascii-box', 4)
UNICODE = cmdtree.resolve_style('unicode-box', 4)
PLAIN = cmdtree.resolve_style('plain-indent', 4)


def node(display, *children, description='', is_match=False,
         truncated=False):
    return cmdtree.CommandTree(display=display, description=description,
                               children=children, is_match=is_match,
                               subtree_matches=is_match, truncated=truncated)


def sample():
    return node('a', node('b', node('d')), node('c'))


class TextRendering(unittest.TestCase):

    def render(self, tree, style=ASCII, max_depth=10, **kwargs):
        return L.render_tree(tree, style, max_depth=max_depth, **kwargs)

    def test_chain(self):
        t = cmdtree.build_tree(cmdtree.Registry(['a', 'a.b', 'a.b.c']), 'a')
        self.assertEqual(self.render(t), 'a\n`- b\n    `- c')

    def test_ascii(self):
        self.assertEqual(self.render(sample()).splitlines(), [
            'a',
            '+- b',
            '|   `- d',
            '`- c'
        ])

    def test_unicode(self):
        self.assertEqual(self.render(sample(), UNICODE).splitlines(), [
            'a',
            '├── b',
            '|   └── d',
            '└── c'
        ])

    def test_plain_indent(self):
        self.assertEqual(self.render(sample(), PLAIN).splitlines(), [
            'a',
            'b',
            '    d',
            'c'
        ])

    def test_narrow_indent(self):
        style = cmdtree.resolve_style('ascii-box', 2)
        self.assertEqual(self.render(sample(), style).splitlines(), [
            'a',
            '+- b',
            '| `- d',
            '`- c'
        ])

    def test_deep_bars(self):
        t = node('r', node('a', node('b', node('c')), node('x')), node('y'))
        self.assertEqual(self.render(t).splitlines(), [
            'r',
            '+- a',
            '|   +- b',
            '|   |   `- c',
            '|   `- x',
            '`- y'
        ])

    def test_description(self):
        t = node('a', node('b', description='Bee'), description='Aye')
        self.assertEqual(self.render(t), 'a: Aye\n`- b: Bee')

    def test_ellipsis(self):
        t = node('x', node('p'), truncated=True)
        self.assertEqual(self.render(t).splitlines(), [
            'x',
            '+- p',
            '`- ...'
        ])

    def test_ellipsis_from_builder(self):
        r = cmdtree.Registry(['x', 'x.p', 'x.q', 'x.r'])
        t = cmdtree.build_tree(r, 'x', max_subcommands=1)
        self.assertEqual(self.render(t), 'x\n+- p\n`- ...')

    def test_ellipsis_bar_carry(self):
        t = node('x', node('p', node('q')), truncated=True)
        self.assertEqual(self.render(t).splitlines(), [
            'x',
            '+- p',
            '|   `- q',
            '`- ...'
        ])

    def test_truncated_without_children(self):
        self.assertEqual(self.render(node('a', truncated=True)), 'a')

    def test_depth_zero(self):
        t = node('a', node('b'), truncated=True)
        self.assertEqual(self.render(t, max_depth=0), 'a')

    def test_depth_limit(self):
        t = node('a', node('b', node('c'), truncated=True))
        self.assertEqual(self.render(t, max_depth=1), 'a\n`- b')
        self.assertEqual(self.render(t, max_depth=2),
                         'a\n`- b\n    +- c\n    `- ...')

    def test_negative_depth(self):
        self.assertRaises(ValueError, self.render, sample(), max_depth=-1)

    def test_synthetic_root(self):
        t = cmdtree.build_tree(cmdtree.Registry(['a', 'b', 'b.c']))
        self.assertEqual(self.render(t).splitlines(), [
            '+- a',
            '`- b',
            '    `- c'
        ])

    def test_empty_root(self):
        t = cmdtree.build_tree(cmdtree.Registry(['a']), filter='zzz')
        self.assertEqual(self.render(t), '')

    def test_marker(self):
        t = node('a', node('b', is_match=True, description='Bee'),
                 node('c'))
        self.assertEqual(self.render(t, highlight=L.Highlight.marker),
                         'a\n+- (*) b: Bee\n`- c')

    def test_no_highlight(self):
        t = node('a', is_match=True)
        self.assertEqual(self.render(t), 'a')

    def test_idempotent(self):
        r = cmdtree.Registry(['a', 'a.b', 'a.c', 'd'])
        params = dict(max_subcommands=1, filter='a')
        first = self.render(cmdtree.build_tree(r, **params),
                            highlight=L.Highlight.marker)
        second = self.render(cmdtree.build_tree(r, **params),
                             highlight=L.Highlight.marker)
        self.assertEqual(first, second)


class MarkupRendering(unittest.TestCase):

    def render(self, tree, highlight=L.Highlight.emphasis, max_depth=10):
        return L.render_tree(tree, ASCII, max_depth=max_depth,
                             highlight=highlight, encoding=L.Encoding.markup)

    def test_linebreaks(self):
        self.assertEqual(self.render(sample()),
                         'a<br/>+- b<br/>|   `- d<br/>`- c')

    def test_escape(self):
        t = node('a<b>', description='x & y')
        self.assertEqual(self.render(t), 'a&lt;b&gt;: x &amp; y')

    def test_emphasis(self):
        t = node('a', node('b', is_match=True, description='<B>'))
        self.assertEqual(self.render(t),
                         'a<br/>`- <strong style="color: red;">b: '
                         '&lt;B&gt;</strong>')

    def test_emphasis_excludes_marker(self):
        t = node('a', is_match=True)
        self.assertNotIn('(*)', self.render(t))

    def test_ellipsis(self):
        t = node('x', node('p'), truncated=True)
        self.assertEqual(self.render(t), 'x<br/>+- p<br/>`- ...')

import asyncio
import cmdtree
import unittest
from cmdtree import config

STYLE = cmdtree.resolve_style('ascii-box', 4)


class FakeRenderer(cmdtree.ImageRenderer):

    def __init__(self):
        self.calls = []

    async def render(self, markup):
        self.calls.append(markup)
        await asyncio.sleep(0)
        return b'PNG:' + markup.encode()


def sample(filter=None):
    r = cmdtree.Registry(['a', 'a.b', 'c'])
    return cmdtree.build_tree(r, filter=filter)


class Formatting(unittest.TestCase):

    def test_css(self):
        f = cmdtree.OutputFormatter(css=config.DEFAULT_CSS)
        self.assertEqual(f.css(), "padding: 1em; line-height: 1; "
                                  "font-feature-settings: 'liga' on;")

    def test_css_empty(self):
        self.assertEqual(cmdtree.OutputFormatter().css(), '')

    def test_text_unfiltered(self):
        f = cmdtree.OutputFormatter()
        self.assertEqual(f.format_text(sample(), STYLE, 10),
                         '+- a\n|   `- b\n`- c')

    def test_text_filtered(self):
        f = cmdtree.OutputFormatter()
        self.assertEqual(f.format_text(sample('b'), STYLE, 10,
                                       filtering=True),
                         '`- a\n    `- (*) b')

    def test_markup(self):
        f = cmdtree.OutputFormatter(css={'padding': '1em', 'font': "'x'"})
        self.assertEqual(f.format_markup(sample('b'), STYLE, 10,
                                         filtering=True),
                         '<html><pre style="padding: 1em; font: &#x27;x&#x27;'
                         ';">`- a<br/>    `- <strong style="color: red;">b'
                         '</strong></pre></html>')

    def test_markup_unfiltered(self):
        f = cmdtree.OutputFormatter()
        markup = f.format_markup(sample(), STYLE, 10)
        self.assertNotIn('<strong', markup)
        self.assertNotIn('(*)', markup)

    def test_format_dispatch(self):
        f = cmdtree.OutputFormatter()
        t = sample()
        self.assertEqual(f.format(t, STYLE, 10), f.format_text(t, STYLE, 10))
        self.assertEqual(f.format(t, STYLE, 10, image=True),
                         f.format_markup(t, STYLE, 10))


class Rasterizing(unittest.TestCase):

    def test_unavailable(self):
        f = cmdtree.OutputFormatter()
        self.assertRaises(cmdtree.RenderingUnavailable, f.check_renderer)
        self.assertRaises(cmdtree.RenderingUnavailable, asyncio.run,
                          f.rasterize('<html></html>'))

    def test_render(self):
        renderer = FakeRenderer()
        f = cmdtree.OutputFormatter(renderer=renderer)
        markup = f.format_markup(sample(), STYLE, 10)
        self.assertEqual(asyncio.run(f.rasterize(markup)),
                         b'PNG:' + markup.encode())
        self.assertEqual(renderer.calls, [markup])

    def test_abstract(self):
        self.assertRaises(TypeError, cmdtree.ImageRenderer)

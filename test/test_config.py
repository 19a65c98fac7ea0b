import cmdtree
import os
import tempfile
import unittest
from cmdtree import config


class ConfigLoading(unittest.TestCase):

    def load(self, content):
        with tempfile.NamedTemporaryFile('w', suffix='.ini',
                                         delete=False) as f:
            f.write(content)
        try:
            return cmdtree.load_config(f.name, home=False)
        finally:
            os.unlink(f.name)

    def test_defaults(self):
        c = cmdtree.load_config(home=False)
        self.assertEqual(c.indent, 4)
        self.assertEqual(c.max_depth, 10)
        self.assertEqual(c.max_subcommands, 5)
        self.assertIs(c.to_image, True)
        self.assertEqual(c.style, 'ascii-box')
        self.assertEqual(list(c.custom_css.items()), [
            ('padding', '1em'),
            ('line-height', '1'),
            ('font-feature-settings', "'liga' on"),
        ])

    def test_overrides(self):
        c = self.load('[tree]\nindent = 2\nstyle = asciiex\nto_image = no\n'
                      'max_subcommands = 0\n\n[css]\nfont-family = Mono\n'
                      'padding = 2em\n')
        self.assertEqual(c.indent, 2)
        self.assertEqual(c.style, 'unicode-box')
        self.assertIs(c.to_image, False)
        self.assertEqual(c.max_subcommands, 0)
        self.assertEqual(c.max_depth, 10)
        self.assertEqual(list(c.custom_css.items()), [
            ('font-family', 'Mono'),
            ('padding', '2em'),
        ])

    def test_home_file(self):
        save = config.var_dir
        with tempfile.TemporaryDirectory() as tmp:
            with open(os.path.join(tmp, config.config_file), 'w') as f:
                f.write('[tree]\nmax_depth = 3\n')
            config.var_dir = tmp
            try:
                c = cmdtree.load_config()
            finally:
                config.var_dir = save
        self.assertEqual(c.max_depth, 3)

    def test_small_indent(self):
        self.assertRaises(ValueError, self.load, '[tree]\nindent = 1\n')

    def test_negative(self):
        self.assertRaises(ValueError, self.load, '[tree]\nmax_depth = -1\n')
        self.assertRaises(ValueError, self.load,
                          '[tree]\nmax_subcommands = -2\n')

    def test_bad_style(self):
        self.assertRaises(cmdtree.UnknownStyle, self.load,
                          '[tree]\nstyle = fancy\n')

    def test_immutable(self):
        c = cmdtree.load_config(home=False)
        self.assertRaises(AttributeError, setattr, c, 'indent', 8)
        with self.assertRaises(TypeError):
            c.custom_css['padding'] = '0'

"""
Static configuration for the tree command.

Defaults are overridden by `~/.cmdtree_config` and then by an explicit file.
Both are INI files; the `[tree]` section holds the tree settings and the
`[css]` section, when present, replaces the CSS applied to image output.

    [tree]
    indent = 2
    style = unicode-box
    to_image = no

    [css]
    padding = 2em
    font-family = monospace
"""

import collections
import configparser
import os.path
import types
from . import styles

__public__ = ['Config', 'load_config', 'default_config']

Config = collections.namedtuple('Config', 'indent max_depth max_subcommands '
                                'to_image style custom_css')

DEFAULT_CSS = collections.OrderedDict([
    ('padding', '1em'),
    ('line-height', '1'),
    ('font-feature-settings', "'liga' on"),
])

var_dir = os.path.expanduser('~')
config_file = '.cmdtree_config'


def default_config():
    return {
        "tree": {
            "indent": '4',
            "max_depth": '10',
            "max_subcommands": '5',
            "to_image": 'true',
            "style": 'ascii-box',
        }
    }


def _natural(section, key, minimum=0):
    value = section.getint(key)
    if value < minimum:
        raise ValueError('Config value `%s` must be at least %d: %d' % (
                         key, minimum, value))
    return value


def from_parser(parser):
    """ Validate a loaded `ConfigParser` and freeze it into a `Config`. """
    tree = parser['tree']
    if parser.has_section('css'):
        css = collections.OrderedDict(parser['css'].items())
    else:
        css = DEFAULT_CSS
    return Config(
        indent=_natural(tree, 'indent', minimum=2),
        max_depth=_natural(tree, 'max_depth'),
        max_subcommands=_natural(tree, 'max_subcommands'),
        to_image=tree.getboolean('to_image'),
        style=styles.canonical_name(tree['style']),
        custom_css=types.MappingProxyType(collections.OrderedDict(css))
    )


def load_config(filename=None, home=True):
    """ Return the merged `Config`.  `home` controls whether the per-user
    config file is read. """
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str
    parser.read_dict(default_config())
    if home:
        parser.read(os.path.join(var_dir, config_file))
    if filename is not None:
        with open(filename) as f:
            parser.read_file(f)
    return from_parser(parser)

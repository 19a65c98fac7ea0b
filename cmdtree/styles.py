"""
Glyph sets used to draw the branches of a command tree.
"""

import collections
from . import errors

__public__ = ['StyleSpec', 'resolve_style', 'style_names']

StyleSpec = collections.namedtuple('StyleSpec', 'filler bar branch '
                                   'last_branch')


def _plain_indent(indent):
    return StyleSpec(filler=' ' * indent, bar=' ' * indent, branch='',
                     last_branch='')


def _ascii_box(indent):
    return StyleSpec(filler=' ' * indent, bar='|' + ' ' * (indent - 1),
                     branch='+- ', last_branch='`- ')


def _unicode_box(indent):
    return StyleSpec(filler=' ' * indent, bar='|' + ' ' * (indent - 1),
                     branch='├── ', last_branch='└── ')


STYLES = collections.OrderedDict([
    ('plain-indent', _plain_indent),
    ('ascii-box', _ascii_box),
    ('unicode-box', _unicode_box),
])

ALIASES = {
    'indent': 'plain-indent',
    'ascii': 'ascii-box',
    'asciiex': 'unicode-box',
}


def style_names(aliases=False):
    """ Canonical style names in catalog order, optionally followed by the
    short aliases. """
    names = list(STYLES)
    if aliases:
        names.extend(ALIASES)
    return names


def canonical_name(name):
    """ Map a style name or alias to its catalog name or raise
    `UnknownStyle`. """
    name = ALIASES.get(name, name)
    if name not in STYLES:
        raise errors.UnknownStyle(name, choices=style_names())
    return name


def resolve_style(name, indent=4):
    """ Return the `StyleSpec` for a named style at the given indent
    width. """
    factory = STYLES[canonical_name(name)]
    if indent < 2:
        raise ValueError('Indent must be at least 2: %d' % indent)
    return factory(indent)

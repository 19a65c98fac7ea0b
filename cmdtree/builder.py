"""
Select the part of a command registry that should be shown.

The builder walks raw registry commands and produces an immutable tree of
`CommandTree` nodes that is already filtered, ordered and truncated.  Depth
is not limited here; every node is fully annotated so the renderer can cut
the tree at any depth.
"""

import collections
import html
import logging
from . import errors
from .locale import Locale

__public__ = ['CommandTree', 'BuildParams', 'TreeBuilder', 'build_tree',
              'walk']

logger = logging.getLogger(__name__)

CommandTree = collections.namedtuple('CommandTree', 'display description '
                                     'children is_match subtree_matches '
                                     'truncated')

BuildParams = collections.namedtuple('BuildParams', 'max_depth '
                                     'max_subcommands filter full_path')
BuildParams.__new__.__defaults__ = (10, 5, None, False)


def walk(tree):
    """ Yield every node of a `CommandTree`, parents before children. """
    yield tree
    for x in tree.children:
        yield from walk(x)


class TreeBuilder(object):
    """ Build `CommandTree` objects from a registry. """

    def __init__(self, registry, locale=None, params=None):
        self.registry = registry
        self.locale = locale if locale is not None else Locale()
        self.params = params if params is not None else BuildParams()
        if self.params.max_subcommands < 0:
            raise ValueError('max_subcommands must not be negative: %d' %
                             self.params.max_subcommands)
        self.hoisted = 0

    @property
    def filtering(self):
        return bool(self.params.filter)

    def remove_hoisted(self, commands):
        """ Drop any command whose name extends a sibling's name, i.e. `x.y`
        when `x` is a sibling.  Those are shown nested under `x`. """
        prefixes = tuple('%s.' % x.name for x in commands)
        keep = [x for x in commands if not x.name.startswith(prefixes)]
        self.hoisted += len(commands) - len(keep)
        return keep

    def build_children(self, commands):
        """ Build, filter and order a sibling list.  The result is not
        truncated so callers can tell how many were available. """
        subs = [self.build_node(x) for x in self.remove_hoisted(commands)]
        if self.filtering:
            subs = [x for x in subs if x.subtree_matches]
            subs.sort(key=lambda x: x.subtree_matches)
        return subs

    def build_node(self, command):
        name = command.name
        display = html.unescape(name if self.params.full_path else
                                name.rsplit('.', 1)[-1])
        description = html.unescape(self.locale.describe(name))
        is_match = not self.filtering or self.params.filter in display
        subs = self.build_children(command.children)
        return self.make_tree(display, description, subs, is_match)

    def make_tree(self, display, description, subs, is_match):
        limit = self.params.max_subcommands
        subtree_matches = is_match or any(x.subtree_matches for x in subs)
        return CommandTree(display=display, description=description,
                           children=tuple(subs[:limit]), is_match=is_match,
                           subtree_matches=subtree_matches,
                           truncated=len(subs) > limit)

    def build(self, root=None):
        """ Build the tree for a `RawCommand` or, if `root` is None, for the
        whole registry under a synthetic root with no name. """
        self.hoisted = 0
        if root is not None:
            tree = self.build_node(root)
        else:
            subs = self.build_children(self.registry.commands)
            tree = self.make_tree('', '', subs, False)
        logger.debug('Built tree for %s: %d nodes, %d hoisted, filter=%r',
                     root.name if root is not None else '<root>',
                     sum(1 for _ in walk(tree)), self.hoisted,
                     self.params.filter)
        return tree

    def build_path(self, path=None):
        """ Resolve a dotted path with the registry and build it.  An empty
        path builds the whole registry. """
        if not path:
            return self.build()
        command = self.registry.resolve(path)
        if command is None:
            raise errors.CommandNotFound(path)
        return self.build(command)


def build_tree(registry, path=None, locale=None, **params):
    """ Shortcut for building a tree from keyword parameters. E.g.

        build_tree(registry, 'db', max_subcommands=3, filter='mig')
    """
    builder = TreeBuilder(registry, locale=locale,
                          params=BuildParams(**params))
    return builder.build_path(path)

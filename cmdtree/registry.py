"""
In-memory command registry.

Commands are identified by dot separated names where `a.b` is a child of `a`.
The registry keeps a flat list of every command in registration order, which
means nested commands also show up at the top level of `commands`.  Anything
rendering the registry is expected to collapse those duplicates.
"""

import collections
import configparser

__public__ = ['RawCommand', 'Registry']


class RawCommand(object):
    """ A single registered command. """

    def __init__(self, name, title=None):
        self.name = name
        self.title = title
        self.parent = None
        self.children = []

    def __repr__(self):
        return '<%s: %s (%d children)>' % (type(self).__name__, self.name,
                                           len(self.children))

    @property
    def leaf(self):
        """ The last segment of the dotted name. """
        return self.name.rsplit('.', 1)[-1]


class Registry(object):
    """ Lookup table and hierarchy of `RawCommand` objects. """

    RawCommand = RawCommand

    def __init__(self, names=None):
        self._commands = collections.OrderedDict()
        for x in names or ():
            self.add(x)

    def __len__(self):
        return len(self._commands)

    def __contains__(self, name):
        return name in self._commands

    def __iter__(self):
        return iter(self._commands.values())

    @classmethod
    def from_names(cls, names):
        return cls(names)

    @classmethod
    def from_config(cls, filename):
        """ Load an INI file where every section is a dotted command name.
        Section keys are ignored here, see `Locale.from_config`. """
        config = configparser.ConfigParser(interpolation=None)
        with open(filename) as f:
            config.read_file(f)
        return cls(config.sections())

    @classmethod
    def from_command(cls, root):
        """ Build a registry from the subcommands of a `Command` tree.  The
        root command itself is not registered. """
        registry = cls()

        def crawl(cmd, prefix):
            for name, sub in cmd.subcommands.items():
                fullname = '%s.%s' % (prefix, name) if prefix else name
                registry.add(fullname, title=sub.title)
                crawl(sub, fullname)
        crawl(root, '')
        return registry

    @property
    def commands(self):
        """ Every command in registration order, nested ones included. """
        return list(self._commands.values())

    def roots(self):
        return [x for x in self._commands.values() if x.parent is None]

    def validate_name(self, name):
        if not name or not all(name.split('.')):
            raise ValueError('Invalid command name: %r' % name)
        if name in self._commands:
            raise ValueError('Command name already added: %s' % name)

    def add(self, name, title=None):
        """ Register a command.  The parent is the closest registered
        dotted ancestor; commands registered earlier that belong under the
        new one are moved beneath it. """
        self.validate_name(name)
        command = self.RawCommand(name, title=title)
        parent = self.find_parent(name)
        prefix = name + '.'
        for x in self._commands.values():
            if x.name.startswith(prefix) and (x.parent is None or
                                              x.parent is parent):
                if x.parent is not None:
                    x.parent.children.remove(x)
                x.parent = command
                command.children.append(x)
        if parent is not None:
            command.parent = parent
            parent.children.append(command)
        self._commands[name] = command
        return command

    def find_parent(self, name):
        while '.' in name:
            name = name.rsplit('.', 1)[0]
            if name in self._commands:
                return self._commands[name]
        return None

    def resolve(self, path):
        """ Return the command for a dotted (or space separated) path or None
        if it is not registered. """
        if path is None:
            return None
        name = '.'.join(path.split())
        return self._commands.get(name)

"""
Command line surface.  `Command` is a small argparse based command class that
commands can be nested with, `TreeCommand` is the `tree` command that draws a
command hierarchy and `TreeTool` is the standalone `cmdtree` program.
"""

import argparse
import asyncio
import collections
import html
import inspect
import logging
import shlex
import sys
from . import builder, config, errors, output, rendering, styles
from . import logging as vtlogging
from .locale import Locale
from .registry import Registry

__public__ = ['Command', 'TreeCommand', 'TreeTool', 'main']

logger = logging.getLogger(__name__)


def _vprinterr(*args, **kwargs):
    return rendering.vtmlprint(*args, file=sys.stderr, **kwargs)


def parse_docstring(entity):
    """ Return sanitized docstring from an entity.  The first line of the
    docstring is the title, and remaining lines are the details, aka git
    style. """
    doc = inspect.getdoc(entity)
    if not doc:
        return None, None
    doc = [x.strip() for x in doc.splitlines()]
    if not doc[0]:
        doc.pop(0)
    title = (doc and doc.pop(0)) or None
    if doc and not doc[0]:
        doc.pop(0)
    desc = '\n'.join(doc) or None
    return title, desc


def natural(value):
    """ Argument type for integers >= 0. """
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError('invalid natural number: %r' % value)
    if number < 0:
        raise argparse.ArgumentTypeError('must not be negative: %d' % number)
    return number


class Command(object):
    """ A named command with an argparse parser.  Subclasses provide
    `setup_args` and `run`; the docstring becomes the title and help text.
    Subcommands are dispatched to with `__call__`. """

    name = None
    title = None
    desc = None
    command_key = '__command__'
    command_error_verbosity = 'traceback'

    def setup_args(self, parser):
        """ Subclasses should provide any setup for their parsers here. """
        pass

    def prerun(self, args):
        """ Hook to do something prior to invocation. """
        pass

    def run(self, args):
        """ Primary entry point for command exec. """
        self.argparser.print_help()
        raise SystemExit(1)

    def __init__(self, parent=None, title=None, desc=None, name=None):
        if name:
            self.name = name
        if self.name is None:
            raise RuntimeError("Command missing `name` attribute")
        if type(self) is not Command:
            alt_title, alt_desc = parse_docstring(self)
        else:
            alt_title, alt_desc = None, None
        if not self.title or title:
            self.title = title or alt_title
        if not self.desc or desc:
            self.desc = desc or alt_desc
        self.subcommands = collections.OrderedDict()
        self.subparsers = None
        self.parent = parent
        self.argparser = self.create_argparser()
        self.argparser.set_defaults(**{self.command_key: self})
        self.setup_args(self.argparser)

    def __getitem__(self, item):
        return self.subcommands[item]

    def create_argparser(self):
        if self.desc:
            if self.title:
                fulldesc = '%s\n\n%s' % (self.title, self.desc)
            else:
                fulldesc = self.desc
        else:
            fulldesc = self.title
        return argparse.ArgumentParser(prog=self.name, description=fulldesc,
                                       formatter_class=argparse.
                                       RawDescriptionHelpFormatter)

    def add_argument(self, *args, **kwargs):
        return self.argparser.add_argument(*args, **kwargs)

    def add_subcommand(self, command):
        if isinstance(command, type):
            command = command()
        if command.name in self.subcommands:
            raise ValueError('Command name already added: %s' % command.name)
        if not self.subparsers:
            self.subparsers = self.argparser.add_subparsers(
                title='subcommands', metavar='COMMAND')
        command.parent = self
        command.argparser.prog = '%s %s' % (self.argparser.prog, command.name)
        self.subparsers._name_parser_map[command.name] = command.argparser
        action = self.subparsers._ChoicesPseudoAction(command.name, (),
                                                      command.title or '')
        self.subparsers._choices_actions.append(action)
        self.subcommands[command.name] = command
        return command

    def find_root(self):
        """ Traverse parent refs to top. """
        cmd = self
        while cmd.parent:
            cmd = cmd.parent
        return cmd

    def parse_args(self, argv=None):
        """ Parse a string (split like a shell would) or list of args.  None
        means `sys.argv`. """
        if isinstance(argv, str):
            argv = shlex.split(argv)
        return self.argparser.parse_args(argv)

    def __call__(self, args=None, argv=None):
        """ Parse `argv` if need be and execute the deepest command that was
        selected. """
        if args is None:
            args = self.parse_args(argv)
        command = getattr(args, self.command_key, self)
        return command.execute(args)

    def execute(self, args):
        """ Exception conversion around command execution.  Errors are
        printed and converted to SystemExit so the interpretor will exit
        without further ado. """
        try:
            self.prerun(args)
            return self.run(args)
        except BrokenPipeError as e:
            _vprinterr('<dim><red>...broken pipe...</red></dim>')
            raise SystemExit(1) from e
        except KeyboardInterrupt as e:
            _vprinterr('<dim><red>...interrupted...</red></dim>')
            raise SystemExit(1) from e
        except Exception as e:
            self.handle_command_error(e)
            raise SystemExit(1) from e

    def handle_command_error(self, exc):
        verbosity = self.command_error_verbosity
        if verbosity == 'raise':
            raise exc
        elif isinstance(exc, errors.CommandTreeError) or \
                verbosity == 'pretty':
            _vprinterr("<red>%s</red>" % html.escape(str(exc)))
        elif verbosity == 'traceback':
            _vprinterr("<red>Command '%s' error, traceback...</red>" %
                       self.argparser.prog)
            rendering.print_exception(exc, file=sys.stderr)
        else:
            raise ValueError('Unexpected command_error_verbosity: %s' %
                             verbosity)


class TreeCommand(Command):
    """ Display the command tree.

    Shows the commands of a registry as a tree, starting at PATH when given.
    Matches of --filter are marked with (*) in text output and highlighted
    in image output; their ancestors are kept so the matches stay in
    context.  Lists with more than --max-sub entries end with "...".
    """

    name = 'tree'

    def __init__(self, *args, registry=None, locale=None, config=None,
                 renderer=None, **kwargs):
        self.registry = registry
        self.locale = locale
        self.config = config
        self.renderer = renderer
        super().__init__(*args, **kwargs)

    def setup_args(self, parser):
        self.add_argument('path', nargs='?', help='Dotted path of the '
                          'command to start at, e.g. "db.migrate".')
        self.add_argument('-L', '--max-depth', type=natural, metavar='DEPTH',
                          help='Maximum depth of the command tree.')
        self.add_argument('-m', '--max-sub', type=natural, metavar='COUNT',
                          help='Maximum count of displayed subcommands.')
        self.add_argument('-p', '--fullpath', action='store_true',
                          help='Display full paths of subcommands.')
        self.add_argument('-i', '--image', action='store_const', const=True,
                          dest='image', help='Render to image.')
        self.add_argument('-I', '--no-image', action='store_const',
                          const=False, dest='image',
                          help='Do not render to image.')
        self.add_argument('-f', '--filter', help='Search for commands '
                          'containing this text.')
        self.add_argument('-s', '--style', help='Style to use. Available '
                          'styles: %s' % ' | '.join(styles.style_names()))
        self.add_argument('-o', '--output', metavar='FILE', help='Write the '
                          'image to this file instead of stdout.')

    def get_config(self):
        if self.config is None:
            self.config = config.load_config()
        return self.config

    def get_registry(self):
        """ Default to the command tree this command is mounted in. """
        if self.registry is None:
            self.registry = Registry.from_command(self.find_root())
        return self.registry

    def get_locale(self):
        if self.locale is None:
            self.locale = Locale.from_registry(self.get_registry())
        return self.locale

    def get_formatter(self):
        return output.OutputFormatter(css=self.get_config().custom_css,
                                      renderer=self.renderer)

    def render(self, path=None, max_depth=None, max_sub=None, fullpath=False,
               image=None, filter=None, style=None):
        """ Build and render a tree.  Returns a tuple of the rendered string
        and whether it is markup meant for rasterization. """
        conf = self.get_config()
        spec = styles.resolve_style(style or conf.style, conf.indent)
        image = conf.to_image if image is None else image
        formatter = self.get_formatter()
        if image:
            formatter.check_renderer()
        max_depth = conf.max_depth if max_depth is None else max_depth
        params = builder.BuildParams(
            max_depth=max_depth,
            max_subcommands=conf.max_subcommands if max_sub is None else
            max_sub,
            filter=filter,
            full_path=fullpath)
        tree = builder.TreeBuilder(self.get_registry(), self.get_locale(),
                                   params).build_path(path)
        return formatter.format(tree, spec, max_depth, image=image,
                                filtering=bool(filter)), image

    def run(self, args):
        result, image = self.render(args.path, max_depth=args.max_depth,
                                    max_sub=args.max_sub,
                                    fullpath=args.fullpath, image=args.image,
                                    filter=args.filter, style=args.style)
        if not image:
            if result:
                print(result)
            return result
        artifact = asyncio.run(self.get_formatter().rasterize(result))
        self.write_image(artifact, args.output)
        return artifact

    def write_image(self, artifact, filename=None):
        if isinstance(artifact, str):
            artifact = artifact.encode()
        if filename:
            with open(filename, 'wb') as f:
                f.write(artifact)
            logger.info('Wrote %d bytes to %s', len(artifact), filename)
        else:
            sys.stdout.buffer.write(artifact)
            sys.stdout.flush()


class TreeTool(TreeCommand):
    """ Display a command tree.

    The registry is an INI file where every section is a dotted command name
    and an optional `description` key holds its description.  A markdown
    locale file may override descriptions (see `Locale.from_markdown`).
    """

    name = 'cmdtree'

    def setup_args(self, parser):
        super().setup_args(parser)
        self.add_argument('--registry', metavar='FILE', required=True,
                          help='INI file of command names.')
        self.add_argument('--locale', metavar='FILE', help='Markdown file '
                          'of command descriptions.')
        self.add_argument('--config', metavar='FILE', help='Config file '
                          'read after ~/%s.' % config.config_file)
        self.add_argument('-v', '--verbose', action='store_true',
                          help='Log debug information.')

    def prerun(self, args):
        vtlogging.setup_logging(verbose=args.verbose)
        self.config = config.load_config(args.config)
        self.registry = Registry.from_config(args.registry)
        self.locale = Locale.from_config(args.registry)
        if args.locale:
            with open(args.locale) as f:
                self.locale = self.locale.merge(Locale.from_markdown(f.read()))
        logger.debug('Loaded %d commands from %s', len(self.registry),
                     args.registry)


def main(argv=None):
    return TreeTool()(argv=argv)

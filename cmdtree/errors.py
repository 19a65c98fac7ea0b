"""
Exceptions raised while selecting and rendering a command tree.
"""

__public__ = ['CommandTreeError', 'CommandNotFound', 'UnknownStyle',
              'RenderingUnavailable']


class CommandTreeError(Exception):
    """ Base for all errors that end a tree invocation. """
    pass


class CommandNotFound(CommandTreeError):
    """ The root path given to the tree command does not resolve. """

    def __init__(self, path):
        self.path = path
        super().__init__('Command not found: %s' % path)


class UnknownStyle(CommandTreeError, ValueError):
    """ A style name outside the style catalog. """

    def __init__(self, name, choices=()):
        self.name = name
        self.choices = tuple(choices)
        msg = 'Unknown style: %s' % name
        if self.choices:
            msg += ' (choose from %s)' % ', '.join(self.choices)
        super().__init__(msg)


class RenderingUnavailable(CommandTreeError):
    """ Image output was requested but no image renderer is available. """

    def __init__(self, msg=None):
        super().__init__(msg or 'Image rendering is unavailable: no image '
                         'renderer is configured')

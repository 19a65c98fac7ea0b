"""
VTML traceback/exception formatting and printing
"""

import html
import traceback
from . import vtml

__all__ = ['format_exception', 'print_exception']

cause_message = 'The above exception was the direct cause of the ' \
                'following exception:'
context_message = 'During handling of the above exception, another ' \
                  'exception occurred:'


def format_exception(exc, indent=0, pad='  '):
    """ Take an exception object and return a generator with vtml formatted
    exception traceback lines. """
    from_msg = None
    if exc.__cause__ is not None:
        indent += yield from format_exception(exc.__cause__, indent)
        from_msg = cause_message
    elif exc.__context__ is not None and not exc.__suppress_context__:
        indent += yield from format_exception(exc.__context__, indent)
        from_msg = context_message
    padding = pad * indent
    if from_msg:
        yield '\n%s%s\n' % (padding, from_msg)
    yield '%s<b><u>Traceback (most recent call last)</u></b>' % padding
    tblist = traceback.extract_tb(exc.__traceback__)
    tbdepth = len(tblist)
    for x in tblist:
        depth = '%d.' % tbdepth
        yield '%s<dim>%-3s</dim> <cyan>File</cyan> "<blue>%s</blue>", ' \
              'line <u>%d</u>, in <b>%s</b>' % (padding, depth,
              html.escape(x.filename), x.lineno, html.escape(x.name))
        yield '%s      %s' % (padding, html.escape(x.line or ''))
        tbdepth -= 1
    yield '%s<b><red>%s</red>: %s</b>' % (padding, type(exc).__name__,
                                          html.escape(str(exc)))
    return indent + 1


def print_exception(*args, file=None, **kwargs):
    """ Print the formatted output of an exception object. """
    for line in format_exception(*args, **kwargs):
        vtml.vtmlprint(line, file=file)

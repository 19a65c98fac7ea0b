"""
A logging handler that's tty aware.
"""

import html
import logging
from . import rendering

__public__ = ['VTMLHandler', 'VTMLFormatter', 'setup_logging']


class VTMLHandler(logging.StreamHandler):
    """ Parse VTML messages to colorize and embolden logs.  Markup is
    stripped when the stream is not a tty. """

    def __init__(self, *args, fmt=None, level_prefmt=None, field_prefmt=None,
                 **kwargs):
        super().__init__(*args, **kwargs)
        self.setFormatter(VTMLFormatter(fmt=fmt, level_prefmt=level_prefmt,
                                        field_prefmt=field_prefmt))

    def format(self, record):
        isatty = getattr(self.stream, 'isatty', None)
        plain = not (isatty and isatty())
        return rendering.vtmlrender(super().format(record), plain=plain)


class VTMLFormatter(logging.Formatter):

    default_fmt = ' '.join((
        '[%(asctime)s]',
        '[%(name)s]',
        '[%(levelname)s]',
        '%(message)s'
    ))
    default_level_prefmt = {
        logging.DEBUG: '<dim>%s</dim>',
        logging.INFO: '%s',
        logging.WARNING: '<b>%s</b>',
        logging.ERROR: '<red>%s</red>',
        logging.CRITICAL: '<red><b>%s</b></red>',
    }
    default_field_prefmt = {
        "asctime": '<blue>%s</blue>',
        "name": '<green>%s</green>',
        "funcName": '<yellow>%s</yellow>',
        "lineno": '<cyan>%s</cyan>',
    }

    def __init__(self, fmt=None, field_prefmt=None, level_prefmt=None,
                 **kwargs):
        fmt = fmt or self.default_fmt
        field_prefmt = field_prefmt or self.default_field_prefmt
        self.field_prefmt = dict((k, v) for k, v in field_prefmt.items()
                                 if '%%(%s)' % k in fmt)
        self.level_prefmt = level_prefmt or self.default_level_prefmt
        self.asctime_prefmt = self.field_prefmt.pop('asctime', '%s')
        super().__init__(fmt=fmt, **kwargs)

    def formatException(self, ei):
        return '\n'.join(rendering.format_exception(ei[1]))

    def formatTime(self, *args, **kwargs):
        return self.asctime_prefmt % super().formatTime(*args, **kwargs)

    def formatMessage(self, record):
        # Work on a copy so other handlers see the untouched record.
        values = dict(record.__dict__)
        values['message'] = html.escape(record.message, quote=False)
        values['levelname'] = self.level_prefmt.get(
            record.levelno, '%s') % record.levelname
        for key, fmt in self.field_prefmt.items():
            values[key] = fmt % values[key]
        return self._style._fmt % values


def setup_logging(verbose=False, stream=None):
    """ Attach a `VTMLHandler` to the package logger. """
    logger = logging.getLogger('cmdtree')
    for x in list(logger.handlers):
        if isinstance(x, VTMLHandler):
            logger.removeHandler(x)
    handler = VTMLHandler(stream)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return handler

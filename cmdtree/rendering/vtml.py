"""
VTML: a tiny SGML style markup for VT100 text attributes.

    vtmlprint('<red>Command not found:</red> <b>%s</b>' % html.escape(name))

Unknown tags are passed through as text.  When the output is not a tty the
attributes are dropped.
"""

import html.parser
import sys

__all__ = ['TAGS', 'VTMLParser', 'vtmlrender', 'vtmlprint']

TAGS = {
    'b': 1,
    'dim': 2,
    'i': 3,
    'u': 4,
    'reverse': 7,
    'black': 30,
    'red': 31,
    'green': 32,
    'yellow': 33,
    'blue': 34,
    'magenta': 35,
    'cyan': 36,
    'white': 37,
}

RESET = '\033[0m'


class VTMLParser(html.parser.HTMLParser):
    """ Convert VTML to a string with VT100 opcodes (or none if `plain`). """

    def __init__(self, plain=False):
        self.plain = plain
        super().__init__(convert_charrefs=True)

    def reset(self):
        self.buf = []
        self.open_tags = []
        super().reset()

    def opcode(self, tag):
        return '' if self.plain else '\033[%dm' % TAGS[tag]

    def handle_starttag(self, tag, attrs):
        if tag not in TAGS:
            return self.handle_data(self.get_starttag_text())
        self.open_tags.append(tag)
        self.buf.append(self.opcode(tag))

    def handle_endtag(self, tag):
        if tag not in TAGS:
            return self.handle_data('</%s>' % tag)
        if not self.open_tags or self.open_tags[-1] != tag:
            raise SyntaxError('Bad close tag: %s' % tag)
        del self.open_tags[-1]
        if not self.plain:
            # Reset clears every attribute so restore the outer ones.
            self.buf.append(RESET)
            self.buf.extend(self.opcode(x) for x in self.open_tags)

    def handle_data(self, data):
        self.buf.append(data)

    def close(self):
        super().close()
        if self.open_tags and not self.plain:
            self.buf.append(RESET)

    def getvalue(self):
        return ''.join(self.buf)


def vtmlrender(vtmarkup, plain=False, strict=False):
    """ Render VTML into a string.  Markup errors fall back to the raw
    input unless `strict` is set. """
    parser = VTMLParser(plain=plain)
    try:
        parser.feed(vtmarkup)
        parser.close()
    except SyntaxError:
        if strict:
            raise
        return vtmarkup
    return parser.getvalue()


def vtmlprint(*values, plain=None, strict=False, file=None, **options):
    """ Follow normal print() signature but render VTML first.  `plain`
    defaults to True when `file` is not a tty. """
    file = sys.stdout if file is None else file
    if plain is None:
        plain = not file.isatty()
    print(*[vtmlrender(x, plain=plain, strict=strict) for x in values],
          file=file, **options)

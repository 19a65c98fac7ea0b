"""
Localized command descriptions.

Descriptions are stored the way message catalogs usually keep them, as
markup text where `&`, `<` and `>` may appear as entity references.  Callers
that need display text are responsible for unescaping.
"""

import collections
import configparser
import html
import html.parser
import markdown2
import re

__public__ = ['Locale']

_md = markdown2.Markdown(extras=['code-friendly'])


class MarkdownCatalogParser(html.parser.HTMLParser):
    """ Collect `<h2>` headings and the paragraph text that follows them
    from a rendered markdown catalog.  Entity refs are kept escaped and tags
    markdown does not produce are kept as escaped text. """

    heading = 'h2'
    markdown_tags = {'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'p', 'em', 'strong',
                     'code', 'pre', 'a', 'ul', 'ol', 'li', 'blockquote', 'br',
                     'hr', 'img'}
    whitespace = re.compile(r'\s+')

    def __init__(self):
        super().__init__(convert_charrefs=False)

    def reset(self):
        self.entries = collections.OrderedDict()
        self.current = None
        self.tag_stack = []
        self.buf = []
        super().reset()

    def text(self):
        return self.whitespace.sub(' ', ''.join(self.buf)).strip()

    def handle_starttag(self, tag, attrs):
        if tag not in self.markdown_tags:
            self.handle_data(html.escape(self.get_starttag_text(),
                                         quote=False))
            return
        self.tag_stack.append(tag)
        if tag == self.heading:
            self.flush()
            self.buf = []
        elif tag == 'p' and self.current is not None and self.buf:
            self.buf.append(' ')

    def handle_endtag(self, tag):
        if tag not in self.markdown_tags:
            self.handle_data('&lt;/%s&gt;' % tag)
            return
        if tag in self.tag_stack:
            while self.tag_stack.pop() != tag:
                pass
        if tag == self.heading:
            self.current = self.text()
            self.buf = []

    def handle_data(self, data):
        if self.tag_stack:
            self.buf.append(data)

    def handle_entityref(self, name):
        self.handle_data('&%s;' % name)

    def handle_charref(self, name):
        self.handle_data('&#%s;' % name)

    def flush(self):
        if self.current:
            self.entries[self.current] = self.text()
        self.current = None

    def close(self):
        super().close()
        self.flush()

    def getvalue(self):
        return self.entries


class Locale(object):
    """ Map of command name to localized description. """

    def __init__(self, descriptions=None):
        self._descriptions = dict(descriptions or {})

    def __len__(self):
        return len(self._descriptions)

    def __contains__(self, name):
        return name in self._descriptions

    def describe(self, name):
        """ Return the description registered for a command name or an empty
        string. """
        return self._descriptions.get(name) or ''

    def merge(self, other):
        """ Return a new locale where entries from `other` win. """
        merged = dict(self._descriptions)
        merged.update(other._descriptions)
        return type(self)(merged)

    @classmethod
    def from_markdown(cls, markdown):
        """ Parse a markdown catalog.  Each second level heading names a
        command and the paragraphs below it are the description, e.g.

            ## db
            Database tools.

            ## db.migrate
            Apply schema migrations &amp; seed data.
        """
        parser = MarkdownCatalogParser()
        parser.feed(_md.convert(markdown))
        parser.close()
        return cls(parser.getvalue())

    @classmethod
    def from_config(cls, filename):
        """ Read `description` keys from an INI registry file. """
        config = configparser.ConfigParser(interpolation=None)
        with open(filename) as f:
            config.read_file(f)
        return cls((section, config[section]['description'])
                   for section in config.sections()
                   if 'description' in config[section])

    @classmethod
    def from_registry(cls, registry):
        """ Use registered command titles as descriptions. """
        return cls((x.name, html.escape(x.title, quote=False))
                   for x in registry if x.title)

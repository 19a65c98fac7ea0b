"""
An image renderer stand-in that keeps the HTML.  Real renderers hand the
markup to a headless browser and return a screenshot.

    $ python html_renderer.py tree -i -o tree.html
"""

import cmdtree


class HTMLRenderer(cmdtree.ImageRenderer):

    async def render(self, markup):
        return markup.encode()


main = cmdtree.Command(name='htmldemo')
main.add_subcommand(cmdtree.Command(name='status', title='Show status.'))
main.add_subcommand(cmdtree.TreeCommand(renderer=HTMLRenderer()))
main()

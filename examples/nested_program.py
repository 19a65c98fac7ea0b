"""
Mount the tree command in a program to show its own commands.

    $ python nested_program.py tree -I
    $ python nested_program.py tree -I -f mig
"""

import cmdtree


class Db(cmdtree.Command):
    """ Database tools. """
    name = 'db'


class Migrate(cmdtree.Command):
    """ Apply schema migrations. """
    name = 'migrate'

    def run(self, args):
        print("Migrating")


class Seed(cmdtree.Command):
    """ Load fixture data. """
    name = 'seed'

    def run(self, args):
        print("Seeding")


main = cmdtree.Command(name='nested')
db = main.add_subcommand(Db)
db.add_subcommand(Migrate)
db.add_subcommand(Seed)
main.add_subcommand(cmdtree.TreeCommand)
main()

"""
Public interface.
"""

import importlib

for x in ['errors', 'styles', 'registry', 'locale', 'builder', 'layout',
          'output', 'config', 'command']:
    module = importlib.import_module('.%s' % x, 'cmdtree')
    for sym in module.__public__:
        globals()[sym] = getattr(module, sym)

"""
VT100 markup rendering used for terminal output.
"""

from .vtml import *
from .traceback import *

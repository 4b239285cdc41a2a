"""treepath: slash-delimited addresses for nodes in a component tree."""

from treepath.path import *  # noqa: F401, F403
from treepath.path import __all__  # noqa: F401

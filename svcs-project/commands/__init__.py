# This file makes the 'commands' directory a Python package
# Importing command modules from here

from . import config
from . import add
from . import log
from . import commit
from . import checkout

from .constants import *
from .types import *
from .errors import *
from .tokenizer import *
from .ics import *

__version__ = '1.0.0'

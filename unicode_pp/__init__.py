from .character import Character
from .logging import log
from .normalize import equivalent
from .types import Bounds, FromEnd, FromStart, StaleCharacterError
from .unicode import Unicode


__version__ = "0.1.0"

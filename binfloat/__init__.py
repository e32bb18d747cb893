"""
binfloat - IEEE 754 single-precision binary string decoder
"""
import logging

from .errors import (
    DecodeError, MalformedInputError, SpecialExponentError,
    DomainError, AllocationError
)
from .subnormal_mode import SubnormalMode
from .encoding import *

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

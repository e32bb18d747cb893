"""
解码错误 (Decode Errors)
=======================

All failures of the decode path derive from ``DecodeError``, which is a
``ValueError`` so callers that only guard against bad arguments still catch
them.

- MalformedInputError: input is not exactly 32 characters of '0'/'1'
- SpecialExponentError: exponent field is 255 (Infinity or NaN)
- AllocationError: storage for the split fields could not be obtained

作者: binfloat Project
"""


class DecodeError(ValueError):
    """Base class for every binfloat decode failure."""


class MalformedInputError(DecodeError):
    """输入不是 32 位 '0'/'1' 字符串"""

    def __init__(self, text, reason):
        self.text = text
        self.reason = reason
        super().__init__(f"Malformed binary float {text!r}: {reason}")


class SpecialExponentError(DecodeError):
    """指数全 1 (255): 编码的是 Infinity 或 NaN

    Attributes:
        kind: 'inf' 当尾数全 0, 否则 'nan'
        sign: 符号位 (0 或 1)
    """

    def __init__(self, kind, sign):
        self.kind = kind
        self.sign = sign
        label = {'inf': '-Infinity' if sign else 'Infinity', 'nan': 'NaN'}[kind]
        super().__init__(f"Exponent is 255: value encodes {label}")


# The exponent-255 case is the only domain error of the decoder
DomainError = SpecialExponentError


class AllocationError(DecodeError, MemoryError):
    """Field storage could not be obtained."""

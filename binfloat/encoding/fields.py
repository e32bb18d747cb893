"""
位字段拆分器 (BitFieldSplitter)
==============================

把 32 位二进制字符串按 IEEE 754 单精度布局拆成三段:

    S EEEEEEEE MMMMMMMMMMMMMMMMMMMMMMM
    0 1......8 9.....................31

作者: binfloat Project
"""
import logging
from typing import NamedTuple

from binfloat.errors import AllocationError, MalformedInputError

logger = logging.getLogger(__name__)

SIGN_BITS = 1
EXPONENT_BITS = 8
MANTISSA_BITS = 23
TOTAL_BITS = SIGN_BITS + EXPONENT_BITS + MANTISSA_BITS  # 32

_BINARY_DIGITS = frozenset('01')


def _check_bits(text, width, role):
    if not isinstance(text, str):
        raise MalformedInputError(text, f"{role} must be a str, got {type(text).__name__}")
    if len(text) != width:
        raise MalformedInputError(text, f"{role} needs {width} bits, got {len(text)}")
    if not _BINARY_DIGITS.issuperset(text):
        raise MalformedInputError(text, f"{role} may only contain '0' and '1'")


class DecodedFields(NamedTuple):
    """(sign, exponent, mantissa) 三段位串, 每段都是独立的 str"""
    sign: str
    exponent: str
    mantissa: str

    @classmethod
    def create(cls, sign, exponent, mantissa):
        """校验宽度与字符集后构造"""
        _check_bits(sign, SIGN_BITS, 'sign')
        _check_bits(exponent, EXPONENT_BITS, 'exponent')
        _check_bits(mantissa, MANTISSA_BITS, 'mantissa')
        return cls(sign, exponent, mantissa)

    def __str__(self):
        return f"Sign: {self.sign} Exponent: {self.exponent} Fraction: {self.mantissa}"


def split_binary_float(binary_float):
    """拆分 32 位二进制浮点字符串

    Args:
        binary_float: 32 个 '0'/'1' 字符, 无分隔符, 无 '0b' 前缀

    Returns:
        DecodedFields

    Raises:
        MalformedInputError: 长度不是 32 或含非法字符
        AllocationError: 无法为字段分配存储
    """
    _check_bits(binary_float, TOTAL_BITS, 'binary float')

    try:
        sign = binary_float[:SIGN_BITS]
        exponent = binary_float[SIGN_BITS:SIGN_BITS + EXPONENT_BITS]
        mantissa = binary_float[SIGN_BITS + EXPONENT_BITS:]
    except MemoryError as e:
        raise AllocationError("Memory allocation error while splitting fields") from e

    fields = DecodedFields(sign, exponent, mantissa)
    logger.debug("Binary --- %s", fields)
    return fields


class BitFieldSplitter:
    """Object form of ``split_binary_float``; holds no state."""

    def split(self, binary_float):
        return split_binary_float(binary_float)

    __call__ = split

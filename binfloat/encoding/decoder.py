"""
IEEE 754 单精度解码器 (IEEE754Decoder)
=====================================

把 (sign, exponent, mantissa) 三段位串还原为十进制数值:

    value = (-1)^S * 2^(E - 127) * (1 + F)        1 <= E <= 254
    value = (-1)^S * 2^(1 - 127) * F              E == 0 (次正规数, IEEE 模式)
    E == 255 -> SpecialExponentError (Infinity / NaN)

其中 F = sum(m_i * 2^-(i+1)), i = 0..22

作者: binfloat Project
"""
import logging
from typing import NamedTuple, Optional

from binfloat.errors import DecodeError, MalformedInputError, SpecialExponentError
from binfloat.subnormal_mode import SubnormalMode
from binfloat.encoding.fields import DecodedFields, split_binary_float

logger = logging.getLogger(__name__)

EXPONENT_BIAS = 127
MAX_EXPONENT = 255


def _bit_value(ch):
    if ch == '0':
        return 0
    if ch == '1':
        return 1
    raise MalformedInputError(ch, "bit must be '0' or '1'")


def parse_integer_bits(bits):
    """大端无符号整数: acc = acc*2 + bit"""
    acc = 0
    for ch in bits:
        acc = acc * 2 + _bit_value(ch)
    return acc


def parse_fractional_bits(bits):
    """二进制小数: acc += bit * factor, factor 从 0.5 开始逐位减半

    Returns:
        [0, 1) 区间的 float
    """
    acc = 0.0
    factor = 0.5
    for ch in bits:
        acc += _bit_value(ch) * factor
        factor /= 2
    return acc


def convert_ieee_float(full_float, mode=None):
    """IEEE 754 单精度字段 -> float (double)

    Args:
        full_float: DecodedFields 或 (sign, exponent, mantissa) 三元组
        mode: SubnormalMode.IEEE / SubnormalMode.LEGACY, None 跟随全局/上下文

    Raises:
        SpecialExponentError: 指数为 255
        MalformedInputError: 字段宽度或字符非法
    """
    fields = DecodedFields.create(*full_float)

    sign = parse_integer_bits(fields.sign)
    exponent = parse_integer_bits(fields.exponent)
    fraction = parse_fractional_bits(fields.mantissa)

    logger.debug("Decimal --- Sign: %d Exponent: %d Fraction: %f", sign, exponent, fraction)

    sign_part = (-1.0) ** sign

    if exponent == MAX_EXPONENT:
        kind = 'inf' if fraction == 0.0 else 'nan'
        raise SpecialExponentError(kind, sign)
    elif exponent == 0:
        exp_part = 2.0 ** (1 - EXPONENT_BIAS)
        if SubnormalMode.keeps_leading_one(mode):
            value_part = 1.0 + fraction
        else:
            value_part = fraction
    else:
        exp_part = 2.0 ** (exponent - EXPONENT_BIAS)
        value_part = 1.0 + fraction

    return sign_part * exp_part * value_part


class IEEE754Decoder:
    """无状态解码器, 可固定实例级次正规数策略

    Args:
        mode: 实例级 SubnormalMode 覆盖, None 表示跟随全局/上下文
    """

    def __init__(self, mode=None):
        if mode is not None:
            SubnormalMode.validate(mode)
        self.mode = mode

    def decode(self, fields):
        return convert_ieee_float(fields, mode=self.mode)

    def decode_string(self, binary_float):
        return self.decode(split_binary_float(binary_float))

    __call__ = decode


class DecodeResult(NamedTuple):
    """带标签的解码结果: value 与 error 恰有一个非 None"""
    value: Optional[float] = None
    error: Optional[DecodeError] = None

    @property
    def ok(self):
        return self.error is None


def decode(binary_float, mode=None):
    """split + convert"""
    return convert_ieee_float(split_binary_float(binary_float), mode=mode)


def try_decode(binary_float, mode=None):
    """同 decode, 但把 DecodeError 包装进 DecodeResult 而不是抛出"""
    try:
        return DecodeResult(value=decode(binary_float, mode=mode))
    except DecodeError as e:
        logger.debug("decode failed for %r: %s", binary_float, e)
        return DecodeResult(error=e)

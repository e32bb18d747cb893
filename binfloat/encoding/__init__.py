"""
Encoding/Decoding components - binary string <-> fields <-> float
"""
from .fields import (
    DecodedFields, BitFieldSplitter, split_binary_float,
    SIGN_BITS, EXPONENT_BITS, MANTISSA_BITS, TOTAL_BITS
)
from .decoder import (
    IEEE754Decoder, DecodeResult,
    parse_integer_bits, parse_fractional_bits,
    convert_ieee_float, decode, try_decode,
    EXPONENT_BIAS, MAX_EXPONENT
)
from .converters import (
    bitstring_to_pulse, bitstrings_to_pulse, pulse_to_bitstring,
    float32_to_bitstring, bitstring_to_float32, float32_array_to_bitstrings
)
from .pulse_decoder import PulseFP32Decoder

__all__ = [
    'DecodedFields', 'BitFieldSplitter', 'split_binary_float',
    'SIGN_BITS', 'EXPONENT_BITS', 'MANTISSA_BITS', 'TOTAL_BITS',
    'IEEE754Decoder', 'DecodeResult',
    'parse_integer_bits', 'parse_fractional_bits',
    'convert_ieee_float', 'decode', 'try_decode',
    'EXPONENT_BIAS', 'MAX_EXPONENT',
    'bitstring_to_pulse', 'bitstrings_to_pulse', 'pulse_to_bitstring',
    'float32_to_bitstring', 'bitstring_to_float32', 'float32_array_to_bitstrings',
    'PulseFP32Decoder',
]

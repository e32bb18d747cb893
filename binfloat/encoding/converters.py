"""
转换工具 - 位串 <-> 脉冲张量, 以及基于 struct/numpy 的参考位转换

脉冲格式: [..., 32] 的 float 张量, MSB 在前 (index 0 = 符号位)
"""
import struct

import numpy as np
import torch

from binfloat.encoding.fields import TOTAL_BITS, split_binary_float


def bitstring_to_pulse(binary_float, device=None):
    """'0101...' (32 位) -> [32] 脉冲张量"""
    fields = split_binary_float(binary_float)
    bits = [float(ch == '1') for ch in ''.join(fields)]
    return torch.tensor(bits, dtype=torch.float32, device=device)


def bitstrings_to_pulse(binary_floats, device=None):
    """多个位串 -> [N, 32] 脉冲张量"""
    if len(binary_floats) == 0:
        return torch.zeros(0, TOTAL_BITS, device=device)
    return torch.stack([bitstring_to_pulse(b, device=device) for b in binary_floats])


def pulse_to_bitstring(pulse):
    """[32] 脉冲张量 -> 位串 (阈值 0.5)"""
    if pulse.shape[-1] != TOTAL_BITS or pulse.dim() != 1:
        raise ValueError(f"Expected pulse of shape [{TOTAL_BITS}], got {list(pulse.shape)}")
    return ''.join('1' if b > 0.5 else '0' for b in pulse.detach().cpu().tolist())


# =============================================================================
# 参考实现 (位转换), 用作测试基准
# =============================================================================

def float32_to_bitstring(value):
    """float -> 32 位 IEEE 754 位串 (先舍入到 float32)"""
    bits = struct.unpack('>I', struct.pack('>f', float(value)))[0]
    return f"{bits:032b}"


def bitstring_to_float32(binary_float):
    """32 位位串 -> float, 通过 struct 位重解释"""
    fields = split_binary_float(binary_float)
    bits = int(''.join(fields), 2)
    return struct.unpack('>f', struct.pack('>I', bits))[0]


def float32_array_to_bitstrings(values):
    """numpy 数组 -> 位串列表, 通过 view(np.uint32)"""
    raw = np.ascontiguousarray(values, dtype=np.float32).reshape(-1).view(np.uint32)
    return [f"{int(b):032b}" for b in raw]

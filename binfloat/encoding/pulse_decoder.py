import torch
import torch.nn as nn

from binfloat.subnormal_mode import SubnormalMode
from binfloat.encoding.fields import EXPONENT_BITS, MANTISSA_BITS, SIGN_BITS, TOTAL_BITS
from binfloat.encoding.decoder import EXPONENT_BIAS, MAX_EXPONENT


class PulseFP32Decoder(nn.Module):
    """批量 FP32 脉冲解码器

    输入: pulse [..., 32] (S, E7..E0, M22..M0), 值为 0/1
    输出: float64 [...]
    指数为 255 的通道输出 NaN, 用 special_mask() 区分

    与 convert_ieee_float 逐元素一致, 包括 SubnormalMode 策略。
    """
    def __init__(self, mode=None):
        super().__init__()
        if mode is not None:
            SubnormalMode.validate(mode)
        self.mode = mode

        # 权重: 指数 2^7..2^0, 尾数 2^-1..2^-23
        self.register_buffer(
            'exp_weights',
            2.0 ** torch.arange(EXPONENT_BITS - 1, -1, -1, dtype=torch.float64))
        self.register_buffer(
            'frac_weights',
            2.0 ** -torch.arange(1, MANTISSA_BITS + 1, dtype=torch.float64))

    def _split(self, pulse):
        if pulse.shape[-1] != TOTAL_BITS:
            raise ValueError(f"Expected pulse [..., {TOTAL_BITS}], got {list(pulse.shape)}")
        bits = (pulse > 0.5).to(torch.float64)
        sign = bits[..., 0]
        exponent = (bits[..., SIGN_BITS:SIGN_BITS + EXPONENT_BITS] * self.exp_weights).sum(-1)
        fraction = (bits[..., SIGN_BITS + EXPONENT_BITS:] * self.frac_weights).sum(-1)
        return sign, exponent, fraction

    def forward(self, pulse):
        sign, exponent, fraction = self._split(pulse)

        sign_part = 1.0 - 2.0 * sign
        is_zero_exp = exponent == 0
        is_special = exponent == MAX_EXPONENT

        # 次正规数: 指数固定为 1 - bias
        exp_eff = torch.where(is_zero_exp, torch.ones_like(exponent), exponent)
        exp_part = torch.pow(2.0, exp_eff - EXPONENT_BIAS)

        if SubnormalMode.keeps_leading_one(self.mode):
            value_part = 1.0 + fraction
        else:
            value_part = torch.where(is_zero_exp, fraction, 1.0 + fraction)

        result = sign_part * exp_part * value_part
        return torch.where(is_special, torch.full_like(result, float('nan')), result)

    def special_mask(self, pulse):
        """指数为 255 (Infinity/NaN) 的位置为 True"""
        _, exponent, _ = self._split(pulse)
        return exponent == MAX_EXPONENT

    def reset(self):
        """无状态, 无需清除; 保留 reset() 以与其他脉冲组件接口一致"""

"""
SubnormalMode - 次正规数解码策略控制器
====================================

指数字段为 0 时, 有效数 (significand) 的取值有两种策略:

- **IEEE**: 按 IEEE 754 标准, 去掉隐含的前导 1, 有效数 = fraction
- **LEGACY**: 与参考程序逐位一致, 有效数 = 1 + fraction

控制层次
--------
1. 全局模式 - 整个进程的默认行为
2. 上下文管理器 - 局部临时切换
3. 实例级覆盖 - 解码器构造时传入 mode

使用示例
--------
```python
from binfloat import SubnormalMode, IEEE754Decoder, decode

decode('0' * 32)                       # 0.0 (默认 IEEE)

with SubnormalMode.legacy():
    decode('0' * 32)                   # 2**-126, 参考程序行为

decoder = IEEE754Decoder(mode=SubnormalMode.LEGACY)  # 该实例始终为 LEGACY
```

作者: binfloat Project
"""

import threading
from contextlib import contextmanager


class SubnormalMode:
    """次正规数解码策略控制器

    优先级: 实例模式 > 上下文模式 > 全局模式

    Attributes:
        IEEE: 标准 IEEE 754 次正规数 (无隐含前导 1)
        LEGACY: 参考程序行为 (保留隐含前导 1)
    """

    IEEE = 'ieee'
    LEGACY = 'legacy'

    # 线程安全的全局状态
    _local = threading.local()
    _global_mode = IEEE

    @classmethod
    def _get_context_stack(cls):
        """获取当前线程的上下文栈 (线程安全)"""
        if not hasattr(cls._local, 'context_stack'):
            cls._local.context_stack = []
        return cls._local.context_stack

    @classmethod
    def validate(cls, mode):
        if mode not in (cls.IEEE, cls.LEGACY):
            raise ValueError(f"Invalid mode: {mode}. Use SubnormalMode.IEEE or SubnormalMode.LEGACY")
        return mode

    @classmethod
    def get_mode(cls):
        """获取当前有效模式 (上下文 > 全局)"""
        stack = cls._get_context_stack()
        if stack:
            return stack[-1]
        return cls._global_mode

    @classmethod
    def set_global_mode(cls, mode):
        """设置全局模式

        Raises:
            ValueError: 如果 mode 不是有效模式
        """
        cls._global_mode = cls.validate(mode)

    @classmethod
    def get_global_mode(cls):
        return cls._global_mode

    @classmethod
    @contextmanager
    def mode(cls, mode):
        """上下文管理器: 临时切换到指定模式, 退出后恢复原模式"""
        cls.validate(mode)
        stack = cls._get_context_stack()
        stack.append(mode)
        try:
            yield
        finally:
            stack.pop()

    @classmethod
    @contextmanager
    def ieee(cls):
        with cls.mode(cls.IEEE):
            yield

    @classmethod
    @contextmanager
    def legacy(cls):
        with cls.mode(cls.LEGACY):
            yield

    @classmethod
    def resolve(cls, instance_mode=None):
        """解析实际生效的模式

        Args:
            instance_mode: 实例级模式覆盖, None 表示跟随全局/上下文
        """
        if instance_mode is not None:
            return cls.validate(instance_mode)
        return cls.get_mode()

    @classmethod
    def keeps_leading_one(cls, instance_mode=None):
        """指数为 0 时是否保留隐含前导 1"""
        return cls.resolve(instance_mode) == cls.LEGACY

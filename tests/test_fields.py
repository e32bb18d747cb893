"""
位字段拆分测试
=============

覆盖 split_binary_float / BitFieldSplitter / DecodedFields:
1. 固定位置拆分 (1 / 8 / 23)
2. 输入校验 (长度, 字符集, 类型)
3. 字段独立性与不可变

作者: binfloat Project
"""
import sys
import os

# Ensure project root is in path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from binfloat import (
    split_binary_float, BitFieldSplitter, DecodedFields,
    MalformedInputError, DecodeError, AllocationError
)


def expect_malformed(text):
    try:
        split_binary_float(text)
    except MalformedInputError as e:
        return e
    raise AssertionError(f"split_binary_float({text!r}) did not raise")


def test_split_positions():
    print("\nTesting field positions...")
    text = '1' + '10000001' + '01100000000000000000001'
    fields = split_binary_float(text)
    assert fields.sign == '1'
    assert fields.exponent == '10000001'
    assert fields.mantissa == '01100000000000000000001'
    assert ''.join(fields) == text
    print("positions: PASS")


def test_split_widths():
    fields = split_binary_float('0' * 32)
    assert (len(fields.sign), len(fields.exponent), len(fields.mantissa)) == (1, 8, 23)


def test_splitter_object():
    splitter = BitFieldSplitter()
    text = '0' + '01111111' + '0' * 23
    assert splitter.split(text) == splitter(text) == split_binary_float(text)


def test_reject_wrong_length():
    print("\nTesting length validation...")
    e = expect_malformed('0' * 31)
    assert '32' in str(e)
    expect_malformed('0' * 33)
    expect_malformed('')
    print("length: PASS")


def test_reject_bad_characters():
    expect_malformed('0' * 31 + '2')
    expect_malformed('0b' + '0' * 30)
    expect_malformed(' ' + '0' * 31)
    e = expect_malformed('0' * 16 + 'x' + '0' * 15)
    assert e.text == '0' * 16 + 'x' + '0' * 15


def test_reject_non_string():
    expect_malformed(None)
    expect_malformed(12345)


def test_malformed_is_value_error():
    assert issubclass(MalformedInputError, DecodeError)
    assert issubclass(MalformedInputError, ValueError)


def test_fields_are_immutable():
    fields = split_binary_float('0' * 32)
    try:
        fields.sign = '1'
    except AttributeError:
        pass
    else:
        raise AssertionError("DecodedFields should be immutable")


def test_create_validates_widths():
    DecodedFields.create('0', '0' * 8, '0' * 23)
    for args in [('00', '0' * 8, '0' * 23),
                 ('0', '0' * 7, '0' * 23),
                 ('0', '0' * 8, '0' * 24),
                 ('0', '0' * 8, '0' * 22 + 'a')]:
        try:
            DecodedFields.create(*args)
        except MalformedInputError:
            continue
        raise AssertionError(f"DecodedFields.create{args} did not raise")


class _UnsliceableBits(str):
    """合法的 32 位串, 但切片时无法分配存储"""
    def __getitem__(self, key):
        raise MemoryError("no memory for field")


def test_allocation_failure():
    print("\nTesting allocation failure...")
    text = _UnsliceableBits('1' * 32)
    fields = None
    try:
        fields = split_binary_float(text)
    except AllocationError as e:
        assert isinstance(e, MemoryError)
        assert isinstance(e, DecodeError)
        assert isinstance(e.__cause__, MemoryError)
    else:
        raise AssertionError("AllocationError not raised")
    assert fields is None
    print("allocation failure: PASS")


if __name__ == "__main__":
    try:
        test_split_positions()
        test_split_widths()
        test_splitter_object()
        test_reject_wrong_length()
        test_reject_bad_characters()
        test_reject_non_string()
        test_malformed_is_value_error()
        test_fields_are_immutable()
        test_create_validates_widths()
        test_allocation_failure()
        print("\nALL FIELD TESTS PASSED.")
    except Exception as e:
        print(f"\nTEST FAILED: {e}")
        exit(1)

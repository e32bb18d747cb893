"""
命令行入口: 读取 32 位二进制浮点字符串并打印十进制结果

    $ binfloat 00111111100000000000000000000000
    Result: 1.000000

    $ binfloat
    Insert the binary float: 01000000000000000000000000000000
    Result: 2.000000

结果写到 stdout, 诊断信息 (错误, --verbose 字段回显) 写到 stderr。
"""
import argparse
import logging
import sys

from binfloat.errors import DecodeError
from binfloat.subnormal_mode import SubnormalMode
from binfloat.encoding.decoder import IEEE754Decoder
from binfloat.encoding.fields import split_binary_float


def build_parser():
    parser = argparse.ArgumentParser(
        prog='binfloat',
        description='Decode a 32-bit IEEE 754 binary string into its decimal value.')
    parser.add_argument('binary_float', nargs='?',
                        help="32 characters of '0'/'1'; prompted for when omitted")
    parser.add_argument('--legacy-subnormals', action='store_true',
                        help='keep the implicit leading 1 when the exponent is 0')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='echo the parsed fields on stderr')
    return parser


def main(argv=None, stdin=None, stdout=None, stderr=None):
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = build_parser().parse_args(argv)

    text = args.binary_float
    if text is None:
        stdout.write('Insert the binary float: ')
        stdout.flush()
        text = stdin.readline().strip()

    mode = SubnormalMode.LEGACY if args.legacy_subnormals else None
    decoder = IEEE754Decoder(mode=mode)

    pkg_logger = logging.getLogger('binfloat')
    handler = None
    previous_level = pkg_logger.level
    if args.verbose:
        handler = logging.StreamHandler(stderr)
        handler.setFormatter(logging.Formatter('%(message)s'))
        pkg_logger.addHandler(handler)
        pkg_logger.setLevel(logging.DEBUG)

    try:
        value = decoder.decode(split_binary_float(text))
    except DecodeError as e:
        print(f"Error: {e}", file=stderr)
        return 1
    finally:
        if handler is not None:
            pkg_logger.removeHandler(handler)
            pkg_logger.setLevel(previous_level)

    print(f"Result: {value:f}", file=stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())

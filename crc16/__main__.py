import logging
import sys
from argparse import ArgumentParser, ArgumentDefaultsHelpFormatter, Namespace
from pathlib import Path
from typing import Optional

from crc16.catalog import UnknownAlgorithmError, algorithms, lookup
from crc16.check import self_test
from crc16.common import Algorithm
from crc16.hash import new
from crc16.utils import argparse_int, argparse_positive, chunks


logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

ACTION_SUM = 'sum'
ACTION_LIST = 'list'
ACTION_CHECK = 'check'

DEFAULT_ALGORITHM = 'CRC-16/XMODEM'
DEFAULT_CHUNK_SIZE = 65536

STDIN = '-'


# -----------------------------------------------------------------------------

def cmd_sum(algorithm: Algorithm, files: list[str], chunk_size: int):
    for name in files or [STDIN]:
        d = new(algorithm)

        if name == STDIN:
            for chunk in chunks(sys.stdin.buffer, chunk_size):
                d.write(chunk)
        else:
            with Path(name).open('rb') as f:
                for chunk in chunks(f, chunk_size):
                    d.write(chunk)

        logger.debug("%s: %s", name, d)
        print(f"0x{d.sum16():04X}  {name}")


def cmd_list():
    for algorithm in algorithms().values():
        print(algorithm)


def cmd_check() -> int:
    mismatches = self_test()

    for m in mismatches:
        print(m)

    if mismatches:
        return 1

    print(f"All {len(algorithms())} algorithms match their check values")
    return 0


# -----------------------------------------------------------------------------

def make_argument_parser():
    parser = ArgumentParser(
        prog='crc16-py',
        formatter_class=ArgumentDefaultsHelpFormatter
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help="Log debug messages to stderr."
    )

    # -------------------------------------------------------------------------

    action = parser.add_subparsers(
        title='action',
        dest='action',
        required=True
    )

    # -------------------------------------------------------------------------

    sum_ = action.add_parser(
        ACTION_SUM,
        formatter_class=ArgumentDefaultsHelpFormatter,
        help="Compute the checksum of files or standard input."
    )

    sum_.add_argument('files', nargs='*', metavar='FILE')

    sum_.add_argument(
        '-a', '--algorithm',
        default=DEFAULT_ALGORITHM,
        help=(
            "Name of a predefined algorithm, e.g. MODBUS or CRC-16/USB. "
            "Ignored if --poly is given."
        )
    )

    sum_.add_argument(
        '-c', '--chunk-size',
        type=argparse_positive,
        default=DEFAULT_CHUNK_SIZE,
        help="Number of bytes read at a time.",
        metavar='N'
    )

    custom = sum_.add_argument_group(
        'custom algorithm',
        "Define the algorithm from its parameters instead of by name. "
        "All of these require --poly; --init and --xorout default to 0."
    )

    custom.add_argument('--poly', type=argparse_int, metavar='X')
    custom.add_argument('--init', type=argparse_int, metavar='X')
    custom.add_argument('--xorout', type=argparse_int, metavar='X')
    custom.add_argument('--refin', action='store_true')
    custom.add_argument('--refout', action='store_true')

    # -------------------------------------------------------------------------

    action.add_parser(
        ACTION_LIST,
        help="List the predefined algorithms."
    )

    action.add_parser(
        ACTION_CHECK,
        help="Verify every predefined algorithm against its check value."
    )

    # -------------------------------------------------------------------------

    return parser


def algorithm_from_args(args: Namespace) -> Algorithm:
    if args.poly is None:
        given = [option for option, value in (
            ('--init', args.init is not None),
            ('--xorout', args.xorout is not None),
            ('--refin', args.refin),
            ('--refout', args.refout)
        ) if value]
        if given:
            raise ValueError(f"{', '.join(given)} requires --poly")
        return lookup(args.algorithm)

    return Algorithm(
        polynomial=args.poly,
        initial=args.init or 0,
        reflect_input=args.refin,
        reflect_output=args.refout,
        xor_output=args.xorout or 0,
        check=0,
        name='custom'
    )


def main(argv: Optional[list[str]] = None) -> int:
    parser = make_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    if args.action == ACTION_SUM:
        try:
            algorithm = algorithm_from_args(args)
        except (UnknownAlgorithmError, ValueError) as e:
            parser.error(str(e))

        try:
            cmd_sum(algorithm, args.files, args.chunk_size)
        except OSError as e:
            parser.error(str(e))

    if args.action == ACTION_LIST:
        cmd_list()

    if args.action == ACTION_CHECK:
        return cmd_check()

    return 0


# -----------------------------------------------------------------------------

if __name__ == '__main__':
    sys.exit(main())

from io import BufferedIOBase
from typing import Iterator


def argparse_int(s: str) -> int:
    """
    Parse an unsigned 16 bit integer in any base Python literals accept.

    >>> argparse_int('0x1021')
    4129
    >>> argparse_int('65535')
    65535
    >>> argparse_int('0b101')
    5
    """
    x = int(s, 0)
    if not 0 <= x <= 0xFFFF:
        raise ValueError(f"{s} does not fit in 16 bits")
    return x


def argparse_positive(s: str) -> int:
    x = int(s)
    if x < 1:
        raise ValueError(f"{s} must be greater than zero")
    return x


def chunks(buffer: BufferedIOBase, n: int) -> Iterator[bytes]:
    """
    Read buffer in chunks of n bytes. The last chunk may be shorter.

    >>> from io import BytesIO
    >>> list(chunks(BytesIO(b'ABCDEFG'), 3))
    [b'ABC', b'DEF', b'G']
    """
    if n < 1:
        raise ValueError('n must be greater than zero')
    while (chunk := buffer.read(n)):
        yield chunk

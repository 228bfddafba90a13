# -----------------------------------------------------------------------------

def mask(n: int) -> int:
    """
    >>> bin(mask(0))
    '0b0'
    >>> bin(mask(1))
    '0b1'
    >>> bin(mask(3))
    '0b111'
    >>> hex(mask(16))
    '0xffff'
    """
    return (1 << n) - 1


def reflect(x: int, n: int) -> int:
    """
    Reverse the order of the lowest n bits of x.

    >>> bin(reflect(0b110, 3))
    '0b11'
    >>> bin(reflect(0b0001, 4))
    '0b1000'
    """
    res = 0
    for _ in range(n):
        res = (res << 1) | (x & 1)
        x >>= 1
    return res


# -----------------------------------------------------------------------------

REFLECT8_TABLE = tuple(reflect(x, 8) for x in range(256))


def reflect8(x: int) -> int:
    """
    >>> bin(reflect8(0b10000000))
    '0b1'
    >>> bin(reflect8(0b11010000))
    '0b1011'
    """
    return REFLECT8_TABLE[x & 0xFF]


def reflect16(x: int) -> int:
    """
    >>> hex(reflect16(0x8000))
    '0x1'
    >>> hex(reflect16(0x1234))
    '0x2c48'
    """
    return (REFLECT8_TABLE[x & 0xFF] << 8) | REFLECT8_TABLE[(x >> 8) & 0xFF]

import logging
from functools import cache, lru_cache

from crc16.binary import mask, reflect8, reflect16
from crc16.common import WIDTH, Algorithm, Buffer


logger = logging.getLogger(__name__)

ENGINE_CACHE_SIZE = 64


# -----------------------------------------------------------------------------

@cache
def crc_table(polynomial: int) -> tuple[int, ...]:
    """
    Byte-at-a-time lookup table for the MSB-first form of the polynomial.
    Reflection is applied by the engine, not baked into the table.

    >>> t = crc_table(0x1021)
    >>> hex(t[0]), hex(t[1]), hex(t[255])
    ('0x0', '0x1021', '0x1ef0')
    """
    t = []
    top = 1 << (WIDTH - 1)
    for divident in range(256):
        value = divident << (WIDTH - 8)
        for _ in range(8):
            if value & top != 0:
                value = ((value << 1) & mask(WIDTH)) ^ polynomial
            else:
                value = (value << 1) & mask(WIDTH)
        t.append(value)
    return tuple(t)


# -----------------------------------------------------------------------------

class Engine:
    """
    Table driven CRC-16 calculator for a single algorithm.

    The engine is never mutated after construction: the running register is
    an int owned by the caller and threaded through init(), update() and
    finalize(). Any number of computations may share one engine.
    """

    __slots__ = ('_algorithm', '_table')

    def __init__(self, algorithm: Algorithm):
        self._algorithm = algorithm
        self._table = crc_table(algorithm.polynomial)
        logger.debug("Engine created for %s", algorithm.name or algorithm)

    def __repr__(self):
        return f"Engine({self._algorithm!r})"

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @property
    def table(self) -> tuple[int, ...]:
        return self._table

    def init(self) -> int:
        "Return the register value before any input is consumed."
        return self._algorithm.initial

    def update(self, crc: int, data: Buffer) -> int:
        "Return the register after feeding data into crc."
        t = self._table
        refin = self._algorithm.reflect_input
        for b in data:
            if refin:
                b = reflect8(b)
            crc = ((crc << 8) & 0xFFFF) ^ t[((crc >> 8) ^ b) & 0xFF]
        return crc

    def finalize(self, crc: int) -> int:
        "Apply output reflection and the XOR mask to a register."
        if self._algorithm.reflect_output:
            crc = reflect16(crc)
        return (crc ^ self._algorithm.xor_output) & 0xFFFF

    complete = finalize

    def checksum(self, data: Buffer) -> int:
        return self.finalize(self.update(self.init(), data))


# -----------------------------------------------------------------------------

@lru_cache(maxsize=ENGINE_CACHE_SIZE)
def make_engine(algorithm: Algorithm) -> Engine:
    return Engine(algorithm)


def checksum(data: Buffer, algorithm: Algorithm) -> int:
    return make_engine(algorithm).checksum(data)

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from crc16.catalog import algorithms as catalog
from crc16.common import CHECK_INPUT, Algorithm
from crc16.crc import make_engine


logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Mismatch:
    algorithm: Algorithm
    expected: int
    got: int

    def __str__(self):
        return (f"{self.algorithm.name}: "
                f"expected 0x{self.expected:04X}, got 0x{self.got:04X}")


def verify(algorithm: Algorithm) -> bool:
    "Return True if the checksum of b'123456789' matches the check value."
    return make_engine(algorithm).checksum(CHECK_INPUT) == algorithm.check


def self_test(
        algorithms: Optional[Iterable[Algorithm]] = None
) -> list[Mismatch]:
    """
    Check every algorithm (the whole catalog by default) against its check
    value. Mismatches are logged and returned, not raised.
    """
    if algorithms is None:
        algorithms = catalog().values()

    mismatches = []
    count = 0

    for algorithm in algorithms:
        count += 1
        got = make_engine(algorithm).checksum(CHECK_INPUT)
        if got != algorithm.check:
            m = Mismatch(algorithm, algorithm.check, got)
            logger.warning("Check value mismatch: %s", m)
            mismatches.append(m)

    logger.info("Self-test: %d algorithms, %d mismatches",
                count, len(mismatches))

    return mismatches

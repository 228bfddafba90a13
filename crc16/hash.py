from typing import Protocol, runtime_checkable

from crc16.common import SIZE, BLOCK_SIZE, Algorithm, Buffer
from crc16.crc import Engine, make_engine


# -----------------------------------------------------------------------------

@runtime_checkable
class Hash16(Protocol):
    """
    Incremental CRC-16 hash.

    write() never fails, sum() does not change the running state and the
    serialized checksum is big-endian.
    """

    @property
    def size(self) -> int:
        ...

    @property
    def block_size(self) -> int:
        ...

    def write(self, data: Buffer) -> int:
        ...

    def reset(self) -> None:
        ...

    def sum(self, b: bytes = b'') -> bytes:
        ...

    def sum16(self) -> int:
        ...


# -----------------------------------------------------------------------------

class Digest:
    """
    Running CRC-16 over a shared Engine.

    The register is private to the digest; share the engine, not the digest,
    between threads.

    >>> from crc16.catalog import CRC16_XMODEM
    >>> d = new(CRC16_XMODEM)
    >>> d.write(b'1234')
    4
    >>> d.write(b'56789')
    5
    >>> hex(d.sum16())
    '0x31c3'
    >>> d.sum(b'>')
    b'>1\\xc3'
    """

    def __init__(self, engine: Engine):
        self._engine = engine
        self._crc = engine.init()

    def __repr__(self):
        return f"Digest({self.name!r}, sum=0x{self.sum16():04X})"

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def size(self) -> int:
        "Number of bytes sum() appends."
        return SIZE

    @property
    def block_size(self) -> int:
        return BLOCK_SIZE

    def write(self, data: Buffer) -> int:
        self._crc = self._engine.update(self._crc, data)
        return len(data)

    def reset(self) -> None:
        self._crc = self._engine.init()

    def sum16(self) -> int:
        return self._engine.finalize(self._crc)

    def sum(self, b: bytes = b'') -> bytes:
        return b + self.sum16().to_bytes(SIZE, byteorder='big')

    # hashlib compatible surface

    @property
    def name(self) -> str:
        return self._engine.algorithm.name

    @property
    def digest_size(self) -> int:
        return SIZE

    def update(self, data: Buffer) -> None:
        self.write(data)

    def digest(self) -> bytes:
        return self.sum()

    def hexdigest(self) -> str:
        return self.digest().hex()

    def copy(self) -> 'Digest':
        other = Digest(self._engine)
        other._crc = self._crc
        return other


# -----------------------------------------------------------------------------

def new(algorithm: Algorithm | Engine, data: Buffer = b'') -> Digest:
    if isinstance(algorithm, Engine):
        engine = algorithm
    else:
        engine = make_engine(algorithm)
    d = Digest(engine)
    if data:
        d.write(data)
    return d

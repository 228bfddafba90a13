from dataclasses import dataclass


# -----------------------------------------------------------------------------

WIDTH = 16

# Number of bytes of a serialized checksum and the minimum addressable unit
# of input.
SIZE = 2
BLOCK_SIZE = 1

CHECK_INPUT = b'123456789'


# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Algorithm:
    """
    Parameters of a CRC-16 algorithm in the Rocksoft model.

    See http://www.zlib.net/crc_v3.txt for the meaning of each field and
    https://reveng.sourceforge.io/crc-catalogue/16.htm for known values.
    """
    polynomial: int
    initial: int
    reflect_input: bool
    reflect_output: bool
    xor_output: int
    check: int
    name: str = ''

    def __str__(self):
        return (f"{self.name or 'CRC-16'}: "
                f"poly=0x{self.polynomial:04X} "
                f"init=0x{self.initial:04X} "
                f"refin={str(self.reflect_input).lower()} "
                f"refout={str(self.reflect_output).lower()} "
                f"xorout=0x{self.xor_output:04X} "
                f"check=0x{self.check:04X}")


# -----------------------------------------------------------------------------

Buffer = bytes | bytearray | memoryview

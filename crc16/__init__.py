"""
Table driven CRC-16 with parameters for the well-known CRC-16 algorithms.

>>> from crc16 import CRC16_MODBUS, make_engine
>>> hex(make_engine(CRC16_MODBUS).checksum(b'123456789'))
'0x4b37'
"""

from crc16.catalog import (  # noqa: F401
    ALGORITHMS, UnknownAlgorithmError, algorithms, lookup,
    CRC16_DECT_R, CRC16_DECT_X, CRC16_NRSC_5, CRC16_GSM, CRC16_KERMIT,
    CRC16_XMODEM, CRC16_AUG_CCITT, CRC16_SPI_FUJITSU, CRC16_TMS37157,
    CRC16_RIELLO, CRC16_CRC_A, CRC16_CCITT_FALSE, CRC16_IBM_3740,
    CRC16_GENIBUS, CRC16_MCRF4XX, CRC16_X_25, CRC16_IBM_SDLC,
    CRC16_PROFIBUS, CRC16_DNP, CRC16_EN_13757, CRC16_OPENSAFETY_A,
    CRC16_M17, CRC16_LJ1200, CRC16_OPENSAFETY_B, CRC16_ARC, CRC16_BUYPASS,
    CRC16_UMTS, CRC16_MAXIM, CRC16_DDS_110, CRC16_CMS, CRC16_MODBUS,
    CRC16_USB, CRC16_T10_DIF, CRC16_TELEDISK, CRC16_CDMA2000
)
from crc16.check import Mismatch, self_test, verify  # noqa: F401
from crc16.common import Algorithm  # noqa: F401
from crc16.crc import Engine, checksum, crc_table, make_engine  # noqa: F401
from crc16.hash import Digest, Hash16, new  # noqa: F401

"""
Predefined CRC-16 algorithms.

Parameters and check values come from the CRC RevEng catalogue,
https://reveng.sourceforge.io/crc-catalogue/16.htm, including the older
names some variants are still commonly known by.

Fields: polynomial, initial, reflect_input, reflect_output, xor_output,
check, name.
"""

from functools import cache
from types import MappingProxyType
from typing import Mapping

from crc16.common import Algorithm


# -----------------------------------------------------------------------------

CRC16_DECT_R = Algorithm(
    0x0589, 0x0000, False, False, 0x0001, 0x007E, "CRC-16/DECT-R")
CRC16_DECT_X = Algorithm(
    0x0589, 0x0000, False, False, 0x0000, 0x007F, "CRC-16/DECT-X")
CRC16_NRSC_5 = Algorithm(
    0x080B, 0xFFFF, True, True, 0x0000, 0xA066, "CRC-16/NRSC-5")
CRC16_GSM = Algorithm(
    0x1021, 0x0000, False, False, 0xFFFF, 0xCE3C, "CRC-16/GSM")
CRC16_KERMIT = Algorithm(
    0x1021, 0x0000, True, True, 0x0000, 0x2189, "CRC-16/KERMIT")
CRC16_XMODEM = Algorithm(
    0x1021, 0x0000, False, False, 0x0000, 0x31C3, "CRC-16/XMODEM")
CRC16_AUG_CCITT = Algorithm(
    0x1021, 0x1D0F, False, False, 0x0000, 0xE5CC, "CRC-16/AUG-CCITT")
CRC16_SPI_FUJITSU = Algorithm(
    0x1021, 0x1D0F, False, False, 0x0000, 0xE5CC, "CRC-16/SPI-FUJITSU")
CRC16_TMS37157 = Algorithm(
    0x1021, 0x89EC, True, True, 0x0000, 0x26B1, "CRC-16/TMS37157")
CRC16_RIELLO = Algorithm(
    0x1021, 0xB2AA, True, True, 0x0000, 0x63D0, "CRC-16/RIELLO")
CRC16_CRC_A = Algorithm(
    0x1021, 0xC6C6, True, True, 0x0000, 0xBF05, "CRC-16/CRC-A")
CRC16_CCITT_FALSE = Algorithm(
    0x1021, 0xFFFF, False, False, 0x0000, 0x29B1, "CRC-16/CCITT-FALSE")
CRC16_IBM_3740 = Algorithm(
    0x1021, 0xFFFF, False, False, 0x0000, 0x29B1, "CRC-16/IBM-3740")
CRC16_GENIBUS = Algorithm(
    0x1021, 0xFFFF, False, False, 0xFFFF, 0xD64E, "CRC-16/GENIBUS")
CRC16_MCRF4XX = Algorithm(
    0x1021, 0xFFFF, True, True, 0x0000, 0x6F91, "CRC-16/MCRF4XX")
CRC16_X_25 = Algorithm(
    0x1021, 0xFFFF, True, True, 0xFFFF, 0x906E, "CRC-16/X-25")
CRC16_IBM_SDLC = Algorithm(
    0x1021, 0xFFFF, True, True, 0xFFFF, 0x906E, "CRC-16/IBM-SDLC")
CRC16_PROFIBUS = Algorithm(
    0x1DCF, 0xFFFF, False, False, 0xFFFF, 0xA819, "CRC-16/PROFIBUS")
CRC16_DNP = Algorithm(
    0x3D65, 0x0000, True, True, 0xFFFF, 0xEA82, "CRC-16/DNP")
CRC16_EN_13757 = Algorithm(
    0x3D65, 0x0000, False, False, 0xFFFF, 0xC2B7, "CRC-16/EN-13757")
CRC16_OPENSAFETY_A = Algorithm(
    0x5935, 0x0000, False, False, 0x0000, 0x5D38, "CRC-16/OPENSAFETY-A")
CRC16_M17 = Algorithm(
    0x5935, 0xFFFF, False, False, 0x0000, 0x772B, "CRC-16/M17")
CRC16_LJ1200 = Algorithm(
    0x6F63, 0x0000, False, False, 0x0000, 0xBDF4, "CRC-16/LJ1200")
CRC16_OPENSAFETY_B = Algorithm(
    0x755B, 0x0000, False, False, 0x0000, 0x20FE, "CRC-16/OPENSAFETY-B")
CRC16_ARC = Algorithm(
    0x8005, 0x0000, True, True, 0x0000, 0xBB3D, "CRC-16/ARC")
CRC16_BUYPASS = Algorithm(
    0x8005, 0x0000, False, False, 0x0000, 0xFEE8, "CRC-16/BUYPASS")
CRC16_UMTS = Algorithm(
    0x8005, 0x0000, False, False, 0x0000, 0xFEE8, "CRC-16/UMTS")
CRC16_MAXIM = Algorithm(
    0x8005, 0x0000, True, True, 0xFFFF, 0x44C2, "CRC-16/MAXIM")
CRC16_DDS_110 = Algorithm(
    0x8005, 0x800D, False, False, 0x0000, 0x9ECF, "CRC-16/DDS-110")
CRC16_CMS = Algorithm(
    0x8005, 0xFFFF, False, False, 0x0000, 0xAEE7, "CRC-16/CMS")
CRC16_MODBUS = Algorithm(
    0x8005, 0xFFFF, True, True, 0x0000, 0x4B37, "CRC-16/MODBUS")
CRC16_USB = Algorithm(
    0x8005, 0xFFFF, True, True, 0xFFFF, 0xB4C8, "CRC-16/USB")
CRC16_T10_DIF = Algorithm(
    0x8BB7, 0x0000, False, False, 0x0000, 0xD0DB, "CRC-16/T10-DIF")
CRC16_TELEDISK = Algorithm(
    0xA097, 0x0000, False, False, 0x0000, 0x0FB3, "CRC-16/TELEDISK")
CRC16_CDMA2000 = Algorithm(
    0xC867, 0xFFFF, False, False, 0x0000, 0x4C06, "CRC-16/CDMA2000")

ALGORITHMS = (
    CRC16_DECT_R, CRC16_DECT_X, CRC16_NRSC_5, CRC16_GSM, CRC16_KERMIT,
    CRC16_XMODEM, CRC16_AUG_CCITT, CRC16_SPI_FUJITSU, CRC16_TMS37157,
    CRC16_RIELLO, CRC16_CRC_A, CRC16_CCITT_FALSE, CRC16_IBM_3740,
    CRC16_GENIBUS, CRC16_MCRF4XX, CRC16_X_25, CRC16_IBM_SDLC,
    CRC16_PROFIBUS, CRC16_DNP, CRC16_EN_13757, CRC16_OPENSAFETY_A,
    CRC16_M17, CRC16_LJ1200, CRC16_OPENSAFETY_B, CRC16_ARC, CRC16_BUYPASS,
    CRC16_UMTS, CRC16_MAXIM, CRC16_DDS_110, CRC16_CMS, CRC16_MODBUS,
    CRC16_USB, CRC16_T10_DIF, CRC16_TELEDISK, CRC16_CDMA2000
)

PREFIX = 'CRC-16/'


# -----------------------------------------------------------------------------

class UnknownAlgorithmError(KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"Unknown CRC-16 algorithm: {self.name}"


def normalize(name: str) -> str:
    """
    >>> normalize('modbus')
    'CRC-16/MODBUS'
    >>> normalize('crc-16/x_25')
    'CRC-16/X-25'
    >>> normalize(' CRC16_CCITT_FALSE ')
    'CRC-16/CCITT-FALSE'
    """
    s = name.strip().upper().replace('_', '-')
    for prefix in (PREFIX, 'CRC16-', 'CRC-16-'):
        if s.startswith(prefix):
            s = s[len(prefix):]
            break
    return PREFIX + s


@cache
def algorithms() -> Mapping[str, Algorithm]:
    "Read-only mapping from full algorithm name to its parameters."
    return MappingProxyType({a.name: a for a in ALGORITHMS})


def lookup(name: str) -> Algorithm:
    try:
        return algorithms()[normalize(name)]
    except KeyError:
        raise UnknownAlgorithmError(name) from None

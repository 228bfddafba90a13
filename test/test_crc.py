from random import Random

import pytest
from crc16.binary import reflect8, reflect16
from crc16.catalog import ALGORITHMS, CRC16_MODBUS, CRC16_XMODEM
from crc16.common import CHECK_INPUT, Algorithm
from crc16.crc import (
    ENGINE_CACHE_SIZE, Engine, checksum, crc_table, make_engine
)


# -----------------------------------------------------------------------------

def bitwise(data: bytes, a: Algorithm) -> int:
    "Bit at a time reference, independent from the lookup table."
    crc = a.initial
    for b in data:
        if a.reflect_input:
            b = reflect8(b)
        crc ^= b << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ a.polynomial) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
    if a.reflect_output:
        crc = reflect16(crc)
    return crc ^ a.xor_output


def table_entry(n: int, polynomial: int) -> int:
    value = n << 8
    for _ in range(8):
        if value & 0x8000:
            value = ((value << 1) & 0xFFFF) ^ polynomial
        else:
            value = (value << 1) & 0xFFFF
    return value


RANDOM = Random(0x1021)
DATA = bytes(RANDOM.randrange(256) for _ in range(1024))


# -----------------------------------------------------------------------------

def test_xmodem():
    assert Engine(CRC16_XMODEM).checksum(b'123456789') == 0x31C3


def test_modbus():
    assert Engine(CRC16_MODBUS).checksum(b'123456789') == 0x4B37


def test_checksum_function():
    assert checksum(CHECK_INPUT, CRC16_MODBUS) == 0x4B37


# -----------------------------------------------------------------------------

def test_table_ccitt():
    t = crc_table(0x1021)
    assert len(t) == 256
    assert t[0] == 0
    assert t[1] == 0x1021
    assert t[2] == 0x2042
    assert t[255] == 0x1EF0


def test_table_ibm():
    t = crc_table(0x8005)
    assert t[0] == 0
    assert t[1] == 0x8005
    assert t[2] == 0x800F


@pytest.mark.parametrize("polynomial", [0x0589, 0x1021, 0x3D65, 0x8005,
                                        0x8BB7, 0xC867])
def test_table_expansion(polynomial):
    t = crc_table(polynomial)
    for n in range(256):
        assert t[n] == table_entry(n, polynomial)


def test_table_zero_polynomial():
    assert crc_table(0) == (0,) * 256


def test_table_is_shared():
    assert crc_table(0x1021) is crc_table(0x1021)
    assert Engine(CRC16_XMODEM).table is crc_table(0x1021)


# -----------------------------------------------------------------------------

@pytest.mark.parametrize("algorithm", ALGORITHMS, ids=lambda a: a.name)
def test_matches_bitwise(algorithm):
    e = make_engine(algorithm)
    assert e.checksum(DATA) == bitwise(DATA, algorithm)
    assert e.checksum(CHECK_INPUT) == bitwise(CHECK_INPUT, algorithm)


@pytest.mark.parametrize("algorithm", [CRC16_XMODEM, CRC16_MODBUS],
                         ids=lambda a: a.name)
def test_chunking(algorithm):
    e = Engine(algorithm)
    whole = e.update(e.init(), DATA)

    for n in (1, 2, 3, 7, 64, 1000, len(DATA)):
        crc = e.init()
        for i in range(0, len(DATA), n):
            crc = e.update(crc, DATA[i:i+n])
        assert crc == whole

    r = Random(42)
    for _ in range(20):
        cuts = sorted(r.sample(range(1, len(DATA)), 5))
        crc = e.init()
        for i, j in zip([0] + cuts, cuts + [len(DATA)]):
            crc = e.update(crc, DATA[i:j])
        assert crc == whole


@pytest.mark.parametrize("algorithm", ALGORITHMS, ids=lambda a: a.name)
def test_empty(algorithm):
    e = make_engine(algorithm)
    assert e.update(e.init(), b'') == e.init()

    expected = algorithm.initial
    if algorithm.reflect_output:
        expected = reflect16(expected)
    expected ^= algorithm.xor_output

    assert e.checksum(b'') == e.finalize(e.init()) == expected


def test_deterministic():
    e = Engine(CRC16_MODBUS)
    results = {e.checksum(DATA) for _ in range(5)}
    assert len(results) == 1
    assert e.finalize(0x1234) == e.finalize(0x1234)


def test_buffer_types():
    e = Engine(CRC16_MODBUS)
    assert e.checksum(bytearray(CHECK_INPUT)) == 0x4B37
    assert e.checksum(memoryview(CHECK_INPUT)) == 0x4B37


def test_complete_is_finalize():
    e = Engine(CRC16_XMODEM)
    assert e.complete(0xBEEF) == e.finalize(0xBEEF) == 0xBEEF


def test_make_engine_cached():
    assert make_engine(CRC16_XMODEM) is make_engine(CRC16_XMODEM)
    assert make_engine(CRC16_XMODEM).algorithm is CRC16_XMODEM


def test_zero_polynomial_accepted():
    a = Algorithm(0x0000, 0x0000, False, False, 0x0000, 0x0000, "zero")
    assert Engine(a).checksum(CHECK_INPUT) == 0


def test_make_engine_cache_bounded():
    for initial in range(ENGINE_CACHE_SIZE * 2):
        a = Algorithm(0x1021, initial, False, False, 0x0000, 0x0000, "adhoc")
        checksum(CHECK_INPUT, a)
    assert make_engine.cache_info().currsize <= ENGINE_CACHE_SIZE
    assert make_engine.cache_info().maxsize == ENGINE_CACHE_SIZE

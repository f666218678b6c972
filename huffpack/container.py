"""
On-disk layout:

    [length:5][record:5]...[-----][payload]

`length` is the content length: four little-endian bytes followed by a sign
byte (0 non-negative, 1 negative, in which case the four bytes hold the 32-bit
two's complement of the magnitude). Each header record is one symbol byte
followed by its frequency as a little-endian uint32, in ascending symbol
order. The header ends at the separator; everything after it is payload.
"""
import logging
import struct

from .errors import MalformedContainer

log = logging.getLogger(__name__)

SEPARATOR = b'-----'
RECORD = struct.Struct('<BI')
RECORD_SIZE = RECORD.size
LENGTH_SIZE = 5

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
UINT32_MASK = 0xFFFFFFFF


def encode_length(n: int) -> bytes:
    if not INT32_MIN <= n <= INT32_MAX:
        raise ValueError(f'length {n} does not fit in a signed 32-bit field')
    if n < 0:
        magnitude = (~(-n) + 1) & UINT32_MASK
        sign = 1
    else:
        magnitude = n
        sign = 0
    return magnitude.to_bytes(4, 'little') + bytes([sign])

def decode_length(raw: bytes) -> int:
    if len(raw) < LENGTH_SIZE:
        raise MalformedContainer(f'length field needs {LENGTH_SIZE} bytes, got {len(raw)}')
    magnitude = int.from_bytes(raw[:4], 'little')
    match raw[4]:
        case 0:
            return magnitude
        case 1:
            return -((~magnitude + 1) & UINT32_MASK)
        case sign:
            raise MalformedContainer(f'invalid sign byte {sign:#04x} in length field')

def serialize_header(freq_stats: dict[int, int]) -> bytes:
    return b''.join(RECORD.pack(symbol, count) for symbol, count in sorted(freq_stats.items()))

def deserialize_header(raw: bytes) -> dict[int, int]:
    if len(raw) % RECORD_SIZE:
        raise MalformedContainer(f'header size {len(raw)} is not a multiple of {RECORD_SIZE}')
    result = dict()
    for symbol, count in RECORD.iter_unpack(raw):
        if symbol in result:
            raise MalformedContainer(f'symbol {symbol:#04x} appears twice in header')
        result[symbol] = count
    return result

def pack_container(length: int, header: bytes, payload: bytes) -> bytes:
    return encode_length(length) + header + SEPARATOR + payload

def find_separator(data: bytes, length: int) -> int:
    """
    Return the offset of the separator that closes the header.

    A record for symbol `-` with frequency 0x2D2D2D2D reads exactly like the
    separator, so a candidate only ends the header once the frequencies seen
    so far add up to `length`.
    """
    offset = LENGTH_SIZE
    total = 0
    while offset + RECORD_SIZE <= len(data):
        chunk = data[offset:offset + RECORD_SIZE]
        if chunk == SEPARATOR and total == length:
            return offset
        _, count = RECORD.unpack(chunk)
        total += count
        offset += RECORD_SIZE
    raise MalformedContainer('header separator not found')

def unpack_container(data: bytes) -> tuple[int, dict[int, int], bytes]:
    length = decode_length(data)
    if length <= 0:
        raise MalformedContainer(f'declared content length {length} is not positive')
    end = find_separator(data, length)
    freq_stats = deserialize_header(data[LENGTH_SIZE:end])
    payload = data[end + len(SEPARATOR):]
    log.debug('container: length %d, %d header records, %d payload bytes',
              length, len(freq_stats), len(payload))
    return length, freq_stats, payload

import logging
import os

from . import bitpack, container
from .codes import make_code
from .errors import EmptyInput, MalformedContainer
from .storage import read_all, write_all
from .tree import build_full_tree, calc_freq

log = logging.getLogger(__name__)


def compress(source: bytes) -> bytes:
    if not source:
        raise EmptyInput('nothing to compress: input is empty')
    freq_stats = calc_freq(source)
    coding_tree = build_full_tree(freq_stats)
    coding = make_code(coding_tree)
    payload = bitpack.encode(source, coding)
    header = container.serialize_header(freq_stats)
    result = container.pack_container(len(source), header, payload)
    log.debug('compressed %d bytes to %d (%d symbols)', len(source), len(result), len(freq_stats))
    return result

def decompress(source: bytes) -> bytes:
    length, freq_stats, payload = container.unpack_container(source)
    codetree = build_full_tree(freq_stats)
    result = bitpack.decode(payload, codetree, length)
    # The walk can land on the right count with the wrong symbols
    if calc_freq(result) != freq_stats:
        raise MalformedContainer('decoded content does not match header frequencies')
    log.debug('decompressed %d bytes to %d', len(source), len(result))
    return result

def compress_file(src: str | os.PathLike, dst: str | os.PathLike) -> tuple[int, int]:
    source = read_all(src)
    result = compress(source)
    write_all(dst, result)
    return len(source), len(result)

def decompress_file(src: str | os.PathLike, dst: str | os.PathLike) -> tuple[int, int]:
    source = read_all(src)
    result = decompress(source)
    write_all(dst, result)
    return len(source), len(result)

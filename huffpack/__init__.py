from .compression import compress, compress_file, decompress, decompress_file
from .errors import EmptyInput, HuffpackError, MalformedContainer, StorageError

__all__ = [
    'compress',
    'compress_file',
    'decompress',
    'decompress_file',
    'EmptyInput',
    'HuffpackError',
    'MalformedContainer',
    'StorageError',
]

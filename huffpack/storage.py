import os

from .errors import StorageError


def read_all(path: str | os.PathLike) -> bytes:
    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError as e:
        raise StorageError(f'cannot read {os.fspath(path)}: {e.strerror or e}') from e

def write_all(path: str | os.PathLike, data: bytes) -> None:
    try:
        with open(path, 'wb') as f:
            f.write(data)
    except OSError as e:
        raise StorageError(f'cannot write {os.fspath(path)}: {e.strerror or e}') from e

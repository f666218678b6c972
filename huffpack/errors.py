class HuffpackError(Exception):
    pass

class StorageError(HuffpackError):
    pass

class MalformedContainer(HuffpackError):
    pass

class EmptyInput(HuffpackError):
    pass

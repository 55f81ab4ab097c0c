"""Error kinds raised by zip-tree operations."""


class ZipTreeError(Exception):
    """Base class for violated operation preconditions."""

    def __init__(self, key=None, message: str = ""):
        self.key = key
        super().__init__(message or f"{type(self).__name__}: key={key!r}")


class DuplicateKeyError(ZipTreeError):
    """Raised by ``insert`` when the key is already stored in the tree."""

    def __init__(self, key):
        super().__init__(key, f"key {key!r} is already present")


class KeyNotFoundError(ZipTreeError):
    """Raised by ``delete`` and targeted lookups when the key is absent."""

    def __init__(self, key):
        super().__init__(key, f"key {key!r} not found")


class EmptyTreeError(ZipTreeError):
    """Raised when an operation needs at least one node but the tree has none."""

    def __init__(self, key=None, operation: str = "operation"):
        self.operation = operation
        super().__init__(key, f"{operation}() on an empty tree (key={key!r})")

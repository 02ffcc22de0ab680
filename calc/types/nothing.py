from __future__ import annotations


class NothingType:
    """Result of operations with no meaningful output (print, set, define)."""

    __slots__ = ()
    _instance: NothingType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NothingType)

    def __hash__(self):
        return hash(NothingType)

    def __reduce__(self):
        return (NothingType, ())


Nothing = NothingType()

"""Errors raised while building or reversing relationships."""


class RelationshipError(Exception):
    """Base class for relationship errors."""


class InvalidRelationship(RelationshipError, ValueError):
    """A relationship was built with a missing or empty required field."""


class InvalidDivergenceIndex(InvalidRelationship):
    """The common parent index does not point into the node list."""

    def __init__(self, index, size: int):
        self.index = index
        self.size = size
        super().__init__(
            f"Common parent index {index!r} is out of range for a node list of size {size}"
        )


class NoSymmetricCounterpart(RelationshipError, LookupError):
    """A pointer type has no symmetric type to relabel a reversed edge with."""

    def __init__(self, pointer_type):
        self.pointer_type = pointer_type
        super().__init__(f"Pointer type {pointer_type} has no symmetric type")

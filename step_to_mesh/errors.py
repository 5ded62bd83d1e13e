"""Errors raised while reading, selecting and writing solids."""


class StepToMeshError(Exception):
    """Base error. Every failure carries a message meant for the user."""


class UsageError(StepToMeshError):
    pass


class UnitError(StepToMeshError):
    pass


class ReadError(StepToMeshError):
    pass


class WriteError(StepToMeshError):
    pass


class SelectionError(StepToMeshError):
    """A selection token could not be resolved to a solid."""


class SolidNotFoundError(SelectionError):
    pass


class InvalidIndexError(SelectionError):
    pass


class IndexOutOfRangeError(SelectionError):
    pass

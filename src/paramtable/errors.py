"""Exception hierarchy for the converter.

Every failure aborts the whole run: there is no partial table and no retry,
since the conversion is a pure function of its input.
"""


class ParamTableError(Exception):
    """Base class for all converter errors."""


class InputDocumentError(ParamTableError):
    """The input document is unreadable, is not valid JSON, or is not an object."""


class StructureError(ParamTableError, ValueError):
    """The tree cannot be laid out (empty group, bad leaf payload, broken spans)."""


class KeyOrderError(StructureError):
    """The original-order index has no entry for a path, or disagrees with the node's keys."""


class OutputError(ParamTableError):
    """The rendered table could not be written.

    The computed markup is kept on the exception so it can be recovered by hand.
    """

    def __init__(self, message: str, markup: str):
        super().__init__(message)
        self.markup = markup

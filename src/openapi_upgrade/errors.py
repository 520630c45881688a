"""Exceptions for conditions that abort a conversion.

Structural problems in the input or output document are not raised.
They are collected as ConversionIssue entries on the converter instead.
"""


class UpgradeError(Exception):
    """Base class for all fatal openapi-upgrade errors."""


class DocumentNotFoundError(UpgradeError):
    """The input document does not exist or cannot be read."""


class MalformedDocumentError(UpgradeError):
    """The input is not valid JSON/YAML, or its top level is not a mapping."""


class OutputWriteError(UpgradeError):
    """The converted document could not be written to the output path."""

"""Custom exceptions for Schema Compare.

The comparison engine itself never raises. These exceptions belong to the
collaborators around it: loading schema archives, parsing the embedded
markup, and reading configuration.
"""


class SchemaCompareError(Exception):
    """Base exception for all Schema Compare errors."""

    pass


class FormatError(SchemaCompareError):
    """Raised when an input does not have the expected schema archive layout."""

    def __init__(self, message: str, source: str | None = None):
        """Initialize format error.

        Args:
            message: Error message
            source: Name of the archive that was being read
        """
        self.message = message
        self.source = source
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format error message with the offending source."""
        if self.source:
            return f"{self.message} ({self.source})"
        return self.message


class ArchiveError(FormatError):
    """Raised when an input cannot be opened as a zip archive."""

    pass


class SchemaParseError(SchemaCompareError):
    """Raised when the schema markup inside an archive is malformed."""

    def __init__(self, message: str, member: str | None = None):
        """Initialize parse error.

        Args:
            message: Error message (usually from the XML parser)
            member: Archive member that failed to parse
        """
        self.message = message
        self.member = member
        msg = f"{member}: {message}" if member else message
        super().__init__(msg)


class ConfigurationError(SchemaCompareError):
    """Raised when configuration is invalid or missing."""

    pass

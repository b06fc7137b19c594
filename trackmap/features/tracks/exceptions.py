"""
Track decoding errors.

None of these are retried: decoding the same input again gives the
same result.
"""


class TrackError(Exception):
    """Base track error."""
    pass


class FormatError(TrackError):
    """Input parsed, but the expected track/route/activity/record container is missing."""
    pass


class ParseError(TrackError):
    """Malformed XML, gzip, FIT or CSV input."""
    pass


class UnsupportedFormatError(TrackError):
    """File extension we have no decoder for."""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"Unsupported file format: {extension}")

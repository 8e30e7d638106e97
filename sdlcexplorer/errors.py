"""
Exceptions raised by SDLC Explorer.

The interactive core never raises for learner input; these cover content
and configuration problems that are bugs in the packaged data.
"""


class SdlcExplorerError(Exception):
    """Base class for all SDLC Explorer errors."""
    pass


class ContentError(SdlcExplorerError):
    """A content file exists but could not be parsed or validated."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid content file {path}: {reason}")

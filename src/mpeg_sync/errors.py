"""
Errors
======

Exception hierarchy for frame scanning.

Only conditions the caller must act on are raised. Invalid header bytes
are not errors: the scanner recovers from them internally by advancing
one byte and retrying.
"""

from typing import Optional

from mpeg_sync.models.frame import FrameHeader


class FrameError(Exception):
    """Base class for frame scanning errors."""
    pass


class TruncatedFrameError(FrameError, EOFError):
    """
    Raised when a valid header was found but the stream ended before
    the rest of the frame could be consumed.
    
    This is distinct from normal end-of-stream (which is signalled by
    ``read_frame`` returning ``None``) and usually means the file is
    truncated or corrupt.
    
    Attributes:
        header: The header that was committed to
        required: Payload bytes needed after the 4-byte header
        available: Payload bytes actually obtained from the stream
    """
    
    def __init__(
        self,
        header: FrameHeader,
        required: int,
        available: int,
        message: Optional[str] = None,
    ) -> None:
        self.header = header
        self.required = required
        self.available = available
        super().__init__(
            message
            or f"Unexpected end of stream before frame complete: "
            f"needed {required} payload bytes, got {available}"
        )

"""
Scan Options
============

Enumerations that control how the scanner consumes a stream.
"""

from enum import Enum


class SkipMode(str, Enum):
    """
    How payload bytes are passed over when data capture is off.
    
    Attributes:
        AUTO: Seek when the stream reports it is seekable, else read
        SEEK: Always advance with seek()
        READ: Always read and discard
    """
    
    AUTO = "auto"
    SEEK = "seek"
    READ = "read"

"""
File containing custom errors raised on input buffers before any statistic is computed.
"""

class InputBufferError(ValueError):
    """Raised when a buffer cannot be analysed at all."""
    pass

class EmptyInputError(InputBufferError):
    """Raised for a zero-length buffer, where mean, entropy and chi-square would divide by zero."""
    pass

class InsufficientDataError(InputBufferError):
    """Raised when the buffer is too short to form a single Monte Carlo coordinate pair"""

    def __init__(self, length: int, required: int):
        super().__init__(f"Need at least {required} bytes for the Monte Carlo estimate, got {length}")
        self.length = length
        self.required = required

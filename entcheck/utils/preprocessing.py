def fold_case(buffer) -> bytes:
    """Map ASCII uppercase letters to lowercase; every other byte value is left alone."""
    return bytes(buffer).lower()

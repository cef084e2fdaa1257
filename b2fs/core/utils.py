"""Small helpers shared by the b2fs core."""


def bounded(value: str, max_len: int) -> str:
    """
    Truncate ``value`` to at most ``max_len`` UTF-8 bytes.
    
    Truncation is silent and never splits a multi-byte character.
    """
    encoded = value.encode('utf-8')
    if len(encoded) <= max_len:
        return value
    return encoded[:max_len].decode('utf-8', errors='ignore')

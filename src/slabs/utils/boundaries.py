"""UTF-8 character boundary helpers.

All chunk offsets are byte offsets into ``text.encode("utf-8")``. A byte
offset is a valid boundary when it sits at either end of the buffer or on a
byte that is not a UTF-8 continuation byte (``0b10xxxxxx``).
"""


def is_char_boundary(data: bytes, index: int) -> bool:
    """Return True if ``index`` does not split a multi-byte character."""
    if index <= 0 or index >= len(data):
        return index == 0 or index == len(data)
    return (data[index] & 0xC0) != 0x80


def floor_char_boundary(data: bytes, index: int) -> int:
    """Largest boundary ``<= index`` (clamped to the buffer)."""
    if index >= len(data):
        return len(data)
    if index <= 0:
        return 0
    while index > 0 and not is_char_boundary(data, index):
        index -= 1
    return index


def ceil_char_boundary(data: bytes, index: int) -> int:
    """Smallest boundary ``>= index`` (clamped to the buffer)."""
    if index <= 0:
        return 0
    if index >= len(data):
        return len(data)
    while index < len(data) and not is_char_boundary(data, index):
        index += 1
    return index


def decode_span(data: bytes, start: int, end: int) -> str:
    """Decode ``data[start:end]``; both offsets must be char boundaries."""
    return data[start:end].decode("utf-8")


def trimmed_span(data: bytes, start: int, end: int) -> tuple[int, int]:
    """Shrink ``[start, end)`` so it excludes leading and trailing whitespace.

    Returns an empty span at ``start`` when the slice is all whitespace.
    """
    text = decode_span(data, start, end)
    stripped = text.strip()
    if not stripped:
        return start, start
    leading = len(text.encode("utf-8")) - len(text.lstrip().encode("utf-8"))
    trailing = len(text.encode("utf-8")) - len(text.rstrip().encode("utf-8"))
    return start + leading, end - trailing

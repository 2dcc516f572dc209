"""Apply byte-range edits to a source buffer."""

from react_named_imports.models.schemas import TextEdit
from react_named_imports.transform.exceptions import EditConflictError


def apply_edits(source: bytes, edits: list[TextEdit]) -> bytes:
    """Splice all edits into ``source`` in a single forward pass.

    Edits are ordered by start offset; insertions at the same offset as a
    deletion go first. Edits at equal offsets keep their list order.

    Raises:
        EditConflictError: If two edits overlap or an edit is out of bounds
    """
    if not edits:
        return source

    ordered = sorted(edits, key=lambda e: (e.start, e.end))
    chunks: list[bytes] = []
    cursor = 0
    for edit in ordered:
        if edit.end < edit.start or edit.end > len(source):
            raise EditConflictError(f"Edit out of bounds: {edit.start}..{edit.end}")
        if edit.start < cursor:
            raise EditConflictError(
                f"Overlapping edits at byte {edit.start} (previous edit ends at {cursor})"
            )
        chunks.append(source[cursor:edit.start])
        chunks.append(edit.text.encode("utf-8"))
        cursor = edit.end
    chunks.append(source[cursor:])
    return b"".join(chunks)

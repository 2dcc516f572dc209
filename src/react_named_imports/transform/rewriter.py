"""Reference rewriter: replace qualified references with bare member names."""

from collections.abc import Callable

from react_named_imports.models.schemas import (
    MemberSet,
    QualifiedReference,
    ReferenceKind,
    TextEdit,
)

Handler = Callable[[QualifiedReference, MemberSet], "TextEdit | None"]


def _bare(ref: QualifiedReference) -> TextEdit:
    return TextEdit(start=ref.start_byte, end=ref.end_byte, text=ref.member)


def rewrite_value_access(ref: QualifiedReference, members: MemberSet) -> TextEdit | None:
    """``React.useState(0)`` -> ``useState(0)``."""
    if ref.node.type != "member_expression" or not members.has_value(ref.member):
        return None
    return _bare(ref)


def rewrite_type_reference(ref: QualifiedReference, members: MemberSet) -> TextEdit | None:
    """``React.FC<Props>`` -> ``FC<Props>``.

    Only the qualified name is replaced, so the type-argument list attached to
    the enclosing generic type is carried over untouched.
    """
    if ref.node.type != "nested_type_identifier" or not members.has_type(ref.member):
        return None
    return _bare(ref)


def rewrite_generic_argument(ref: QualifiedReference, members: MemberSet) -> TextEdit | None:
    """``Array<React.ReactNode>`` -> ``Array<ReactNode>``."""
    if ref.container is None or ref.container.type != "type_arguments":
        return None
    if not members.has_type(ref.member):
        return None
    return _bare(ref)


def rewrite_markup_access(ref: QualifiedReference, members: MemberSet) -> TextEdit | None:
    """``<React.Fragment>`` -> ``<Fragment>``, closing tags included."""
    if ref.container is None or not ref.container.type.startswith("jsx_"):
        return None
    if not members.has_value(ref.member):
        return None
    return _bare(ref)


def rewrite_inheritance_entry(ref: QualifiedReference, members: MemberSet) -> TextEdit | None:
    """``interface P extends React.Component<S>`` -> ``extends Component<S>``."""
    if ref.container is None or ref.container.type != "extends_type_clause":
        return None
    if not members.has_type(ref.member):
        return None
    return _bare(ref)


HANDLERS: dict[ReferenceKind, Handler] = {
    ReferenceKind.VALUE_ACCESS: rewrite_value_access,
    ReferenceKind.TYPE_REFERENCE: rewrite_type_reference,
    ReferenceKind.GENERIC_ARGUMENT: rewrite_generic_argument,
    ReferenceKind.MARKUP_ACCESS: rewrite_markup_access,
    ReferenceKind.INHERITANCE_ENTRY: rewrite_inheritance_entry,
}


def rewrite_references(
    references: list[QualifiedReference],
    members: MemberSet,
) -> list[TextEdit]:
    """Return one edit per reference whose member is in the matching set."""
    edits = []
    for ref in references:
        edit = HANDLERS[ref.kind](ref, members)
        if edit is not None:
            edits.append(edit)
    return edits

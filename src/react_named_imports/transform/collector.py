"""Reference collector: gather member names reached through the namespace."""

from tree_sitter import Tree

from react_named_imports.models.schemas import MemberSet, QualifiedReference, ReferenceKind
from react_named_imports.transform.references import find_references


def build_member_set(references: list[QualifiedReference]) -> MemberSet:
    """Split references into value and type member names.

    Names keep the order of their first occurrence; repeated names are
    treated as the same binding. Runtime accesses are listed before JSX tag
    names in the value set.
    """
    value_members: dict[str, None] = {}
    type_members: dict[str, None] = {}
    markup = [ref for ref in references if ref.kind == ReferenceKind.MARKUP_ACCESS]
    for ref in references:
        if ref.kind == ReferenceKind.MARKUP_ACCESS:
            continue
        target = type_members if ref.kind.is_type else value_members
        target.setdefault(ref.member, None)
    for ref in markup:
        value_members.setdefault(ref.member, None)
    return MemberSet(
        value_members=tuple(value_members),
        type_members=tuple(type_members),
    )


def collect_members(tree: Tree, language: str, namespace: str = "React") -> MemberSet:
    """Walk the tree once and return the members used through ``namespace``.

    The tree is never mutated. JSX tag references land in the value set since
    tags and runtime values share one namespace.
    """
    return build_member_set(find_references(tree, language, namespace))

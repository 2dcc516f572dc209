"""Locate qualified ``Namespace.Member`` references in a tree-sitter tree.

Every match is classified into exactly one :class:`ReferenceKind`. Shapes that
only superficially match (optional chains, ``typeof`` queries, class
``implements`` entries, deeper qualification) are dropped here, so neither the
collector nor the rewriter ever sees them.
"""

from functools import lru_cache

from tree_sitter import Node, Query, QueryCursor, Tree

from react_named_imports.models.schemas import QualifiedReference, ReferenceKind
from react_named_imports.utils.ast_parser import get_language, node_text, supports_types

MEMBER_QUERY = """
(member_expression
    object: (identifier) @object
    property: (property_identifier) @property) @reference
"""

TYPE_QUERY = """
(nested_type_identifier
    module: (identifier) @object
    name: (type_identifier) @property) @reference
"""

# Tag names are matched by field and checked by hand: grammar releases differ
# in whether a dotted tag name is a member_expression or a nested_identifier.
JSX_QUERY = """
(jsx_opening_element name: (_) @tag)
(jsx_closing_element name: (_) @tag)
(jsx_self_closing_element name: (_) @tag)
"""

JSX_NAME_PARENTS = frozenset({
    "jsx_opening_element",
    "jsx_closing_element",
    "jsx_self_closing_element",
})

JSX_GRAMMARS = frozenset({"javascript", "tsx"})

# Type-position qualified names (``React.A.B.C``) alias their inner parts as
# member_expression; those are not runtime accesses.
QUALIFIED_TYPE_NAMES = frozenset({"nested_identifier", "nested_type_identifier"})


@lru_cache(maxsize=None)
def _compiled_queries(language: str) -> dict[str, Query]:
    lang = get_language(language)
    queries = {"member": Query(lang, MEMBER_QUERY)}
    if supports_types(language):
        queries["type"] = Query(lang, TYPE_QUERY)
    if language in JSX_GRAMMARS:
        queries["jsx"] = Query(lang, JSX_QUERY)
    return queries


def _is_optional_chain(node: Node) -> bool:
    return any(child.type == "optional_chain" for child in node.children)


def _inside_type_query(node: Node) -> bool:
    """True for ``typeof React.X`` and ``typeof React.X.Y``."""
    parent = node.parent
    while parent is not None and parent.type == "member_expression":
        parent = parent.parent
    return parent is not None and parent.type == "type_query"


def _classify_type_identifier(node: Node) -> tuple[ReferenceKind, Node] | None:
    holder = node
    if node.parent is not None and node.parent.type == "generic_type":
        holder = node.parent
    slot = holder.parent
    if slot is None:
        return ReferenceKind.TYPE_REFERENCE, holder
    if slot.type in ("type_query", "implements_clause"):
        # typeof queries and class implements entries stay qualified
        return None
    if slot.type == "extends_type_clause":
        return ReferenceKind.INHERITANCE_ENTRY, slot
    if slot.type == "type_arguments":
        return ReferenceKind.GENERIC_ARGUMENT, slot
    return ReferenceKind.TYPE_REFERENCE, holder


def _value_references(query: Query, tree: Tree, namespace: str) -> list[QualifiedReference]:
    references = []
    for _, captures in QueryCursor(query).matches(tree.root_node):
        if not ("reference" in captures and "object" in captures and "property" in captures):
            continue
        node = captures["reference"][0]
        if node_text(captures["object"][0]) != namespace:
            continue
        if node.parent is not None and node.parent.type in JSX_NAME_PARENTS:
            continue  # tag names come from the JSX query
        if node.parent is not None and node.parent.type in QUALIFIED_TYPE_NAMES:
            continue
        if _is_optional_chain(node) or _inside_type_query(node):
            continue
        references.append(QualifiedReference(
            kind=ReferenceKind.VALUE_ACCESS,
            member=node_text(captures["property"][0]),
            node=node,
            container=node.parent,
        ))
    return references


def _type_references(query: Query, tree: Tree, namespace: str) -> list[QualifiedReference]:
    references = []
    for _, captures in QueryCursor(query).matches(tree.root_node):
        if not ("reference" in captures and "object" in captures and "property" in captures):
            continue
        node = captures["reference"][0]
        if node_text(captures["object"][0]) != namespace:
            continue
        classified = _classify_type_identifier(node)
        if classified is None:
            continue
        kind, container = classified
        references.append(QualifiedReference(
            kind=kind,
            member=node_text(captures["property"][0]),
            node=node,
            container=container,
        ))
    return references


def _tag_parts(tag: Node) -> tuple[Node, Node] | None:
    if tag.type not in ("member_expression", "nested_identifier") or tag.named_child_count != 2:
        return None
    obj = tag.child_by_field_name("object") or tag.named_children[0]
    prop = tag.child_by_field_name("property") or tag.named_children[1]
    if obj.type != "identifier" or prop.type not in ("property_identifier", "identifier"):
        return None
    return obj, prop


def _markup_references(query: Query, tree: Tree, namespace: str) -> list[QualifiedReference]:
    references = []
    for _, captures in QueryCursor(query).matches(tree.root_node):
        for tag in captures.get("tag", []):
            parts = _tag_parts(tag)
            if parts is None or node_text(parts[0]) != namespace:
                continue
            references.append(QualifiedReference(
                kind=ReferenceKind.MARKUP_ACCESS,
                member=node_text(parts[1]),
                node=tag,
                container=tag.parent,
            ))
    return references


def find_references(tree: Tree, language: str, namespace: str = "React") -> list[QualifiedReference]:
    """Return every supported qualified reference in document order.

    Args:
        tree: Parsed tree-sitter Tree
        language: Language name the tree was parsed with
        namespace: Local identifier the references are qualified with

    Returns:
        List of QualifiedReference sorted by start byte, one per node
    """
    queries = _compiled_queries(language)
    references = _value_references(queries["member"], tree, namespace)
    if "type" in queries:
        references.extend(_type_references(queries["type"], tree, namespace))
    if "jsx" in queries:
        references.extend(_markup_references(queries["jsx"], tree, namespace))

    unique: dict[tuple[int, int], QualifiedReference] = {}
    for ref in references:
        unique.setdefault((ref.start_byte, ref.end_byte), ref)
    return sorted(unique.values(), key=lambda ref: ref.start_byte)

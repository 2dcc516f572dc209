"""Import synthesizer: drop the namespace import, emit consolidated named imports."""

from tree_sitter import Node, Tree

from react_named_imports.models.schemas import (
    ImportStatement,
    MemberSet,
    TextEdit,
    TransformOptions,
)
from react_named_imports.transform.exceptions import TransformError
from react_named_imports.utils.ast_parser import node_text, string_value
from react_named_imports.utils.diff_generator import detect_code_style

QUOTE_CHARS = {"single": "'", "double": '"'}


def _import_source(node: Node) -> Node | None:
    source = node.child_by_field_name("source")
    if source is None:
        for child in node.named_children:
            if child.type == "string":
                return child
    return source


def _import_clause(node: Node) -> Node | None:
    for child in node.named_children:
        if child.type == "import_clause":
            return child
    return None


def is_type_only_import(node: Node) -> bool:
    """True for ``import type ... from``."""
    return any(child.type == "type" for child in node.children)


def binds_namespace(node: Node, namespace: str) -> bool:
    """True if the statement binds ``namespace`` as a default or ``* as`` import."""
    clause = _import_clause(node)
    if clause is None:
        return False
    for child in clause.named_children:
        if child.type == "identifier" and node_text(child) == namespace:
            return True
        if child.type == "namespace_import":
            for grandchild in child.named_children:
                if grandchild.type == "identifier" and node_text(grandchild) == namespace:
                    return True
    return False


def named_specifiers(node: Node) -> list[Node]:
    """Return the ``import_specifier`` nodes of a statement's ``{ ... }`` list."""
    clause = _import_clause(node)
    if clause is None:
        return []
    specifiers = []
    for child in clause.named_children:
        if child.type == "named_imports":
            specifiers.extend(c for c in child.named_children if c.type == "import_specifier")
    return specifiers


def specifier_local_name(specifier: Node) -> str:
    local = specifier.child_by_field_name("alias") or specifier.child_by_field_name("name")
    return node_text(local) if local is not None else node_text(specifier)


def specifier_imported_name(specifier: Node) -> str:
    name = specifier.child_by_field_name("name")
    return node_text(name) if name is not None else node_text(specifier)


def module_imports(tree: Tree, module: str) -> list[Node]:
    """Top-level import statements whose source is ``module``."""
    imports = []
    for child in tree.root_node.named_children:
        if child.type != "import_statement":
            continue
        source = _import_source(child)
        if source is not None and string_value(source) == module:
            imports.append(child)
    return imports


def find_namespace_imports(tree: Tree, module: str, namespace: str) -> list[Node]:
    """Import statements of ``module`` that bind exactly ``namespace``.

    Imports of the module under any other local name are left alone.
    """
    return [node for node in module_imports(tree, module) if binds_namespace(node, namespace)]


def _removal_end(source: bytes, end: int) -> int:
    """Extend a deletion through the rest of the line when only whitespace follows."""
    pos = end
    while pos < len(source) and source[pos:pos + 1] in (b" ", b"\t"):
        pos += 1
    if pos >= len(source):
        return pos
    if source[pos:pos + 2] == b"\r\n":
        return pos + 2
    if source[pos:pos + 1] == b"\n":
        return pos + 1
    return end


def _is_directive(node: Node) -> bool:
    # "use client" / "use strict"
    return (
        node.type == "expression_statement"
        and node.named_child_count == 1
        and node.named_children[0].type == "string"
    )


def insertion_point(tree: Tree) -> int:
    """Byte offset where synthesized imports are inserted.

    The hashbang, the directive prologue and header comments stay above the
    imports. A comment block sitting directly on the first statement (a doc
    comment, no blank line in between) stays attached to that statement,
    unless the statement is itself an import.
    """
    block: Node | None = None  # first comment of the run touching the next node
    previous: Node | None = None
    for child in tree.root_node.children:
        if child.type == "comment":
            trailing = (
                previous is not None
                and previous.type != "comment"
                and child.start_point[0] == previous.end_point[0]
            )
            if trailing:
                block = None
            elif block is None or child.start_point[0] - previous.end_point[0] > 1:
                block = child
            previous = child
            continue
        if child.type == "hash_bang_line" or _is_directive(child):
            block = None
            previous = child
            continue
        if (
            block is not None
            and child.type != "import_statement"
            and child.start_point[0] - previous.end_point[0] <= 1
        ):
            return block.start_byte
        return child.start_byte
    return tree.root_node.end_byte


def _detect_style(tree: Tree, source: bytes, options: TransformOptions) -> tuple[str, bool, str]:
    text = source.decode("utf-8")
    style = detect_code_style(text)
    existing = [c for c in tree.root_node.named_children if c.type == "import_statement"]
    preferred = module_imports(tree, options.module) or existing

    if options.quote is not None:
        quote = QUOTE_CHARS[options.quote]
    elif preferred and _import_source(preferred[0]) is not None:
        quote = node_text(_import_source(preferred[0]))[:1]
    else:
        quote = QUOTE_CHARS[style["quotes"]]

    if options.semicolons is not None:
        semicolon = options.semicolons
    elif existing:
        semicolon = node_text(existing[0]).rstrip().endswith(";")
    else:
        semicolon = bool(style["semicolons"])

    return quote, semicolon, str(style["newline"])


def plan_imports(
    members: MemberSet,
    removed: list[Node],
    module: str,
) -> list[ImportStatement]:
    """Build at most one type import and one value import, in final file order.

    Specifiers carried over from the removed statements come first. A carried
    specifier stands in for a collected member only when it imports that name
    under the same name.

    Raises:
        TransformError: If a carried alias already binds a member's name to a
            different export
    """
    carried_values: list[Node] = []
    carried_types: list[Node] = []
    for node in removed:
        target = carried_types if is_type_only_import(node) else carried_values
        target.extend(named_specifiers(node))

    for spec in carried_values + carried_types:
        local = specifier_local_name(spec)
        imported = specifier_imported_name(spec)
        if local != imported and (members.has_value(local) or members.has_type(local)):
            raise TransformError(
                f"'{local}' is bound to '{imported}' by the removed import "
                f"and cannot also name the '{local}' member of '{module}'"
            )

    value_names = [node_text(spec) for spec in carried_values]
    value_locals = {specifier_local_name(spec) for spec in carried_values}
    value_names.extend(name for name in members.value_members if name not in value_locals)

    type_names = [node_text(spec) for spec in carried_types]
    type_locals = {specifier_local_name(spec) for spec in carried_types}
    type_names.extend(name for name in members.type_members if name not in type_locals)

    statements = []
    if value_names:
        statements.insert(0, ImportStatement(names=tuple(value_names), module=module))
    if type_names:
        statements.insert(0, ImportStatement(names=tuple(type_names), module=module, type_only=True))
    return statements


def synthesize_imports(
    tree: Tree,
    source: bytes,
    members: MemberSet,
    options: TransformOptions | None = None,
) -> tuple[list[TextEdit], int]:
    """Plan the import edits for one unit.

    Args:
        tree: Parsed tree of the original source
        source: Original source bytes
        members: Completed member set from the collector
        options: Namespace, module and style options

    Returns:
        Tuple of (edits, number of import statements removed)
    """
    options = options or TransformOptions()
    removed = find_namespace_imports(tree, options.module, options.namespace)

    edits = [
        TextEdit(start=node.start_byte, end=_removal_end(source, node.end_byte), text="")
        for node in removed
    ]

    statements = plan_imports(members, removed, options.module)
    if statements:
        quote, semicolon, newline = _detect_style(tree, source, options)
        position = insertion_point(tree)
        text = "".join(stmt.render(quote, semicolon) + newline for stmt in statements)
        if position == len(source) and source and not source.endswith(b"\n"):
            text = newline + text
        edits.insert(0, TextEdit(start=position, end=position, text=text))

    return edits, len(removed)

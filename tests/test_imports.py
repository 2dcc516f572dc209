"""Unit tests for the import synthesizer."""

import pytest

from react_named_imports.models import ImportStatement, MemberSet, TransformOptions
from react_named_imports.transform.exceptions import TransformError
from react_named_imports.transform.imports import (
    binds_namespace,
    find_namespace_imports,
    insertion_point,
    is_type_only_import,
    plan_imports,
    synthesize_imports,
)


class TestImportStatement:
    def test_render_value_import(self):
        stmt = ImportStatement(names=("useState", "useEffect"), module="react")
        assert stmt.render() == "import { useState, useEffect } from 'react';"

    def test_render_type_import_double_quotes_no_semicolon(self):
        stmt = ImportStatement(names=("FC",), module="react", type_only=True)
        assert stmt.render('"', False) == 'import type { FC } from "react"'


class TestFindNamespaceImports:
    """Which existing imports are deleted."""

    def test_default_and_namespace_imports_match(self, parse):
        tree = parse(
            "import React from 'react';\n"
            "import * as React from 'react';\n",
            "typescript",
        )
        assert len(find_namespace_imports(tree, "react", "React")) == 2

    def test_other_alias_not_matched(self, parse):
        tree = parse("import * as R from 'react';\nimport Def from 'react';\n", "typescript")
        assert find_namespace_imports(tree, "react", "React") == []

    def test_other_module_not_matched(self, parse):
        tree = parse("import React from 'preact/compat';\n", "typescript")
        assert find_namespace_imports(tree, "react", "React") == []

    def test_named_only_import_not_matched(self, parse):
        tree = parse("import { React } from 'react';\n", "typescript")
        node = tree.root_node.named_children[0]
        assert binds_namespace(node, "React") is False

    def test_type_only_detection(self, parse):
        tree = parse("import type React from 'react';\nimport React2 from 'react';\n", "typescript")
        first, second = tree.root_node.named_children
        assert is_type_only_import(first) is True
        assert is_type_only_import(second) is False


class TestPlanImports:
    def test_type_statement_first(self):
        members = MemberSet(value_members=("useId",), type_members=("FC",))
        statements = plan_imports(members, [], "react")
        assert [s.type_only for s in statements] == [True, False]
        assert statements[0].names == ("FC",)
        assert statements[1].names == ("useId",)

    def test_nothing_collected(self):
        assert plan_imports(MemberSet(), [], "react") == []

    def test_carried_specifiers_come_first_without_duplicates(self, parse):
        tree = parse("import React, { useState, useRef as ref } from 'react';\n", "typescript")
        removed = find_namespace_imports(tree, "react", "React")
        members = MemberSet(value_members=("useEffect", "useState"))
        statements = plan_imports(members, removed, "react")
        assert len(statements) == 1
        assert statements[0].names == ("useState", "useRef as ref", "useEffect")

    def test_shared_name_in_both_statements(self):
        members = MemberSet(value_members=("Component",), type_members=("Component", "FC"))
        type_stmt, value_stmt = plan_imports(members, [], "react")
        assert type_stmt.names == ("Component", "FC")
        assert value_stmt.names == ("Component",)

    def test_aliased_carried_specifier_clash_raises(self, parse):
        tree = parse("import React, { foo as useState } from 'react';\n", "typescript")
        removed = find_namespace_imports(tree, "react", "React")
        with pytest.raises(TransformError):
            plan_imports(MemberSet(value_members=("useState",)), removed, "react")

    def test_aliased_carried_type_specifier_clash_raises(self, parse):
        tree = parse("import React, { Other as FC } from 'react';\n", "typescript")
        removed = find_namespace_imports(tree, "react", "React")
        with pytest.raises(TransformError):
            plan_imports(MemberSet(type_members=("FC",)), removed, "react")


class TestSynthesizeImports:
    def test_no_members_no_imports_no_edits(self, parse):
        source = "const a = 1;\n"
        edits, removed = synthesize_imports(parse(source), source.encode(), MemberSet())
        assert edits == []
        assert removed == 0

    def test_removal_only(self, parse):
        source = "import * as React from 'react';\nconst a = 1;\n"
        edits, removed = synthesize_imports(parse(source, "typescript"), source.encode(), MemberSet())
        assert removed == 1
        assert [(e.start, e.end, e.text) for e in edits] == [(0, 32, "")]

    def test_removal_keeps_trailing_code_on_same_line(self, parse):
        source = "import React from 'react'; const a = 1;\n"
        edits, _ = synthesize_imports(parse(source, "typescript"), source.encode(), MemberSet())
        assert [(e.start, e.end) for e in edits] == [(0, 26)]

    def test_insertion_after_directive(self, parse):
        source = "'use client';\nexport const a = 1;\n"
        tree = parse(source)
        assert insertion_point(tree) == len("'use client';\n")

    def test_insertion_before_attached_doc_comment(self, parse):
        source = "/** Docs */\nexport const a = 1;\n"
        assert insertion_point(parse(source, "typescript")) == 0

    def test_insertion_after_detached_header_comment(self, parse):
        source = "// header\n\n/** Docs */\nexport const a = 1;\n"
        assert insertion_point(parse(source, "typescript")) == len("// header\n\n")

    def test_insertion_after_comment_above_import(self, parse):
        source = "// header\nimport x from 'x';\n"
        assert insertion_point(parse(source, "typescript")) == len("// header\n")

    def test_trailing_directive_comment_stays_on_its_line(self, parse):
        source = "'use client'; // client only\nexport const a = 1;\n"
        tree = parse(source)
        assert insertion_point(tree) == source.index("export")

    def test_style_from_options(self, parse):
        source = "import x from 'x';\nx();\n"
        options = TransformOptions(quote="double", semicolons=False)
        edits, _ = synthesize_imports(
            parse(source, "typescript"), source.encode(), MemberSet(value_members=("useId",)), options
        )
        assert edits[0].text == 'import { useId } from "react"\n'
        assert edits[0].start == 0

    def test_style_detected_from_existing_imports(self, parse):
        source = 'import x from "x"\nx()\n'
        edits, _ = synthesize_imports(
            parse(source, "typescript"), source.encode(), MemberSet(value_members=("useId",))
        )
        assert edits[0].text == 'import { useId } from "react"\n'

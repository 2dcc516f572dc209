"""Pydantic data models for the codemod core."""

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from tree_sitter import Node


class ReferenceKind(str, Enum):
    """Syntactic category of a qualified ``Namespace.Member`` reference."""

    VALUE_ACCESS = "value_access"
    TYPE_REFERENCE = "type_reference"
    MARKUP_ACCESS = "markup_access"
    GENERIC_ARGUMENT = "generic_argument"
    INHERITANCE_ENTRY = "inheritance_entry"

    @property
    def is_type(self) -> bool:
        return self in TYPE_KINDS


TYPE_KINDS = frozenset({
    ReferenceKind.TYPE_REFERENCE,
    ReferenceKind.GENERIC_ARGUMENT,
    ReferenceKind.INHERITANCE_ENTRY,
})


class QualifiedReference(BaseModel):
    """A two-part ``React.X`` node found in the tree."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: ReferenceKind
    member: str
    node: Node  # the qualified node itself, replaced as a whole
    container: Optional[Node] = None  # enclosing node holding the slot

    @property
    def start_byte(self) -> int:
        return self.node.start_byte

    @property
    def end_byte(self) -> int:
        return self.node.end_byte


class MemberSet(BaseModel):
    """Unique member names reached through the namespace, in first-seen order."""

    model_config = ConfigDict(frozen=True)

    value_members: tuple[str, ...] = ()
    type_members: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.value_members or self.type_members)

    def has_value(self, name: str) -> bool:
        return name in self.value_members

    def has_type(self, name: str) -> bool:
        return name in self.type_members


class TextEdit(BaseModel):
    """Byte-range replacement over the original source. ``start == end`` inserts."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0)
    end: int = Field(ge=0)
    text: str = ""


class ImportStatement(BaseModel):
    """A synthesized ``import { ... } from '<module>'`` statement."""

    model_config = ConfigDict(frozen=True)

    names: tuple[str, ...]
    module: str
    type_only: bool = False

    def render(self, quote: str = "'", semicolon: bool = True) -> str:
        keyword = "import type" if self.type_only else "import"
        terminator = ";" if semicolon else ""
        return (
            f"{keyword} {{ {', '.join(self.names)} }} "
            f"from {quote}{self.module}{quote}{terminator}"
        )


class TransformOptions(BaseModel):
    """Options that control a single transform invocation."""

    model_config = ConfigDict(frozen=True)

    namespace: str = "React"
    module: str = "react"
    quote: Optional[Literal["single", "double"]] = None  # None = detect
    semicolons: Optional[bool] = None  # None = detect

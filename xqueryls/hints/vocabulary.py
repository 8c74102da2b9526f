"""
Built-in XQuery vocabulary offered alongside identifiers from the project.

The four tables are kept exactly as shipped, including repeated entries:
candidates are merged without deduplication.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class StaticVocabulary:
    """Fixed keyword, type, operator and axis-specifier tables."""

    keywords: tuple[str, ...]
    types: tuple[str, ...]
    operators: tuple[str, ...]
    axis_specifiers: tuple[str, ...]

    def entries(self) -> list[str]:
        """All entries in merge order: keywords, types, operators, axes."""
        return [
            *self.keywords,
            *self.types,
            *self.operators,
            *self.axis_specifiers,
        ]


XQUERY_KEYWORDS = (
    "after", "ancestor", "ancestor-or-self", "and", "as", "ascending",
    "assert", "attribute", "before", "by", "case", "cast", "child", "comment",
    "declare", "default", "define", "descendant", "descendant-or-self",
    "descending", "document", "document-node", "element", "else", "eq",
    "every", "except", "external", "following", "following-sibling",
    "follows", "for", "function", "if", "import", "in", "instance",
    "intersect", "item", "let", "module", "namespace", "node", "node", "of",
    "only", "or", "order", "parent", "precedes", "preceding",
    "preceding-sibling", "processing-instruction", "ref", "return", "returns",
    "satisfies", "schema", "schema-element", "self", "some", "sortby",
    "stable", "text", "then", "to", "treat", "typeswitch", "union",
    "variable", "version", "where", "xquery", "empty-sequence",
)

XQUERY_TYPES = (
    "xs:string", "xs:float", "xs:decimal", "xs:double", "xs:integer",
    "xs:boolean", "xs:date", "xs:dateTime", "xs:time", "xs:duration",
    "xs:dayTimeDuration", "xs:time", "xs:yearMonthDuration", "numeric",
    "xs:hexBinary", "xs:base64Binary", "xs:anyURI", "xs:QName", "xs:byte",
    "xs:boolean", "xs:anyURI", "xf:yearMonthDuration",
)

XQUERY_OPERATORS = (
    "eq", "ne", "lt", "le", "gt", "ge", "and", "or", "div", "idiv", "mod",
)

XQUERY_AXIS_SPECIFIERS = (
    "self::", "attribute::", "child::", "descendant::",
    "descendant-or-self::", "parent::", "ancestor::", "ancestor-or-self::",
    "following::", "preceding::", "following-sibling::", "preceding-sibling::",
)

XQUERY_VOCABULARY = StaticVocabulary(
    keywords=XQUERY_KEYWORDS,
    types=XQUERY_TYPES,
    operators=XQUERY_OPERATORS,
    axis_specifiers=XQUERY_AXIS_SPECIFIERS,
)

"""Type-mapping table and Rust-to-C++ type translation."""

from __future__ import annotations

from dataclasses import dataclass, field
import re
from typing import Dict, List, Optional, Tuple

from .errors import TypeResolutionError

_TOKEN_PATTERN = re.compile(
    r"\s*(?:(?P<lifetime>'[A-Za-z_][A-Za-z0-9_]*)|(?P<ident>[A-Za-z_][A-Za-z0-9_]*)"
    r"|(?P<number>[0-9]+)|(?P<punct>::|[<>,&*\[\];()]))"
)

_BUILTIN_TYPES: Dict[str, str] = {
    "bool": "bool",
    "c_char": "char",
    "char": "char32_t",
    "f32": "float",
    "f64": "double",
    "i8": "::std::int8_t",
    "i16": "::std::int16_t",
    "i32": "::std::int32_t",
    "i64": "::std::int64_t",
    "isize": "::rust::isize",
    "u8": "::std::uint8_t",
    "u16": "::std::uint16_t",
    "u32": "::std::uint32_t",
    "u64": "::std::uint64_t",
    "usize": "::std::size_t",
    "String": "::rust::String",
    "CxxString": "::std::string",
}

_WRAPPER_TYPES: Dict[str, str] = {
    "Box": "::rust::Box",
    "CxxVector": "::std::vector",
    "SharedPtr": "::std::shared_ptr",
    "UniquePtr": "::std::unique_ptr",
    "Vec": "::rust::Vec",
    "WeakPtr": "::std::weak_ptr",
}

_RESERVED_WORDS = {"const", "dyn", "fn", "impl", "mut", "Self"}


@dataclass
class CxxMappings:
    """Cross-language naming table: C++ renames and namespaces keyed by Rust ident."""

    cxx_names: Dict[str, str] = field(default_factory=dict)
    namespaces: Dict[str, str] = field(default_factory=dict)

    def cxx(self, ident: str) -> str:
        """Return the qualified C++ name for ``ident``, applying renames and namespaces."""
        name = self.cxx_names.get(ident, ident)
        namespace = self.namespace_of(ident)
        if namespace:
            return f"::{namespace}::{name}"
        return name

    def namespace_of(self, ident: str) -> Optional[str]:
        namespace = self.namespaces.get(ident, "").strip(":")
        return namespace or None

    def merged(self, other: "CxxMappings") -> "CxxMappings":
        """Return a new table where entries of ``other`` override this one."""
        return CxxMappings(
            cxx_names={**self.cxx_names, **other.cxx_names},
            namespaces={**self.namespaces, **other.namespaces},
        )

    def to_cpp_type(self, source_type: str) -> str:
        """Translate a Rust type expression into C++ type text."""
        return _TypeTranslator(source_type, self).translate()


class _TypeTranslator:
    """Recursive-descent translator over a tokenised Rust type."""

    def __init__(self, source_type: str, mappings: CxxMappings) -> None:
        self.source_type = source_type
        self.mappings = mappings
        self.tokens = self._tokenize(source_type)
        self.position = 0

    def translate(self) -> str:
        if not self.tokens:
            raise self._error("empty type")
        result = self._parse_type()
        if self.position != len(self.tokens):
            raise self._error(f"unexpected `{self.tokens[self.position][1]}`")
        return result

    def _tokenize(self, text: str) -> List[Tuple[str, str]]:
        tokens: List[Tuple[str, str]] = []
        index = 0
        stripped = text.rstrip()
        while index < len(stripped):
            match = _TOKEN_PATTERN.match(stripped, index)
            if match is None or match.end() == index:
                raise self._error(f"unexpected character `{stripped[index:].strip()[:1]}`")
            kind = match.lastgroup or ""
            tokens.append((kind, match.group(kind)))
            index = match.end()
        return tokens

    def _error(self, reason: str) -> TypeResolutionError:
        return TypeResolutionError(self.source_type, reason)

    def _peek(self) -> Optional[str]:
        if self.position < len(self.tokens):
            return self.tokens[self.position][1]
        return None

    def _next(self) -> Tuple[str, str]:
        if self.position >= len(self.tokens):
            raise self._error("unexpected end of type")
        token = self.tokens[self.position]
        self.position += 1
        return token

    def _expect(self, value: str) -> None:
        _, token = self._next()
        if token != value:
            raise self._error(f"expected `{value}` but found `{token}`")

    def _parse_type(self) -> str:
        token = self._peek()
        if token == "&":
            return self._parse_reference()
        if token == "*":
            return self._parse_pointer()
        if token == "[":
            return self._parse_array()
        if token == "(":
            self._next()
            if self._peek() != ")":
                raise self._error("tuples are not supported")
            self._next()
            return "void"
        return self._parse_path()

    def _parse_reference(self) -> str:
        self._expect("&")
        if self.position < len(self.tokens) and self.tokens[self.position][0] == "lifetime":
            self._next()
        mutable = self._peek() == "mut"
        if mutable:
            self._next()
        if self._peek() == "[":
            self._next()
            inner = self._parse_type()
            self._expect("]")
            return f"::rust::Slice<{inner}>" if mutable else f"::rust::Slice<{inner} const>"
        if not mutable and self._peek() == "str":
            self._next()
            return "::rust::Str"
        inner = self._parse_type()
        return f"{inner}&" if mutable else f"{inner} const&"

    def _parse_pointer(self) -> str:
        self._expect("*")
        qualifier = self._peek()
        if qualifier not in {"const", "mut"}:
            raise self._error("raw pointers must be `*const` or `*mut`")
        self._next()
        inner = self._parse_type()
        return f"{inner}*" if qualifier == "mut" else f"{inner} const*"

    def _parse_array(self) -> str:
        self._expect("[")
        inner = self._parse_type()
        self._expect(";")
        kind, length = self._next()
        if kind != "number":
            raise self._error("array length must be an integer literal")
        self._expect("]")
        return f"::std::array<{inner}, {length}>"

    def _parse_path(self) -> str:
        if self._peek() == "::":
            self._next()
        ident, arguments = self._parse_segment()
        while self._peek() == "::":
            self._next()
            ident, arguments = self._parse_segment()
        return self._resolve_segment(ident, arguments)

    def _parse_segment(self) -> Tuple[str, List[str]]:
        kind, ident = self._next()
        if kind != "ident":
            raise self._error(f"expected a type name but found `{ident}`")
        if ident in _RESERVED_WORDS:
            raise self._error(f"`{ident}` is not supported in a parameter type")
        arguments: List[str] = []
        if self._peek() == "<":
            self._next()
            arguments.append(self._parse_type())
            while self._peek() == ",":
                self._next()
                arguments.append(self._parse_type())
            self._expect(">")
        return ident, arguments

    def _resolve_segment(self, ident: str, arguments: List[str]) -> str:
        if ident == "Pin":
            self._check_arity(ident, arguments, 1)
            return arguments[0]
        if ident in _WRAPPER_TYPES:
            self._check_arity(ident, arguments, 1)
            return f"{_WRAPPER_TYPES[ident]}<{arguments[0]}>"
        if arguments:
            raise self._error(f"generic arguments are not supported on `{ident}`")
        if ident == "str":
            raise self._error("`str` is only supported behind a shared reference (`&str`)")
        if ident in _BUILTIN_TYPES:
            return _BUILTIN_TYPES[ident]
        return self.mappings.cxx(ident)

    def _check_arity(self, ident: str, arguments: List[str], expected: int) -> None:
        if len(arguments) != expected:
            raise self._error(
                f"`{ident}` expects {expected} generic argument(s), found {len(arguments)}"
            )


__all__ = ["CxxMappings"]

"""Generated C++ text fragments and their per-QObject aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass(frozen=True)
class CppHeaderFragment:
    """Declaration-only fragment that lives in the header."""

    header: str

    @property
    def source(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class CppPairFragment:
    """Declaration for the header paired with its definition for the source file."""

    header: str
    source: str


CppFragment = Union[CppHeaderFragment, CppPairFragment]


@dataclass
class GeneratedCppBlocks:
    """Fragments generated for one QObject, in emission order."""

    methods: List[CppFragment] = field(default_factory=list)

    def append(self, fragment: CppFragment) -> None:
        self.methods.append(fragment)

    def extend(self, other: "GeneratedCppBlocks") -> None:
        self.methods.extend(other.methods)

    def __len__(self) -> int:
        return len(self.methods)


__all__ = ["CppFragment", "CppHeaderFragment", "CppPairFragment", "GeneratedCppBlocks"]

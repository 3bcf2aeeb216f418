# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Compiled schema nodes.

A node describes one named option. Its behavior is selected by ``kind``, a
closed variant over scalar, list and structure shapes. Nodes are frozen; every
descriptor application produces a new node.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from .inflection import binding_name as to_binding_name

LIST_MEMBER_NAME = "##list-member##"

LIST_JOIN = "."
MEMBERED_LIST_JOIN = ".member."


class LeafType(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    BLOB = "blob"
    TIMESTAMP = "timestamp"


@dataclass(frozen=True)
class ScalarKind:
    leaf: LeafType = LeafType.STRING


@dataclass(frozen=True)
class ListKind:
    member: "SchemaNode"
    join: str = LIST_JOIN


@dataclass(frozen=True)
class StructureKind:
    members: Tuple["SchemaNode", ...] = ()
    _by_wire_name: Dict[str, "SchemaNode"] = field(init=False, repr=False, compare=False)
    _by_binding_name: Dict[str, "SchemaNode"] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_by_wire_name", {m.wire_name: m for m in self.members})
        object.__setattr__(self, "_by_binding_name", {m.binding_name: m for m in self.members})

    def member(self, binding_name: str) -> Optional["SchemaNode"]:
        return self._by_binding_name.get(binding_name)

    def member_by_wire_name(self, wire_name: str) -> Optional["SchemaNode"]:
        return self._by_wire_name.get(wire_name)


NodeKind = Union[ScalarKind, ListKind, StructureKind]


@dataclass(frozen=True)
class SchemaNode:
    wire_name: str
    binding_name: str
    required: bool = False
    kind: NodeKind = ScalarKind()

    @classmethod
    def default(cls, wire_name: str) -> "SchemaNode":
        """A plain, optional string option."""
        return cls(wire_name=wire_name, binding_name=to_binding_name(wire_name))

    @classmethod
    def list_member(cls) -> "SchemaNode":
        return cls(wire_name=LIST_MEMBER_NAME, binding_name=LIST_MEMBER_NAME)

    def evolve(self, **changes) -> "SchemaNode":
        return replace(self, **changes)

    def context_description(self, context: Optional[str]) -> str:
        return context or f"option {self.binding_name}"

    @property
    def is_scalar(self) -> bool:
        return isinstance(self.kind, ScalarKind)

    @property
    def is_list(self) -> bool:
        return isinstance(self.kind, ListKind)

    @property
    def is_structure(self) -> bool:
        return isinstance(self.kind, StructureKind)


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
"""
BTreeNode Module

A node is one page of the B-tree. It holds an ordered list of keys and, unless it is
a leaf, one more child than it has keys.

Noteworthy features and design choices:

1. Ownership: a node exclusively owns its children, there are no parent references;
   the tree passes the parent and child index down explicitly when it needs them.
2. Identity: splitting a node keeps the original object as the left half, the keys and
   children lists are replaced rather than edited in place.
3. JSON Representation: `__str__` renders the keys the way they are printed in tree
   dumps, `to_dict` gives a nested structure suitable for orjson.
"""

from typing import Any
from typing import Dict
from typing import List
from typing import Optional


class BTreeNode:

    __slots__ = ("keys", "children", "leaf")

    def __init__(
        self,
        leaf: bool = True,
        keys: Optional[List[Any]] = None,
        children: Optional[List["BTreeNode"]] = None,
    ):
        """
        Initialize a node.

        Parameters:
            leaf: bool, optional
                True when the node has no children.
            keys: list, optional
                Keys in ascending order.
            children: list, optional
                Child nodes, only for internal nodes.
        """
        self.leaf = leaf
        self.keys: List[Any] = keys if keys is not None else []
        self.children: List["BTreeNode"] = children if children is not None else []

    @property
    def is_leaf(self) -> bool:
        return self.leaf

    def is_full(self, max_keys: int) -> bool:
        return len(self.keys) >= max_keys

    def to_dict(self) -> Dict[str, Any]:
        """
        Nested dictionary of this node and its subtree.
        """
        result: Dict[str, Any] = {"keys": list(self.keys), "leaf": self.leaf}
        if not self.leaf:
            result["children"] = [child.to_dict() for child in self.children]
        return result

    def __str__(self) -> str:
        return "[" + ", ".join(str(key) for key in self.keys) + "]"

    def __repr__(self) -> str:
        kind = "leaf" if self.leaf else "internal"
        return f"<BTreeNode {kind} keys={self.keys!r}>"

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
In-memory B-tree with insert-only semantics.

The tree has a minimum degree `t`; every node holds at most 2t-1 keys and every node
other than the root holds at least t-1 keys. Inserts split full nodes on the way down
(before descending into them) so a single pass from the root to a leaf is always
enough, nothing ever has to be pushed back up the tree. The only place the tree grows
taller is when the root itself is full.

    tree = BTree(2)
    tree.extend([10, 20, 5, 6, 12, 30, 7, 17])
    tree.keys()  # [5, 6, 7, 10, 12, 17, 20, 30]
"""

import logging
from typing import Any
from typing import Callable
from typing import Generator
from typing import Iterable
from typing import List
from typing import Optional
from typing import Tuple

from arbor import config
from arbor.exceptions import InvalidInternalStateError
from arbor.models.btree_node import BTreeNode
from arbor.utils.invariants import check_invariants

logger = logging.getLogger(__name__)


class BTree:

    __slots__ = ("minimum_degree", "root", "_size")

    def __init__(self, minimum_degree: Optional[int] = None):
        if minimum_degree is None:
            self.minimum_degree: int = config.parse_minimum_degree(
                config.DEFAULT_MINIMUM_DEGREE, config_item="ARBOR_MINIMUM_DEGREE"
            )
        else:
            self.minimum_degree = config.parse_minimum_degree(
                minimum_degree, config_item="minimum_degree"
            )
        self.root: Optional[BTreeNode] = None
        self._size: int = 0

    @property
    def min_keys(self) -> int:
        return self.minimum_degree - 1

    @property
    def max_keys(self) -> int:
        return (2 * self.minimum_degree) - 1

    @property
    def min_children(self) -> int:
        return self.minimum_degree

    @property
    def max_children(self) -> int:
        return 2 * self.minimum_degree

    @property
    def height(self) -> int:
        """Number of levels, zero for an empty tree."""
        height = 0
        node = self.root
        while node is not None:
            height += 1
            node = None if node.leaf else node.children[0]
        return height

    def is_empty(self) -> bool:
        return self.root is None

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self.root is not None

    def __iter__(self):
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"<BTree t={self.minimum_degree} keys={self._size} height={self.height}>"

    def insert(self, key: Any) -> None:
        """
        Add a key to the tree.

        Duplicates are accepted, they end up next to the keys they are equal to.
        """
        root = self.root

        if root is None:
            self.root = BTreeNode(leaf=True, keys=[key])
        else:
            if root.is_full(self.max_keys):
                # the root is the only node without a parent to split it, so we give it one
                new_root = BTreeNode(leaf=False, children=[root])
                self.split_child(new_root, 0, root)
                self.root = new_root
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("Root split, tree height is now %s", self.height)
            self.insert_non_full(self.root, key)

        self._size += 1

        if config.VALIDATE_ON_INSERT:
            check_invariants(self)

    def extend(self, keys: Iterable[Any]) -> None:
        for key in keys:
            self.insert(key)

    def insert_non_full(self, node: BTreeNode, key: Any) -> None:
        """
        Place a key in the subtree rooted at `node`, which must not be full.

        Equal keys always go to the left; the leaf scan, the choice of child and the
        choice after a split all use the same comparison so equal keys can't end up on
        both sides of a separator.
        """
        if node.is_full(self.max_keys):
            raise InvalidInternalStateError(
                f"Cannot insert into a full node ({len(node.keys)} keys, maximum is {self.max_keys})."
            )

        i = len(node.keys) - 1

        if node.leaf:
            while i >= 0 and key <= node.keys[i]:
                i -= 1
            node.keys.insert(i + 1, key)
            return

        while i >= 0 and key <= node.keys[i]:
            i -= 1
        i += 1

        child = node.children[i]
        if child.is_full(self.max_keys):
            self.split_child(node, i, child)
            if key > node.keys[i]:
                i += 1

        self.insert_non_full(node.children[i], key)

    def split_child(self, parent: BTreeNode, index: int, full: BTreeNode) -> None:
        """
        Split the full child at `parent.children[index]` around its median.

        `full` keeps the lower t-1 keys (and t children), a new node to its right takes
        the upper t-1 keys (and t children) and the median moves up into `parent`. The
        parent must have room for the median, callers make sure of this by splitting
        parents before they descend.
        """
        t = self.minimum_degree

        if index < 0 or index >= len(parent.children) or parent.children[index] is not full:
            raise InvalidInternalStateError(
                f"Node to split is not child {index} of the parent node."
            )
        if len(full.keys) != self.max_keys:
            raise InvalidInternalStateError(
                f"Cannot split a node with {len(full.keys)} keys, only full nodes ({self.max_keys} keys) are split."
            )

        median = full.keys[t - 1]

        right = BTreeNode(leaf=full.leaf, keys=full.keys[t:])
        if not full.leaf:
            right.children = full.children[t:]
            full.children = full.children[:t]
        full.keys = full.keys[: t - 1]

        parent.children.insert(index + 1, right)
        parent.keys.insert(index, median)

        logger.debug("Split node at child %s, promoted %r", index, median)

    def walk(self) -> Generator[Tuple[BTreeNode, int], None, None]:
        """
        Pre-order walk of the tree, yields (node, depth) with the root at depth 0.
        """
        if self.root is None:
            return
        stack = [(self.root, 0)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            if not node.leaf:
                stack.extend((child, depth + 1) for child in reversed(node.children))

    def for_each_node(self, visitor: Callable[[BTreeNode, int], Any]) -> None:
        for node, depth in self.walk():
            visitor(node, depth)

    def keys(self) -> List[Any]:
        """All of the keys, in order."""
        return self.traverse(self.root) if self.root is not None else []

    def traverse(self, node: BTreeNode) -> List[Any]:
        if node.leaf:
            return list(node.keys)

        result = []
        for i, key in enumerate(node.keys):
            result.extend(self.traverse(node.children[i]))
            result.append(key)
        result.extend(self.traverse(node.children[-1]))
        return result

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
Structural checks for a B-tree.

These are run after every insert when `ARBOR_VALIDATE_ON_INSERT` is set and by the
test suite; a failing check means the tree code is wrong, not the caller, so they
raise InvalidInternalStateError.
"""

from typing import Any
from typing import List

from arbor.exceptions import InvalidInternalStateError

_UNBOUNDED = object()


def check_invariants(tree) -> None:
    """
    Confirm the tree is a valid B-tree.

    Checks, for every node:
    - the number of keys is within bounds (the root may hold fewer than t-1)
    - keys are in ascending order
    - internal nodes have exactly one more child than they have keys
    - every key in a subtree sits between the separators either side of it
    and, for the tree as a whole, that all leaves are at the same depth and the
    number of keys matches the tree's count.

    Parameters:
        tree: BTree
            The tree to check.
    """
    if tree.root is None:
        if len(tree) != 0:
            raise InvalidInternalStateError(f"Empty tree reports {len(tree)} keys.")
        return

    leaf_depths: List[int] = []
    count = _check_node(tree, tree.root, 0, _UNBOUNDED, _UNBOUNDED, leaf_depths, True)

    if len(set(leaf_depths)) != 1:
        raise InvalidInternalStateError(
            f"Leaves are at different depths ({sorted(set(leaf_depths))})."
        )
    if count != len(tree):
        raise InvalidInternalStateError(f"Tree holds {count} keys but reports {len(tree)}.")


def _check_node(
    tree,
    node,
    depth: int,
    lower: Any,
    upper: Any,
    leaf_depths: List[int],
    is_root: bool,
) -> int:
    keys = node.keys

    if len(keys) > tree.max_keys:
        raise InvalidInternalStateError(
            f"Node {node} at depth {depth} has more than {tree.max_keys} keys."
        )
    if not is_root and len(keys) < tree.min_keys:
        raise InvalidInternalStateError(
            f"Node {node} at depth {depth} has fewer than {tree.min_keys} keys."
        )
    if is_root and not keys and node.leaf:
        raise InvalidInternalStateError("Root leaf has no keys.")

    for left, right in zip(keys, keys[1:]):
        if right < left:
            raise InvalidInternalStateError(f"Keys of node {node} are not in order.")

    for key in keys:
        if lower is not _UNBOUNDED and key < lower:
            raise InvalidInternalStateError(f"Key {key!r} in {node} is less than {lower!r}.")
        if upper is not _UNBOUNDED and key > upper:
            raise InvalidInternalStateError(f"Key {key!r} in {node} is greater than {upper!r}.")

    if node.leaf:
        if node.children:
            raise InvalidInternalStateError(f"Leaf node {node} has children.")
        leaf_depths.append(depth)
        return len(keys)

    if not keys:
        raise InvalidInternalStateError(f"Internal node at depth {depth} has no keys.")
    if len(node.children) != len(keys) + 1:
        raise InvalidInternalStateError(
            f"Node {node} has {len(keys)} keys but {len(node.children)} children."
        )

    count = len(keys)
    for i, child in enumerate(node.children):
        child_lower: Any = keys[i - 1] if i > 0 else lower
        child_upper: Any = keys[i] if i < len(keys) else upper
        count += _check_node(tree, child, depth + 1, child_lower, child_upper, leaf_depths, False)
    return count

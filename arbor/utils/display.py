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
Renderers for looking at a tree. These only read the tree; they use the pre-order
walk, and each node's keys and children.
"""

from typing import List

import orjson

EMPTY_TREE = "Empty tree."
TEXT_HEADER = "Tree structure:"


def to_text(tree, indent: str = "  ") -> str:
    """
    Render the tree as one line per node, indented by depth.

        Tree structure:
        [10, 20]
          [5, 6, 7]
          [12, 17]
          [30]
    """
    lines = [TEXT_HEADER]
    if tree.is_empty():
        lines.append(EMPTY_TREE)
    else:
        tree.for_each_node(lambda node, depth: lines.append(f"{indent * depth}{node}"))
    return "\n".join(lines)


def _ascii_inner(node, prefix="", last=True):
    """
    Prints a node and its children as an ascii tree
    """

    yield prefix
    if last:
        yield "└─ "
        prefix += "   "
    else:
        yield "├─ "
        prefix += "│  "

    yield str(node) + "\n"

    # Recursively print the children
    count = len(node.children)
    for i, child in enumerate(node.children):
        last = i == count - 1
        yield from _ascii_inner(child, prefix, last)


def to_ascii(tree) -> str:
    if tree.is_empty():
        return EMPTY_TREE
    return "".join(_ascii_inner(tree.root)).rstrip("\n")


def to_mermaid(tree) -> str:
    """
    Render the tree as a mermaid flowchart, nodes are numbered in pre-order.
    """
    builder: List[str] = []
    edges: List[str] = []

    def _inner(node, nid: int) -> int:
        label = ", ".join(str(key) for key in node.keys)
        builder.append(f'  NODE_{nid}["{label}"]')
        next_id = nid + 1
        for child in node.children:
            edges.append(f"  NODE_{nid} --> NODE_{next_id}")
            next_id = _inner(child, next_id)
        return next_id

    if not tree.is_empty():
        _inner(tree.root, 0)

    return "flowchart TD\n\n" + "\n".join(builder + edges) + "\n"


# orjson only serializes integers that fit in 64 bits
_JSON_INT_MIN = -(2**63)
_JSON_INT_MAX = 2**64 - 1


def _json_key(key):
    if isinstance(key, int) and not isinstance(key, bool):
        if key < _JSON_INT_MIN or key > _JSON_INT_MAX:
            return str(key)
    return key


def _json_node(node: dict) -> dict:
    node["keys"] = [_json_key(key) for key in node["keys"]]
    for child in node.get("children", []):
        _json_node(child)
    return node


def to_json(tree) -> bytes:
    """
    Serialize the structure of the tree.

    Keys that aren't JSON types, and integers too large for a 64 bit number, are
    written as strings.
    """
    document = {
        "minimum_degree": tree.minimum_degree,
        "size": len(tree),
        "height": tree.height,
        "root": None if tree.is_empty() else _json_node(tree.root.to_dict()),
    }
    return orjson.dumps(document, default=str)

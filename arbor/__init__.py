# isort: skip_file
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Arbor is an in-memory B-tree.

To get started:
    import arbor
    tree = arbor.BTree(minimum_degree=2)
    tree.extend([10, 20, 5, 6, 12, 30, 7, 17])
    print(arbor.to_text(tree))

Keys can be any values that can be compared with each other; the tree only supports
inserting keys and reading its structure back.
"""

from arbor import config

from arbor.__version__ import __author__
from arbor.__version__ import __build__
from arbor.__version__ import __version__

from arbor.btree import BTree
from arbor.exceptions import InvalidConfigurationError
from arbor.exceptions import InvalidInternalStateError
from arbor.models.btree_node import BTreeNode
from arbor.utils.display import to_ascii
from arbor.utils.display import to_json
from arbor.utils.display import to_mermaid
from arbor.utils.display import to_text
from arbor.utils.invariants import check_invariants

__all__ = [
    "BTree",
    "BTreeNode",
    "check_invariants",
    "InvalidConfigurationError",
    "InvalidInternalStateError",
    "to_ascii",
    "to_json",
    "to_mermaid",
    "to_text",
    "__author__",
    "__build__",
    "__version__",
]

ARBOR_DEBUG = config.ARBOR_DEBUG

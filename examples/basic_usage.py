#!/usr/bin/env python3
"""Demo script for PropTreeLib.

This script demonstrates:
- Logging a nested value with a circular reference
- Root-only and primitive output
- Absorbed property failures and how to inspect them
- Querying an already-built tree
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from proptreelib import (
    CollectErrorsPolicy,
    build_property_tree,
    format_property_tree,
    get_tree_paths,
    get_tree_stats,
    log_property_tree,
)


class Account:
    """Object with a property that fails when read."""

    def __init__(self, owner):
        self.owner = owner
        self.balance = 12.5

    @property
    def statement(self):
        raise ConnectionError("ledger offline")


def make_complex_object():
    complex_object = {
        "id": 123,
        "user": {
            "name": "Alice",
            "roles": ["admin", "editor"],
            "settings": {"theme": "dark", "notifications": True},
        },
        "data": [None, 2 ** 64],
        "method": lambda: "hello",
    }
    # Create a circular reference
    complex_object["user"]["self"] = complex_object["user"]
    return complex_object


def demo_logging():
    print("\n=== Property tree (max depth 3) ===")
    log_property_tree(make_complex_object(), 3, "myObject")

    print("\n=== Root only (max depth 0) ===")
    log_property_tree(make_complex_object(), 0)

    print("\n=== Primitive ===")
    log_property_tree("Just a string", 1)


def demo_errors():
    print("\n=== Failing property ===")
    policy = CollectErrorsPolicy()
    tree = build_property_tree(Account("alice"), 2, "account", error_policy=policy)
    print(format_property_tree(tree))
    for error in policy.errors:
        print(f"  {error['label']}: {error['error_type']}: {error['error_message']}")


def demo_queries():
    print("\n=== Paths and statistics ===")
    tree = build_property_tree(make_complex_object(), 3, "obj")
    for path in get_tree_paths(tree, strategy="dfs_pre"):
        print(f"  {path}")
    stats = get_tree_stats(tree)
    print(f"\n{stats['total_nodes']} nodes | max depth {stats['max_depth']} | "
          f"{stats['circular_references']} circular")


def main():
    demo_logging()
    demo_errors()
    demo_queries()


if __name__ == "__main__":
    main()

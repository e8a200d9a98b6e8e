"""
Binary Search Tree Demo -- fixed walkthrough of construction, analysis,
traversal, search, statistics and teardown.

Prints everything to stdout; writes no files and takes no arguments.
"""

from typing import Dict, List, Sequence

from binary_search_tree import BinarySearchTree
from sequence_stats import format_statistics, sequence_statistics

DATASET = [50, 30, 70, 20, 40, 60, 80, 10, 25, 35, 45, 55, 65, 75, 85]
SEARCH_TARGETS = [25, 75, 100, 1, 50]
PROGRESS_BAR_WIDTH = 20
BANNER_WIDTH = 60


def progress_bar(step: int, total: int, width: int = PROGRESS_BAR_WIDTH) -> str:
    if total <= 0:
        raise ValueError(f"total must be positive, got {total}")
    filled = (step * width) // total
    percent = (step * 100) // total
    return "[" + "=" * filled + " " * (width - filled) + f"] {percent:3d}%"


def format_traversal(values: Sequence[int]) -> str:
    return " -> ".join(str(v) for v in values)


def section(title: str) -> None:
    print("\n" + title)
    print("-" * len(title))


def build_tree(values: Sequence[int]) -> BinarySearchTree:
    """Phase 1: insert the dataset one value at a time."""
    tree = BinarySearchTree()
    for i, value in enumerate(values, start=1):
        tree.insert(value)
        print(f"Inserting node with value: {value:3d} {progress_bar(i, len(values))}")
    return tree


def analyze_structure(tree: BinarySearchTree) -> Dict[str, object]:
    height = tree.height()
    count = tree.count()
    balance = tree.balance_factor()
    print(f"Tree Height (Maximum Depth): {height}")
    print(f"Total Node Count: {count}")
    print(f"Leaf Count: {tree.leaf_count()}")
    if balance is not None:
        print(f"Tree Balance Factor: {balance:.2f}")
    return {"height": height, "count": count, "balance_factor": balance}


def show_traversals(tree: BinarySearchTree) -> Dict[str, List[int]]:
    traversals = {
        "In-Order": tree.in_order(),
        "Pre-Order": tree.pre_order(),
        "Post-Order": tree.post_order(),
    }
    for name, values in traversals.items():
        print(f"{name} Traversal: {format_traversal(values)}")
    return traversals


def run_searches(tree: BinarySearchTree, targets: Sequence[int]) -> Dict[int, bool]:
    results = {}
    for target in targets:
        found = tree.contains(target)
        results[target] = found
        print(f"Search for value {target:3d}: {'FOUND' if found else 'NOT FOUND'}")
    return results


def run_demo() -> Dict[str, object]:
    """Run all six phases and return the computed values."""
    print("=" * BANNER_WIDTH)
    print("Binary Search Tree Demo")
    print("=" * BANNER_WIDTH)

    section("Phase 1: Tree Construction and Node Insertion")
    tree = build_tree(DATASET)

    section("Phase 2: Tree Structure Analysis")
    structure = analyze_structure(tree)

    section("Phase 3: Tree Traversal Operations")
    traversals = show_traversals(tree)

    section("Phase 4: Search Operations and Validation")
    searches = run_searches(tree, SEARCH_TARGETS)

    section("Phase 5: Statistical Analysis")
    stats = sequence_statistics(traversals["In-Order"])
    for line in format_statistics(stats):
        print(line)

    section("Phase 6: Memory Management")
    released = tree.release()
    print(f"Released {released} nodes; tree is now empty (count={tree.count()}, height={tree.height()}).")

    print("\n" + "=" * BANNER_WIDTH)
    print("DEMO COMPLETE")
    print("=" * BANNER_WIDTH)

    return {
        **structure,
        "in_order": traversals["In-Order"],
        "pre_order": traversals["Pre-Order"],
        "post_order": traversals["Post-Order"],
        "searches": searches,
        "statistics": stats,
        "released": released,
    }


def main() -> int:
    run_demo()
    return 0


if __name__ == "__main__":
    main()

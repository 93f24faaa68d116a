"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the engine knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict keyed by module name:
    {
        "bubble_sort": AlgoInfo(key, label, fn, pseudocode, initial, category, tags, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The engine and the web layer both
consume it, so adding an algorithm is: write the module (PSEUDOCODE,
build_initial_state, trace function), add one `_card(...)` line here.
"""

from dataclasses import dataclass, field
from types import ModuleType
from typing import Any, Callable, Dict, List, Optional

from algorithms.backtracking import hamiltonian_cycle, knights_tour, n_queens, rat_maze, sudoku
from algorithms.divide_conquer import closest_pair, fft, karatsuba, strassen
from algorithms.dynamic_programming import (
    coin_change, edit_distance, fibonacci, knapsack, lcs, lis, matrix_chain, rod_cutting, scs, subset_sum,
)
from algorithms.graphs import (
    astar, bellman_ford, bfs, dfs, dijkstra, floyd_warshall, ford_fulkerson, johnsons, kruskals, prims,
    topological_sort,
)
from algorithms.greedy import activity_selection, fractional_knapsack, huffman, job_sequencing
from algorithms.searching import (
    binary_search, exponential_search, fibonacci_search, interpolation_search, jump_search, linear_search,
    ternary_search,
)
from algorithms.sorting import (
    bubble_sort, bucket_sort, counting_sort, heap_sort, insertion_sort, merge_sort, quick_sort, radix_sort,
    selection_sort, shell_sort, tim_sort,
)
from algorithms.step import Step
from algorithms.strings import boyer_moore, kmp, naive, rabin_karp, z_algorithm
from algorithms.trees import avl, bst, inorder, level_order, postorder, preorder


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "dijkstra"
    label:             str                    # human label, e.g. "Dijkstra's Algorithm"
    fn:                Callable               # the trace function
    pseudocode:        List[str]              # lines for the side-panel
    initial:           Callable               # build_initial_state(seed)
    category:          str                    # one of CATEGORIES
    tags:              List[str] = field(default_factory=list)   # e.g. ["weighted", "shortest-path"]
    complexity_time:   str      = ""          # e.g. "O(V + E)"
    complexity_space:  str      = ""          # e.g. "O(V)"
    description:       str      = ""          # one-liner for the card
    max_steps:         Optional[int] = None   # tighter step cap for this algorithm

    def initial_data(self, seed: Optional[int] = None) -> Dict[str, Any]:
        """Fresh initial state; identical for identical seeds."""
        return self.initial(seed)

    def generate_steps(self, initial: Optional[Dict[str, Any]] = None) -> List[Step]:
        """Full step list for `initial` (the sample instance when omitted)."""
        from engine.recorder import build_trace
        return build_trace(self.key, initial).steps

    def card(self) -> Dict[str, Any]:
        return {
            "key":              self.key,
            "label":            self.label,
            "category":         self.category,
            "tags":             list(self.tags),
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
        }


def _card(module: ModuleType, label: str, category: str, tags: List[str], time: str, space: str,
          description: str, max_steps: Optional[int] = None) -> AlgoInfo:
    key = module.__name__.rsplit(".", 1)[-1]
    return AlgoInfo(
        key=key, label=label, fn=getattr(module, key), pseudocode=module.PSEUDOCODE,
        initial=module.build_initial_state, category=category, tags=tags,
        complexity_time=time, complexity_space=space, description=description, max_steps=max_steps,
    )


CATEGORIES: Dict[str, str] = {
    "sorting":        "Sorting",
    "searching":      "Searching",
    "graphs":         "Graphs",
    "dynamic":        "Dynamic Programming",
    "backtracking":   "Backtracking",
    "strings":        "String Matching",
    "trees":          "Trees",
    "greedy":         "Greedy",
    "divide_conquer": "Divide & Conquer",
}


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
_CARDS: List[AlgoInfo] = [
    # Sorting
    _card(bubble_sort, "Bubble Sort", "sorting", ["comparison", "stable", "in-place"], "O(n²)", "O(1)",
          "Swaps adjacent out-of-order pairs; the largest value bubbles to the end each pass."),
    _card(selection_sort, "Selection Sort", "sorting", ["comparison", "in-place"], "O(n²)", "O(1)",
          "Selects the minimum of the unsorted suffix and swaps it into place."),
    _card(insertion_sort, "Insertion Sort", "sorting", ["comparison", "stable", "in-place"], "O(n²)", "O(1)",
          "Shifts each value left until it sits in order within the sorted prefix."),
    _card(merge_sort, "Merge Sort", "sorting", ["comparison", "stable", "divide-and-conquer"],
          "O(n log n)", "O(n)", "Sorts both halves recursively, then merges them."),
    _card(quick_sort, "Quick Sort", "sorting", ["comparison", "in-place", "divide-and-conquer"],
          "O(n log n) avg", "O(log n)", "Lomuto partition around the last element, then recurse."),
    _card(heap_sort, "Heap Sort", "sorting", ["comparison", "in-place"], "O(n log n)", "O(1)",
          "Builds a max-heap, then repeatedly moves the root behind the heap."),
    _card(counting_sort, "Counting Sort", "sorting", ["distribution", "stable"], "O(n + k)", "O(k)",
          "Counts each value, prefix-sums the counts and places values by position."),
    _card(radix_sort, "Radix Sort", "sorting", ["distribution", "stable"], "O(d · (n + 10))", "O(n)",
          "LSD radix sort in base 10, one stable counting pass per digit."),
    _card(shell_sort, "Shell Sort", "sorting", ["comparison", "in-place"], "O(n^1.5)", "O(1)",
          "Gapped insertion sort with the gap halved each round."),
    _card(tim_sort, "Tim Sort", "sorting", ["comparison", "stable", "hybrid"], "O(n log n)", "O(n)",
          "Insertion-sorts runs of four, then merges runs of doubling width."),
    _card(bucket_sort, "Bucket Sort", "sorting", ["distribution"], "O(n + k) avg", "O(n + k)",
          "Scatters values into ⌈√n⌉ buckets, sorts each and concatenates."),

    # Searching
    _card(linear_search, "Linear Search", "searching", ["unsorted"], "O(n)", "O(1)",
          "Checks every element in turn."),
    _card(binary_search, "Binary Search", "searching", ["sorted", "divide-and-conquer"], "O(log n)", "O(1)",
          "Halves the search interval around the middle element."),
    _card(jump_search, "Jump Search", "searching", ["sorted"], "O(√n)", "O(1)",
          "Jumps ahead by ⌊√n⌋, then scans the block linearly."),
    _card(interpolation_search, "Interpolation Search", "searching", ["sorted"], "O(log log n) avg", "O(1)",
          "Looks where the target should sit if values are evenly spread."),
    _card(exponential_search, "Exponential Search", "searching", ["sorted"], "O(log n)", "O(1)",
          "Doubles a bound until it passes the target, then binary-searches the range."),
    _card(fibonacci_search, "Fibonacci Search", "searching", ["sorted"], "O(log n)", "O(1)",
          "Narrows the range by Fibonacci offsets instead of halves."),
    _card(ternary_search, "Ternary Search", "searching", ["sorted", "divide-and-conquer"], "O(log n)", "O(1)",
          "Splits the interval into thirds with two midpoints."),

    # Graphs
    _card(bfs, "Breadth-First Search", "graphs", ["unweighted", "shortest-path", "traversal"],
          "O(V + E)", "O(V)", "Explores layer by layer. Finds shortest paths by hop count."),
    _card(dfs, "Depth-First Search", "graphs", ["unweighted", "traversal"], "O(V + E)", "O(V)",
          "Dives deep before backtracking. Does not guarantee shortest paths."),
    _card(dijkstra, "Dijkstra's Algorithm", "graphs", ["weighted", "shortest-path"],
          "O((V + E) log V)", "O(V)", "Greedily settles the closest node. Optimal for non-negative weights."),
    _card(astar, "A* Search", "graphs", ["weighted", "shortest-path", "heuristic"],
          "O((V + E) log V)", "O(V)", "Dijkstra guided by a straight-line heuristic towards the goal."),
    _card(bellman_ford, "Bellman–Ford", "graphs", ["weighted", "shortest-path", "negative-edges"],
          "O(V · E)", "O(V)", "Relaxes every edge V-1 times; an extra pass detects negative cycles."),
    _card(floyd_warshall, "Floyd–Warshall", "graphs", ["weighted", "all-pairs", "negative-edges"],
          "O(V³)", "O(V²)", "All-pairs shortest paths by allowing one more intermediate node per round."),
    _card(johnsons, "Johnson's Algorithm", "graphs", ["weighted", "all-pairs", "negative-edges"],
          "O(V · E log V)", "O(V²)", "Reweights with Bellman–Ford potentials, then runs Dijkstra from every node."),
    _card(kruskals, "Kruskal's Algorithm", "graphs", ["weighted", "spanning-tree", "union-find"],
          "O(E log E)", "O(V)", "Adds the lightest edge that joins two different components."),
    _card(prims, "Prim's Algorithm", "graphs", ["weighted", "spanning-tree"], "O(V²)", "O(V)",
          "Grows one tree by always adding the cheapest edge leaving it."),
    _card(topological_sort, "Topological Sort", "graphs", ["directed", "ordering"], "O(V + E)", "O(V)",
          "Kahn's algorithm: repeatedly output a node with no remaining incoming edges."),
    _card(ford_fulkerson, "Ford–Fulkerson", "graphs", ["directed", "flow"], "O(V · E²)", "O(V²)",
          "Edmonds–Karp: augment along shortest residual paths until none remain."),

    # Dynamic programming
    _card(fibonacci, "Fibonacci", "dynamic", ["tabulation", "1-d"], "O(n)", "O(n)",
          "Bottom-up table where each entry is the sum of the previous two."),
    _card(knapsack, "0/1 Knapsack", "dynamic", ["tabulation", "2-d", "optimisation"], "O(n · W)", "O(n · W)",
          "Best value per item prefix and capacity; traceback recovers the chosen items."),
    _card(lcs, "Longest Common Subsequence", "dynamic", ["tabulation", "2-d", "strings"],
          "O(m · n)", "O(m · n)", "Extends matches diagonally; otherwise keeps the better neighbour."),
    _card(lis, "Longest Increasing Subsequence", "dynamic", ["tabulation", "1-d"], "O(n²)", "O(n)",
          "dp[i] is the longest increasing run ending at i."),
    _card(matrix_chain, "Matrix Chain Multiplication", "dynamic", ["tabulation", "interval"],
          "O(n³)", "O(n²)", "Cheapest split for every chain length; traceback gives the parenthesisation."),
    _card(edit_distance, "Edit Distance", "dynamic", ["tabulation", "2-d", "strings"], "O(m · n)", "O(m · n)",
          "Minimum inserts, deletes and substitutions to turn one string into another."),
    _card(coin_change, "Coin Change", "dynamic", ["tabulation", "counting"], "O(n · amount)", "O(amount)",
          "Counts the ways to make each amount, one coin denomination at a time."),
    _card(subset_sum, "Subset Sum", "dynamic", ["tabulation", "2-d", "decision"], "O(n · target)",
          "O(n · target)", "Whether some subset of the prefix reaches each sum."),
    _card(rod_cutting, "Rod Cutting", "dynamic", ["tabulation", "optimisation"], "O(n²)", "O(n)",
          "Best revenue for every rod length from its first cut."),
    _card(scs, "Shortest Common Supersequence", "dynamic", ["tabulation", "2-d", "strings"],
          "O(m · n)", "O(m · n)", "Shortest string containing both inputs as subsequences."),

    # Backtracking
    _card(n_queens, "N-Queens", "backtracking", ["constraint", "board"], "O(n!)", "O(n²)",
          "Places one queen per column, backtracking on attacks."),
    _card(rat_maze, "Rat in a Maze", "backtracking", ["grid", "path"], "O(2^(n²))", "O(n²)",
          "Tries down, then right, undoing moves that reach a dead end."),
    _card(knights_tour, "Knight's Tour", "backtracking", ["board", "path"], "O(8^(n²))", "O(n²)",
          "Visits every square once with knight moves in a fixed order.", max_steps=100),
    _card(sudoku, "Sudoku Solver", "backtracking", ["constraint", "grid"], "O(9^m)", "O(m)",
          "Fills empty cells with the first digit that fits, backtracking on dead ends."),
    _card(hamiltonian_cycle, "Hamiltonian Cycle", "backtracking", ["graph", "path"], "O(n!)", "O(n)",
          "Extends a path through unvisited neighbours until it can close into a cycle."),

    # Strings
    _card(naive, "Naive String Matching", "strings", ["pattern-matching"], "O(n · m)", "O(1)",
          "Compares the pattern at every alignment."),
    _card(kmp, "Knuth–Morris–Pratt", "strings", ["pattern-matching", "preprocessing"], "O(n + m)", "O(m)",
          "The LPS table lets the search skip re-reading matched text."),
    _card(boyer_moore, "Boyer–Moore", "strings", ["pattern-matching", "preprocessing"], "O(n · m)", "O(m + σ)",
          "Compares right to left; shifts by the better of the bad-character and good-suffix rules."),
    _card(rabin_karp, "Rabin–Karp", "strings", ["pattern-matching", "hashing"], "O(n + m) avg", "O(1)",
          "Rolling hash over windows; equal hashes are verified character by character."),
    _card(z_algorithm, "Z-Algorithm", "strings", ["pattern-matching", "preprocessing"], "O(n + m)", "O(n + m)",
          "Z-array of pattern$text; a Z-value equal to the pattern length is a match."),

    # Trees
    _card(inorder, "Inorder Traversal", "trees", ["traversal", "depth-first"], "O(n)", "O(h)",
          "Left subtree, node, right subtree."),
    _card(preorder, "Preorder Traversal", "trees", ["traversal", "depth-first"], "O(n)", "O(h)",
          "Node, left subtree, right subtree."),
    _card(postorder, "Postorder Traversal", "trees", ["traversal", "depth-first"], "O(n)", "O(h)",
          "Left subtree, right subtree, node."),
    _card(level_order, "Level-Order Traversal", "trees", ["traversal", "breadth-first"], "O(n)", "O(w)",
          "Visits nodes level by level with a queue."),
    _card(bst, "Binary Search Tree", "trees", ["search-tree"], "O(h)", "O(1)",
          "Search, insert and delete by walking left or right from the root."),
    _card(avl, "AVL Tree", "trees", ["search-tree", "self-balancing"], "O(log n)", "O(log n)",
          "BST that restores balance with rotations after every update."),

    # Greedy
    _card(activity_selection, "Activity Selection", "greedy", ["scheduling"], "O(n log n)", "O(n)",
          "Sort by finish time; take every activity that starts after the last one taken."),
    _card(fractional_knapsack, "Fractional Knapsack", "greedy", ["optimisation"], "O(n log n)", "O(n)",
          "Take items by value-to-weight ratio, splitting the last one."),
    _card(job_sequencing, "Job Sequencing", "greedy", ["scheduling"], "O(n²)", "O(n)",
          "Most profitable jobs first, each in the latest free slot before its deadline."),
    _card(huffman, "Huffman Coding", "greedy", ["compression", "heap"], "O(n log n)", "O(n)",
          "Merge the two lightest trees until one remains, then read codes off the tree."),

    # Divide & conquer
    _card(strassen, "Strassen Multiplication", "divide_conquer", ["matrices"], "O(n^2.81)", "O(n²)",
          "Seven recursive products M1..M7 instead of eight."),
    _card(closest_pair, "Closest Pair of Points", "divide_conquer", ["geometry"], "O(n log² n)", "O(n)",
          "Solve both halves, then check the strip around the dividing line."),
    _card(fft, "Fast Fourier Transform", "divide_conquer", ["signal"], "O(n log n)", "O(n)",
          "Radix-2 Cooley–Tukey butterflies over bit-reversed samples."),
    _card(karatsuba, "Karatsuba Multiplication", "divide_conquer", ["arithmetic"], "O(n^1.585)", "O(n)",
          "Three recursive half-size products instead of four."),
]

REGISTRY: Dict[str, AlgoInfo] = {info.key: info for info in _CARDS}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_category(category: str) -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if a.category == category]


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "CATEGORIES",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_category",
    "algorithms_by_tag",
]

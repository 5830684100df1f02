"""
Skill tree DAG - 22 DSA topics organized in 8 tiers.

Tiers are a coarse ordering on top of the explicit prerequisite edges:
every prerequisite sits in a strictly lower tier than its dependent.
The graph is validated once at import and is read-only afterwards.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from pydantic import BaseModel, ConfigDict

from skilltree.errors import GraphValidationError

PROBLEMS_PER_TOPIC = 3
MAX_TIER = 7


class Topic(BaseModel):
    """A node in the skill tree."""

    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    tier: int
    prerequisites: Tuple[str, ...] = ()
    description: str = ""
    theory: str = ""
    youtube: str = ""
    problem_count: int = PROBLEMS_PER_TOPIC


_TOPICS: List[Topic] = [
    # Tier 0: Roots
    Topic(
        key="ARRAY_SCAN",
        label="Array Memory",
        tier=0,
        description="Contiguous memory mastery. The bedrock of CPU caching.",
        theory=(
            "Arrays are blocks of contiguous memory. Access is O(1) because the CPU calculates "
            "the address via (Base + Index * Size). Insertion and deletion are O(N) because "
            "elements must shift."
        ),
        youtube="RBSGKlAvoiM",
    ),
    Topic(
        key="RECURSION_ROOTS",
        label="Recursion Core",
        tier=0,
        description="The stack frame mental model. Essential for Trees/Graphs.",
        theory=(
            "Recursion is a stack of function calls. Every recursive step adds a frame to the "
            "call stack; identify the base case and the recursive step or overflow the stack."
        ),
        youtube="Mv9NEX63odU",
    ),
    # Tier 1: Structuring
    Topic(
        key="SORTING",
        label="Sorting",
        tier=1,
        prerequisites=("ARRAY_SCAN",),
        description="Ordering data to enable binary search and pointer logic.",
        theory=(
            "Sorting transforms chaos into order, enabling O(log N) search and O(N) two-pointer "
            "techniques. Know how QuickSort partitions and MergeSort divides and conquers."
        ),
        youtube="Hg85P2FGiQA",
    ),
    Topic(
        key="HASHING",
        label="Hashing",
        tier=1,
        prerequisites=("ARRAY_SCAN",),
        description="O(1) lookups. Space-time tradeoff.",
        theory=(
            "Hashing maps data of arbitrary size to fixed-size keys, trading memory for O(1) "
            "retrieval. The key invariant is handling collisions."
        ),
        youtube="RBSGKlAvoiM",
    ),
    Topic(
        key="STACKS",
        label="Stacks (LIFO)",
        tier=1,
        prerequisites=("ARRAY_SCAN",),
        description="Backtracking history and state management.",
        theory=(
            "Last-In, First-Out. Push to the top, pop from the top. Used for undo, parsing "
            "parentheses and depth-first search."
        ),
        youtube="KInG04mAjO0",
    ),
    # Tier 2: Patterns
    Topic(
        key="PREFIX_SUM",
        label="Prefix Sums",
        tier=2,
        prerequisites=("ARRAY_SCAN",),
        description="Pre-computation for O(1) range queries.",
        theory=(
            "Pre-calculate P[i] as the sum of all nums up to i; the sum of range [i, j] is "
            "P[j] - P[i-1]."
        ),
        youtube="pVS3yhlzrlQ",
    ),
    Topic(
        key="TWO_POINTERS",
        label="Two Pointers",
        tier=2,
        prerequisites=("SORTING",),
        description="Converging on solutions in linear time.",
        theory=(
            "On a sorted array, compare the values at Left and Right to decide which pointer "
            "moves, reducing the search space linearly instead of nesting loops."
        ),
        youtube="-GJ1GV4khSc",
    ),
    Topic(
        key="QUEUES",
        label="Queues (FIFO)",
        tier=2,
        prerequisites=("STACKS",),
        description="Processing streams and breadth-first flows.",
        theory="First-In, First-Out. Essential for breadth-first search and sliding window buffers.",
        youtube="DkK8g6RBJs8",
    ),
    Topic(
        key="LINKED_LISTS",
        label="Linked Lists",
        tier=2,
        prerequisites=("ARRAY_SCAN", "RECURSION_ROOTS"),
        description="Dynamic non-contiguous memory.",
        theory=(
            "Nodes scattered in memory, connected by pointers. No O(1) indexing, but O(1) "
            "insertion and deletion given the pointer. Learn the fast/slow runner technique."
        ),
        youtube="WwfhLC16bis",
    ),
    # Tier 3: Advanced linear
    Topic(
        key="SLIDING_WINDOW",
        label="Sliding Window",
        tier=3,
        prerequisites=("TWO_POINTERS", "HASHING"),
        description="Dynamic range optimization.",
        theory=(
            "Maintain a window of state: expand the right edge to satisfy a condition, shrink "
            "the left edge to optimize."
        ),
        youtube="GCm7m5671Ps",
    ),
    Topic(
        key="BINARY_SEARCH",
        label="Binary Search",
        tier=3,
        prerequisites=("SORTING",),
        description="Logarithmic space reduction.",
        theory="On a monotonic search space, check the middle and discard half every step.",
        youtube="s4DPM8ct1pI",
    ),
    Topic(
        key="MONOTONIC_STACK",
        label="Monotonic Stack",
        tier=3,
        prerequisites=("STACKS",),
        description="Finding next greater/smaller elements in O(N).",
        theory=(
            "A stack kept sorted; popping to restore order gives each popped element its next "
            "greater or smaller neighbour."
        ),
        youtube="Dq_ObZwTY_Q",
    ),
    # Tier 4: Hierarchical
    Topic(
        key="BINARY_TREES",
        label="Binary Trees",
        tier=4,
        prerequisites=("RECURSION_ROOTS", "QUEUES"),
        description="Hierarchical data storage and traversal.",
        theory="Each node has at most two children. Master preorder, inorder and postorder traversal.",
        youtube="OnSn2XEQ4MY",
    ),
    Topic(
        key="INTERVALS",
        label="Intervals",
        tier=4,
        # GREEDY shares tier 4, so it cannot be a prerequisite here. Without that
        # edge INTERVALS opens on SORTING alone, before any GREEDY progress.
        prerequisites=("SORTING",),
        description="Managing overlapping timelines.",
        theory="Sort by start time first, then iterate linearly to merge overlaps or find gaps.",
        youtube="44H3cEC2fFM",
    ),
    Topic(
        key="GREEDY",
        label="Greedy",
        tier=4,
        prerequisites=("SORTING",),
        description="Local optimization for global solutions.",
        theory=(
            "Take the locally optimal choice at each step. Works only with optimal substructure; "
            "otherwise you need DP."
        ),
        youtube="bC7o8P_Ste4",
    ),
    # Tier 5: Graph & search
    Topic(
        key="DFS_BFS",
        label="Graph Search",
        tier=5,
        prerequisites=("BINARY_TREES", "HASHING", "STACKS", "QUEUES"),
        description="Navigating arbitrary networks.",
        theory=(
            "DFS dives deep with a stack or recursion; BFS explores layer by layer with a queue "
            "and finds shortest paths in unweighted graphs. Always track visited nodes."
        ),
        youtube="PMMc4VsIacU",
    ),
    Topic(
        key="BACKTRACKING",
        label="Backtracking",
        tier=5,
        # DFS_BFS shares tier 5, so it cannot be a prerequisite here. BACKTRACKING
        # therefore opens on RECURSION_ROOTS alone, without graph search progress.
        prerequisites=("RECURSION_ROOTS",),
        description="Brute-force with pruning.",
        theory=(
            "Build a candidate step by step and abandon it as soon as it violates the rules, "
            "exploring the decision tree of the problem."
        ),
        youtube="pfiQ_PS1g8E",
    ),
    Topic(
        key="TRIES",
        label="Tries",
        tier=5,
        prerequisites=("BINARY_TREES", "HASHING"),
        description="Prefix trees for string retrieval.",
        theory=(
            "A tree where each node is a character and root paths form words. Prefix lookups cost "
            "O(length of word) independent of dictionary size."
        ),
        youtube="oObPgJJdixI",
    ),
    # Tier 6: Complex graph & specialist
    Topic(
        key="TOPOLOGICAL_SORT",
        label="Topo Sort",
        tier=6,
        prerequisites=("DFS_BFS",),
        description="Dependency resolution in DAGs.",
        theory=(
            "Order vertices so every edge U->V has U before V. Use DFS post-order reversal or "
            "Kahn's in-degree counting."
        ),
        youtube="eL-KzMXSXXI",
    ),
    Topic(
        key="UNION_FIND",
        label="Union Find",
        tier=6,
        prerequisites=("DFS_BFS", "ARRAY_SCAN"),
        description="Disjoint set management and cycle detection.",
        theory="Track disjoint sets with near-O(1) Union and Find. Essential for Kruskal's algorithm.",
        youtube="ayW5B2WdBhE",
    ),
    Topic(
        key="BIT_MANIPULATION",
        label="Bitwise Logic",
        tier=6,
        prerequisites=("ARRAY_SCAN",),
        description="Hardware-level boolean algebra. XOR, AND, shifting.",
        theory="X^X=0 and X^0=X. Shifts multiply and divide by 2. Bitmasks give compact state.",
        youtube="NLKQEOgBzpA",
    ),
    # Tier 7: Endgame
    Topic(
        key="DYNAMIC_PROGRAMMING",
        label="Dynamic Prog",
        tier=7,
        prerequisites=("BACKTRACKING",),
        description="Memoization and Tabulation. The final boss.",
        theory=(
            "Cache overlapping subproblems. Top-down is recursion plus memoization, bottom-up is "
            "iteration plus tabulation."
        ),
        youtube="Hdr64lNM3Vk",
    ),
]


def validate_graph(graph: Mapping[str, Topic]) -> None:
    """
    Check the structural invariants of a topic graph.

    Raises GraphValidationError when a key does not match its topic, a tier is
    out of range, a prerequisite is unknown or not in a strictly lower tier,
    or the prerequisite relation has a cycle.
    """
    for key, topic in graph.items():
        if key != topic.key:
            raise GraphValidationError(f"Graph key {key!r} does not match topic key {topic.key!r}")
        if not 0 <= topic.tier <= MAX_TIER:
            raise GraphValidationError(f"{key}: tier {topic.tier} outside 0-{MAX_TIER}")
        if topic.problem_count < 1:
            raise GraphValidationError(f"{key}: problem_count must be positive")
        for req in topic.prerequisites:
            prereq = graph.get(req)
            if prereq is None:
                raise GraphValidationError(f"{key}: unknown prerequisite {req}")
            if prereq.tier >= topic.tier:
                raise GraphValidationError(
                    f"{key} (tier {topic.tier}) requires {req} (tier {prereq.tier}); "
                    "prerequisites must sit in a lower tier"
                )

    # Strict tier ordering already rules out cycles; keep an explicit DFS so the
    # check stays meaningful if tier ordering is ever relaxed.
    visiting: set = set()
    done: set = set()

    def visit(key: str, path: Tuple[str, ...]) -> None:
        if key in done:
            return
        if key in visiting:
            raise GraphValidationError("Prerequisite cycle: " + " -> ".join(path + (key,)))
        visiting.add(key)
        for req in graph[key].prerequisites:
            visit(req, path + (key,))
        visiting.discard(key)
        done.add(key)

    for key in graph:
        visit(key, ())


def get_topics_by_tier(graph: Mapping[str, Topic]) -> Dict[int, List[Topic]]:
    """Group topics by tier, preserving definition order within a tier."""
    tiers: Dict[int, List[Topic]] = {}
    for topic in graph.values():
        tiers.setdefault(topic.tier, []).append(topic)
    return tiers


DAG_STRUCTURE: Mapping[str, Topic] = MappingProxyType({t.key: t for t in _TOPICS})
validate_graph(DAG_STRUCTURE)

"""
Calibration problems - exactly 3 per topic (66 total).

Solving a problem marks it in the user's mastery record; confidence is
derived from how many of a topic's problems are solved.
"""

from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class Problem(BaseModel):
    """A calibration problem for one topic."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    difficulty: str
    invariant: str = ""


def _p(id: str, title: str, difficulty: str, invariant: str) -> Problem:
    return Problem(id=id, title=title, difficulty=difficulty, invariant=invariant)


PROBLEMS_DB: Mapping[str, Tuple[Problem, ...]] = MappingProxyType({
    "ARRAY_SCAN": (
        _p("run_sum", "Running Sum of 1d Array", "Easy", "State: prev_sum + curr."),
        _p("prod_except", "Product of Array Except Self", "Medium", "Two pass: Prefix * Suffix."),
        _p("max_subarray", "Maximum Subarray (Kadane)", "Medium", "Local max vs Global max."),
    ),
    "RECURSION_ROOTS": (
        _p("fib_num", "Fibonacci Number", "Easy", "Base cases: 0 and 1."),
        _p("pow_x_n", "Pow(x, n)", "Medium", "Divide & Conquer: x^n = x^(n/2) * x^(n/2)."),
        _p("gen_parens", "Generate Parentheses", "Medium", "Balance state: open < n, close < open."),
    ),
    "SORTING": (
        _p("missing_num", "Missing Number", "Easy", "Sum formula or cyclic sort logic."),
        _p("sort_colors", "Sort Colors", "Medium", "Dutch National Flag: 3-way partition."),
        _p("kth_largest", "Kth Largest Element in an Array", "Medium", "QuickSelect or Heap pivot logic."),
    ),
    "HASHING": (
        _p("contains_dup", "Contains Duplicate", "Easy", "Set existence check."),
        _p("group_anagrams", "Group Anagrams", "Medium", "Key generation: sorted string or char count."),
        _p("longest_consec", "Longest Consecutive Sequence", "Medium", "Set check neighbors (n-1, n+1)."),
    ),
    "STACKS": (
        _p("valid_paren", "Valid Parentheses", "Easy", "LIFO matching."),
        _p("min_stack", "Min Stack", "Medium", "Auxiliary stack for min state."),
        _p("eval_rpn", "Evaluate Reverse Polish Notation", "Medium", "Postfix evaluation using stack."),
    ),
    "PREFIX_SUM": (
        _p("range_sum", "Range Sum Query - Immutable", "Easy", "Immutable P[i] array."),
        _p("sub_sum_k", "Subarray Sum Equals K", "Medium", "Hash Map {sum: count} + Prefix."),
        _p("prod_less_k", "Subarray Product Less Than K", "Medium", "Sliding window over product."),
    ),
    "TWO_POINTERS": (
        _p("valid_palin", "Valid Palindrome", "Easy", "Converge from ends."),
        _p("two_sum_ii", "Two Sum II - Input Array Sorted", "Medium", "Sorted input exploitation."),
        _p("3sum", "3Sum", "Medium", "Fix one, 2-sum the rest. Skip duplicates."),
    ),
    "QUEUES": (
        _p("recent_calls", "Number of Recent Calls", "Easy", "Slide window of time t-3000."),
        _p("stack_queues", "Implement Stack using Queues", "Medium", "Double queue push/pop logic."),
        _p("dota2", "Dota2 Senate", "Medium", "Round robin cyclic simulation."),
    ),
    "LINKED_LISTS": (
        _p("merge_sorted", "Merge Two Sorted Lists", "Easy", "Dummy head + scanner."),
        _p("remove_nth", "Remove Nth Node From End of List", "Medium", "Fast/Slow pointer gap."),
        _p("reorder_list", "Reorder List", "Medium", "Find mid -> Reverse second half -> Merge."),
    ),
    "SLIDING_WINDOW": (
        _p("buy_sell_stock", "Best Time to Buy and Sell Stock", "Easy", "Min_price tracking."),
        _p("longest_sub_no_rep", "Longest Substring Without Repeating Characters", "Medium",
           "Map/Set for char index."),
        _p("min_window", "Minimum Window Substring", "Medium", "Frequency map requirement match."),
    ),
    "BINARY_SEARCH": (
        _p("bin_search", "Binary Search", "Easy", "Standard template."),
        _p("search_2d", "Search 2D Matrix", "Medium", "Treat 2D as 1D array logic."),
        _p("rotated_min", "Find Minimum in Rotated Sorted Array", "Medium", "Compare mid with right."),
    ),
    "MONOTONIC_STACK": (
        _p("next_greater_i", "Next Greater Element I", "Easy", "Hash map + Mono Stack."),
        _p("daily_temps", "Daily Temperatures", "Medium", "Store indices, compare values."),
        _p("asteroid_coll", "Asteroid Collision", "Medium", "Collision rules on stack top."),
    ),
    "BINARY_TREES": (
        _p("max_depth", "Maximum Depth of Binary Tree", "Easy", "DFS height calculation."),
        _p("level_order", "Binary Tree Level Order Traversal", "Medium", "BFS Queue size tracking."),
        _p("validate_bst", "Validate Binary Search Tree", "Medium", "Range (min, max) propagation."),
    ),
    "INTERVALS": (
        _p("attend_meetings", "Meeting Rooms", "Easy", "Sort by start time."),
        _p("insert_interval", "Insert Interval", "Medium", "Skip, Merge, Append."),
        _p("merge_intervals", "Merge Intervals", "Medium", "Sort start, track end."),
    ),
    "GREEDY": (
        _p("assign_cookies", "Assign Cookies", "Easy", "Sort greed + Sort size."),
        _p("jump_game", "Jump Game", "Medium", "Max reachable index extension."),
        _p("gas_station", "Gas Station", "Medium", "Total sum >= 0 check."),
    ),
    "DFS_BFS": (
        _p("flood_fill", "Flood Fill", "Easy", "4-directional recursion."),
        _p("num_islands", "Number of Islands", "Medium", "Sink visited land."),
        _p("rotting_oranges", "Rotting Oranges", "Medium", "Multi-source BFS."),
    ),
    "BACKTRACKING": (
        _p("binary_watch", "Binary Watch", "Easy", "Bit count or recursion."),
        _p("permutations", "Permutations", "Medium", "Used array/set state."),
        _p("comb_sum", "Combination Sum", "Medium", "Target reduction, index passing."),
    ),
    "TRIES": (
        _p("longest_common_prefix", "Longest Common Prefix", "Easy", "Horizontal scan or Trie."),
        _p("implement_trie", "Implement Trie (Prefix Tree)", "Medium", "Node {children[26], isEnd}."),
        _p("word_search_ii", "Word Search II", "Medium", "Backtracking on Trie."),
    ),
    "TOPOLOGICAL_SORT": (
        _p("find_judge", "Find the Town Judge", "Easy", "In-degree vs Out-degree."),
        _p("course_sched", "Course Schedule", "Medium", "Cycle detection (DFS/Kahn)."),
        _p("course_sched_ii", "Course Schedule II", "Medium", "Order generation."),
    ),
    "UNION_FIND": (
        _p("valid_path", "Find if Path Exists in Graph", "Easy", "Find(u) == Find(v)."),
        _p("num_provinces", "Number of Provinces", "Medium", "Count distinct roots."),
        _p("redundant_conn", "Redundant Connection", "Medium", "Cycle detection via Union."),
    ),
    "BIT_MANIPULATION": (
        _p("num_1_bits", "Number of 1 Bits", "Easy", "n & (n-1) drops lowest set bit."),
        _p("single_num", "Single Number", "Medium", "XOR self-inverse property."),
        _p("sum_two_int", "Sum of Two Integers", "Medium", "XOR for sum, AND<<1 for carry."),
    ),
    "DYNAMIC_PROGRAMMING": (
        _p("climb_stairs", "Climbing Stairs", "Easy", "dp[i] = dp[i-1] + dp[i-2]."),
        _p("house_robber", "House Robber", "Medium", "Max(rob current, skip current)."),
        _p("coin_change", "Coin Change", "Medium", "Min coins for amount - coin."),
    ),
})


def get_problems(topic_key: str) -> List[Problem]:
    """Return the calibration problems for a topic (empty for unknown topics)."""
    return list(PROBLEMS_DB.get(topic_key, ()))


def find_problem(topic_key: str, problem_id: str) -> Optional[Problem]:
    """Look up a problem by id within its topic."""
    for problem in PROBLEMS_DB.get(topic_key, ()):
        if problem.id == problem_id:
            return problem
    return None

# slicer/node.py

import math
from collections import namedtuple

from .grid import TOPPINGS, Rectangle

INFEASIBLE = -math.inf

CandidateNode = namedtuple("CandidateNode", ["end", "previous", "counts", "weight"])
"""
end: Cell, the growing corner of the rectangle (the anchor is shared by the whole tree)
previous: int, index of the node this one was extended from (None for the root)
counts: tuple, uncut toppings inside anchor..end, in TOPPINGS order
weight: float, heuristic score of the rectangle; INFEASIBLE if it breaks a constraint
"""


def is_feasible(node):
    return node.weight != INFEASIBLE


def compare_weights(a, b):
    """Plain three-way comparison of two node weights."""
    return (a > b) - (a < b)


class CandidateTree:
    """
    Every rectangle reachable from one anchor by growing the end corner one
    cell to the right or one cell down, as long as the area stays within
    the grid's max_size and every cell inside is still uncut.

    Nodes live in a flat list and refer to each other by index:
      nodes[i]  -> CandidateNode
      right[i]  -> index of the node grown one cell to the right, or None
      bottom[i] -> index of the node grown one cell down, or None
    Index 0 is the root, whose end is the anchor itself. The root is never
    a valid selection.

    The same rectangle can appear several times (right-then-down and
    down-then-right reach the same corner). The tree keeps every path;
    deduplication is up to whoever walks it.
    """

    def __init__(self, grid, anchor):
        self.grid = grid
        self.anchor = anchor
        self.nodes = []
        self.right = []
        self.bottom = []
        self._build()

    def __len__(self):
        return len(self.nodes)

    def rectangle(self, index):
        return Rectangle.between(self.anchor, self.nodes[index].end)

    def key(self, index):
        return (self.anchor, self.nodes[index].end)

    def preorder(self):
        """Yields node indices: node, then its right subtree, then its bottom subtree."""
        stack = [0]
        while stack:
            idx = stack.pop()
            yield idx
            if self.bottom[idx] is not None:
                stack.append(self.bottom[idx])
            if self.right[idx] is not None:
                stack.append(self.right[idx])

    def _area_to(self, end):
        return (end.row - self.anchor.row + 1) * (end.col - self.anchor.col + 1)

    def _build(self):
        # explicit work-list instead of recursion; depth is bounded by max_size anyway
        max_size = self.grid.max_size
        stack = [self._add_node(self.anchor, None)]
        while stack:
            idx = stack.pop()
            end = self.nodes[idx].end

            right_cell = self.grid.right_of(end)
            if right_cell is not None and self._area_to(right_cell) <= max_size:
                child = self._add_node(right_cell, idx)
                if child is not None:
                    self.right[idx] = child
                    stack.append(child)

            bottom_cell = self.grid.below_of(end)
            if bottom_cell is not None and self._area_to(bottom_cell) <= max_size:
                child = self._add_node(bottom_cell, idx)
                if child is not None:
                    self.bottom[idx] = child
                    stack.append(child)

    def _add_node(self, end, previous):
        """
        Appends the node for anchor..end and returns its index, or None when
        the rectangle would swallow a cell that is already cut or wasted.
        That happens when the new corner is free but the rectangle reaches
        around an earlier slice hanging down from the rows above.
        """
        rect = Rectangle.between(self.anchor, end)
        counts = tuple(self.grid.topping_count(t, rect) for t in TOPPINGS)
        if sum(counts) < self._area_to(end):
            return None
        weight = self._weight(end, previous, counts)
        self.nodes.append(CandidateNode(end, previous, counts, weight))
        self.right.append(None)
        self.bottom.append(None)
        return len(self.nodes) - 1

    def _weight(self, end, previous, counts):
        """
        INFEASIBLE for the root, for rectangles over max_size and for
        rectangles missing the minimum of either topping. Otherwise the
        previous node's weight (0 if it was infeasible) plus the reward
        for this step, so bigger feasible rectangles accumulate score.
        """
        if previous is None:
            return INFEASIBLE
        if self._area_to(end) > self.grid.max_size:
            return INFEASIBLE
        if any(c < self.grid.min_ingredient for c in counts):
            return INFEASIBLE

        prev = self.nodes[previous]
        base = prev.weight if is_feasible(prev) else 0.0
        return base + self._incremental_reward(end, prev, counts)

    def _incremental_reward(self, end, prev, counts):
        grid = self.grid
        reward = 0.0

        # +1 for each topping that was still short and grew in this step
        for i in range(len(TOPPINGS)):
            if prev.counts[i] < grid.min_ingredient and counts[i] > prev.counts[i]:
                reward += 1

        # both minimums hold from here on (infeasible nodes never get here).
        # Eating the topping the grid has more of is rewarded, eating the
        # scarce one is penalized, both proportionally to the share consumed.
        prev_remaining = [grid.remaining(t) - prev.counts[i] for i, t in enumerate(TOPPINGS)]
        diffs = [prev.counts[i] - counts[i] for i in range(len(TOPPINGS))]
        if prev_remaining[0] != prev_remaining[1]:
            abundant = 0 if prev_remaining[0] > prev_remaining[1] else 1
            for i, diff in enumerate(diffs):
                if diff < 0:
                    ratio = diff / prev_remaining[i]
                    reward += -ratio if i == abundant else ratio

        # stuck against the border or a cut cell: growing further is not an option
        if grid.right_of(end) is None or grid.below_of(end) is None:
            reward += 1

        return reward

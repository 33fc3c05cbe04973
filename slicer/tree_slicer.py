# slicer/tree_slicer.py

from .node import CandidateTree, compare_weights, is_feasible


class TreeSlicer:
    """
    Greedy tree-search slicer. For the first uncut cell (row-major) it
    builds the tree of every rectangle that can grow from it, keeps the
    best feasible one and cuts it, or wastes the cell when nothing fits.
    Repeating that until the grid is consumed gives the full solution.
    """

    def __init__(self, grid, logger=None):
        """
        grid: a Grid, mutated in place by every select_slice() call
        logger: optional SlicerLogger for structured logging
        """
        self.grid = grid
        self.logger = logger
        self.slices = []

    def solve(self):
        """
        Public entry point. Slices until no uncut cell is left.
        Returns the committed rectangles in commit order.
        """
        if self.logger:
            self.logger.open()
            self.logger.log_event("SlicerStart", None, "",
                                  f"rows={self.grid.rows}, cols={self.grid.cols}, "
                                  f"min={self.grid.min_ingredient}, max={self.grid.max_size}")

        while not self.grid.is_empty():
            self.select_slice()

        if self.logger:
            self.logger.log_event("SlicerEnd", None, "",
                                  f"slices={len(self.slices)}, used={self.grid.used}, "
                                  f"waste={self.grid.waste_count}")
            self.logger.close()

        return self.slices

    def select_slice(self):
        """
        Processes exactly one anchor. Returns the rectangle that was cut,
        or None if the anchor had to be wasted.
        """
        anchor = self.grid.first_uncut_cell()
        if anchor is None:
            raise ValueError("select_slice() called on a fully consumed grid")

        tree = CandidateTree(self.grid, anchor)
        candidates = self.collect_candidates(tree)
        best = self.best_candidate(tree, candidates)

        if best is not None and best != 0:
            rect = self.grid.cut(tree.rectangle(best))
            self.slices.append(rect)
            if self.logger:
                self.logger.log_event("SliceCut", anchor, tree.nodes[best].weight, str(rect))
            return rect

        self.grid.waste(anchor)
        if self.logger:
            self.logger.log_event("CellWasted", anchor, "", f"tree_nodes={len(tree)}")
        return None

    @staticmethod
    def collect_candidates(tree):
        """
        Walks the tree in pre-order and keeps one node per (anchor, end).
        When two paths reach the same rectangle with different weights the
        lower weight is kept. A rectangle keeps the position where it was
        first met. Returns {key: node index}.
        """
        seen = {}
        for idx in tree.preorder():
            key = tree.key(idx)
            old = seen.get(key)
            if old is None:
                seen[key] = idx
            elif compare_weights(tree.nodes[old].weight, tree.nodes[idx].weight) > 0:
                seen[key] = idx
        return seen

    @staticmethod
    def best_candidate(tree, candidates):
        """Index of the feasible node with the highest weight, first one on ties."""
        best = None
        for idx in candidates.values():
            node = tree.nodes[idx]
            if not is_feasible(node):
                continue
            if best is None or compare_weights(node.weight, tree.nodes[best].weight) > 0:
                best = idx
        return best

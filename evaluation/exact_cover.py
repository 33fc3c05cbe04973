# evaluation/exact_cover.py

import gurobipy as gp
from gurobipy import GRB

from slicer.grid import TOPPINGS, Rectangle

class ExactCoverSolver:
    """
    Integer program for the best possible coverage of an untouched grid,
    used as a yardstick for the greedy slicer:
      max  sum(area(r) * x_r)
      s.t. sum(x_r for r covering cell) <= 1   for every cell
           x_r binary, r ranging over every feasible rectangle

    Only practical for small grids: the number of feasible rectangles grows
    with rows * cols * max_size.

    Example usage:
      solver = ExactCoverSolver(grid)
      best_area, rectangles = solver.solve()
    """

    def __init__(self, grid, time_limit=None):
        """
        grid: a Grid that has not been sliced yet
        time_limit: optional Gurobi time limit in seconds
        """
        self.grid = grid
        self.time_limit = time_limit
        self.rectangles = self.feasible_rectangles()

    def feasible_rectangles(self):
        """
        Every rectangle within max_size holding at least min_ingredient of
        each topping. Counts come from 2D prefix sums, one table per topping.
        """
        grid = self.grid
        prefix = {t: self._prefix_sums(t) for t in TOPPINGS}

        def count(t, r1, c1, r2, c2):
            p = prefix[t]
            return p[r2+1][c2+1] - p[r1][c2+1] - p[r2+1][c1] + p[r1][c1]

        result = []
        for r1 in range(grid.rows):
            for c1 in range(grid.cols):
                for h in range(1, min(grid.rows - r1, grid.max_size) + 1):
                    max_w = min(grid.cols - c1, grid.max_size // h)
                    for w in range(1, max_w + 1):
                        r2, c2 = r1 + h - 1, c1 + w - 1
                        if all(count(t, r1, c1, r2, c2) >= grid.min_ingredient for t in TOPPINGS):
                            result.append(Rectangle(r1, c1, r2, c2))
        return result

    def _prefix_sums(self, topping):
        grid = self.grid
        p = [[0]*(grid.cols+1) for _ in range(grid.rows+1)]
        for r in range(grid.rows):
            for c in range(grid.cols):
                hit = 1 if grid.toppings[r][c] is topping else 0
                p[r+1][c+1] = p[r][c+1] + p[r+1][c] - p[r][c] + hit
        return p

    def solve(self):
        """
        Returns (best_area, rectangles). best_area is None if Gurobi could not
        solve the model (e.g. the model exceeds a size-limited license).
        """
        if not self.rectangles:
            return 0, []
        try:
            m = gp.Model()
            m.Params.OutputFlag = 0  # silent
            if self.time_limit is not None:
                m.Params.TimeLimit = self.time_limit

            x_vars = []
            covering = {}
            for j, rect in enumerate(self.rectangles):
                size = (rect.end_row - rect.start_row + 1) * (rect.end_col - rect.start_col + 1)
                var = m.addVar(vtype=GRB.BINARY, obj=size, name=f"x_{j}")
                x_vars.append(var)
                for cell in rect.cells():
                    covering.setdefault(cell, []).append(var)

            for (r, c), vars_ in covering.items():
                m.addConstr(gp.quicksum(vars_) <= 1, name=f"cell_{r}_{c}")

            m.ModelSense = GRB.MAXIMIZE
            m.optimize()
            if m.Status != GRB.OPTIMAL:
                return (None, [])

            chosen = [rect for rect, var in zip(self.rectangles, x_vars) if var.X > 0.5]
            return (int(round(m.ObjVal)), chosen)
        except gp.GurobiError as e:
            print("Gurobi Error in exact cover:", e)
            return (None, [])

# evaluation/evaluate_slicer.py

import time
import csv

from slicer.grid import Grid
from slicer.tree_slicer import TreeSlicer

FIELDS = ["instance_id","rows","cols","slices","used","waste","surface","coverage","time","exact_used"]

def evaluate_instances(instances, output_csv="slicer_evaluation.csv", exact=False):
    """
    instances: list of grid descriptions (input text format)
    output_csv: path to store results
    exact: if True, also solve each instance with ExactCoverSolver for comparison
    We measure time, slices, used/wasted cells and coverage.
    """
    results = []
    for idx, description in enumerate(instances):
        grid = Grid.parse(description)
        exact_used = None
        if exact:
            from .exact_cover import ExactCoverSolver
            exact_used, _ = ExactCoverSolver(Grid.parse(description)).solve()

        start_t = time.time()
        slices = TreeSlicer(grid).solve()
        end_t = time.time()
        results.append({
            "instance_id": idx,
            "rows": grid.rows,
            "cols": grid.cols,
            "slices": len(slices),
            "used": grid.used,
            "waste": grid.waste_count,
            "surface": grid.surface,
            "coverage": grid.coverage(),
            "time": end_t - start_t,
            "exact_used": "" if exact_used is None else exact_used
        })
    # write to CSV
    with open(output_csv, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDS)
        writer.writeheader()
        for r in results:
            writer.writerow(r)
    return results

# evaluation/metrics.py

import csv
import statistics

from slicer.grid import TOPPINGS, Grid, area

def solution_score(description, rectangles):
    """
    Replays the rectangles on a fresh grid built from `description` and
    returns the covered area. Raises ValueError on the first rectangle that
    is out of bounds, too big, short of a topping or overlapping another.
    """
    grid = Grid.parse(description)
    for idx, rect in enumerate(rectangles):
        r = rect.normalized()
        if r.start_row < 0 or r.start_col < 0 or r.end_row >= grid.rows or r.end_col >= grid.cols:
            raise ValueError(f"slice {idx} {r} is out of bounds")
        if area(r) > grid.max_size:
            raise ValueError(f"slice {idx} {r} has area {area(r)} > {grid.max_size}")
        if any(not grid.is_uncut(cell) for cell in r.cells()):
            raise ValueError(f"slice {idx} {r} overlaps a previous slice")
        for t in TOPPINGS:
            if grid.topping_count(t, r) < grid.min_ingredient:
                raise ValueError(f"slice {idx} {r} has fewer than {grid.min_ingredient} {t.name.lower()}")
        grid.cut(r)
    return grid.used

def summarize_csv_performance(csv_file):
    """
    Reads 'slicer_evaluation.csv' and computes average time, coverage, waste
    and (when exact optima were computed) the average gap to the optimum.
    """
    data = []
    with open(csv_file, "r") as f:
        reader = csv.DictReader(f)
        for row in reader:
            row["time"] = float(row["time"])
            row["used"] = int(row["used"])
            row["waste"] = int(row["waste"])
            row["coverage"] = float(row["coverage"])
            row["exact_used"] = int(row["exact_used"]) if row.get("exact_used") else None
            data.append(row)
    if not data:
        return {}

    results = {
        "instances": len(data),
        "avg_time": statistics.mean(r["time"] for r in data),
        "avg_coverage": statistics.mean(r["coverage"] for r in data),
        "avg_waste": statistics.mean(r["waste"] for r in data),
    }
    gaps = [r["exact_used"] - r["used"] for r in data if r["exact_used"] is not None]
    if gaps:
        results["avg_gap"] = statistics.mean(gaps)
    return results

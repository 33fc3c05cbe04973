# scripts/compare_exact.py

import argparse
from evaluation.evaluate_slicer import evaluate_instances
from evaluation.metrics import summarize_csv_performance

def main(argv=None):
    parser = argparse.ArgumentParser(description="Evaluate the tree slicer on a set of grids.")
    parser.add_argument("inputs", nargs="+", help="Grid description files (.in)")
    parser.add_argument("--csv", default="slicer_evaluation.csv")
    parser.add_argument("--exact", action="store_true",
                        help="Also compute the optimal coverage with Gurobi (small grids only)")
    args = parser.parse_args(argv)

    instances = []
    for path in args.inputs:
        with open(path, "r", encoding="utf-8") as f:
            instances.append(f.read())

    # evaluate
    evaluate_instances(instances, output_csv=args.csv, exact=args.exact)
    summary = summarize_csv_performance(args.csv)
    print(f"Evaluation done. See {args.csv}")
    for key, value in summary.items():
        print(f"{key}: {value}")

if __name__=="__main__":
    main()

# scripts/run_slicer.py

import argparse
from slicer.grid import Grid, write_solution
from slicer.logger import SlicerLogger
from slicer.tree_slicer import TreeSlicer

def main(argv=None):
    parser = argparse.ArgumentParser(description="Cut a pizza grid into slices with the tree-search slicer.")
    parser.add_argument("input", help="Path to the .in grid description")
    parser.add_argument("--output", default=None, help="Where to write the solution (default: input with .out)")
    parser.add_argument("--log", default=None, help="Path to a CSV event log")
    parser.add_argument("--diagram-limit", type=int, default=90,
                        help="Print the slice diagram only below this many slices")
    args = parser.parse_args(argv)

    grid = Grid.from_file(args.input)
    logger = SlicerLogger(args.log) if args.log else None
    slices = TreeSlicer(grid, logger=logger).solve()

    output = args.output
    if output is None:
        base = args.input[:-3] if args.input.endswith(".in") else args.input
        output = base + ".out"
    write_solution(output, slices)

    if len(slices) < args.diagram_limit:
        print("~~~~~~~ HERE IS YOUR PIZZA ~~~~~~~")
        print(grid.slice_diagram())

    print(f"Slices: {len(slices)}")
    print(f"Used: {grid.coverage()}%")
    print(f"Th. Score: {grid.used}")
    print(f"Waste: {grid.waste_count}")
    print(f"Solution written to {output}")

if __name__=="__main__":
    main()

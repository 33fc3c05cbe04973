# scripts/generate_instances.py

import argparse
import os
from instances.generator import generate_multiple_instances


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate random pizza grids.")
    parser.add_argument("--count", type=int, default=10)
    parser.add_argument("--rows", type=int, default=6)
    parser.add_argument("--cols", type=int, default=7)
    parser.add_argument("--min-ingredient", type=int, default=1)
    parser.add_argument("--max-size", type=int, default=5)
    parser.add_argument("--tomato-ratio", type=float, default=0.5)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--out-dir", default="instances_out")
    args = parser.parse_args(argv)

    # 1) Generate random instances
    instances = generate_multiple_instances(
        count=args.count,
        seed=args.seed,
        rows=args.rows,
        cols=args.cols,
        min_ingredient=args.min_ingredient,
        max_size=args.max_size,
        tomato_ratio=args.tomato_ratio
    )

    # 2) Save each one as a .in file
    os.makedirs(args.out_dir, exist_ok=True)
    for idx, description in enumerate(instances):
        path = os.path.join(args.out_dir, f"instance_{idx:03d}.in")
        with open(path, "w", encoding="utf-8") as f:
            f.write(description)
    print(f"Saved {len(instances)} instances to {args.out_dir}")


if __name__=="__main__":
    main()

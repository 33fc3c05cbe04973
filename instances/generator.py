# instances/generator.py

import random

def generate_random_grid(rows, cols, min_ingredient, max_size, tomato_ratio=0.5, seed=None):
    """
    Returns a grid description in the input text format.
    tomato_ratio: probability of each cell being a tomato ('T'), otherwise mushroom ('M').
    """
    rng = random.Random(seed)
    lines = [f"{rows} {cols} {min_ingredient} {max_size}"]
    for r in range(rows):
        lines.append("".join("T" if rng.random() < tomato_ratio else "M" for _ in range(cols)))
    return "\n".join(lines) + "\n"

def generate_multiple_instances(count=10, seed=None, **kwargs):
    instances = []
    for i in range(count):
        inst_seed = None if seed is None else seed + i
        inst = generate_random_grid(seed=inst_seed, **kwargs)
        instances.append(inst)
    return instances

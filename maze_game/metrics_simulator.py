import argparse
import csv
import os
import random
import statistics
import time

# Optional plotting
try:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    HAS_MPL = True
except Exception:
    HAS_MPL = False

from maze_game.generator import RESHUFFLE_DIVISOR
from maze_game.grid import opposite
from maze_game.session import MAZE_HEIGHT, MAZE_WIDTH, MazeSession

DEFAULT_DIVISORS = [1, 2, 4, RESHUFFLE_DIVISOR]

METRICS = [
    "elapsed_sec",
    "steps",
    "reshuffles",
    "backtracks",
    "passages",
    "dead_ends",
    "straight_cells",
    "turns",
    "junctions",
    "max_depth",
]


def texture_metrics(grid):
    """
    Corridor texture of a carved grid.

      - dead_ends: cells with a single open passage
      - straight_cells: two passages on opposite sides (corridor runs through)
      - turns: two passages on adjacent sides
      - junctions: three or four passages
      - max_depth: longest parent chain, i.e. how far the carving tree reaches
        from its origin
    """
    dead_ends = straight = turns = junctions = 0
    for _, cell in grid:
        degree = len(cell.passages)
        if degree == 1:
            dead_ends += 1
        elif degree == 2:
            a, b = cell.passages
            if opposite(a) == b:
                straight += 1
            else:
                turns += 1
        elif degree >= 3:
            junctions += 1

    depth = {}
    for (x, y), _ in grid:
        chain = []
        node = (x, y)
        while node is not None and node not in depth:
            chain.append(node)
            node = grid.cell(*node).parent
        d = depth[node] if node is not None else -1
        for n in reversed(chain):
            d += 1
            depth[n] = d

    return {
        "passages": grid.passage_count(),
        "dead_ends": dead_ends,
        "straight_cells": straight,
        "turns": turns,
        "junctions": junctions,
        "max_depth": max(depth.values()),
    }


def run_single(width, height, reshuffle_divisor=RESHUFFLE_DIVISOR, seed=None):
    rng = random.Random(seed)

    t0 = time.perf_counter()
    session = MazeSession(width, height, rng=rng, reshuffle_divisor=reshuffle_divisor)
    elapsed = time.perf_counter() - t0

    m = session.metrics
    result = {
        "width": width,
        "height": height,
        "reshuffle_divisor": reshuffle_divisor,
        "seed": seed,
        "elapsed_sec": elapsed,
        "steps": m.get("steps", 0),
        "reshuffles": m.get("reshuffles", 0),
        "backtracks": m.get("backtracks", 0),
    }
    result.update(texture_metrics(session.grid))
    return result


def aggregate_results(rows, group_by=("reshuffle_divisor",)):
    # Aggregate by group-by keys
    grouped = {}
    for r in rows:
        key = tuple(r[k] for k in group_by)
        grouped.setdefault(key, []).append(r)

    def agg_stat(values):
        if not values:
            return {"avg": 0, "min": 0, "max": 0, "stdev": 0}
        return {
            "avg": statistics.mean(values),
            "min": min(values),
            "max": max(values),
            "stdev": statistics.pstdev(values) if len(values) > 1 else 0,
        }

    summary = []
    for key, items in grouped.items():
        entry = dict(zip(group_by, key))
        entry["count"] = len(items)
        for m in METRICS:
            stats = agg_stat([it[m] for it in items])
            for stat_name, value in stats.items():
                entry[f"{m}_{stat_name}"] = value
        summary.append(entry)
    return summary


def write_csv(path, rows):
    if not rows:
        return
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        for r in rows:
            writer.writerow(r)


def plot_metric(summary, metric_key, out_path):
    if not HAS_MPL:
        return
    labels = [f"divisor {row.get('reshuffle_divisor', '')}" for row in summary]
    values = [row.get(metric_key, 0) for row in summary]
    plt.figure(figsize=(max(6, len(labels) * 1.2), 4))
    plt.bar(range(len(values)), values)
    plt.xticks(range(len(values)), labels)
    plt.ylabel(metric_key)
    plt.tight_layout()
    parent = os.path.dirname(out_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    plt.savefig(out_path)
    plt.close()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate many mazes and measure corridor texture per reshuffle divisor.")
    parser.add_argument("--runs", type=int, default=20, help="Mazes per reshuffle divisor")
    parser.add_argument("--width", type=int, default=MAZE_WIDTH)
    parser.add_argument("--height", type=int, default=MAZE_HEIGHT)
    parser.add_argument("--divisors", type=int, nargs="*", default=DEFAULT_DIVISORS,
                        help="Reshuffle budget is drawn from [0, height // divisor]")
    parser.add_argument("--seed", type=int, default=None, help="Base seed (defaults to the current time)")
    parser.add_argument("--out_dir", default="metrics_output")
    parser.add_argument("--no-plots", action="store_true", help="Skip chart rendering")
    args = parser.parse_args(argv)

    if args.width < 1 or args.height < 1:
        parser.error("--width and --height must be at least 1")
    if any(d < 1 for d in args.divisors):
        parser.error("--divisors must be positive")

    all_rows = []
    seed_base = args.seed if args.seed is not None else int(time.time())

    for divisor in args.divisors:
        for i in range(args.runs):
            all_rows.append(run_single(args.width, args.height, divisor, seed=seed_base + i))

    os.makedirs(args.out_dir, exist_ok=True)
    write_csv(os.path.join(args.out_dir, "raw_results.csv"), all_rows)

    summary = aggregate_results(all_rows)
    write_csv(os.path.join(args.out_dir, "summary.csv"), summary)

    if HAS_MPL and not args.no_plots:
        for metric in [
            "straight_cells_avg",
            "turns_avg",
            "dead_ends_avg",
            "junctions_avg",
            "max_depth_avg",
            "reshuffles_avg",
        ]:
            plot_metric(summary, metric, os.path.join(args.out_dir, f"{metric}.png"))

    print(f"Wrote results to {args.out_dir}")


if __name__ == "__main__":
    main()

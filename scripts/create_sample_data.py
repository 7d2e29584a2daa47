#!/usr/bin/env python
"""
Create sample papaya_trees.json and papayas.csv tables for trying DuckGPT.

Run with: python -m scripts.create_sample_data [target_dir]
"""

import csv
import json
import random
import sys
from pathlib import Path

REGIONS = ["north", "south", "east", "west"]


def create_sample_data(target: Path) -> None:
    target.mkdir(parents=True, exist_ok=True)
    print(f"Creating sample tables in: {target}")

    trees = [
        {"id": i, "region": random.choice(REGIONS), "planted_year": random.randint(2010, 2022)}
        for i in range(1, 51)
    ]
    with open(target / "papaya_trees.json", "w") as f:
        json.dump(trees, f, indent=2)

    rows = []
    papaya_id = 1
    for tree in trees:
        # 5-20 papayas per tree
        for _ in range(random.randint(5, 20)):
            rows.append({
                "id": papaya_id,
                "papaya_tree_id": tree["id"],
                "size": round(random.uniform(8.0, 25.0), 2),
                "ripe": random.random() < 0.6,
            })
            papaya_id += 1

    with open(target / "papayas.csv", "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=["id", "papaya_tree_id", "size", "ripe"])
        writer.writeheader()
        writer.writerows(rows)

    print(f"✅ Wrote {len(trees)} trees and {len(rows)} papayas")


if __name__ == "__main__":
    create_sample_data(Path(sys.argv[1] if len(sys.argv) > 1 else ".").resolve())

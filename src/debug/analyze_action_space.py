import sys
import os
import argparse
import logging

import numpy as np

# Add src to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from configs import *
from action_space.generic_action_space import GenericActionSpace
from action_space.object_oriented_action_space import ObjectOrientedActionSpace
from action_space.action_def import SIDES, SIDE_NAMES


def build_space(kind: str):
    if kind == 'generic':
        return GenericActionSpace(GENERIC_SPEEDS, GENERIC_DURATIONS, NUM_HEADING)
    return ObjectOrientedActionSpace(OBJECT_SPEEDS, OBJECT_RATIOS, EDGE_OFFSET, NUM_OFFSET, CENTER_OFFSET)


def view_action_space(space, limit=None):
    print(f"Total Actions (N): {space.size}")
    n_show = space.size if limit is None else min(space.size, limit)
    for action_id in range(n_show):
        action = space.get_action(action_id)
        if isinstance(space, GenericActionSpace):
            print(f"  [{action_id:4d}] speed={action.speed:.3f} duration={action.duration:.3f} "
                  f"heading={np.degrees(action.heading):6.1f}deg")
        else:
            print(f"  [{action_id:4d}] side={action.side_name:<5s} speed={action.speed:.3f} "
                  f"edge_ratio={action.edge_offset_ratio:+.3f} aspect={action.aspect_ratio:.3f}")
    if n_show < space.size:
        print(f"  ... {space.size - n_show} more")


def analyze_action_space(space):
    view_action_space(space, limit=32)

    # 1. Similarity distribution
    features = space.feature_matrix()
    diffs = features[:, None, :] - features[None, :, :]
    dists = np.linalg.norm(diffs, axis=-1)
    off_diag = dists[~np.eye(space.size, dtype=bool)]
    print("\n--- 1. Pairwise Similarity (Euclidean distance) ---")
    if off_diag.size == 0:
        print("Single action, nothing to compare")
    else:
        print(f"Mean Distance: {np.mean(off_diag):.4f}")
        print(f"Min Distance: {np.min(off_diag):.4f}")
        print(f"Max Distance: {np.max(off_diag):.4f}")
        n_dup = int(np.sum(off_diag < 1e-9) // 2)
        print(f"Indistinguishable pairs: {n_dup}")

    # 2. Per-side layout
    if isinstance(space, ObjectOrientedActionSpace):
        print("\n--- 2. Side Layout ---")
        for side in SIDES:
            ids = space.action_ids_for_side(side)
            print(f"{SIDE_NAMES[side]:<5s}: ids [{ids.start}, {ids.stop})")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("kind", choices=["generic", "object"], nargs="?", default="generic")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(format=LOG_FORMAT, level=logging.DEBUG if args.verbose else LOG_LEVEL)
    analyze_action_space(build_space(args.kind))

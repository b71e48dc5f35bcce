import sys
import os
import argparse
import logging
from typing import Optional

import numpy as np
import matplotlib
import matplotlib.pyplot as plt

# Add src to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from configs import *
from action_space.object_oriented_action_space import ObjectOrientedActionSpace
from env.object_state import ObjectState


def plot_object(ax, state: ObjectState, length: float, width: float):
    box = state.create_box(length, width)
    x, y = box.xy
    ax.plot(x, y, color=OBJECT_COLOR, linewidth=1)
    ax.fill(x, y, color=OBJECT_COLOR, alpha=0.5)
    ax.plot(state.loc.x, state.loc.y, marker='+', color='black')


def plot_start_poses(ax, space: ObjectOrientedActionSpace, state: ObjectState):
    seen_sides = set()
    for action_id in range(space.size):
        generic = space.get_action(action_id)
        oo_action = space.get_generic_to_object_oriented_action(action_id, state)
        x, y, theta = oo_action.start_pose
        name = generic.side_name
        color = SIDE_COLORS.get(name, 'black')
        label = name if name not in seen_sides else None
        seen_sides.add(name)
        ax.arrow(x, y, ARROW_LENGTH * np.cos(theta), ARROW_LENGTH * np.sin(theta),
                 color=color, head_width=ARROW_LENGTH / 4, length_includes_head=True, label=label)


def visualize(state: ObjectState, save_path: Optional[str] = None):
    space = ObjectOrientedActionSpace(OBJECT_SPEEDS, OBJECT_RATIOS, EDGE_OFFSET, NUM_OFFSET, CENTER_OFFSET)
    print(f"Plotting {space.size} start poses around {state}")

    fig, ax = plt.subplots(figsize=(6, 6))
    plot_object(ax, state, *OBJECT_RATIOS)
    plot_start_poses(ax, space, state)
    ax.set_aspect('equal')
    ax.set_xlabel('x (mm)')
    ax.set_ylabel('y (mm)')
    ax.set_title('Object oriented start poses')
    ax.legend(loc='upper right')

    if save_path:
        os.makedirs(os.path.dirname(os.path.abspath(save_path)), exist_ok=True)
        fig.savefig(save_path, dpi=150)
        print(f"Saved figure to {save_path}")
    else:
        plt.show()
    plt.close(fig)


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--x", type=float, default=0.0)
    parser.add_argument("--y", type=float, default=0.0)
    parser.add_argument("--theta", type=float, default=0.0, help="object heading (deg)")
    parser.add_argument("--save", type=str, default=None, help="write the figure instead of showing it")
    args = parser.parse_args()

    logging.basicConfig(format=LOG_FORMAT, level=LOG_LEVEL)
    if args.save:
        matplotlib.use("Agg")
    visualize(ObjectState([args.x, args.y, np.radians(args.theta)]), args.save)

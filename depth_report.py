import time
import numpy as np
import pandas as pd
from config import SOLVED_STATE, STATE_SPACE
from transition_table import get_move_table
from util import format_time


def build_depth_array(table=None, verbose=False):
    """Distance to the solved cross of every reachable cross state, -1 if unreachable.

    Face turns are closed under inversion, so a BFS outward from the solved
    state gives the distance back to it.
    """
    if table is None:
        table = get_move_table()
    depths = np.full(STATE_SPACE, -1, dtype=np.int8)
    depths[SOLVED_STATE] = 0
    frontier = np.array([SOLVED_STATE], dtype=np.int64)
    depth = 0
    start_time = time.time()

    while frontier.size:
        next_states = np.unique(table.step(frontier))
        next_states = next_states[depths[next_states] == -1]
        if next_states.size == 0:
            break
        depth += 1
        depths[next_states] = depth
        frontier = next_states
        if verbose:
            print(f"Depth {depth}: {len(next_states):,} states | Time: {format_time(time.time() - start_time)}")
    return depths


def depth_report(table=None, verbose=False):
    depths = build_depth_array(table, verbose)
    reached = depths[depths >= 0]
    counts = np.bincount(reached)

    df = pd.DataFrame({"depth": np.arange(len(counts)),
                       "states": counts})
    df["cumulative"] = df["states"].cumsum()
    df["share"] = df["states"] / df["states"].sum()
    return df


if __name__ == "__main__":
    print("\n" + "="*60)
    print("Cross state space by distance to solved")
    print("="*60 + "\n")

    df = depth_report(verbose=True)
    print()
    print(df.to_string(index=False))
    print(f"\nTotal states: {df['states'].sum():,} | Deepest: {df['depth'].max()} moves")

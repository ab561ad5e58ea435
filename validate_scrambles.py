import math
import random
import time
from cube import Cube, Color
from errors import CrossSolverError
from frame import facing_options
from scramble import invert_alg
from solver import solve_cross, new_buffers
from transition_table import get_move_table
from util import format_time, generate_random_scramble


def check_solution(cube, result):
    ###Solution must build the cross, and undoing it must give back the cube###
    solved = cube.apply_alg(result.rotations).apply_alg(result.path)
    if not solved.cross_solved(result.frame.bottom):
        return False
    undone = solved.apply_alg(invert_alg(result.path)).apply_alg(invert_alg(result.rotations))
    return undone == cube


def validate_scrambles(num_scrambles=100, scramble_lengths=(5, 20), bottom=None, front=None,
                       seed=None, verbose=False):
    rng = random.Random(seed)
    table = get_move_table()
    buffers = new_buffers()
    freq_of_outputs = max(1, int(.05 * 10 ** int(math.log10(max(num_scrambles, 1)))))

    matches = 0
    mismatches = 0
    failures = 0
    lengths = []
    bad_scrambles = []
    start_time = time.time()

    for i in range(num_scrambles):
        scramble = generate_random_scramble(rng.randint(*scramble_lengths), seed=rng.random())
        cross_color = Color(bottom) if bottom is not None else rng.choice(list(Color))
        facing = Color(front) if front is not None else rng.choice(facing_options(cross_color))
        cube = Cube.solved().apply_alg(scramble)

        try:
            result = solve_cross(cube.color_at, cross_color, facing, table=table, buffers=buffers)
        except CrossSolverError as e:
            failures += 1
            bad_scrambles.append((scramble, str(e)))
            continue

        if check_solution(cube, result):
            matches += 1
            lengths.append(len(result.path))
        else:
            mismatches += 1
            bad_scrambles.append((scramble, result.solution_str))
            if verbose:
                print(f"MISMATCH #{mismatches} on scramble {i+1}: {scramble}")
                print(f"  {cross_color.label} cross, {facing.label} front -> {result.solution_str}")

        if verbose and (i + 1) % freq_of_outputs == 0:
            print(f"  Progress: {i+1}/{num_scrambles} (Matches: {matches}, Mismatches: {mismatches}, Failures: {failures})")

    summary = {
        "tested": num_scrambles,
        "matches": matches,
        "mismatches": mismatches,
        "failures": failures,
        "longest": max(lengths) if lengths else 0,
        "average": sum(lengths) / len(lengths) if lengths else 0.0,
        "bad_scrambles": bad_scrambles,
        "elapsed": format_time(time.time() - start_time)
    }
    if verbose:
        print(f"\n{'='*70}")
        print("RESULTS")
        print(f"{'='*70}")
        print(f"Tested: {num_scrambles} in {summary['elapsed']}")
        print(f"    Matches: {matches}")
        print(f"    Mismatches: {mismatches}")
        print(f"    Failures: {failures}")
        print(f"    Longest solution: {summary['longest']} | Average: {summary['average']:.2f}")
        print("\n" + ("✓ PASSED" if mismatches == 0 and failures == 0 else f"✗ FAILED - {mismatches} mismatches, {failures} failures"))
    return summary


if __name__ == "__main__":
    validate_scrambles(num_scrambles=1000, verbose=True)

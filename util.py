import random
from config import SCRAMBLE_LENGTH, MODIFIERS, MODIFIER_PROBABILITIES


def format_time(elapsed_time):
    hours = int(elapsed_time // 3600)
    minutes = int((elapsed_time % 3600) // 60)
    seconds = elapsed_time % 60
    time_str = ""
    if hours > 0:
        time_str += f"{hours}h "
    if minutes > 0:
        time_str += f"{minutes}m "
    if seconds > 0 or not time_str:
        time_str += f"{seconds:.1f}s"
    return time_str.strip()


def generate_random_scramble(scramble_length=SCRAMBLE_LENGTH, seed=None):
    rng = random.Random(seed)

    move_pairs = [("U", "D"), ("R", "L"), ("F", "B")] #don't want U D U, it collapses to U2 D
    all_moves = ["U", "D", "R", "L", "F", "B"]

    scramble_sequence = []
    last_move = ""
    before_last = ""

    while len(scramble_sequence) < scramble_length:
        move = rng.choice(all_moves)

        #find opposite of LAST move
        opposite = ""
        for pair in move_pairs:
            if last_move in pair:
                opposite = pair[1] if last_move == pair[0] else pair[0]
                break

        #skip same face twice, and a face again after only its opposite in between
        if move == last_move or (move == before_last and move == opposite):
            continue

        #choose modifier to add if any
        modifier = rng.choices(MODIFIERS, weights=MODIFIER_PROBABILITIES, k=1)[0]

        scramble_sequence.append(move + modifier)
        before_last, last_move = last_move, move

    return " ".join(scramble_sequence)

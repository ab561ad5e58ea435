#configuration
MAX_DEPTH = 7                       #deepest BFS layer expanded, paths are at most MAX_DEPTH + 1 moves
SOLVED_STATE = 200768               #DF, DR, DB, DL all oriented: 0 | 2 << 5 | 4 << 10 | 6 << 15
STATE_BITS = 20
STATE_SPACE = 1 << STATE_BITS       #1,048,576 packed cross states
SLOT_BITS = 5
SLOT_MASK = (1 << SLOT_BITS) - 1
NUM_SLOTS = 4
NUM_EDGE_STATES = 24                #12 positions x 2 orientations

#display strings handed to the move consumer
NO_MOVE_TEXT = "No move needed"
NO_SCRAMBLE_TEXT = "No scramble needed"
INVALID_PREFIX = "INVALID | "

#colors: letter, name and the hex value the display layer paints with
COLOR_LETTERS = "WYGROB"
COLOR_NAMES = ["White", "Yellow", "Green", "Red", "Orange", "Blue"]
COLOR_HEX = {0xFFFFFF: 0,
             0xFFFF00: 1,
             0x00FF00: 2,
             0xFF0000: 3,
             0xFFA500: 4,
             0x0000FF: 5}

#random scrambles
SCRAMBLE_LENGTH = 10
MODIFIERS = ["", "'", "2"]          #cw, ccw and half turn
MODIFIER_PROBABILITIES = [0.4, 0.4, 0.2]

import random

# Belady's anomaly example: FIFO faults 9 times with 3 frames, 10 with 4.
BELADY = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]
CLASSIC = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2, 1, 2, 0, 1, 7, 0, 1]


def random_sequences(count=6, length=60, page_range=9):
    rng = random.Random(20240917)
    return [[rng.randrange(page_range) for _ in range(length)] for _ in range(count)]

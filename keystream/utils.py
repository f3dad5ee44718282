import math
import numpy as np

# Pre-compute bit count table for fast vectorized counting
BIT_COUNTS = np.array([bin(x).count('1') for x in range(256)], dtype=np.uint8)

def bit_ratio(values):
    """
    Fraction of 1 bits in a keystream, given as bytes or as an array of uint32 draws.
    """
    if isinstance(values, (bytes, bytearray)):
        arr = np.frombuffer(values, dtype=np.uint8)
    else:
        arr = np.ascontiguousarray(values, dtype=np.uint32).view(np.uint8)
    if arr.size == 0:
        raise ValueError("Cannot measure the bit balance of an empty keystream")
    ones = int(BIT_COUNTS[arr].sum(dtype=np.uint64))
    return ones / (arr.size * 8)

def calculate_entropy(ratio):
    """
    Shannon entropy (bits per bit) of a stream with the given ratio of 1 bits.
    """
    if ratio == 0:
        return 0.0
    if ratio == 1:
        return 0.0
    if ratio == 0.5:
        return 1.0

    return -ratio * math.log2(ratio) - (1 - ratio) * math.log2(1 - ratio)

import time
import numpy as np
from keystream.config import *
from keystream.prngs import ISAAC

def profile_one_block():
    print("Profiling one regeneration...")
    gen = ISAAC([1, 2, 3, 4])

    start_time = time.time()
    gen._isaac()
    end_time = time.time()
    print(f"Scalar block: {end_time - start_time:.6f} seconds")

    seeds = np.arange(BENCH_BATCH * 4, dtype=np.int64).reshape((BENCH_BATCH, 4))
    batch = ISAAC.batch(seeds)

    start_time = time.time()
    batch._isaac()
    end_time = time.time()
    print(f"Batch of {len(batch)} blocks: {end_time - start_time:.6f} seconds")

if __name__ == "__main__":
    profile_one_block()

import time
import numpy as np
from keystream.config import *
from keystream.prngs import ISAAC
from keystream.utils import bit_ratio, calculate_entropy

def main():
    # 1. Setup Seeds (Random 4-word session keys)
    seed = np.random.randint(0, 1 << 32, size=4, dtype=np.uint64).tolist()
    batch_seeds = np.random.randint(0, 1 << 32, size=(BENCH_BATCH, 4), dtype=np.uint64)
    values_per_row = BENCH_VALUES // BENCH_BATCH

    print(f"--- ISAAC KEYSTREAM BENCHMARK ---")
    print(f"Seed: {' '.join(f'{w:08x}' for w in seed)}")
    print(f"Draws: {BENCH_VALUES} values ({BENCH_VALUES // SIZE} blocks)")
    print("-" * 60)

    # 2. Scalar generator, one value at a time
    gen = ISAAC(seed)
    start_time = time.time()
    for _ in range(BENCH_VALUES):
        gen.next_value()
    single_duration = time.time() - start_time

    # 3. Scalar generator, block-sized draws
    gen = ISAAC(seed)
    start_time = time.time()
    stream = gen.next_values(BENCH_VALUES)
    bulk_duration = time.time() - start_time

    # 4. Vectorized lockstep generators
    start_time = time.time()
    batch = ISAAC.batch(batch_seeds)
    batch_stream = batch.next_values(values_per_row)
    batch_duration = time.time() - start_time

    print(f"{'MODE':<12} | {'VALUES':<8} | {'TIME':<8} | {'VALUES/S'}")
    print("-" * 60)
    for mode, count, duration in (
        ("next_value", BENCH_VALUES, single_duration),
        ("next_values", BENCH_VALUES, bulk_duration),
        ("batch", batch_stream.size, batch_duration),
    ):
        rate = count / duration if duration > 0 else float('inf')
        print(f"{mode:<12} | {count:<8} | {duration:<8.3f} | {rate:,.0f}")

    # 5. Bit balance
    ratio = bit_ratio(stream)
    batch_ratio = bit_ratio(batch_stream)
    print("-" * 60)
    print(f"Bit Ratio (scalar): {ratio:.5f}  entropy {calculate_entropy(ratio):.6f} bits/bit")
    print(f"Bit Ratio (batch):  {batch_ratio:.5f}  entropy {calculate_entropy(batch_ratio):.6f} bits/bit")

    if abs(ratio - 0.5) < 0.01:
        print("✅ Keystream is balanced.")
    else:
        print("❌ Keystream is biased, check the generator.")

if __name__ == "__main__":
    main()

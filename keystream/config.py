# Configuration for the ISAAC keystream generator

# The golden ratio, used to prime the initial mixing state
RATIO = 0x9E3779B9

# log2 of the pool size
SIZE_LOG = 8

# Size of the memory pool and of every results block
SIZE = 1 << SIZE_LOG

# Partner offset used while regenerating a block
HALF = SIZE // 2

# Pool index mask, pre-scaled by the 4-byte word size of the reference design
MASK = (SIZE - 1) << 2

# Every value is kept as an unsigned 32-bit integer
U32 = 0xFFFFFFFF

# Benchmark sizing: values drawn per run and generators per vectorized batch
BENCH_VALUES = 64 * 1024
BENCH_BATCH = 1024

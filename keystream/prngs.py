import numpy as np
from keystream.config import *


def _mix(a, b, c, d, e, f, g, h):
    """
    One round of the 8-word shift/xor/add mixer used while seeding.
    Works on plain ints and on uint32 numpy arrays alike.
    """
    a ^= (b << 11) & U32
    d = (d + a) & U32
    b = (b + c) & U32
    b ^= c >> 2
    e = (e + b) & U32
    c = (c + d) & U32
    c ^= (d << 8) & U32
    f = (f + c) & U32
    d = (d + e) & U32
    d ^= e >> 16
    g = (g + d) & U32
    e = (e + f) & U32
    e ^= (f << 10) & U32
    h = (h + e) & U32
    f = (f + g) & U32
    f ^= g >> 4
    a = (a + f) & U32
    g = (g + h) & U32
    g ^= (h << 8) & U32
    b = (b + g) & U32
    h = (h + a) & U32
    h ^= a >> 9
    c = (c + h) & U32
    a = (a + b) & U32
    return [a, b, c, d, e, f, g, h]


def _seed_words(seed):
    words = list(seed)
    if len(words) > SIZE:
        raise ValueError(f"Seed holds {len(words)} values, the pool only fits {SIZE}")
    for v in words:
        if not isinstance(v, (int, np.integer)):
            raise TypeError(f"Seed values must be integers, got {type(v).__name__}")
    # Signed 32-bit peers send the same bits as negative numbers
    return [int(v) & U32 for v in words]


class PRNG:
    def seed(self, seed_val):
        pass
    def next_value(self):
        pass
    def randbytes(self, n):
        pass
    @classmethod
    def batch(cls, seeds, **kwargs):
        """
        Optional vectorized lockstep generator over many seeds. Returns None if unsupported.
        """
        return None


class ISAAC(PRNG):
    """
    Bob Jenkins' ISAAC generator with a 256 word pool.
    Values come out of each block from the last slot backwards.
    """
    def __init__(self, seed=(), second_pass=True):
        self.second_pass = second_pass
        self._memory = np.zeros(SIZE, dtype=np.uint32)
        self._results = np.zeros(SIZE, dtype=np.uint32)
        self._a = 0
        self._b = 0
        self._c = 0
        self._count = 0
        self.seed(seed)

    @classmethod
    def single_pass(cls, seed=()):
        """
        Faster, lower quality seeding: one sweep over the pool and the seed is not folded in.
        """
        return cls(seed, second_pass=False)

    @classmethod
    def batch(cls, seeds, second_pass=True):
        return ISAACBatch(seeds, second_pass=second_pass)

    @property
    def remaining(self):
        return self._count

    def seed(self, seed_val):
        words = _seed_words(seed_val)

        self._memory[:] = 0
        self._results[:] = 0
        self._results[:len(words)] = words
        self._a = self._b = self._c = 0
        self._init()

    def _init(self):
        s = [RATIO] * 8
        for _ in range(4):
            s = _mix(*s)

        rsl = self._results.tolist()
        mem = [0] * SIZE
        for i in range(0, SIZE, 8):
            if self.second_pass:
                s = [(x + r) & U32 for x, r in zip(s, rsl[i:i + 8])]
            s = _mix(*s)
            mem[i:i + 8] = s

        if self.second_pass:
            # Second sweep folds the pool back into itself
            for i in range(0, SIZE, 8):
                s = [(x + m) & U32 for x, m in zip(s, mem[i:i + 8])]
                s = _mix(*s)
                mem[i:i + 8] = s

        self._memory[:] = mem
        self._isaac()
        self._count = SIZE

    def _isaac(self):
        """
        Generates the next block of 256 results and advances a, b and c.
        """
        mem = self._memory.tolist()
        rsl = [0] * SIZE
        a = self._a
        self._c = (self._c + 1) & U32
        b = (self._b + self._c) & U32

        for i in range(SIZE):
            x = mem[i]
            shift = i & 3
            if shift == 0:
                a ^= (a << 13) & U32
            elif shift == 1:
                a ^= a >> 6
            elif shift == 2:
                a ^= (a << 2) & U32
            else:
                a ^= a >> 16
            a = (a + mem[(i + HALF) & (SIZE - 1)]) & U32
            y = (mem[(x & MASK) >> 2] + a + b) & U32
            mem[i] = y
            b = (mem[((y >> SIZE_LOG) & MASK) >> 2] + x) & U32
            rsl[i] = b

        self._memory[:] = mem
        self._results[:] = rsl
        self._a = a
        self._b = b

    def next_value(self):
        if self._count == 0:
            self._isaac()
            self._count = SIZE
        self._count -= 1
        return int(self._results[self._count])

    def __iter__(self):
        return self

    def __next__(self):
        return self.next_value()

    def next_values(self, n):
        """
        Draws n values at once, in the same order as n calls to next_value().
        """
        if n < 0:
            raise ValueError("Cannot draw a negative number of values")
        output = np.empty(n, dtype=np.uint32)
        filled = 0
        while filled < n:
            if self._count == 0:
                self._isaac()
                self._count = SIZE
            take = min(self._count, n - filled)
            output[filled:filled + take] = self._results[self._count - take:self._count][::-1]
            self._count -= take
            filled += take
        return output

    def randbytes(self, n):
        """
        Keystream bytes, each draw packed big-endian. A partly used last word is still consumed.
        """
        if n < 0:
            raise ValueError("Cannot draw a negative number of bytes")
        words = self.next_values((n + 3) // 4)
        return words.astype('>u4').tobytes()[:n]


class ISAACBatch:
    """
    Runs one ISAAC generator per seed row in lockstep.
    Every step is vectorized across the seed axis; uint32 arrays wrap on overflow.
    """
    def __init__(self, seeds, second_pass=True):
        seeds = np.asarray(seeds)
        if seeds.ndim != 2:
            raise ValueError(f"Expected a 2-D array of seeds, got {seeds.ndim} dimension(s)")
        n_rows, n_cols = seeds.shape
        if n_rows == 0:
            raise ValueError("Batch needs at least one seed")
        if n_cols > SIZE:
            raise ValueError(f"Seeds hold {n_cols} values, the pool only fits {SIZE}")
        if n_cols and not np.issubdtype(seeds.dtype, np.integer):
            raise TypeError(f"Seed values must be integers, got {seeds.dtype}")

        self.second_pass = second_pass
        self._rows = np.arange(n_rows)
        self._memory = np.zeros((n_rows, SIZE), dtype=np.uint32)
        self._results = np.zeros((n_rows, SIZE), dtype=np.uint32)
        if n_cols:
            self._results[:, :n_cols] = (seeds.astype(np.int64) & U32).astype(np.uint32)
        self._a = np.zeros(n_rows, dtype=np.uint32)
        self._b = np.zeros(n_rows, dtype=np.uint32)
        self._c = np.zeros(n_rows, dtype=np.uint32)
        self._count = 0
        self._init()

    def __len__(self):
        return len(self._rows)

    @property
    def remaining(self):
        return self._count

    def _init(self):
        n_rows = len(self._rows)
        s = [np.full(n_rows, RATIO, dtype=np.uint32) for _ in range(8)]
        for _ in range(4):
            s = _mix(*s)

        for i in range(0, SIZE, 8):
            if self.second_pass:
                s = [x + self._results[:, i + k] for k, x in enumerate(s)]
            s = _mix(*s)
            self._memory[:, i:i + 8] = np.column_stack(s)

        if self.second_pass:
            for i in range(0, SIZE, 8):
                s = [x + self._memory[:, i + k] for k, x in enumerate(s)]
                s = _mix(*s)
                self._memory[:, i:i + 8] = np.column_stack(s)

        self._isaac()
        self._count = SIZE

    def _isaac(self):
        mem = self._memory
        rsl = self._results
        rows = self._rows
        a = self._a.copy()
        self._c += 1
        b = self._b + self._c

        for i in range(SIZE):
            x = mem[:, i].copy()
            shift = i & 3
            if shift == 0:
                a ^= a << 13
            elif shift == 1:
                a ^= a >> 6
            elif shift == 2:
                a ^= a << 2
            else:
                a ^= a >> 16
            a += mem[:, (i + HALF) & (SIZE - 1)]
            y = mem[rows, (x & MASK) >> 2] + a + b
            mem[:, i] = y
            b = mem[rows, ((y >> SIZE_LOG) & MASK) >> 2] + x
            rsl[:, i] = b

        self._a = a
        self._b = b

    def next_values(self, n):
        """
        Draws n values from every generator. Row r matches ISAAC(seeds[r]).next_values(n).
        """
        if n < 0:
            raise ValueError("Cannot draw a negative number of values")
        output = np.empty((len(self._rows), n), dtype=np.uint32)
        filled = 0
        while filled < n:
            if self._count == 0:
                self._isaac()
                self._count = SIZE
            take = min(self._count, n - filled)
            output[:, filled:filled + take] = self._results[:, self._count - take:self._count][:, ::-1]
            self._count -= take
            filled += take
        return output

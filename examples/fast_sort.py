"""Example candidate: LSD radix sort over signed 32-bit keys."""


def fast_sort(values):
    n = len(values)
    if n < 256:
        values.sort()
        return
    bias = 1 << 31
    keys = [v + bias for v in values]
    for shift in (0, 8, 16, 24):
        buckets = [[] for _ in range(256)]
        for k in keys:
            buckets[(k >> shift) & 0xFF].append(k)
        keys = [k for b in buckets for k in b]
    values[:] = [k - bias for k in keys]

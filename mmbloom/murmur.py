'''
MurmurHash3, x86 32-bit variant, in pure python.
https://en.wikipedia.org/wiki/MurmurHash#Algorithm

Python ints don't overflow, so everything is masked back down to 32 bits after each multiply/add/shift.
'''

C1 = 0xcc9e2d51
C2 = 0x1b873593
R1 = 15
R2 = 13
M = 5
N = 0xe6546b64

MASK32 = 0xffffffff


def _rotl32(x: int, r: int) -> int:
    return ((x << r) | (x >> (32 - r))) & MASK32


def _mix_chunk(chunk: int) -> int:
    chunk = (chunk * C1) & MASK32
    chunk = _rotl32(chunk, R1)
    return (chunk * C2) & MASK32


def _fmix32(h: int) -> int:
    h ^= h >> 16
    h = (h * 0x85ebca6b) & MASK32
    h ^= h >> 13
    h = (h * 0xc2b2ae35) & MASK32
    h ^= h >> 16
    return h


def _to_bytes(key) -> bytes:
    if type(key) is str:
        return key.encode()
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    raise TypeError(f'cannot hash key of type {type(key).__name__}, expected str or bytes-like')


def murmur3_32_seeded(key, seed: int = 0) -> int:
    key = _to_bytes(key)
    length = len(key)
    h = seed & MASK32

    n_full = length - length % 4
    for i in range(0, n_full, 4):
        h ^= _mix_chunk(int.from_bytes(key[i:i + 4], byteorder='little'))
        h = _rotl32(h, R2)
        h = (h * M + N) & MASK32

    # the 1-3 leftover bytes are only xored in, no rotate/multiply/add afterwards
    if n_full < length:
        h ^= _mix_chunk(int.from_bytes(key[n_full:], byteorder='little'))

    h ^= length & MASK32
    return _fmix32(h)


def murmur3_32(key) -> int:
    return murmur3_32_seeded(key, 0)

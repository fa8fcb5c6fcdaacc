'''
Fixed-size packed bit array. Bit `pos` lives in byte `pos // 8` at bit offset `pos % 8` (LSB first), which is exactly
how a little-endian bitarray lays out its buffer, so the raw bytes can be handed out as they are.
'''

from sys import getsizeof

from bitarray import bitarray


class BitArray:

    def __init__(self, size: int):
        if type(size) is not int:
            raise TypeError(f'bit array size must be an int, got {type(size).__name__}')
        if size < 0:
            raise ValueError(f'bit array size must be non-negative, got {size}')

        self.size = size
        self.bits = bitarray(size, endian='little')
        self.bits.setall(False)

    def _check(self, pos):
        if type(pos) is not int:
            raise TypeError(f'bit position must be an int, got {type(pos).__name__}')
        # strict: pos == size is already out of range
        if not 0 <= pos < self.size:
            raise IndexError(f'bit position {pos} out of range for bit array of size {self.size}')

    def is_set(self, pos: int) -> bool:
        self._check(pos)
        return bool(self.bits[pos])

    def set(self, pos: int):
        self._check(pos)
        self.bits[pos] = True

    def unset(self, pos: int):
        self._check(pos)
        self.bits[pos] = False

    def flip(self, pos: int):
        self._check(pos)
        self.bits.invert(pos)

    def raw_bytes(self) -> memoryview:
        '''
        Read-only view over the packed buffer (ceil(size / 8) bytes). Unused bits of the last byte are always 0.
        '''
        return memoryview(self.bits).toreadonly()

    def count(self) -> int:
        return self.bits.count(1)

    def __getitem__(self, pos):
        return self.is_set(pos)

    def __len__(self):
        return self.size

    def __repr__(self):
        return f'BitArray(size={self.size})'

    def __sizeof__(self):
        return getsizeof(self.bits)

# https://en.wikipedia.org/wiki/Bloom_filter#Probability_of_false_positives.

import logging
from math import log, ceil, exp
from sys import getsizeof

from mmbloom.bitvec import BitArray
from mmbloom.murmur import murmur3_32_seeded

logger = logging.getLogger(__name__)


class BloomFilter:
    '''
    Sized once from the expected number of inserts `n` and the target false positive rate `p`:
        m = ceil(-(n ln p) / (ln 2)^2) bits
        k = ceil((m / n) ln 2) hash functions
    The k hash functions are murmur3 with seeds 0..k-1.
    '''

    def __init__(self, expected_inserts: int, false_positive_rate: float = 0.01):
        if false_positive_rate <= 0.0:
            raise ValueError(f'false positive rate must be > 0.0, got {false_positive_rate}')
        if expected_inserts < 1:
            raise ValueError(f'expected inserts must be >= 1, got {expected_inserts}')

        self.expected_inserts = expected_inserts
        self.false_positive_rate = false_positive_rate

        m = ceil(-(expected_inserts * log(false_positive_rate)) / (log(2) ** 2))
        # p >= 1 makes the formula give m <= 0
        self.size = max(1, m)
        self.num_hashes = max(1, ceil((self.size / expected_inserts) * log(2)))

        self.bits = BitArray(self.size)
        self.num_inserts = 0

        logger.debug('BloomFilter created: n=%d, p=%g -> m=%d bits, k=%d hashes',
                     expected_inserts, false_positive_rate, self.size, self.num_hashes)

    def _bit_indices(self, value):
        for i in range(self.num_hashes):
            yield murmur3_32_seeded(value, i) % self.size

    def insert(self, value):
        for idx in self._bit_indices(value):
            self.bits.set(idx)
        self.num_inserts += 1

    def maybe_present(self, value) -> bool:
        for idx in self._bit_indices(value):
            if not self.bits.is_set(idx):
                return False
        return True

    def estimated_false_positive_rate(self) -> float:
        '''
        (1 - e^(-kx/m))^k where x is the number of insert calls so far (repeats included, so it's an upper bound).
        '''
        return (1 - exp(-self.num_hashes * self.num_inserts / self.size)) ** self.num_hashes

    def add(self, value):
        self.insert(value)

    def __contains__(self, value):
        return self.maybe_present(value)

    def __repr__(self):
        return f'BloomFilter(size={self.size}, num_hashes={self.num_hashes})'

    def __sizeof__(self):
        return getsizeof(self.bits)

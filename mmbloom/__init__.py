from mmbloom.murmur import murmur3_32, murmur3_32_seeded
from mmbloom.bitvec import BitArray
from mmbloom.bloom import BloomFilter

hash = murmur3_32_seeded

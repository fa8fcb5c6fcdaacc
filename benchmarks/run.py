'''
Fill filters up to their expected number of inserts and measure insert/query time, memory and the observed false
positive rate against the target one.
'''

import sys
import itertools
from sys import getsizeof
from random import Random
from argparse import ArgumentParser

import pandas as pd
from tqdm import tqdm

sys.path.append('.')  # make it runnable from the top level

from benchmarks import Timer, make_experiments_args
from mmbloom import BloomFilter


def explode(d):
    return (dict(zip(d, v)) for v in itertools.product(*d.values()))


def measure(expected_inserts, false_positive_rate, key_len, n_probes, rng):
    bf = BloomFilter(expected_inserts, false_positive_rate)

    # random keys of the same length almost never collide, dedupe anyway so the fpr below stays honest
    members = {rng.randbytes(key_len) for _ in range(expected_inserts)}
    probes = [k for k in (rng.randbytes(key_len) for _ in range(n_probes)) if k not in members]

    with Timer() as t_insert:
        for k in members:
            bf.insert(k)

    with Timer() as t_query:
        false_positives = sum(1 for k in probes if bf.maybe_present(k))

    return {
        'm': bf.size,
        'k': bf.num_hashes,
        'insert_s': float(t_insert),
        'query_s': float(t_query),
        'mem': getsizeof(bf),
        'fpr_observed': false_positives / len(probes) if probes else 0.0,
        'fpr_estimated': bf.estimated_false_positive_rate(),
    }


def run(experiment_id=0, seed=1, show_progress=False):
    rng = Random(seed)
    data = []
    combs = list(explode(make_experiments_args(experiment_id)))
    for comb in tqdm(combs, desc='Global', disable=not show_progress):
        data.append({**comb, **measure(rng=rng, **comb)})
    return pd.DataFrame.from_dict(data)


def main():
    parser = ArgumentParser()
    parser.add_argument('-e', type=int, default=0, help='experiment id')
    parser.add_argument('-s', type=int, default=1, help='rng seed')
    parser.add_argument('-o', type=str, default='measurements.csv', help='output csv')
    args = parser.parse_args()

    df = run(args.e, args.s, show_progress=True)
    df.to_csv(args.o, index=False)
    print(df.to_string(index=False))


if __name__ == '__main__':
    main()

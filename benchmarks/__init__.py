from benchmarks.timer import Timer
from benchmarks.settings import make_experiments_args

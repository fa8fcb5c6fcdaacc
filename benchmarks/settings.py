def make_experiments_args(experiment_id):
    experiments = {
        0: {  # basic toy experiment
            'expected_inserts': [100],
            'false_positive_rate': [0.01],
            'key_len': [8],
            'n_probes': [1_000],
        },
        1: {  # fpr/size trade-off across filter sizes
            'expected_inserts': [1_000, 10_000, 100_000],
            'false_positive_rate': [0.1, 0.01, 0.001],
            'key_len': [8, 64],
            'n_probes': [100_000],
        }
    }
    return experiments[experiment_id]

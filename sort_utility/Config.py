from pathlib import Path

LOG_LEVEL = "INFO"

# inputs larger than this are sampled instead of enumerated
MAX_N = 8
MAX_SAMPLE_TIME_MS = 3000
SAMPLE_SEED = 0

RESULT_PATH = Path("logs/statistics.csv")
STATISTICS_NS = list(range(3, 10)) + list(range(10, 100, 10)) + list(range(100, 1000, 100))

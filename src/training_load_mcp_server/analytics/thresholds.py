"""Thresholds, weights and window lengths for load and recovery metrics."""

# ACWR windows (days). Both windows end on "today" and include both ends.
ACUTE_WINDOW_DAYS = 7
CHRONIC_WINDOW_DAYS = 28

# Minimum number of records before an ACWR is reported
MIN_RECORDS_FOR_ACWR = ACUTE_WINDOW_DAYS

# ACWR risk bands
#   < 0.8        = low
#   0.8 - 1.3    = optimal (both ends inclusive)
#   1.3 - 1.5    = moderate (exclusive)
#   >= 1.5       = high
ACWR_OPTIMAL_MIN = 0.8
ACWR_OPTIMAL_MAX = 1.3
ACWR_HIGH_RISK = 1.5

# Recovery score blend
READINESS_WEIGHT = 0.6
SLEEP_WEIGHT = 0.4

# Recovery level bands (lower bounds, inclusive)
RECOVERY_EXCELLENT_MIN = 85
RECOVERY_GOOD_MIN = 70
RECOVERY_FAIR_MIN = 50

# Optimal run day
OPTIMAL_SLEEP_MIN = 85
OPTIMAL_READINESS_MIN = 80
LOW_SLEEP_THRESHOLD = 70
LOW_READINESS_THRESHOLD = 65

# Number of trailing records (by position) in the average recovery score
AVG_RECOVERY_RECORDS = 7

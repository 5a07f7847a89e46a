"""Powerball game constants."""

import math

WHITE_BALL_MIN = 1
WHITE_BALL_MAX = 69
WHITE_BALL_COUNT = 5
POWERBALL_MIN = 1
POWERBALL_MAX = 26

# Historical files predate the 2015 matrix change; older powerballs went up to 39.
HISTORICAL_POWERBALL_MAX = 39

TOTAL_WHITE_COMBINATIONS = math.comb(WHITE_BALL_MAX, WHITE_BALL_COUNT)  # 11,238,513
TOTAL_COMBINATIONS = TOTAL_WHITE_COMBINATIONS * POWERBALL_MAX  # 292,201,338

HOT_THRESHOLD = 105
COLD_THRESHOLD = 95

DATA_HEADER = "Results for Powerball"
SKIP_MARKERS = ("results for powerball", "information", "accuracy")

"""Application constants."""

# Split validation
SPLIT_NAME_MIN_LENGTH = 3
SPLIT_NAME_MAX_LENGTH = 50
SPLIT_DESCRIPTION_MAX_LENGTH = 500

# Defaults applied to users created from identity-provider events
DEFAULT_REST_TIME_SECONDS = 60

# Unit conversion factors
KG_PER_LB = 0.45359237
LBS_PER_KG = 2.20462262

# Push delivery: transport status codes meaning the subscription is gone
PUSH_GONE_STATUS_CODES = (404, 410)

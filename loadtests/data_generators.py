"""Query and payload generators for Locust load test scenarios.

Values are drawn from the bundled Hostaway sample so filtered reads
return a realistic mix of hits and empty results.
"""

import random

LISTING_FRAGMENTS = ["shoreditch", "camden", "paddington", "heights", "lofts", "flat"]
STATUSES = ["published", "awaiting"]
TYPES = ["guest-to-host", "host-to-guest"]
SAMPLE_REVIEW_IDS = [f"hostaway-{n}" for n in range(7453, 7460)]


def filter_params() -> dict:
    """Build a random subset of the supported filter criteria."""
    params = {}
    if random.random() < 0.4:
        params["listing"] = random.choice(LISTING_FRAGMENTS)
    if random.random() < 0.3:
        params["status"] = random.choice(STATUSES)
    if random.random() < 0.2:
        params["type"] = random.choice(TYPES)
    if random.random() < 0.3:
        low = random.randint(0, 8)
        params["rating_min"] = str(low)
        params["rating_max"] = str(random.randint(low, 10))
    if random.random() < 0.2:
        params["date_from"] = f"2024-0{random.randint(1, 6)}-01"
    return params


def review_id() -> str:
    return random.choice(SAMPLE_REVIEW_IDS)

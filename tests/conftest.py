import os

# Keep API tests deterministic: no per-client throttling while the suite runs.
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")

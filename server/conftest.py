import os

# rate_limit.py reads this at import time
os.environ.setdefault("ANALYZE_RATE_LIMIT", "1000/minute")
# Never send a developer's real token from the test suite
os.environ["GITHUB_TOKEN"] = ""

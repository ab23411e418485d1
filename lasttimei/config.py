import os

from botocore.config import Config

TABLE_NAME = os.getenv("TABLE_NAME", "lasttimei_events")
HOME_REGION = os.getenv("HOME_REGION", "us-east-1")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# One attempt per press: botocore counts the initial call in max_attempts.
BOTO_CONFIG = Config(retries={"max_attempts": 1, "mode": "standard"}, read_timeout=2, connect_timeout=2)

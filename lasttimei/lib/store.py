from functools import lru_cache

import boto3

from lasttimei.config import BOTO_CONFIG, HOME_REGION, TABLE_NAME


@lru_cache(maxsize=None)
def get_table():
    """Process-wide DynamoDB table handle, reused across warm invocations."""
    dynamodb = boto3.resource("dynamodb", region_name=HOME_REGION, config=BOTO_CONFIG)
    return dynamodb.Table(TABLE_NAME)

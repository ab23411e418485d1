import logging
import time
import uuid
from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError

from lasttimei.lib.errors import StoreReadError, StoreWriteError
from lasttimei.lib.models import ActionRecord

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


def _new_id() -> str:
    # uuid1 is time-ordered; switch to uuid4 for ids with no host/time component.
    return str(uuid.uuid1())


def _store_message(err: Exception) -> str:
    if isinstance(err, ClientError):
        return err.response.get("Error", {}).get("Message") or str(err)
    return str(err)


def build_record(serial_number: str, action: str) -> ActionRecord:
    if action is None:
        raise ValueError("action is required; resolve the serial number first")
    return ActionRecord(
        id=_new_id(),
        serial_number=serial_number,
        action=action,
        timestamp=_now_ms(),
    )


def store_record(table, record: ActionRecord) -> ActionRecord:
    """
    Insert one record. Exactly one PutItem is attempted; it only succeeds
    when no item with the same id exists, so a record is never overwritten.
    Any store failure is raised as StoreWriteError with the store's message.
    """
    try:
        table.put_item(
            Item=record.to_item(),
            ConditionExpression="attribute_not_exists(id)",
        )
    except (ClientError, BotoCoreError) as e:
        message = _store_message(e)
        logger.error("store write failed for %s: %s", record.id, message)
        raise StoreWriteError(message, cause=e) from e
    logger.info("stored %s action=%s serial=%s", record.id, record.action, record.serial_number)
    return record


def record(table, serial_number: str, action: str) -> ActionRecord:
    """Build an ActionRecord stamped with a fresh id and the current time, and store it."""
    return store_record(table, build_record(serial_number, action))


def fetch_record(table, record_id: str) -> Optional[ActionRecord]:
    try:
        resp = table.get_item(Key={"id": record_id}, ConsistentRead=True)
    except (ClientError, BotoCoreError) as e:
        message = _store_message(e)
        logger.error("store read failed for %s: %s", record_id, message)
        raise StoreReadError(message, cause=e) from e
    item = resp.get("Item")
    if not item:
        return None
    return ActionRecord.from_item(item)

from lasttimei.lib.presses import handle_press
from lasttimei.lib.store import get_table
from lasttimei.logging_config import setup_logging

setup_logging()


def handler(event, context):
    """
    AWS IoT rule → Lambda
    - event carries the button's serialNumber
    - the resolved action is stored in DynamoDB
    Failures raise, so Lambda reports the error message to the invoker.
    """
    rec = handle_press(event, get_table())
    return {"ok": True, "id": rec.id}

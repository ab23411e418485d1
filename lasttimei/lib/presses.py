import logging
from typing import Any, Mapping, Union

from lasttimei.lib.errors import UnregisteredDeviceError
from lasttimei.lib.events import record
from lasttimei.lib.models import ActionRecord, ButtonEvent
from lasttimei.lib.registry import resolve

logger = logging.getLogger(__name__)


def handle_press(event: Union[ButtonEvent, Mapping[str, Any]], table) -> ActionRecord:
    """
    Resolve the pressed button to its action and store the press.

    Raises UnregisteredDeviceError for unknown serial numbers and lets
    StoreWriteError from the store propagate unchanged.
    """
    if not isinstance(event, ButtonEvent):
        event = ButtonEvent.model_validate(event)
    serial_number = event.serial_number
    logger.info("press received from %s", serial_number)

    action = resolve(serial_number)
    if action is None:
        logger.warning("serial number %s is not registered", serial_number)
        raise UnregisteredDeviceError(serial_number)

    return record(table, serial_number, action)

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class ButtonEvent(BaseModel):
    """Payload forwarded by the IoT rule. Only the serial number is used."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    serial_number: str = Field(alias="serialNumber", min_length=1)


class ActionRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    serial_number: str
    action: str
    timestamp: int  # ms since epoch

    def to_item(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "SerialNumber": self.serial_number,
            "Action": self.action,
            "TimeStamp": self.timestamp,
        }

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "ActionRecord":
        # DynamoDB numbers come back as Decimal
        return cls(
            id=item["id"],
            serial_number=item["SerialNumber"],
            action=item["Action"],
            timestamp=int(item["TimeStamp"]),
        )

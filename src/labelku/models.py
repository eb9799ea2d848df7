"""
LabelKu - Data Models

Receipt records shared by the PDF renderer, the plain-text formatter and
the CLI. Input JSON may use either the camelCase keys of the web form or
the snake_case attribute names.
"""

from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any

from labelku.config import RECEIPT_FILENAME_TEMPLATE


class Orientation(str, Enum):
    """Page orientation of a label."""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"

    @classmethod
    def parse(cls, value: "str | Orientation | None") -> "Orientation":
        """Anything other than "landscape" is treated as portrait."""
        if isinstance(value, Orientation):
            return value
        if value and value.strip().lower() == cls.LANDSCAPE.value:
            return cls.LANDSCAPE
        return cls.PORTRAIT


# camelCase form key -> attribute name
_CAMEL_KEYS: dict[str, str] = {
    "senderName": "sender_name",
    "senderPhone": "sender_phone",
    "senderAddress": "sender_address",
    "recipientName": "recipient_name",
    "recipientPhone": "recipient_phone",
    "recipientAddress": "recipient_address",
    "packageContents": "package_contents",
    "weight": "weight",
    "notes": "notes",
    "courier": "courier",
    "service": "service",
    "paperSize": "paper_size",
    "orientation": "orientation",
    "shippingCost": "shipping_cost",
    "trackingNumber": "tracking_number",
}


def normalize_keys(data: dict[str, Any]) -> dict[str, Any]:
    """Map camelCase form keys to attribute names, dropping unknown keys."""
    known = set(_CAMEL_KEYS.values())
    result: dict[str, Any] = {}
    for key, value in data.items():
        name = _CAMEL_KEYS.get(key, key)
        if name in known:
            result[name] = value
    return result


@dataclass(frozen=True)
class ReceiptData:
    """One shipping receipt.

    Attributes:
        sender_name: Sender full name
        sender_phone: Sender phone number
        sender_address: Sender address, may span several lines
        recipient_name: Recipient full name
        recipient_phone: Recipient phone number
        recipient_address: Recipient address, may span several lines
        package_contents: Free-text description of the contents
        weight: Weight in grams, kept as entered
        notes: Optional handling notes
        courier: Carrier code (e.g. "jnt")
        service: Service name chosen after the cost check
        paper_size: Paper-size token (e.g. "100x150mm")
        orientation: "portrait" or "landscape"
        shipping_cost: Cost in whole Rupiah
        tracking_number: Opaque tracking number generated upstream
    """

    sender_name: str = ""
    sender_phone: str = ""
    sender_address: str = ""
    recipient_name: str = ""
    recipient_phone: str = ""
    recipient_address: str = ""
    package_contents: str = ""
    weight: str = ""
    notes: str = ""
    courier: str = ""
    service: str = ""
    paper_size: str = "100x150mm"
    orientation: str = Orientation.PORTRAIT.value
    shipping_cost: int = 0
    tracking_number: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ReceiptData":
        """Build a receipt from a form/JSON mapping.

        Missing keys and ``None`` values take the field defaults; numeric
        weights are kept as text.
        """
        values = normalize_keys(data)
        kwargs: dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in values or values[f.name] is None:
                continue
            raw = values[f.name]
            if f.name == "shipping_cost":
                kwargs[f.name] = int(raw)
            elif f.name == "orientation":
                kwargs[f.name] = Orientation.parse(str(raw)).value
            else:
                kwargs[f.name] = str(raw)
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Return the receipt as a camelCase mapping, as the web form uses."""
        names = {v: k for k, v in _CAMEL_KEYS.items()}
        return {names[k]: v for k, v in asdict(self).items()}

    @property
    def pdf_filename(self) -> str:
        return RECEIPT_FILENAME_TEMPLATE.format(tracking_number=self.tracking_number)

"""
Shipping form handling: courier catalog, cost lookup, tracking numbers.

The cost lookup returns a fixed service list; there is no carrier API
behind it.
"""

import random
import string
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Final

from labelku.models import ReceiptData, normalize_keys
from labelku.utils.exceptions import IncompleteFormError
from labelku.utils.logger import logger


@dataclass(frozen=True)
class Courier:
    code: str
    label: str


@dataclass(frozen=True)
class CourierService:
    """A delivery service offered by the cost lookup.

    Attributes:
        name: Service name, also printed as the payment column
        price: Cost in whole Rupiah
        estimated_days: Human-readable delivery estimate
    """

    name: str
    price: int
    estimated_days: str


COURIERS: Final[tuple[Courier, ...]] = (
    Courier("jnt", "J&T Express"),
    Courier("jne", "JNE"),
    Courier("lion", "Lion Parcel"),
    Courier("pos", "Pos Indonesia"),
    Courier("tiki", "TIKI"),
    Courier("wahana", "Wahana"),
)

MOCK_SERVICES: Final[tuple[CourierService, ...]] = (
    CourierService("Reguler", 15000, "2-3 hari"),
    CourierService("Express", 25000, "1-2 hari"),
    CourierService("Same Day", 35000, "Hari ini"),
)

COST_CHECK_FIELDS: Final[tuple[str, ...]] = (
    "courier",
    "weight",
    "sender_address",
    "recipient_address",
)

RECEIPT_REQUIRED_FIELDS: Final[tuple[str, ...]] = (
    "sender_name",
    "recipient_name",
    "package_contents",
    "weight",
    "service",
)

_TRACKING_SUFFIX_CHARS: Final[str] = string.digits + string.ascii_uppercase


def _missing_fields(form: dict[str, Any], required: tuple[str, ...]) -> list[str]:
    values = normalize_keys(form)
    return [name for name in required if not str(values.get(name) or "").strip()]


def check_shipping_cost(form: dict[str, Any]) -> list[CourierService]:
    """Return the services available for a shipment.

    Args:
        form: Shipping form values (camelCase or snake_case keys)

    Returns:
        Available services with prices

    Raises:
        IncompleteFormError: If courier, weight or either address is empty
    """
    missing = _missing_fields(form, COST_CHECK_FIELDS)
    if missing:
        raise IncompleteFormError(missing)
    return list(MOCK_SERVICES)


def generate_tracking_number(
    courier: str,
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> str:
    """Build a tracking number: courier prefix, time digits, random suffix.

    Args:
        courier: Carrier code; its first three letters become the prefix
        now: Time source for the digits (default: current time)
        rng: Random source for the suffix (default: a fresh random.Random)

    Returns:
        e.g. "JNT12345678A1B2"
    """
    now = now or datetime.now()
    rng = rng or random.Random()

    prefix = courier.upper()[:3]
    millis = str(int(now.timestamp() * 1000))[-8:]
    suffix = "".join(rng.choice(_TRACKING_SUFFIX_CHARS) for _ in range(4))
    return f"{prefix}{millis}{suffix}"


def create_receipt(
    form: dict[str, Any],
    services: list[CourierService] | None = None,
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> ReceiptData:
    """Turn a completed shipping form into a receipt.

    The shipping cost is the price of the selected service when it is
    among ``services``, otherwise 0.

    Raises:
        IncompleteFormError: If a required field is empty
    """
    missing = _missing_fields(form, RECEIPT_REQUIRED_FIELDS)
    if missing:
        raise IncompleteFormError(missing)

    values = normalize_keys(form)
    service_name = str(values.get("service") or "")
    selected = next((s for s in services or [] if s.name == service_name), None)

    values["shipping_cost"] = selected.price if selected else 0
    values["tracking_number"] = generate_tracking_number(
        str(values.get("courier") or ""), now=now, rng=rng
    )

    receipt = ReceiptData.from_dict(values)
    logger.info(f"Created receipt {receipt.tracking_number} ({receipt.courier} {service_name})")
    return receipt

"""
Movement Deriver
Maps a voucher line to the signed stock movements it produces
"""
import math
from dataclasses import dataclass
from typing import List, Optional

from stockstar.core.exceptions import ValidationError
from stockstar.core.logging import get_logger
from stockstar.models.inventory import TransactionTypeName

logger = get_logger("business")

INWARD_TYPES = frozenset({
    TransactionTypeName.PURCHASE_INWARD.value,
    TransactionTypeName.OPENING_STOCK.value,
})

TRANSFER_TYPES = frozenset({
    TransactionTypeName.GODOWN_TO_SITE.value,
    TransactionTypeName.SITE_TO_GODOWN.value,
    TransactionTypeName.SITE_TO_SITE.value,
})

OUTWARD_TYPES = frozenset({
    TransactionTypeName.MATERIAL_USAGE.value,
    TransactionTypeName.DAMAGED_STOCK.value,
})


@dataclass(frozen=True)
class DerivedMovement:
    """One stock-in or stock-out at a site"""
    item_id: int
    site_id: int
    stock_in: float = 0.0
    stock_out: float = 0.0


def derive_movements(
    type_name: str,
    source_site_id: Optional[int],
    destination_site_id: Optional[int],
    item_id: int,
    quantity: float
) -> List[DerivedMovement]:
    """
    Derive the movements for one voucher line.

    Inward types book stock in at the destination, outward types book stock out
    at the source, transfers do both. A stock adjustment books in at the
    destination when one is set, otherwise out at the source. A side whose site
    is missing produces nothing.

    Unknown type names produce no movements. This is a pass-through, not an
    error, and is logged as a warning.

    Raises:
        ValidationError: quantity is not a positive finite number
    """
    if quantity is None or not math.isfinite(quantity) or quantity <= 0:
        raise ValidationError(f"Quantity must be a finite number greater than zero, got {quantity}")

    quantity = float(quantity)
    stock_in_at = None
    stock_out_at = None

    if type_name in INWARD_TYPES:
        stock_in_at = destination_site_id
    elif type_name in TRANSFER_TYPES:
        stock_out_at = source_site_id
        stock_in_at = destination_site_id
    elif type_name in OUTWARD_TYPES:
        stock_out_at = source_site_id
    elif type_name == TransactionTypeName.STOCK_ADJUSTMENT.value:
        if destination_site_id is not None:
            stock_in_at = destination_site_id
        else:
            stock_out_at = source_site_id
    else:
        logger.warning(f"No movement policy for transaction type '{type_name}', item {item_id} skipped")
        return []

    movements = []
    if stock_out_at is not None:
        movements.append(DerivedMovement(item_id=item_id, site_id=stock_out_at, stock_out=quantity))
    if stock_in_at is not None:
        movements.append(DerivedMovement(item_id=item_id, site_id=stock_in_at, stock_in=quantity))
    return movements


def is_transfer_type(type_name: str) -> bool:
    return type_name in TRANSFER_TYPES

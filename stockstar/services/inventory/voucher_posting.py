"""
Voucher Posting Service
Creates, replaces and deletes vouchers together with their lines and movements
"""
import math
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session, aliased

from stockstar.core.database import transactional
from stockstar.core.exceptions import NotFoundError, ValidationError
from stockstar.core.logging import get_logger
from stockstar.models.inventory import (
    InventoryTransactionType, InventoryVoucher, InventoryVoucherItem, StockMovement
)
from stockstar.models.master import Site
from stockstar.schemas.inventory import InventoryVoucherIn, VoucherLineIn
from stockstar.services.inventory.movement_deriver import derive_movements, is_transfer_type
from stockstar.services.pagination import page_offset

logger = get_logger("business")


class VoucherPostingService:
    """
    Voucher posting functionality

    Every write runs inside one transaction scope: the header, its lines and
    the derived movements are committed together or not at all.
    """

    def __init__(self, db: Session):
        self.db = db

    def post(self, voucher: InventoryVoucherIn) -> int:
        """
        Post a new voucher

        Returns:
            Id of the new voucher
        """
        with transactional(self.db):
            self._validate_lines(voucher.items)
            transaction_number = self.next_transaction_number()
            type_name = self._resolve_type_name(voucher.voucher_type_id)

            header = InventoryVoucher(
                transaction_number=transaction_number,
                voucher_date=voucher.voucher_date,
                source_site_id=voucher.source_site_id,
                destination_site_id=voucher.destination_site_id,
                voucher_type_id=voucher.voucher_type_id,
                remarks=self._resolve_remarks(voucher, type_name),
                created_by=voucher.created_by
            )
            self.db.add(header)
            self.db.flush()

            movement_count = self._post_lines(header, type_name, voucher.items)
            voucher_id = header.id

        logger.info(
            f"Posted voucher {voucher_id} #{transaction_number} ({type_name}): "
            f"{len(voucher.items)} lines, {movement_count} movements"
        )
        return voucher_id

    def update(self, voucher: InventoryVoucherIn, user_id: Optional[int] = None) -> bool:
        """
        Replace an existing voucher's header fields, lines and movements

        The transaction number is kept.
        """
        if voucher.id is None:
            raise ValidationError("Voucher id is required for update")

        with transactional(self.db):
            header = self.db.get(InventoryVoucher, voucher.id)
            if header is None:
                raise NotFoundError(f"Voucher {voucher.id} not found")

            self._validate_lines(voucher.items)
            type_name = self._resolve_type_name(voucher.voucher_type_id)

            self._clear_lines(header.id)

            header.voucher_date = voucher.voucher_date
            header.source_site_id = voucher.source_site_id
            header.destination_site_id = voucher.destination_site_id
            header.voucher_type_id = voucher.voucher_type_id
            header.remarks = self._resolve_remarks(voucher, type_name)
            header.updated_at = datetime.utcnow()
            header.updated_by = user_id if user_id is not None else voucher.created_by
            self.db.flush()

            movement_count = self._post_lines(header, type_name, voucher.items)

        logger.info(
            f"Updated voucher {voucher.id} ({type_name}): "
            f"{len(voucher.items)} lines, {movement_count} movements"
        )
        return True

    def delete(self, voucher_id: int) -> bool:
        """Delete a voucher with its lines and movements"""
        with transactional(self.db):
            exists = self.db.scalar(
                select(InventoryVoucher.id).where(InventoryVoucher.id == voucher_id)
            )
            if exists is None:
                raise NotFoundError(f"Voucher {voucher_id} not found")

            self._clear_lines(voucher_id)
            self.db.execute(delete(InventoryVoucher).where(InventoryVoucher.id == voucher_id))

        logger.info(f"Deleted voucher {voucher_id}")
        return True

    def get_voucher(self, voucher_id: int) -> InventoryVoucher:
        voucher = self.db.get(InventoryVoucher, voucher_id)
        if voucher is None:
            raise NotFoundError(f"Voucher {voucher_id} not found")
        return voucher

    def list_vouchers(self, page: int = 1, limit: int = 10) -> Tuple[List[Dict], int]:
        """
        List voucher headers, newest first, with site and type names

        Returns:
            (rows for the page, total voucher count)
        """
        offset = page_offset(page, limit)
        source = aliased(Site)
        destination = aliased(Site)

        query = (
            select(
                InventoryVoucher.id,
                InventoryVoucher.transaction_number,
                InventoryVoucher.voucher_date,
                InventoryVoucher.source_site_id,
                source.name.label("source_site_name"),
                InventoryVoucher.destination_site_id,
                destination.name.label("destination_site_name"),
                InventoryVoucher.voucher_type_id,
                InventoryTransactionType.name.label("voucher_type_name"),
                InventoryVoucher.remarks,
                InventoryVoucher.created_at,
            )
            .join(InventoryTransactionType, InventoryVoucher.voucher_type_id == InventoryTransactionType.id)
            .outerjoin(source, InventoryVoucher.source_site_id == source.id)
            .outerjoin(destination, InventoryVoucher.destination_site_id == destination.id)
            .order_by(InventoryVoucher.created_at.desc(), InventoryVoucher.id.desc())
            .offset(offset)
            .limit(limit)
        )

        rows = [dict(row) for row in self.db.execute(query).mappings()]
        total = self.db.scalar(select(func.count(InventoryVoucher.id)))
        return rows, total

    def next_transaction_number(self) -> str:
        """Next transaction number: highest numeric value in use plus one"""
        max_seq = 0
        for number in self.db.scalars(select(InventoryVoucher.transaction_number)):
            try:
                max_seq = max(max_seq, int(number))
            except (TypeError, ValueError):
                continue
        return str(max_seq + 1)

    def _validate_lines(self, lines: List[VoucherLineIn]):
        for index, line in enumerate(lines, start=1):
            if line.quantity is None or not math.isfinite(line.quantity) or line.quantity <= 0:
                raise ValidationError(
                    f"Line {index}: quantity must be a finite number greater than zero, got {line.quantity}"
                )

    def _resolve_type_name(self, voucher_type_id: int) -> str:
        type_name = self.db.scalar(
            select(InventoryTransactionType.name).where(InventoryTransactionType.id == voucher_type_id)
        )
        if type_name is None:
            raise ValidationError(f"Unknown voucher type id {voucher_type_id}")
        return type_name

    def _resolve_remarks(self, voucher: InventoryVoucherIn, type_name: str) -> str:
        if voucher.remarks and voucher.remarks.strip():
            return voucher.remarks

        remarks = type_name
        if is_transfer_type(type_name):
            source_name = self._site_name(voucher.source_site_id)
            destination_name = self._site_name(voucher.destination_site_id)
            if source_name and destination_name:
                remarks = f"Transfer: {source_name} -> {destination_name}"
        return remarks

    def _site_name(self, site_id: Optional[int]) -> Optional[str]:
        if site_id is None:
            return None
        return self.db.scalar(select(Site.name).where(Site.id == site_id))

    def _post_lines(self, header: InventoryVoucher, type_name: str, lines: List[VoucherLineIn]) -> int:
        """Insert each line followed by its derived movements"""
        movement_count = 0
        for line in lines:
            voucher_item = InventoryVoucherItem(
                inventory_voucher_id=header.id,
                item_id=line.item_id,
                quantity=line.quantity
            )
            self.db.add(voucher_item)
            self.db.flush()

            for derived in derive_movements(
                type_name,
                header.source_site_id,
                header.destination_site_id,
                line.item_id,
                line.quantity
            ):
                self.db.add(StockMovement(
                    voucher_id=header.id,
                    voucher_item_id=voucher_item.id,
                    item_id=derived.item_id,
                    site_id=derived.site_id,
                    stock_in=derived.stock_in,
                    stock_out=derived.stock_out
                ))
                movement_count += 1

        self.db.flush()
        return movement_count

    def _clear_lines(self, voucher_id: int):
        """Delete movements, then lines, owned by a voucher"""
        self.db.execute(delete(StockMovement).where(StockMovement.voucher_id == voucher_id))
        self.db.execute(
            delete(InventoryVoucherItem).where(InventoryVoucherItem.inventory_voucher_id == voucher_id)
        )

"""
Tests for the Movement Deriver
Transaction type policy for every seeded type
"""
import logging
import math

import pytest

from stockstar.core.exceptions import ValidationError
from stockstar.models.inventory import TransactionTypeName
from stockstar.services.inventory import DerivedMovement, derive_movements

GODOWN, SITE = 1, 2
ITEM = 7


class TestInwardTypes:

    @pytest.mark.parametrize("type_name", [
        TransactionTypeName.PURCHASE_INWARD.value,
        TransactionTypeName.OPENING_STOCK.value,
    ])
    def test_books_stock_in_at_destination(self, type_name):
        movements = derive_movements(type_name, None, SITE, ITEM, 10)

        assert movements == [DerivedMovement(item_id=ITEM, site_id=SITE, stock_in=10.0)]

    def test_ignores_source_site(self):
        movements = derive_movements(TransactionTypeName.PURCHASE_INWARD.value, GODOWN, SITE, ITEM, 3)

        assert [m.site_id for m in movements] == [SITE]

    def test_missing_destination_produces_nothing(self):
        assert derive_movements(TransactionTypeName.OPENING_STOCK.value, GODOWN, None, ITEM, 3) == []


class TestTransferTypes:

    @pytest.mark.parametrize("type_name", [
        TransactionTypeName.GODOWN_TO_SITE.value,
        TransactionTypeName.SITE_TO_GODOWN.value,
        TransactionTypeName.SITE_TO_SITE.value,
    ])
    def test_stock_out_then_stock_in(self, type_name):
        movements = derive_movements(type_name, GODOWN, SITE, ITEM, 4)

        assert movements == [
            DerivedMovement(item_id=ITEM, site_id=GODOWN, stock_out=4.0),
            DerivedMovement(item_id=ITEM, site_id=SITE, stock_in=4.0),
        ]

    def test_transfer_conserves_quantity(self):
        movements = derive_movements(TransactionTypeName.SITE_TO_SITE.value, GODOWN, SITE, ITEM, 2.5)

        assert sum(m.stock_in - m.stock_out for m in movements) == 0

    def test_half_specified_transfer_emits_one_side(self):
        movements = derive_movements(TransactionTypeName.GODOWN_TO_SITE.value, GODOWN, None, ITEM, 4)

        assert movements == [DerivedMovement(item_id=ITEM, site_id=GODOWN, stock_out=4.0)]


class TestOutwardTypes:

    @pytest.mark.parametrize("type_name", [
        TransactionTypeName.MATERIAL_USAGE.value,
        TransactionTypeName.DAMAGED_STOCK.value,
    ])
    def test_books_stock_out_at_source(self, type_name):
        movements = derive_movements(type_name, SITE, GODOWN, ITEM, 1)

        assert movements == [DerivedMovement(item_id=ITEM, site_id=SITE, stock_out=1.0)]


class TestStockAdjustment:

    def test_destination_wins(self):
        movements = derive_movements(TransactionTypeName.STOCK_ADJUSTMENT.value, GODOWN, SITE, ITEM, 5)

        assert movements == [DerivedMovement(item_id=ITEM, site_id=SITE, stock_in=5.0)]

    def test_source_only_books_stock_out(self):
        movements = derive_movements(TransactionTypeName.STOCK_ADJUSTMENT.value, GODOWN, None, ITEM, 5)

        assert movements == [DerivedMovement(item_id=ITEM, site_id=GODOWN, stock_out=5.0)]

    def test_no_sites_produces_nothing(self):
        assert derive_movements(TransactionTypeName.STOCK_ADJUSTMENT.value, None, None, ITEM, 5) == []


class TestValidation:

    @pytest.mark.parametrize("quantity", [0, -1, -0.5])
    def test_rejects_non_positive_quantity(self, quantity):
        with pytest.raises(ValidationError, match="greater than zero"):
            derive_movements(TransactionTypeName.PURCHASE_INWARD.value, None, SITE, ITEM, quantity)

    @pytest.mark.parametrize("quantity", [math.inf, -math.inf, math.nan])
    def test_rejects_non_finite_quantity(self, quantity):
        with pytest.raises(ValidationError, match="finite"):
            derive_movements(TransactionTypeName.PURCHASE_INWARD.value, None, SITE, ITEM, quantity)

    def test_unknown_type_is_skipped_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="stockstar.business"):
            movements = derive_movements("Consignment", GODOWN, SITE, ITEM, 5)

        assert movements == []
        assert "Consignment" in caplog.text

"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Configuration comes from the environment:

    AUTOPOS_DATA_DIR       directory holding the JSON files (default: <repo>/data)
    AUTOPOS_STORE_NAME     receipt header
    AUTOPOS_STORE_ADDRESS
    AUTOPOS_STORE_PHONE
"""

from __future__ import annotations

import os
from pathlib import Path

from autopos.application.receipt import StoreInfo
from autopos.infrastructure.persistence.json_movement_repository import (
    JsonMovementRepository,
)
from autopos.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from autopos.infrastructure.persistence.json_shift_repository import (
    JsonShiftRepository,
)
from autopos.infrastructure.persistence.json_transaction_repository import (
    JsonTransactionRepository,
)

DATA_DIR_ENV = "AUTOPOS_DATA_DIR"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    configured = os.environ.get(DATA_DIR_ENV)
    return Path(configured) if configured else _DEFAULT_DATA_DIR


def product_repository(base: Path | None = None) -> JsonProductRepository:
    return JsonProductRepository((base or data_dir()) / "products.json")


def transaction_repository(base: Path | None = None) -> JsonTransactionRepository:
    return JsonTransactionRepository((base or data_dir()) / "transactions.json")


def shift_repository(base: Path | None = None) -> JsonShiftRepository:
    return JsonShiftRepository((base or data_dir()) / "shifts.json")


def movement_repository(base: Path | None = None) -> JsonMovementRepository:
    return JsonMovementRepository((base or data_dir()) / "inventory_movements.json")


def store_info() -> StoreInfo:
    defaults = StoreInfo()
    return StoreInfo(
        name=os.environ.get("AUTOPOS_STORE_NAME", defaults.name),
        tagline=defaults.tagline,
        address=os.environ.get("AUTOPOS_STORE_ADDRESS", defaults.address),
        phone=os.environ.get("AUTOPOS_STORE_PHONE", defaults.phone),
    )

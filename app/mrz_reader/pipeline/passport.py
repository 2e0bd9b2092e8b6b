"""Downstream mapping of a decoded MRZ record to the wallet passport summary."""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Optional

from .td3 import MrzRecord

LOGGER = logging.getLogger(__name__)


@dataclass
class PassportInfo:
    id: str
    given_names: str
    family_name: str
    birth_date: dt.date
    photo: Optional[bytes] = None


def to_passport_info(record: MrzRecord, photo: Optional[bytes] = None) -> PassportInfo:
    """Wallet-facing summary of a decoded MRZ, keyed by document number."""
    if not record.is_valid:
        LOGGER.info("Building passport info from MRZ with failing check digits: %s", ", ".join(record.checks.failed()))
    return PassportInfo(
        id=record.document_number,
        given_names=record.given_names,
        family_name=record.family_name,
        birth_date=record.date_of_birth,
        photo=photo,
    )

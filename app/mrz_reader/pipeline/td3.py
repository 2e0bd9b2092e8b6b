from __future__ import annotations

import datetime as dt
import logging
import re
from dataclasses import asdict, dataclass, field, fields
from typing import Dict, List, Tuple

from .check_digit import FILLER, validate_check_digit

LOGGER = logging.getLogger(__name__)

TD3_LINE_LENGTH = 44
NAME_SEPARATOR = FILLER * 2
MRZ_DATE_RE = re.compile(r"[0-9]{6}")


class MalformedInput(ValueError):
    """The MRZ lines cannot be decoded: wrong length or an unreadable date."""


@dataclass(frozen=True)
class CheckDigitResults:
    document_number: bool
    date_of_birth: bool
    expiration_date: bool
    personal_number: bool
    composite: bool

    @property
    def all_valid(self) -> bool:
        return all(getattr(self, f.name) for f in fields(self))

    def failed(self) -> List[str]:
        return [f.name for f in fields(self) if not getattr(self, f.name)]


@dataclass(frozen=True)
class MrzRecord:
    document_type: str
    issuing_country: str
    family_name: str
    given_names: str
    document_number: str
    nationality: str
    date_of_birth: dt.date
    sex: str
    expiration_date: dt.date
    personal_number: str
    raw_line_1: str
    raw_line_2: str
    checks: CheckDigitResults = field(repr=False)

    @property
    def is_valid(self) -> bool:
        return self.checks.all_valid

    def to_mrz_string(self) -> str:
        return self.raw_line_1 + self.raw_line_2

    def to_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {
            f.name: getattr(self, f.name) for f in fields(self) if f.name != "checks"
        }
        payload["date_of_birth"] = self.date_of_birth.isoformat()
        payload["expiration_date"] = self.expiration_date.isoformat()
        payload["is_valid"] = self.is_valid
        return payload

    def checks_dict(self) -> Dict[str, bool]:
        return asdict(self.checks)


def trim_fillers(value: str) -> str:
    return value.rstrip(FILLER)


def parse_name_field(name_field: str) -> Tuple[str, str]:
    """Split ``SURNAME<<GIVEN<NAMES<<<`` into (family name, given names)."""
    family_raw, separator, given_raw = name_field.partition(NAME_SEPARATOR)
    family_name = family_raw.replace(FILLER, " ").strip()
    if not separator:
        return family_name, ""
    given_names = given_raw.rstrip(FILLER).replace(FILLER, " ").strip()
    return family_name, given_names


def parse_mrz_date(raw: str, *, field_name: str = "date") -> dt.date:
    """Decode YYMMDD. Years 00-50 are 20xx, 51-99 are 19xx."""
    if not MRZ_DATE_RE.fullmatch(raw):
        raise MalformedInput(f"{field_name} must be six digits (YYMMDD), got {raw!r}")
    year = int(raw[0:2])
    month = int(raw[2:4])
    day = int(raw[4:6])
    century = 2000 if year <= 50 else 1900
    try:
        return dt.date(century + year, month, day)
    except ValueError as exc:
        raise MalformedInput(f"{field_name} {raw!r} is not a calendar date: {exc}") from exc


def _require_length(line: str, label: str) -> None:
    if len(line) != TD3_LINE_LENGTH:
        raise MalformedInput(
            f"{label} must be exactly {TD3_LINE_LENGTH} characters, got {len(line)}"
        )


def check_td3_digits(line2: str) -> CheckDigitResults:
    # Composite covers line 2 except nationality and the composite digit itself.
    composite_data = line2[0:10] + line2[13:20] + line2[21:43]
    return CheckDigitResults(
        document_number=validate_check_digit(line2[0:9], line2[9]),
        date_of_birth=validate_check_digit(line2[13:19], line2[19]),
        expiration_date=validate_check_digit(line2[21:27], line2[27]),
        personal_number=validate_check_digit(line2[28:42], line2[42]),
        composite=validate_check_digit(composite_data, line2[43]),
    )


def decode_td3(line1: str, line2: str) -> MrzRecord:
    """Decode a TD3 (passport) MRZ pair.

    Raises MalformedInput when either line is not 44 characters or a date
    field is not a valid YYMMDD date. Check digit mismatches do not raise;
    they are reported through ``MrzRecord.checks`` and ``is_valid``.
    """
    _require_length(line1, "line 1")
    _require_length(line2, "line 2")

    family_name, given_names = parse_name_field(line1[5:44])
    checks = check_td3_digits(line2)

    record = MrzRecord(
        document_type=line1[0:1],
        issuing_country=line1[2:5],
        family_name=family_name,
        given_names=given_names,
        document_number=trim_fillers(line2[0:9]),
        nationality=line2[10:13],
        date_of_birth=parse_mrz_date(line2[13:19], field_name="date of birth"),
        sex=line2[20:21],
        expiration_date=parse_mrz_date(line2[21:27], field_name="expiration date"),
        personal_number=trim_fillers(line2[28:42]),
        raw_line_1=line1,
        raw_line_2=line2,
        checks=checks,
    )
    LOGGER.debug("Decoded TD3 MRZ for document type %s from %s", record.document_type, record.issuing_country)
    if not checks.all_valid:
        LOGGER.info("TD3 MRZ check digits failed: %s", ", ".join(checks.failed()))
    return record

"""
Decode step for legacy row-oriented datasets.

Legacy rows arrive with every field as a string (CSV cells or the old per-year
Jakarta JSON). They are decoded once into typed records; unparsable or empty
numbers become 0 instead of raising.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")


def parse_count(raw: Any) -> int:
    """Leading integer of a cell value (``"12 kasus"`` -> 12); 0 when there is none."""
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return 0 if math.isnan(raw) or math.isinf(raw) else int(raw)
    match = LEADING_INTEGER.match(str(raw))
    return int(match.group(1)) if match else 0


def _first_filled(row: Mapping[str, Any], *fields: str) -> Optional[Any]:
    for field in fields:
        value = row.get(field)
        if value not in (None, ""):
            return value
    return None


def _text(row: Mapping[str, Any], field: str, default: str = "") -> str:
    value = row.get(field)
    return default if value is None else str(value)


@dataclass(frozen=True)
class JakartaCaseRecord:
    period: str
    region: str
    sex: str
    case_type: str
    count: int
    diphtheria_count: int
    reported_count: int

    @property
    def is_male(self) -> bool:
        return "laki" in self.sex.lower()


@dataclass(frozen=True)
class AnimalOutbreakRecord:
    """One Cirebon or Bogor subdistrict-year row."""

    year: str
    subdistrict_code: str
    subdistrict_name: str
    count: int


@dataclass(frozen=True)
class JatimCaseRecord:
    period_update: str
    disease: str
    category: str
    year: str
    count: int


def decode_jakarta_rows(rows: Iterable[Mapping[str, Any]]) -> list[JakartaCaseRecord]:
    records = []
    for row in rows:
        region = _first_filled(row, "wilayah", "kota_atau_kabupaten") or "Unknown"
        records.append(
            JakartaCaseRecord(
                period=_text(row, "periode_data"),
                region=str(region),
                sex=_text(row, "jenis_kelamin"),
                case_type=_text(row, "jenis_kasus"),
                count=parse_count(_first_filled(row, "jumlah", "jumlah_difteri")),
                diphtheria_count=parse_count(_first_filled(row, "jumlah_difteri", "jumlah")),
                reported_count=parse_count(row.get("jumlah")),
            )
        )
    return records


def _decode_outbreak_rows(rows: Iterable[Mapping[str, Any]], count_field: str) -> list[AnimalOutbreakRecord]:
    return [
        AnimalOutbreakRecord(
            year=_text(row, "tahun"),
            subdistrict_code=_text(row, "bps_kode_kecamatan"),
            subdistrict_name=_text(row, "bps_nama_kecamatan"),
            count=parse_count(row.get(count_field)),
        )
        for row in rows
    ]


def decode_cirebon_rows(rows: Iterable[Mapping[str, Any]]) -> list[AnimalOutbreakRecord]:
    return _decode_outbreak_rows(rows, "jumlah_kasus")


def decode_bogor_rows(rows: Iterable[Mapping[str, Any]]) -> list[AnimalOutbreakRecord]:
    return _decode_outbreak_rows(rows, "jumlah_wabah_lainya")


def decode_jatim_rows(rows: Iterable[Mapping[str, Any]]) -> list[JatimCaseRecord]:
    return [
        JatimCaseRecord(
            period_update=_text(row, "periode_update"),
            disease=_text(row, "penyakit"),
            category=_text(row, "kategori"),
            year=_text(row, "tahun"),
            count=parse_count(row.get("jumlah")),
        )
        for row in rows
    ]

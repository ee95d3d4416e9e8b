"""
Serialisation of a signal's history for download: a ``Date,Value`` CSV and a JSON document carrying the signal id, title, export timestamp and data points.

Dates are rendered as UTC calendar days (``YYYY-MM-DD``); timezone-aware
timestamps are converted to UTC first, naive ones are taken as UTC.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Sequence, Union

from engine.series import DataPoint

CSV_HEADER = "Date,Value"


def export_date(date: datetime) -> str:
    if date.tzinfo is not None:
        date = date.astimezone(timezone.utc)
    return date.date().isoformat()


def _number(value: float) -> Union[int, float]:
    # integral values print without a trailing ".0"
    if value.is_integer() and abs(value) < 1e15:
        return int(value)
    return value


def _timestamp(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def to_csv(series: Sequence[DataPoint]) -> str:
    rows = [f"{export_date(p.date)},{_number(float(p.value))}" for p in series]
    return "\n".join([CSV_HEADER, *rows])


def to_json_document(
    signal_id: str,
    title: str,
    series: Sequence[DataPoint],
    exported_at: Optional[datetime] = None,
) -> Dict[str, Any]:
    return {
        "signal": signal_id,
        "title": title,
        "exportedAt": _timestamp(exported_at or datetime.now(timezone.utc)),
        "dataPoints": [{"date": export_date(p.date), "value": _number(float(p.value))} for p in series],
    }


def to_json(
    signal_id: str,
    title: str,
    series: Sequence[DataPoint],
    exported_at: Optional[datetime] = None,
) -> str:
    return json.dumps(to_json_document(signal_id, title, series, exported_at), indent=2, ensure_ascii=False)

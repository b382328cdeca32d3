"""
Payroll aggregation over completed attendance sessions.
"""
from __future__ import annotations

import csv
import io
import os
from typing import Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from innkeeper.db import models
from innkeeper.db.repositories import attendance as attendance_repo

DEFAULT_HOURLY_RATE = 95.0

CSV_COLUMNS = ["employee_number", "name", "card_id", "total_hours", "rate", "total_pay", "status"]


def hourly_rate() -> float:
    try:
        return float(os.getenv("PAYROLL_HOURLY_RATE", str(DEFAULT_HOURLY_RATE)))
    except ValueError:
        return DEFAULT_HOURLY_RATE


def aggregate_payroll(records: Iterable[models.Attendance], employees: Dict, rate: Optional[float] = None) -> List[dict]:
    """Sum hours per employee and price them at ``rate``.

    ``employees`` maps employee id to ``models.Employee``. Records without
    ``total_hours`` (open sessions) are ignored. Hours and pay are rounded to
    2 decimals.
    """
    rate = hourly_rate() if rate is None else rate
    totals: Dict = {}
    for record in records:
        if record.total_hours is None:
            continue
        entry = totals.get(record.employee_id)
        if entry is None:
            employee = employees.get(record.employee_id)
            entry = totals[record.employee_id] = {
                "employee_id": record.employee_id,
                "employee_number": employee.employee_number if employee else 0,
                "card_id": record.card_id,
                "name": employee.name if employee else record.name,
                "total_hours": 0.0,
            }
        entry["total_hours"] += record.total_hours

    entries = []
    for entry in totals.values():
        hours = round(entry["total_hours"], 2)
        entries.append({
            **entry,
            "total_hours": hours,
            "rate": rate,
            "total_pay": round(hours * rate, 2),
            "status": "Unpaid",
        })
    entries.sort(key=lambda e: e["employee_number"])
    return entries


def build_payroll(db: Session, rate: Optional[float] = None) -> dict:
    records = attendance_repo.list_completed(db)
    employee_ids = {r.employee_id for r in records}
    employees = {}
    if employee_ids:
        employees = {
            e.id: e for e in db.query(models.Employee).filter(models.Employee.id.in_(employee_ids)).all()
        }
    rate = hourly_rate() if rate is None else rate
    entries = aggregate_payroll(records, employees, rate)
    return {
        "rate": rate,
        "entries": entries,
        "total_payout": round(sum(e["total_pay"] for e in entries), 2),
    }


def payroll_csv(entries: List[dict]) -> str:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=CSV_COLUMNS, extrasaction="ignore")
    writer.writeheader()
    for entry in entries:
        writer.writerow(entry)
    return buffer.getvalue()

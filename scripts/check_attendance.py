#!/usr/bin/env python3
"""
Attendance Smoke Check

Taps an employee card against a running Innkeeper service and prints the
resulting attendance record. With a staff admin token it also lists the
attendance rows recorded so far.

Reads the service URL from (in order):
- --base-url
- APP_BASE_URL
- http://localhost:8000

Usage:
  python scripts/check_attendance.py 0007 [--token JWT] [--json]

Exit code is 1 when the tap is rejected.
"""
from __future__ import annotations
import argparse
import json
import os
import sys
from typing import Any, Dict, Optional

import requests


def _base_url(explicit: Optional[str]) -> str:
    return (explicit or os.getenv('APP_BASE_URL') or 'http://localhost:8000').rstrip('/')


def tap(base_url: str, employee_id: str, timeout: float = 10.0) -> requests.Response:
    return requests.post(
        f"{base_url}/api/attendance/tap",
        json={'employee_id': employee_id},
        timeout=timeout,
    )


def list_attendance(base_url: str, token: str, timeout: float = 10.0) -> requests.Response:
    return requests.get(
        f"{base_url}/api/attendance/",
        headers={'Authorization': f'Bearer {token}'},
        timeout=timeout,
    )


def _print(payload: Dict[str, Any], as_json: bool) -> None:
    if as_json:
        print(json.dumps(payload, indent=2, default=str))
        return
    data = payload.get('data') or {}
    print(f"{payload.get('message')}: {payload.get('employee')}")
    print(f"  clock_in:    {data.get('clock_in')}")
    print(f"  clock_out:   {data.get('clock_out') or '-'}")
    print(f"  total_hours: {data.get('total_hours') if data.get('total_hours') is not None else '-'}")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description='Tap an employee card and show attendance.')
    ap.add_argument('employee_id', help='Employee number or card id')
    ap.add_argument('--base-url', default=None)
    ap.add_argument('--token', default=os.getenv('INNKEEPER_TOKEN'), help='Staff admin JWT for listing')
    ap.add_argument('--json', action='store_true', help='Print raw JSON')
    args = ap.parse_args(argv)

    base_url = _base_url(args.base_url)
    try:
        resp = tap(base_url, args.employee_id)
    except requests.RequestException as e:
        print(f"Request to {base_url} failed: {e}", file=sys.stderr)
        return 1

    if resp.status_code != 200:
        detail = resp.json().get('detail') if resp.headers.get('content-type', '').startswith('application/json') else resp.text
        print(f"Tap rejected ({resp.status_code}): {detail}", file=sys.stderr)
        return 1
    _print(resp.json(), args.json)

    if args.token:
        rows = list_attendance(base_url, args.token)
        rows.raise_for_status()
        records = rows.json()
        print(f"\n{len(records)} attendance record(s)")
        for r in records[:10]:
            print(f"  {r.get('date')}  {r.get('name'):<24} {r.get('total_hours') if r.get('total_hours') is not None else 'open'}")
    return 0


if __name__ == '__main__':
    sys.exit(main())

"""Display helpers for sequential staff identifiers."""


def pad_employee_number(number: int) -> str:
    return str(number).zfill(4)


def parse_employee_number(value: str):
    """Return the integer form of a typed/scanned employee number, else None."""
    value = (value or "").strip()
    if value.isdigit():
        return int(value)
    return None

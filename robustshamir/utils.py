from dataclasses import fields
from string import ascii_lowercase, digits
from typing import Any, Dict

DIGITS = digits + ascii_lowercase


def dataclass_to_dict(obj: Any) -> Dict[str, Any]:
    return {field.name: getattr(obj, field.name) for field in fields(obj)}


def int_2_base(i: int, base: int) -> str:
    if not 2 <= base <= len(DIGITS):
        raise ValueError(f"Base must be between 2 and {len(DIGITS)}, not {base}.")
    if i < 0:
        return "-" + int_2_base(-i, base)
    out = []
    while True:
        i, rem = divmod(i, base)
        out.append(DIGITS[rem])
        if not i:
            return "".join(reversed(out))

import argparse
import math


DEFAULT_GPA_COL = "gpa"
DEFAULT_ACTIVITY_COL = "activity"

def parse_at(s: str):
    """'gpa=3.2,activity=72' -> {'gpa': 3.2, 'activity': 72.0}"""
    if not s:
        return {}
    out = {}
    for pair in s.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if "=" not in pair:
            raise argparse.ArgumentTypeError(f"invalid item: '{pair}' (expected 'name=value').")
        k, v = (t.strip() for t in pair.split("=", 1))
        if k not in ("gpa", "activity"):
            raise argparse.ArgumentTypeError(f"unknown variable '{k}' (expected gpa or activity).")
        try:
            x = float(v)
        except ValueError:
            raise argparse.ArgumentTypeError(f"value for '{k}' is not a number: '{v}'.") from None
        if not math.isfinite(x):
            raise argparse.ArgumentTypeError(f"value for '{k}' must be finite, got '{v}'.")
        out[k] = x
    return out

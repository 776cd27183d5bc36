#!/usr/bin/env python3
"""
General utilities for the gravity field simulator.
"""
import math
from typing import Optional


def try_float(val) -> Optional[float]:
    if isinstance(val, bool):
        return None
    try:
        return float(val)
    except (TypeError, ValueError):
        return None


def try_int(val) -> Optional[int]:
    f = try_float(val)
    if f is None or not math.isfinite(f) or f != int(f):
        return None
    return int(f)

"""Small numeric helpers shared by the computation modules."""
import math


def _isnum(x) -> bool:
    return (
        x is not None
        and not isinstance(x, bool)
        and isinstance(x, (int, float))
        and math.isfinite(x)
    )

def _nz(x, default=0.0):
    """Return x when it is a finite number, otherwise default."""
    return x if _isnum(x) else default

def clamp(value: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, value))

def clamp01(x) -> float:
    return 0.0 if not _isnum(x) else clamp(x, 0.0, 1.0)

def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t

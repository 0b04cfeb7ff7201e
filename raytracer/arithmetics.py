"""Small numeric helpers."""


def scale(num: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    """Linearly map ``num`` from [in_min, in_max] to [out_min, out_max]."""
    return (num - in_min) * (out_max - out_min) / (in_max - in_min) + out_min


def clamp(x: float, low: float, high: float) -> float:
    if x < low:
        return low
    if x > high:
        return high
    return x
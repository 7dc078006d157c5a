E7_FACTOR = 10_000_000


def latlong_to_e7(value: float) -> int:
    """Convert latitude or longitude in degrees to the integer e7 form used on the wire.

    >>> latlong_to_e7(37.4210000)
    374210000
    >>> latlong_to_e7(-12.2084000)
    -122084000
    """
    return round(value * E7_FACTOR)


def latlong_from_e7(value: int) -> float:
    """Inverse of latlong_to_e7."""
    return value / float(E7_FACTOR)

from decimal import ROUND_HALF_UP, Decimal, localcontext

TWO_PLACES = Decimal("0.01")
WHOLE = Decimal("1")


def to_decimal(value: float | int | Decimal) -> Decimal:
    # str() keeps the shortest repr, so 66.0 stays 66.0 rather than 65.99999...
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(value: float | int | Decimal, places: Decimal = TWO_PLACES) -> Decimal:
    number = to_decimal(value)
    # quantize() needs a digit for every integer place plus the kept decimals.
    digits = max(number.adjusted(), 0) + 1 - places.as_tuple().exponent
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits + 1)
        return number.quantize(places, rounding=ROUND_HALF_UP)


def mean_2dp(values: list[float]) -> float:
    # Caller guarantees a non-empty list.
    total = sum((to_decimal(v) for v in values), Decimal(0))
    return float(round_half_up(total / len(values)))

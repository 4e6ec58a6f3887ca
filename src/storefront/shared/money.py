"""Money arithmetic helpers.

Amounts are floats in major units (e.g. SEK); payment providers receive
integer minor units.
"""


def round_money(amount: float) -> float:
    return round(float(amount), 2)


def to_minor_units(amount: float) -> int:
    return int(round(float(amount) * 100))


def format_money(amount: float, currency: str = "SEK") -> str:
    return f"{amount:.2f} {currency}"


def from_minor_units(amount: int) -> float:
    return round_money(amount / 100)

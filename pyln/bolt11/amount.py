from .errors import ParseAmountError
from decimal import Decimal, InvalidOperation
import re


class Unit(object):
    """Bitcoin subunits.

    BOLT #11:
    The following `multiplier` letters are defined:

    * `m` (milli): multiply by 0.001
    * `u` (micro): multiply by 0.000001
    * `n` (nano): multiply by 0.000000001
    * `p` (pico): multiply by 0.000000000001
    """
    # Finest first, the order in which an amount gets shortened.
    units = ('p', 'n', 'u', 'm')

    scales = {
        'p': 10**12,
        'n': 10**9,
        'u': 10**6,
        'm': 10**3,
    }

    @classmethod
    def value(cls, c: str) -> int:
        return cls.scales.get(c, 1)


# BOLT #11:
#
# A writer MUST encode `amount` as a positive decimal integer with no
# leading zeroes, SHOULD use the shortest representation possible.
def shorten_amount(amount) -> str:
    """ Given an amount in bitcoin, shorten it
    """
    try:
        amount = Decimal(str(amount))
    except InvalidOperation:
        raise ParseAmountError(amount)
    if not amount.is_finite() or amount < 0:
        raise ParseAmountError(amount)

    # Convert to pico initially
    amount = int(amount * Unit.value('p'))
    for unit in Unit.units:
        if amount % 1000 == 0:
            amount //= 1000
        else:
            break
    else:
        unit = ''
    return str(amount) + unit


def unshorten_amount(amount: str) -> Decimal:
    """ Given a shortened amount, convert it into a decimal
    """
    # BOLT #11:
    # A reader SHOULD fail if `amount` contains a non-digit, or is followed by
    # anything except a `multiplier` in the table above.
    amount = str(amount)
    if not re.fullmatch(r'[0-9]+[pnum]?', amount):
        raise ParseAmountError(amount)

    unit = amount[-1]
    if unit in Unit.scales:
        return Decimal(int(amount[:-1])) / Unit.value(unit)
    else:
        return Decimal(amount)

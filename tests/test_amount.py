from decimal import Decimal
from pyln.bolt11 import ParseAmountError, Unit, shorten_amount, unshorten_amount
import pytest


def test_shorten_amount():
    tests = {
        Decimal(10) / Unit.value('p'): '10p',
        Decimal(1000) / Unit.value('p'): '1n',
        Decimal(1200) / Unit.value('p'): '1200p',
        Decimal(123) / Unit.value('u'): '123u',
        Decimal(123) / 1000: '123m',
        Decimal(3): '3',
        Decimal('3.5'): '3500m',
        Decimal(3000): '3000',
        Decimal('0.0025'): '2500u',
    }
    for amount, shortened in tests.items():
        assert(shorten_amount(amount) == shortened)
        assert(unshorten_amount(shortened) == amount)


def test_shorten_amount_is_minimal():
    for amount in ['0.000000000001', '0.00000001', '0.0001', '0.1', '1', '21000000']:
        s = shorten_amount(Decimal(amount))
        digits = s.rstrip('pnum')
        # A coarser multiplier would have been picked if it still divided evenly
        if s[-1] in Unit.units:
            assert(int(digits) % 1000 != 0)


def test_shorten_amount_accepts_strings_and_ints():
    assert(shorten_amount('0.000123') == '123u')
    assert(shorten_amount(2) == '2')


def test_shorten_amount_truncates_below_pico():
    assert(shorten_amount(Decimal('0.0000000000019')) == '1p')


def test_shorten_amount_invalid():
    with pytest.raises(ParseAmountError):
        shorten_amount(Decimal('-1'))
    with pytest.raises(ParseAmountError):
        shorten_amount('one bitcoin')
    for amount in [Decimal('NaN'), Decimal('sNaN'), Decimal('Infinity'), Decimal('-Infinity')]:
        with pytest.raises(ParseAmountError):
            shorten_amount(amount)


def test_unshorten_amount():
    assert(unshorten_amount('1') == Decimal(1))
    assert(unshorten_amount('2500u') == Decimal('0.0025'))
    assert(unshorten_amount('20m') == Decimal('0.02'))
    assert(unshorten_amount('9678785340p') == Decimal('0.00967878534'))


def test_unshorten_amount_invalid():
    for amount in ['', 'p', '1x', '10pp', '1.5m', '-1', ' 1', '1 ', '1P', '\u0661\u0662m', '\uff11']:
        with pytest.raises(ParseAmountError, match='Invalid amount'):
            unshorten_amount(amount)


def test_unit():
    assert(Unit.value('p') == 10**12)
    assert(Unit.value('n') == 10**9)
    assert(Unit.value('u') == 10**6)
    assert(Unit.value('m') == 10**3)
    assert(Unit.value('x') == 1)


def test_unshorten_amount_non_str():
    assert(unshorten_amount(123) == Decimal(123))
    with pytest.raises(ParseAmountError):
        unshorten_amount(None)

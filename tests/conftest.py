from pytest import Item, fixture

from progcalc import Calculator, Base, BitWidth


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Excessive in most cases.

    Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!)
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def calc():
    return Calculator()


@fixture
def dec8():
    return Calculator(base=Base.DEC, bit_width=BitWidth.EIGHT)

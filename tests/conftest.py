from pytest import Item, fixture

from polarrpn.arithmetic import Arithmetic
from polarrpn.codec import Codec
from polarrpn.machine import Machine
from polarrpn.real import FloatReal, MpReal
from polarrpn.screen import Screen


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Off unless asked for: pytest -rP -o enable_assertion_pass_hook=true
    '''
    print('given', item.name + ':' + str(lineno), str(orig))
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture(params=[FloatReal, MpReal], ids=['float', 'mp'])
def ops(request):
    '''
    Every backend; results must not depend on which.
    '''
    return request.param()


@fixture
def arithmetic(ops):
    return Arithmetic(ops)


@fixture
def codec(arithmetic):
    return Codec(arithmetic)


@fixture
def machine(arithmetic, codec):
    return Machine(arithmetic, codec, Screen())

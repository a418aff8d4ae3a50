''' All intrinsic implementations '''

from typing import TYPE_CHECKING
from atoms import Intrinsic, DivisionByZero
if TYPE_CHECKING: from execution import Runtime

class Add(Intrinsic):
    def __init__(self): super().__init__('+', 'a b -- a+b')
    def execute(self, runtime: 'Runtime') -> None:
        arg2, arg1 = runtime.stack.pop_args(2)
        runtime.stack.push(arg1 + arg2)

class Substract(Intrinsic):
    def __init__(self): super().__init__('-', 'a b -- a-b')
    def execute(self, runtime: 'Runtime') -> None:
        arg2, arg1 = runtime.stack.pop_args(2)
        runtime.stack.push(arg1 - arg2)

class Multiply(Intrinsic):
    def __init__(self): super().__init__('*', 'a b -- a*b')
    def execute(self, runtime: 'Runtime') -> None:
        arg2, arg1 = runtime.stack.pop_args(2)
        runtime.stack.push(arg1 * arg2)

class Divide(Intrinsic):
    ''' Integer division, truncated toward zero : -7 2 / gives -3. '''
    def __init__(self): super().__init__('/', 'a b -- a/b')
    def execute(self, runtime: 'Runtime') -> None:
        runtime.stack.require(2)
        if runtime.stack.peek(0) == 0: raise DivisionByZero(f'division of {runtime.stack.peek(1)} by zero')
        arg2, arg1 = runtime.stack.pop_args(2)
        quotient = abs(arg1) // abs(arg2)
        runtime.stack.push(quotient if (arg1 < 0) == (arg2 < 0) else -quotient)

class Dup(Intrinsic):
    def __init__(self): super().__init__('DUP', 'a -- a a')
    def execute(self, runtime: 'Runtime') -> None:
        runtime.stack.require(1)
        runtime.stack.push(runtime.stack.peek(0))

class Drop(Intrinsic):
    def __init__(self): super().__init__('DROP', 'a --')
    def execute(self, runtime: 'Runtime') -> None:
        runtime.stack.pop_args(1)

class Swap(Intrinsic):
    def __init__(self): super().__init__('SWAP', 'a b -- b a')
    def execute(self, runtime: 'Runtime') -> None:
        arg2, arg1 = runtime.stack.pop_args(2)
        runtime.stack.push(arg2)
        runtime.stack.push(arg1)

class Over(Intrinsic):
    def __init__(self): super().__init__('OVER', 'a b -- a b a')
    def execute(self, runtime: 'Runtime') -> None:
        runtime.stack.require(2)
        runtime.stack.push(runtime.stack.peek(1))

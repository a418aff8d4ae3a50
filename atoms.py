''' Base classes for atoms and errors '''

from typing import Iterable, List, Type, TYPE_CHECKING
from colorama import Fore as fg
if TYPE_CHECKING: from execution import Runtime

class Error(Exception):
    ''' Abstract. Applicative Error. Rendered in red. '''
    def __init__(self, msg: str) -> None:
        super().__init__(f'{fg.LIGHTRED_EX}ERROR:{fg.RESET} {msg}')
        self.message = msg

class ExecutionError(Error):
    ''' Raised during execution of a built-in. '''

class StackUnderflow(ExecutionError):
    ''' A built-in needs more values than the stack holds. '''

class DivisionByZero(ExecutionError):
    ''' Division with a zero divisor. '''

class UnknownWord(Error):
    ''' A word has no dictionary entry, at top level or inside a definition. '''

class ParsingError(Error):
    ''' Raised while parsing a definition. '''

class InvalidWord(ParsingError):
    ''' Malformed definition : numeric or reserved name, nested or missing : / ; '''

class Atom:
    ''' Abstract. Smallest element of language. '''
    def unbox(self) -> Iterable['Atom']:
        raise ExecutionError(f'atom {self} cannot be unboxed')
    def execute(self, runtime: 'Runtime') -> None:
        raise ExecutionError(f'atom {self} cannot be executed')

class NumberLiteral(Atom):
    ''' Atomic integer literal value. '''
    def __init__(self, value: int) -> None:
        self.value = value
    def __str__(self) -> str:
        return f'{fg.CYAN}{self.value}{fg.RESET}'
    def unbox(self) -> Iterable[Atom]: yield self
    def execute(self, runtime: 'Runtime') -> None:
        runtime.stack.push(self.value)

class Word(Atom):
    ''' Reference to a dictionary entry by its (upper case) name. '''
    def __init__(self, value: str) -> None:
        self.value = value
    def __str__(self) -> str:
        return f'{fg.YELLOW}{self.value}{fg.RESET}'
    def execute(self, runtime: 'Runtime') -> None:
        runtime.execute(self.value)

class Intrinsic(Atom):
    ''' Intrinsic implementation of a word. Concrete subclasses are registered on declaration. '''
    classes : List[Type['Intrinsic']] = []
    def __init_subclass__(cls) -> None: Intrinsic.classes.append(cls)
    def __init__(self, value: str = '', comment: str = '') -> None:
        self.value = value
        self.comment = comment
    def unbox(self) -> Iterable[Atom]: yield self
    def __str__(self) -> str:
        return f'{fg.LIGHTBLACK_EX}intrinsic<{self.value}>{fg.RESET}'

class Definition(Atom):
    '''
    User defined word. The body is resolved once, when the definition is compiled :
    it only holds numbers and intrinsics, so later redefinitions of the words it
    was built from do not affect it.
    '''
    def __init__(self, name: str, body: Iterable[Atom]) -> None:
        self.name = name
        self.body = tuple(body)
    def __str__(self) -> str:
        return ' '.join(f'{atom}' for atom in self.body)
    def unbox(self) -> Iterable[Atom]: yield from self.body
    def execute(self, runtime: 'Runtime') -> None:
        for atom in self.body: atom.execute(runtime)


''' Execution engine '''

from typing import Iterable, List
from atoms import InvalidWord, Intrinsic, StackUnderflow, UnknownWord, Word
from compiler import DefinitionCompiler
from dictionary import Dictionary
from parsing import classify
import intrinsics  # ignore 'Unused import' warning, registers the intrinsic classes

class Stack:
    ''' Integer stack. The top is the last element. '''

    def __init__(self) -> None:
        self.values: List[int] = []

    def __len__(self) -> int: return len(self.values)

    def require(self, n: int) -> None:
        if len(self.values) < n:
            if n > 1: raise StackUnderflow(f'{n} values needed, {len(self.values)} on stack')
            raise StackUnderflow('one value needed (empty stack)')

    def pop_args(self, n: int) -> List[int]:
        ''' Pops n values, top first. Fails without popping anything if the stack is too short. '''
        self.require(n)
        return [self.values.pop() for _ in range(n)]

    def peek(self, i: int = 0) -> int : return self.values[-(i+1)]

    def push(self, value: int) -> None:
        self.values.append(value)

class Runtime:
    '''
    Runtime environment for execution.
    Holds the stack and the dictionary, seeded with the intrinsics.
    '''

    def __init__(self) -> None:
        self.stack = Stack()
        self.dictionary = Dictionary()
        for intrinsic in Intrinsic.classes:
            instance = intrinsic()
            self.dictionary.define(instance.value, instance)
        self.compiler = DefinitionCompiler(self.dictionary)

    def execute(self, name: str) -> None:
        entry = self.dictionary.lookup(name)
        if entry is None: raise UnknownWord(f'unknown word {Word(name)}')
        entry.execute(self)

    def run(self, tokens: Iterable[str]) -> None:
        '''
        Processes raw tokens left to right. The definition compiler shares the same
        token stream, so evaluation resumes right after the closing ; of a definition.
        Stops at the first error, leaving the effects of earlier tokens in place.
        '''
        stream = iter(tokens)
        for raw in stream:
            token = classify(raw)
            if isinstance(token, Word) and token.value == self.compiler.prefix:
                self.compiler.compile(stream)
            elif isinstance(token, Word) and token.value == self.compiler.suffix:
                raise InvalidWord(f'{token} without matching {self.compiler.prefix}')
            else:
                token.execute(self)

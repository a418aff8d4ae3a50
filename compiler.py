''' Definition compiler '''

import logging
from typing import Iterator, List
from atoms import Atom, Definition, InvalidWord, NumberLiteral, UnknownWord, Word
from dictionary import Dictionary
from parsing import classify

logger = logging.getLogger(__name__)

class DefinitionCompiler:
    '''
    Handles the pattern : name ... ;  which defines a new word.
    The body is resolved against the dictionary as it stands when ; is reached :
    numbers and intrinsics are kept as is, user words are replaced by their own
    (already resolved) bodies. The resulting definition never refers to a name.
    '''
    prefix = ':'
    suffix = ';'

    def __init__(self, dictionary: Dictionary) -> None:
        self.dictionary = dictionary

    def reserved(self) -> List[str]:
        return [self.prefix, self.suffix]

    def parse_name(self, tokens: Iterator[str]) -> str:
        raw = next(tokens, None)
        if raw is None: raise InvalidWord('missing word name after :')
        token = classify(raw)
        if isinstance(token, NumberLiteral):
            raise InvalidWord(f'word name {token} is a number')
        if token.value in self.reserved():
            raise InvalidWord(f'word name {token} is reserved')
        return token.value

    def parse_body(self, name: str, tokens: Iterator[str]) -> List[Atom]:
        body : List[Atom] = []
        for raw in tokens:
            token = classify(raw)
            if isinstance(token, Word) and token.value == self.suffix: return body
            if isinstance(token, Word) and token.value == self.prefix:
                raise InvalidWord(f'nested definition inside {Word(name)}')
            body.append(token)
        raise InvalidWord(f'missing closing {self.suffix} in definition of {Word(name)}')

    def resolve(self, atom: Atom) -> List[Atom]:
        if not isinstance(atom, Word): return [atom]
        entry = self.dictionary.lookup(atom.value)
        if entry is None: raise UnknownWord(f'unknown word {atom}')
        return [*entry.unbox()]

    def compile(self, tokens: Iterator[str]) -> Definition:
        '''
        Consumes the tokens following : up to and including ; then installs
        the new definition. Nothing is installed if any step fails.
        '''
        name = self.parse_name(tokens)
        body = self.parse_body(name, tokens)
        definition = Definition(name, (resolved for atom in body for resolved in self.resolve(atom)))
        self.dictionary.define(name, definition)
        logger.debug('defined %s as [%s]', name, ' '.join(str(atom.value) for atom in definition.body))
        return definition

''' Tokenizing engine '''

import re
from typing import Iterator, Union
from atoms import NumberLiteral, Word

# Token are outputs of classify
Token = Union[NumberLiteral, Word]

class Tokenizer:
    '''
    Lexical tokenizer. Splits a string on ASCII whitespace into raw token strings.
    Scanning is lazy, and each iteration restarts from the beginning of the input.
    Raw tokens are only classified when consumed, see classify.
    '''

    RAW_TOKEN = re.compile(r'[^ \t\n\r\f\v]+')

    def __init__(self, input_str: str) -> None:
        self.input = input_str

    def __iter__(self) -> Iterator[str]:
        for found in Tokenizer.RAW_TOKEN.finditer(self.input):
            yield found.group()

def is_number(raw: str) -> bool:
    ''' One or more ASCII digits. No sign. '''
    return len(raw) > 0 and all('0' <= c <= '9' for c in raw)

def classify(raw: str) -> Token:
    if is_number(raw): return NumberLiteral(int(raw))
    return Word(raw.upper())

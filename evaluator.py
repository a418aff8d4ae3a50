''' MINIFORTH : evaluator entry point '''

import logging
from typing import List
from atoms import Error
from execution import Runtime
from parsing import Tokenizer

logger = logging.getLogger(__name__)

class Evaluator:
    '''
    Evaluates chunks of source text against a persistent stack and dictionary.

    Each call to eval runs until the input is exhausted or until the first error,
    which is raised to the caller. Work done by the tokens preceding the error is
    kept, and the evaluator remains usable afterwards.

        >>> forth = Evaluator()
        >>> forth.eval(': double dup + ; 3 double')
        >>> forth.stack
        [6]
    '''

    def __init__(self) -> None:
        self.runtime = Runtime()

    @classmethod
    def new(cls) -> 'Evaluator':
        return cls()

    def eval(self, input_str: str) -> None:
        try:
            self.runtime.run(Tokenizer(input_str))
        except Error as error:
            logger.debug('evaluation stopped by %s: %s', type(error).__name__, error.message)
            raise

    @property
    def stack(self) -> List[int]:
        ''' Copy of the stack, bottom first. '''
        return list(self.runtime.stack.values)

    def words(self) -> List[str]:
        return self.runtime.dictionary.names()

    def describe(self, name: str) -> str:
        return self.runtime.dictionary.describe(name)

''' Word dictionary '''

from typing import Dict, List, Optional, Union
from atoms import Definition, Intrinsic, UnknownWord, Word

Entry = Union[Intrinsic, Definition]

class Dictionary:
    '''
    Maps a word name to its entry, either an intrinsic or a compiled definition.
    Names are case insensitive. Defining an existing name rebinds it : entries
    themselves are never modified.
    '''

    def __init__(self) -> None:
        self.words: Dict[str, Entry] = {}

    @staticmethod
    def normalize(name: str) -> str: return name.upper()

    def lookup(self, name: str) -> Optional[Entry]:
        return self.words.get(Dictionary.normalize(name))

    def define(self, name: str, entry: Entry) -> None:
        self.words[Dictionary.normalize(name)] = entry

    def contains(self, name: str) -> bool:
        return Dictionary.normalize(name) in self.words

    def __contains__(self, name: str) -> bool: return self.contains(name)

    def names(self) -> List[str]:
        return sorted(self.words.keys())

    def describe(self, name: str) -> str:
        entry = self.lookup(name)
        if entry is None: raise UnknownWord(f'unknown word {Word(Dictionary.normalize(name))}')
        return ' '.join(f'{atom}' for atom in entry.unbox())

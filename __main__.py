''' MINIFORTH : interactive driver for the evaluator '''

import logging
import colorama
from colorama import Fore as fg

from atoms import Error, NumberLiteral, Word
from evaluator import Evaluator

class Interpreter:
    ''' The interpreter program '''

    def __init__(self) -> None:
        colorama.just_fix_windows_console()
        logging.basicConfig(level = logging.WARNING, format = '%(levelname)s %(name)s: %(message)s')
        self.prompt = fg.LIGHTWHITE_EX + '>> ' + fg.RESET
        self.showstack = True
        self.evaluator = Evaluator()
        print(f'Welcome to {fg.LIGHTWHITE_EX}MINIFORTH{fg.RESET} {fg.GREEN}( minimal Forth evaluator ){fg.RESET}.')
        print('Words : ' + ' '.join(f'{Word(name)}' for name in self.evaluator.words()))
        print(f'Example:{fg.LIGHTBLACK_EX}  : square dup * ; 7 square{fg.RESET}\n')

    def print_stack(self) -> None:
        stack = self.evaluator.stack
        print(fg.LIGHTBLACK_EX+'STACK'+fg.RESET)
        i = len(stack)
        if i > 10:
            print(f'{fg.LIGHTBLACK_EX}  {i} :{fg.RESET}\r\t\t{NumberLiteral(stack[0])}')
            print(f'{fg.LIGHTBLACK_EX}  ...\r\t\t...{fg.RESET}')
            i = 10
        for value in stack[-10:]:
            print(f'{fg.LIGHTBLACK_EX}  {i} :{fg.RESET}\r\t\t{NumberLiteral(value)}')
            i -= 1

    def loop(self) -> None:
        while True :
            if self.showstack: print(); self.print_stack()
            try:
                self.evaluator.eval(input(self.prompt))
            except Error as error:
                print(error)
            except (EOFError, KeyboardInterrupt):
                break
        print('\nSee you soon !\n')

# Main function calling
if __name__ == '__main__':
    Interpreter().loop()

from calc.reader.source import Diagnostic, Location, SourceFile
from calc.reader.lexer import OPERATORS, Token, lex
from calc.reader.parser import TokenStream, parse_file

__all__ = [
    "Diagnostic",
    "Location",
    "OPERATORS",
    "SourceFile",
    "Token",
    "TokenStream",
    "lex",
    "parse_file",
]

from kappa.reader.token import Token, TokenKind
from kappa.reader.lexer import Lexer, lex
from kappa.reader.parser import Parser, parse

__all__ = ["Token", "TokenKind", "Lexer", "lex", "Parser", "parse"]

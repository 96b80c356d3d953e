"""Tokenizer and recursive-descent parser for the article language."""

from .lexer import KEYWORDS, Token, TokenType, TokenizerConfig, WordTokenizer, split_words
from .nodes import (
    Body,
    Identifier,
    IfNode,
    IntegerLiteral,
    Node,
    Program,
    WhileNode,
    nesting_depth,
    walk_body,
)
from .formatter import ProgramFormatter
from .parser import (
    InvalidNumericValue,
    MissingArticleName,
    MissingClosingToken,
    MissingDefine,
    MissingEndOfArticle,
    ParseException,
    Parser,
    ParserConfig,
    Terminator,
    UnexpectedToken,
)
from .parser_manager import ParserManager, ParserManagerConfig

__all__ = [
    "KEYWORDS",
    "Token",
    "TokenType",
    "TokenizerConfig",
    "WordTokenizer",
    "split_words",
    "Body",
    "Identifier",
    "IfNode",
    "IntegerLiteral",
    "Node",
    "Program",
    "WhileNode",
    "nesting_depth",
    "walk_body",
    "ProgramFormatter",
    "InvalidNumericValue",
    "MissingArticleName",
    "MissingClosingToken",
    "MissingDefine",
    "MissingEndOfArticle",
    "ParseException",
    "Parser",
    "ParserConfig",
    "Terminator",
    "UnexpectedToken",
    "ParserManager",
    "ParserManagerConfig",
]

from typing import Dict, List, NotRequired, Optional, TypedDict
from enum import Enum
from scripts.articles.lexer import Token, TokenType
from scripts.articles.nodes import Body, Identifier, IfNode, IntegerLiteral, Node, Program, WhileNode
from scripts.articles.formatter import ProgramFormatter
from scripts.articles.utils import resolve_config
from scripts.articles.logger import Logger


class ParseException(Exception):
    def __init__(self, message: str, token: Optional[Token] = None, position: Optional[int] = None):
        self.message = message
        self.token = token
        self.position = position
        if position is not None:
            message = f"{message} at token {position}"
        if token:
            message = message + f", {token=}"
        elif position is not None:
            message = message + " (end of input)"
        super().__init__(message)


class MissingDefine(ParseException):
    pass


class MissingArticleName(ParseException):
    pass


class MissingEndOfArticle(ParseException):
    pass


class MissingClosingToken(ParseException):
    def __init__(self, expected: str, message: str, token: Optional[Token] = None, position: Optional[int] = None):
        self.expected = expected
        super().__init__(message, token, position)


class InvalidNumericValue(ParseException):
    pass


class UnexpectedToken(ParseException):
    pass


class Terminator(Enum):
    """Keyword that ends a body. The body stops in front of it and leaves it to the caller."""

    NONE = None
    END = "end"
    ENDIF = "endif"
    DO = "do"
    WEND = "wend"

    def matches(self, token: Token) -> bool:
        return self.value is not None and token.value == self.value


class ParserConfig(TypedDict):
    parse: NotRequired[bool]
    enable_logger: NotRequired[bool]


class ParserConfigRequired(TypedDict):
    parse: bool
    enable_logger: bool


DEFAULT_CONFIG: ParserConfigRequired = {"parse": True, "enable_logger": True}


class Parser:
    """Recursive-descent parser for the article language.

    Grammar::

        Program   ::= Article* Body
        Article   ::= "define" Identifier Body "end"
        Statement ::= "if" Body "endif"
                    | "while" Body "do" Body "wend"
                    | Number
                    | Identifier

    Articles are only recognised before the first top-level statement. Any
    error aborts the whole parse.
    """

    def __init__(self, tokens: List[Token], config: Optional[ParserConfig] = None):
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.logger = Logger(config={"name": "Parser Logger", "is_enabled": self.config["enable_logger"]}).logger
        self.logger.info("Parser initialized")
        self.tokens = tuple(tokens)
        self.position = 0
        self.program: Optional[Program] = None
        if self.config["parse"]:
            self.program = self.parse()
            self.logger.debug("Tokens parsed into AST")

    @property
    def current_token(self) -> Optional[Token]:
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return None

    def advance(self) -> None:
        if self.position < len(self.tokens):
            self.logger.debug(f"Advancing from position {self.position}")
            self.position += 1

    def parse(self) -> Program:
        self.position = 0
        self.logger.info("Starting parse")
        try:
            articles = self._parse_articles()
            main_body = self._parse_body(Terminator.NONE)
        except ParseException as e:
            self.logger.error(e)
            raise
        program = Program(articles=articles, main_body=main_body)
        self.logger.info(f"Parse complete, {len(articles)} article(s)")
        return program

    def _parse_articles(self) -> Dict[str, Body]:
        articles: Dict[str, Body] = {}
        while self._at_keyword("define"):
            name, body = self._parse_article()
            if name in articles:
                self.logger.warning(f"Article '{name}' redefined, keeping the last definition")
            articles[name] = body
        return articles

    def _parse_article(self) -> tuple[str, Body]:
        token = self.current_token
        if token is None or token.value != "define":
            raise MissingDefine("Expected 'define'", token, self.position)
        self.advance()

        token = self.current_token
        if token is None:
            raise MissingArticleName("Expected an article name after 'define'", token, self.position)
        if token.type != TokenType.IDENTIFIER:
            raise MissingArticleName(f"Expected an article name, got {token.type}", token, self.position)
        if not isinstance(token.value, str):
            raise MissingArticleName("Invalid article name value", token, self.position)
        name = token.value
        self.advance()

        body = self._parse_body(Terminator.END)
        token = self.current_token
        if token is None or token.value != Terminator.END.value:
            raise MissingEndOfArticle(f"Expected 'end' after the body of article '{name}'", token, self.position)
        self.advance()
        self.logger.info(f"Parsed article '{name}'")
        return name, body

    def _parse_body(self, terminator: Terminator) -> Body:
        statements: List[Node] = []
        while (token := self.current_token) is not None:
            if terminator.matches(token):
                break
            statements.append(self._parse_statement(token))
        return tuple(statements)

    def _parse_statement(self, token: Token) -> Node:
        match token.type:
            case TokenType.KEYWORD if token.value == "if":
                self.advance()
                body = self._parse_body(Terminator.ENDIF)
                self._consume_terminator(Terminator.ENDIF, "after the if body")
                return IfNode(body=body)
            case TokenType.KEYWORD if token.value == "while":
                self.advance()
                condition = self._parse_body(Terminator.DO)
                self._consume_terminator(Terminator.DO, "after the while condition")
                body = self._parse_body(Terminator.WEND)
                self._consume_terminator(Terminator.WEND, "after the while body")
                return WhileNode(condition=condition, body=body)
            case TokenType.NUMBER:
                if isinstance(token.value, bool) or not isinstance(token.value, int):
                    raise InvalidNumericValue(f"Invalid numeric value {token.value!r}", token, self.position)
                self.advance()
                return IntegerLiteral(value=token.value)
            case TokenType.IDENTIFIER:
                self.advance()
                return Identifier(name=str(token.value))
            case _:
                raise UnexpectedToken(f"Unexpected token {token.value!r}", token, self.position)

    def _consume_terminator(self, terminator: Terminator, context: str) -> None:
        token = self.current_token
        if token is None or token.value != terminator.value:
            raise MissingClosingToken(terminator.value, f"Expected '{terminator.value}' {context}", token, self.position)
        self.logger.debug(f"Consumed token {token}")
        self.advance()

    def _at_keyword(self, keyword: str) -> bool:
        token = self.current_token
        return token is not None and token.type == TokenType.KEYWORD and token.value == keyword

    def print_tree(self) -> None:
        if self.program is None:
            self.program = self.parse()
        print(ProgramFormatter().format(self.program))

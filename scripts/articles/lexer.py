from typing import List, NotRequired, Optional, Sequence, TypedDict
from enum import Enum, auto
from dataclasses import dataclass
import re
from scripts.articles.utils import resolve_config
from scripts.articles.logger import Logger


class TokenType(Enum):
    KEYWORD = auto()
    NUMBER = auto()
    IDENTIFIER = auto()


@dataclass(frozen=True, slots=True)
class Token:
    type: TokenType
    value: str | int


KEYWORDS = frozenset({"define", "end", "if", "endif", "while", "do", "wend"})

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class TokenizerConfig(TypedDict):
    enable_logger: NotRequired[bool]


class TokenizerConfigRequired(TypedDict):
    enable_logger: bool


DEFAULT_CONFIG: TokenizerConfigRequired = {
    "enable_logger": True,
}


def split_words(text: str) -> List[str]:
    """Split raw program text on runs of whitespace. There is no quoting or escaping."""
    return text.split()


class WordTokenizer:
    """Classifies whitespace-delimited words one at a time.

    Every word becomes a token: keywords are matched exactly against ``KEYWORDS``,
    base-10 integers become numbers, and anything else is an identifier.
    Numbers are plain Python ints with no width limit, so a word of any
    length made of digits is still a number.
    """

    def __init__(self, words: Sequence[str], config: Optional[TokenizerConfig] = None):
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.logger = Logger(config={"name": "Tokenizer Logger", "is_enabled": self.config["enable_logger"]}).logger
        self.words: List[str] = list(words)

    @property
    def has_more_words(self) -> bool:
        return bool(self.words)

    def peek(self) -> str:
        return self.words[0] if self.words else ""

    def next(self) -> Optional[Token]:
        if not self.words:
            return None
        word = self.words.pop(0)
        token_type = self._get_token_type(word)
        token = Token(token_type, int(word, 10) if token_type == TokenType.NUMBER else word)
        self.logger.debug(f"Adding token {token.type} with value {token.value!r}")
        return token

    def tokenize(self) -> List[Token]:
        self.logger.info("Starting tokenization")
        tokens = []
        while (token := self.next()) is not None:
            tokens.append(token)
        self.logger.info(f"Tokenization complete, {len(tokens)} token(s)")
        return tokens

    def _get_token_type(self, word: str) -> TokenType:
        if word in KEYWORDS:
            return TokenType.KEYWORD
        elif INTEGER_PATTERN.fullmatch(word):
            return TokenType.NUMBER
        return TokenType.IDENTIFIER

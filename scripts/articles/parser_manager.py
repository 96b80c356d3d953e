from pathlib import Path
from typing import List, Optional, NotRequired, TypedDict
from scripts.articles.lexer import Token, TokenizerConfig, WordTokenizer, split_words
from scripts.articles.nodes import Program
from scripts.articles.parser import Parser, ParserConfig
from scripts.articles.utils import resolve_config


class ParserManagerConfig(TypedDict):
    tokenizer_config: NotRequired[TokenizerConfig]
    parser_config: NotRequired[ParserConfig]


class ParserManagerConfigRequired(TypedDict):
    tokenizer_config: TokenizerConfig
    parser_config: ParserConfig


DEFAULT_CONFIG: ParserManagerConfigRequired = {
    "tokenizer_config": {},
    "parser_config": {},
}


class ParserManager:
    """Runs raw program text through word splitting, tokenizing and parsing."""

    def __init__(self, text: str, config: Optional[ParserManagerConfig] = None):
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.input = text
        self.words: List[str] = split_words(text)
        self.tokenizer = WordTokenizer(self.words, config=self.config["tokenizer_config"])
        self.tokens: List[Token] = self.tokenizer.tokenize()
        # the parser only ever sees the drained token list
        self.parser = Parser(tokens=self.tokens, config={**self.config["parser_config"], "parse": True})
        self.program: Program = self.parser.program  # type: ignore[assignment]

    @classmethod
    def from_path(cls, path: str | Path, config: Optional[ParserManagerConfig] = None) -> "ParserManager":
        return cls(Path(path).read_text(encoding="utf-8"), config=config)

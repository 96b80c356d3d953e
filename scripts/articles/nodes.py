"""Node definitions for the article language abstract syntax tree."""

from types import MappingProxyType
from typing import Annotated, Iterator, Literal, Mapping, Union
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class IntegerLiteral(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["integer"] = "integer"
    value: int


class Identifier(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["identifier"] = "identifier"
    name: str


class IfNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["if"] = "if"
    body: "Body" = ()


class WhileNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["while"] = "while"
    condition: "Body" = ()
    body: "Body" = ()


Node = Annotated[Union[IntegerLiteral, Identifier, IfNode, WhileNode], Field(discriminator="kind")]
Body = tuple[Node, ...]

IfNode.model_rebuild()
WhileNode.model_rebuild()


class Program(BaseModel):
    """Parsed program: named articles plus the top-level body.

    ``articles`` is a read-only mapping kept in definition order.
    """

    model_config = ConfigDict(frozen=True)

    articles: Mapping[str, Body] = Field(default_factory=dict, validate_default=True)
    main_body: Body = ()

    @field_validator("articles", mode="after")
    @classmethod
    def freeze_articles(cls, articles: Mapping[str, Body]) -> Mapping[str, Body]:
        return MappingProxyType(dict(articles))

    @field_serializer("articles")
    def serialize_articles(self, articles: Mapping[str, Body]) -> dict[str, Body]:
        return dict(articles)

    def __hash__(self) -> int:
        return hash((tuple(self.articles.items()), self.main_body))


def walk_body(body: Body) -> Iterator[Node]:
    """Yield every node of ``body`` in pre-order; a loop's condition comes before its body."""
    for node in body:
        yield node
        match node:
            case IfNode():
                yield from walk_body(node.body)
            case WhileNode():
                yield from walk_body(node.condition)
                yield from walk_body(node.body)
            case IntegerLiteral() | Identifier():
                pass
            case _:
                raise TypeError(f"Unknown node type: {type(node)}")


def nesting_depth(body: Body) -> int:
    depth = 0
    for node in body:
        match node:
            case IfNode():
                depth = max(depth, 1 + nesting_depth(node.body))
            case WhileNode():
                depth = max(depth, 1 + nesting_depth(node.condition), 1 + nesting_depth(node.body))
            case IntegerLiteral() | Identifier():
                pass
            case _:
                raise TypeError(f"Unknown node type: {type(node)}")
    return depth

"""Indented text rendering of parsed programs, for human inspection only."""

from dataclasses import dataclass

from .nodes import Body, Identifier, IfNode, IntegerLiteral, Node, Program, WhileNode


@dataclass
class ProgramFormatter:
    indent: str = "  "

    def format(self, program: Program) -> str:
        return "\n".join(self.format_program(program))

    def format_program(self, program: Program) -> list[str]:
        lines = ["Articles:"]
        for name, body in program.articles.items():
            lines.append(f"{self._indent(1)}{name}:")
            lines.extend(self.format_body(body, level=2))
        lines.append("Body:")
        lines.extend(self.format_body(program.main_body, level=1))
        return lines

    def format_body(self, body: Body, level: int = 0) -> list[str]:
        lines: list[str] = []
        for node in body:
            lines.extend(self.format_node(node, level))
        return lines

    def format_node(self, node: Node, level: int) -> list[str]:
        match node:
            case IntegerLiteral():
                return [f"{self._indent(level)}{node.value}"]
            case Identifier():
                return [f"{self._indent(level)}{node.name}"]
            case IfNode():
                return [f"{self._indent(level)}if", *self.format_body(node.body, level + 1)]
            case WhileNode():
                return [
                    f"{self._indent(level)}while",
                    f"{self._indent(level + 1)}condition:",
                    *self.format_body(node.condition, level + 2),
                    f"{self._indent(level + 1)}do:",
                    *self.format_body(node.body, level + 2),
                ]
            case _:
                raise TypeError(f"Unknown node type: {type(node)}")

    def _indent(self, level: int) -> str:
        return "" if level <= 0 else self.indent * level

from scripts.articles.formatter import ProgramFormatter
from scripts.articles.lexer import WordTokenizer
from scripts.articles.nodes import Identifier, IfNode, IntegerLiteral, Program, WhileNode
from scripts.articles.parser import Parser


def test_empty_program() -> None:
    assert ProgramFormatter().format_program(Program()) == ["Articles:", "Body:"]


def test_articles_and_body() -> None:
    program = Program(
        articles={"X": (IntegerLiteral(value=1), IntegerLiteral(value=2))},
        main_body=(IntegerLiteral(value=5),),
    )
    assert ProgramFormatter().format(program) == "\n".join(
        [
            "Articles:",
            "  X:",
            "    1",
            "    2",
            "Body:",
            "  5",
        ]
    )


def test_nested_nodes_render_pre_order() -> None:
    body = (
        WhileNode(
            condition=(Identifier(name="n"),),
            body=(IfNode(body=(Identifier(name="dec"),)), IntegerLiteral(value=-1)),
        ),
        Identifier(name="done"),
    )
    assert ProgramFormatter(indent="\t").format_body(body) == [
        "while",
        "\tcondition:",
        "\t\tn",
        "\tdo:",
        "\t\tif",
        "\t\t\tdec",
        "\t\t-1",
        "done",
    ]


def test_custom_indent_applies_to_articles() -> None:
    program = Program(articles={"A": (IfNode(),)})
    assert ProgramFormatter(indent="..").format_program(program) == ["Articles:", "..A:", "....if", "Body:"]


def test_parser_print_tree(capsys) -> None:
    tokens = WordTokenizer(["define", "A", "if", "x", "endif", "end", "A"], config={"enable_logger": False}).tokenize()
    Parser(tokens, config={"enable_logger": False}).print_tree()
    assert capsys.readouterr().out.splitlines() == ["Articles:", "  A:", "    if", "      x", "Body:", "  A"]

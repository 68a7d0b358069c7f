import io
from typing import Callable, Iterator

import pytest
from rich.console import Console

from conftest import FakeOpenAI
from kitchen.cli import (
    parse_args,
    parse_ingredient,
    remove_nth,
    result_markup,
    shell,
    stock_table,
)
from kitchen.domain.models import ErrorKind, GenerationError, Recipe
from kitchen.domain.services import RecipeService
from kitchen.domain.stock import Stock


def recorded(*renderables: object) -> str:
    console = Console(record=True, file=io.StringIO(), width=100)
    for renderable in renderables:
        console.print(renderable)
    return console.export_text()


@pytest.mark.parametrize(
    "given,expected",
    (
        ("Flour 200 g", ("Flour", "200", "g")),
        ("Olive oil 50 ml", ("Olive oil", "50", "ml")),
        ("Eggs 6 unit(s)", ("Eggs", "6", "unit(s)")),
        ("Salt", ("Salt", "", "N/A")),
        ("Black pepper N/A", ("Black pepper", "", "N/A")),
        ("Tomatoes 4", ("Tomatoes 4", "", "N/A")),
        ("", ("", "", "N/A")),
    ),
)
def test_parse_ingredient(given: str, expected: tuple[str, str, str]) -> None:
    assert parse_ingredient(given) == expected


@pytest.mark.parametrize("given", ("Flour g", "Milk ml", "Eggs unit(s)"))
def test_parse_ingredient_unit_without_amount(given: str) -> None:
    with pytest.raises(ValueError, match="amount"):
        parse_ingredient(given)


def test_remove_nth() -> None:
    stock = Stock()
    stock.add("Eggs", "6", "unit(s)")
    stock.add("Flour", "200", "g")

    assert not remove_nth(stock, "3")
    assert not remove_nth(stock, "0")
    assert not remove_nth(stock, "eggs")
    assert remove_nth(stock, "1")
    assert [e.name for e in stock] == ["Flour"]


def test_stock_table() -> None:
    stock = Stock()
    stock.add("Eggs", "6", "unit(s)")
    stock.add("Salt", "", "N/A")
    table = stock_table(stock)
    assert table.row_count == 2


def test_stock_table_shows_brackets_literally() -> None:
    stock = Stock()
    stock.add("Salt [/b]", "", "N/A")
    stock.add("Eggs [large]", "6", "unit(s)")

    text = recorded(stock_table(stock))

    assert "Salt [/b]" in text
    assert "Eggs [large]" in text


def test_recipe_text_keeps_brackets() -> None:
    recipe = Recipe(html="<h3>Cheesy toast</h3><p>Add [bold] cheese [optional]</p>")
    text = recorded(result_markup(recipe))
    assert "Cheesy toast" in text
    assert "Add [bold] cheese [optional]" in text


def test_error_text_keeps_brackets() -> None:
    error = GenerationError(kind=ErrorKind.provider, message="Error code: 400 - [/x] bad")
    assert "Error code: 400 - [/x] bad" in recorded(result_markup(error))


def scripted(lines: list[str]) -> Callable[[str], str]:
    it: Iterator[str] = iter(lines)

    def fake_input(prompt: str = "") -> str:
        return next(it)

    return fake_input


@pytest.mark.asyncio
async def test_shell_cooks_from_typed_stock(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    make_service: Callable[..., tuple[RecipeService, FakeOpenAI]],
) -> None:
    service, client = make_service(reply="<p>Add [bold] cheese [optional]</p>")
    monkeypatch.setattr(
        "builtins.input",
        scripted(["add Flour g", "add Flour 200 g", "ls", "cook", "q"]),
    )

    await shell(service)

    out = capsys.readouterr().out
    assert "Give an amount before 'g'." in out
    assert "Add [bold] cheese [optional]" in out
    assert len(client.calls) == 1
    assert "- Flour (200 g)" in client.calls[0]["messages"][-1]["content"]
    assert client.closed


def test_parse_args() -> None:
    args = parse_args(["serve", "--port", "9000"])
    assert args.command == "serve"
    assert args.port == 9000
    assert parse_args([]).command is None

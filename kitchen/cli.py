"""Terminal entry points: serve the web app or cook from a shell."""

import argparse
import asyncio
import logging

from rich import print
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
import uvicorn

from kitchen.app import create_app
from kitchen.config import Config
from kitchen.domain.catalogue import NOT_APPLICABLE, UNITS
from kitchen.domain.markup import markup_to_text
from kitchen.domain.models import GenerationResult, Recipe
from kitchen.domain.services import RecipeService
from kitchen.domain.session import KitchenSession
from kitchen.domain.stock import Stock


HELP = (
    "Commands:\n"
    "  add <name> [<amount> <unit>]   e.g. add Flour 200 g, add Salt\n"
    "  rm <n>                         remove the n-th ingredient\n"
    "  ls                             show the stock\n"
    "  cook                           ask the chef for a recipe\n"
    "  q                              quit\n"
    f"Units: {', '.join(UNITS)}"
)


def parse_ingredient(text: str) -> tuple[str, str, str]:
    """Split `Olive oil 50 ml` into name, amount and unit.

    Without a trailing unit the whole text is the name and no amount applies.
    A trailing unit with nothing between it and the name raises `ValueError`.
    """
    words = text.split()
    if len(words) >= 2 and words[-1] == NOT_APPLICABLE:
        return " ".join(words[:-1]), "", NOT_APPLICABLE
    if len(words) >= 3 and words[-1] in UNITS:
        return " ".join(words[:-2]), words[-2], words[-1]
    if len(words) == 2 and words[-1] in UNITS:
        raise ValueError(f"Give an amount before {words[-1]!r}.")
    return " ".join(words), "", NOT_APPLICABLE


def stock_table(stock: Stock) -> Table:
    table = Table("#", "Ingredient", "Quantity", title="Your stock")
    for n, entry in enumerate(stock, start=1):
        table.add_row(str(n), escape(entry.name), escape(entry.quantity) or "-")
    return table


def result_markup(result: GenerationResult) -> str:
    """Rich markup for a result, with the provider's text taken literally."""
    if isinstance(result, Recipe):
        return escape(markup_to_text(result.html))
    return f"[red]{escape(result.message)}[/red]"


def remove_nth(stock: Stock, arg: str) -> bool:
    entries = stock.list()
    if not arg.isdigit() or not 1 <= int(arg) <= len(entries):
        return False
    stock.remove(entries[int(arg) - 1].id)
    return True


async def shell(service: RecipeService) -> None:
    session = KitchenSession()
    print(HELP)
    while True:
        line = (await asyncio.to_thread(input, "Kitchen: ")).strip()
        cmd, _, rest = line.partition(" ")
        match cmd.lower():
            case "q" | "quit" | "exit":
                break
            case "add":
                try:
                    parsed = parse_ingredient(rest)
                except ValueError as e:
                    print(f"[red]{escape(str(e))}[/red]")
                else:
                    if session.stock.add(*parsed) is None:
                        print("[red]An ingredient needs a name, and an amount for its unit.[/red]")
            case "rm":
                if not remove_nth(session.stock, rest.strip()):
                    print(f"[red]No ingredient number {escape(repr(rest.strip()))}.[/red]")
            case "ls":
                print(stock_table(session.stock))
            case "cook":
                print("Chef is thinking...")
                print(result_markup(await session.submit(service)))
            case "":
                continue
            case _:
                print(HELP)
        print()
    await service.close()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="kitchen", description=__doc__)
    sub = parser.add_subparsers(dest="command")
    serve = sub.add_parser("serve", help="run the web app")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    sub.add_parser("shell", help="cook from the terminal")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    config = Config()
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler()],
    )

    if args.command == "serve":
        uvicorn.run(create_app(config), host=args.host, port=args.port)
    else:
        asyncio.run(shell(RecipeService(config)))

# cli.py
import argparse
import sys
from typing import List, Dict, Any, Optional, Tuple

import requests
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from catalog_sdk.pycatalog import CatalogClient, CatalogAPIError

console = Console()


# ---------------------------
# Argument parsing helpers
# ---------------------------
def parse_price(raw: str) -> Tuple[str, Tuple[int, int]]:
    """Parse CUR=VALUE[/MULTIPLIER], e.g. GBP=7528/100 or HUF=27725."""
    try:
        currency, amount = raw.split("=", 1)
        value, _, mult = amount.partition("/")
        return currency.strip().upper(), (int(value), int(mult) if mult else 1)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid price {raw!r}, use CUR=VALUE/MULTIPLIER")


def format_price(price: Dict[str, Any]) -> str:
    value, mult = price.get("value", 0), price.get("multiplier", 1) or 1
    if mult == 1:
        return str(value)
    return f"{value / mult:.{max(len(str(mult)) - 1, 0)}f}"


# ---------------------------
# Display helpers
# ---------------------------
def show_ids(ids: List[int]):
    if not ids:
        console.print("[italic yellow]No products found[/italic yellow]")
        return
    console.print(Panel(", ".join(str(i) for i in sorted(ids)), title="📦 Product IDs", border_style="cyan"))


def show_product(p: Dict[str, Any]):
    table = Table(
        title=f"📦 {p.get('name', 'N/A')} (ID {p.get('id', '?')})",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("Currency", style="bold", width=10)
    table.add_column("Price", justify="right", width=14)
    table.add_column("Value / Multiplier", justify="right", width=20)

    for cur, price in sorted(p.get("prices", {}).items()):
        table.add_row(cur, format_price(price), f"{price.get('value')} / {price.get('multiplier')}")

    console.print(p.get("description", ""))
    if p.get("tags"):
        console.print("[dim]Tags:[/dim] " + ", ".join(p["tags"]))
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    console.print(Panel.fit(f"[{style}]{message}[/{style}]", title="Status"))


def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """Call fn and print a status panel. Returns None on failure."""
    try:
        result = fn(*args, **kwargs)
    except CatalogAPIError as e:
        show_status(f"Error: {e.message}", False)
        return None
    except requests.exceptions.RequestException as e:
        show_status(f"Error: {e}", False)
        return None
    if success_msg:
        show_status(success_msg.format(result=result), True)
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Product catalog CLI")
    parser.add_argument("--base-url", default="http://127.0.0.1:8081", help="Catalog service URL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List all product IDs")

    dp = subparsers.add_parser("details", help="Show a product")
    dp.add_argument("--id", type=int, required=True, help="ID of the product")

    for name, help_text in (("create", "Create a new product"), ("update", "Replace a product")):
        p = subparsers.add_parser(name, help=help_text)
        if name == "update":
            p.add_argument("--id", type=int, required=True, help="ID of the product")
        p.add_argument("--name", required=True, help="Product name")
        p.add_argument("--desc", required=True, help="Product description")
        p.add_argument("--tag", action="append", default=[], help="Tag (repeatable)")
        p.add_argument("--price", type=parse_price, action="append", default=[],
                       help="Price as CUR=VALUE/MULTIPLIER (repeatable), USD is mandatory")

    sp = subparsers.add_parser("setprices", help="Add or overwrite price points of a product")
    sp.add_argument("--id", type=int, required=True, help="ID of the product")
    sp.add_argument("--price", type=parse_price, action="append", required=True,
                    help="Price as CUR=VALUE/MULTIPLIER (repeatable)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    c = CatalogClient(base_url=args.base_url)

    if args.command == "list":
        ids = try_api(c.list_products)
        if ids is None:
            return 1
        show_ids(ids)

    elif args.command == "details":
        p = try_api(c.get_product, args.id)
        if p is None:
            return 1
        show_product(p)

    elif args.command == "create":
        pid = try_api(c.create_product, args.name, args.desc, dict(args.price), args.tag,
                      success_msg="Product created with ID {result}")
        if pid is None:
            return 1

    elif args.command == "update":
        pid = try_api(c.update_product, args.id, args.name, args.desc, dict(args.price), args.tag,
                      success_msg="Product {result} updated")
        if pid is None:
            return 1

    elif args.command == "setprices":
        pid = try_api(c.set_prices, args.id, dict(args.price),
                      success_msg="Prices of product {result} updated")
        if pid is None:
            return 1

    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)

# cli.py - interactive catalog browser
import sys
from datetime import datetime
from typing import List, Dict, Any, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

import requests

from sdk.catalog_client import CatalogClient

console = Console()
c = CatalogClient()


# Global state for status messages and caching
status_message = "Ready"
product_cache: List[Dict[str, Any]] = []
category_cache = set()

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]], title: str = "📦 Products Catalog"):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=12)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Category", width=15)
    table.add_column("In stock", justify="center", width=9)
    table.add_column("Description", width=36)

    for p in products:
        in_stock = "[green]yes[/green]" if p.get("inStock") else "[red]no[/red]"
        table.add_row(
            str(p.get("id", "N/A")),
            p.get("name", "N/A"),
            f"${float(p.get('price', 0)):.2f}",
            p.get("category", "N/A"),
            in_stock,
            p.get("description") or "",
        )
    console.print(table)


def show_page(result: Dict[str, Any]):
    products = result.get("products", [])
    title = f"📦 Page {result.get('page', 1)} ({len(products)} of {result.get('totalProducts', 0)})"
    show_products(products, title=title)


def show_stats(stats: Dict[str, Any]):
    table = Table(title="📊 Products per category", box=box.ROUNDED, header_style="bold yellow")
    table.add_column("Category", width=20)
    table.add_column("Count", justify="right", width=8)
    for category, count in sorted(stats.get("stats", {}).items()):
        table.add_row(category, str(count))
    table.add_row("[bold]total[/bold]", f"[bold]{stats.get('totalProducts', 0)}[/bold]")
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def _error_message(e: Exception) -> str:
    if isinstance(e, requests.exceptions.HTTPError) and e.response is not None:
        try:
            return f"HTTP {e.response.status_code}: {e.response.json().get('message')}"
        except ValueError:
            return f"HTTP {e.response.status_code}: {e.response.text}"
    return str(e)


def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    Returns the decoded result, or None after reporting the failure.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
            console.print(show_status(success_msg, True))
        return result
    except requests.exceptions.RequestException as e:
        status_message = f"Error: {_error_message(e)}"
        console.print(show_status(status_message, False))
        return None


def refresh_cache():
    global product_cache, category_cache
    # there is no unpaginated listing, so walk the pages
    products: List[Dict[str, Any]] = []
    page = 1
    while True:
        result = try_api(c.list_products, page=page, limit=50)
        if not result:
            break
        products.extend(result.get("products", []))
        if len(products) >= result.get("totalProducts", 0) or not result.get("products"):
            break
        page += 1
    product_cache = products
    category_cache = {p.get("category", "") for p in products if p.get("category")}


# ---------------------------
# Autocompletion helpers
# ---------------------------
def get_product_completer():
    if not product_cache:
        refresh_cache()
    ids = [str(p.get("id", "")) for p in product_cache]
    return WordCompleter([i for i in ids if i], ignore_case=True)


def get_category_completer():
    return WordCompleter(sorted(category_cache), ignore_case=True)


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Product Catalog",
        f"[bold blue]{c.base_url}[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_price(message: str, default: Optional[float] = None, allow_blank: bool = False) -> Optional[float]:
    while True:
        raw = Prompt.ask(message, default="" if default is None else str(default))
        if allow_blank and raw.strip() == "":
            return None
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message

    console.clear()
    console.print(create_header())
    refresh_cache()

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 List products", "5", "➕ Create product"),
            ("2", "🔍 Search products", "6", "✏️ Update product"),
            ("3", "📊 Category stats", "7", "🗑️ Delete product"),
            ("4", "ℹ️ Get product by ID", "8", "🔄 Reset catalog"),
            ("", "", "q", "👋 Quit")
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 9)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            category = prompt_with_autocomplete("Category (blank for all)", completer=get_category_completer()).strip()
            page = IntPrompt.ask("Page", default=1)
            limit = IntPrompt.ask("Per page", default=2)
            result = try_api(c.list_products, category or None, page, limit, success_msg="Products loaded")
            if result is not None:
                show_page(result)

        elif choice == "2":
            term = prompt_with_autocomplete("Enter search term")
            res = try_api(c.search_products, term, success_msg=f"Search for '{term}' completed")
            if res is not None:
                show_products(res, title=f"🔍 Matches for '{term}'")

        elif choice == "3":
            res = try_api(c.product_stats, success_msg="Stats loaded")
            if res is not None:
                show_stats(res)

        elif choice == "4":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            resp = try_api(c.get_product, pid, success_msg=f"Product {pid} details loaded")
            if resp:
                show_products([resp])

        elif choice == "5":
            name = prompt_with_autocomplete("Enter product name")
            price = ask_price("💰 Price", default=10.0)
            category = prompt_with_autocomplete("🏷️ Category", completer=get_category_completer())
            description = prompt_with_autocomplete("📝 Description (optional)")
            in_stock = Confirm.ask("In stock?", default=True)
            resp = try_api(
                c.create_product, name, price, category, description or None, in_stock,
                success_msg=f"Product '{name}' created"
            )
            if resp:
                show_products([resp])
                refresh_cache()

        elif choice == "6":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            console.print("[dim]Leave a field blank to keep its current value.[/dim]")
            fields: Dict[str, Any] = {}
            name = prompt_with_autocomplete("New name").strip()
            if name:
                fields["name"] = name
            price = ask_price("New price", allow_blank=True)
            if price is not None:
                fields["price"] = price
            category = prompt_with_autocomplete("New category", completer=get_category_completer()).strip()
            if category:
                fields["category"] = category
            description = prompt_with_autocomplete("New description").strip()
            if description:
                fields["description"] = description
            stock = Prompt.ask("In stock? (y/n, blank to keep)", choices=["y", "n", ""], default="")
            if stock:
                fields["inStock"] = stock == "y"
            if not fields:
                console.print("[yellow]Nothing to update[/yellow]")
            else:
                resp = try_api(c.update_product, pid, success_msg=f"Product {pid} updated", **fields)
                if resp:
                    show_products([resp])
                    refresh_cache()

        elif choice == "7":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            if Confirm.ask(f"[red]Delete product {pid}?[/red]"):
                resp = try_api(c.delete_product, pid, success_msg=f"Product {pid} deleted")
                if resp:
                    show_products(resp.get("deleted", []), title="🗑️ Deleted")
                    refresh_cache()

        elif choice == "8":
            if Confirm.ask("[red]This restores the seed catalog. Continue?[/red]"):
                resp = try_api(c.reset, success_msg="Catalog reset")
                console.print(resp)
                refresh_cache()

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Bye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)

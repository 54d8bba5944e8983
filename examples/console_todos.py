#!/usr/bin/env python3
"""
reactodo Console Todo Example
=============================

A tiny terminal front end for reactodo, rendered with Rich. It plays the part
of the external view layer: it subscribes to the derived views and re-renders
when they change, and it turns typed commands into TodoList / FilterState
calls.

Commands:
    add <text>            add a todo
    toggle <id>           flip completion
    edit <id> <text>      change the description
    rm <id>               remove a todo
    clear                 remove completed todos
    filter <all|active|completed>
    quit

To run this example:
    $ pip install -e ".[examples]" && python examples/console_todos.py
"""

import logging

from rich.console import Console
from rich.table import Table

from reactodo import TodoApp, TodoConfig, TodoListFilter, configure_logging, reactive

console = Console()


def render(todos, current_filter, items_left) -> None:
    table = Table(title="todos", caption=f"{items_left} items left")
    table.add_column("id", style="dim")
    table.add_column("done", justify="center")
    table.add_column("description")

    for todo in todos:
        table.add_row(todo.id[:8], "✔" if todo.completed else "", todo.description)

    console.print(table)
    filters = "  ".join(
        f"[bold blue]{f.value}[/]" if f is current_filter else f.value
        for f in TodoListFilter
    )
    console.print(filters)


def resolve_id(app: TodoApp, prefix: str) -> str:
    """Match the shortened ids shown in the table."""
    for todo in app.todos:
        if todo.id.startswith(prefix):
            return todo.id
    return prefix


def run_command(app: TodoApp, line: str) -> bool:
    command, _, rest = line.strip().partition(" ")

    if command == "quit":
        return False
    if command == "add":
        app.todos.add(rest)
    elif command == "toggle":
        app.todos.toggle(resolve_id(app, rest))
    elif command == "edit":
        todo_id, _, description = rest.partition(" ")
        app.todos.edit(resolve_id(app, todo_id), description)
    elif command == "rm":
        app.todos.remove(resolve_id(app, rest))
    elif command == "clear":
        app.todos.clear_completed()
    elif command == "filter":
        try:
            app.filter.set_filter(rest)
        except ValueError:
            console.print(f"[red]Unknown filter:[/] {rest}")
    elif command:
        console.print(f"[red]Unknown command:[/] {command}")
    return True


def main() -> None:
    config = TodoConfig(log_level=logging.INFO)
    configure_logging(config.log_level)

    with TodoApp(config) as app:

        # One redraw per mutation: listen to the two sources, read the views
        @reactive(app.todos.observable, app.filter.observable, call_immediately=True)
        def redraw(_todos, current_filter):
            render(app.filtered_todos.value, current_filter, app.uncompleted_count.value)

        while True:
            try:
                line = console.input("[bold]> [/]")
            except (EOFError, KeyboardInterrupt):
                break
            if not run_command(app, line):
                break

        redraw.unsubscribe()


if __name__ == "__main__":
    main()

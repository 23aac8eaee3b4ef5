"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from tempo_cli.utils.ui.console import get_console


class SuggestingGroup(TyperGroup):
    """Typer group that suggests the closest command on typos."""

    def resolve_command(self, ctx, args):
        if args and not args[0].startswith("-"):
            attempted = args[0]
            name = attempted
            if ctx.token_normalize_func is not None:
                name = ctx.token_normalize_func(name)
            if self.get_command(ctx, name) is None:
                self._suggest(ctx, attempted)
        return super().resolve_command(ctx, args)

    def _suggest(self, ctx, attempted: str) -> None:
        suggestions = get_close_matches(attempted, list(self.commands), n=3, cutoff=0.6)
        if not suggestions:
            return

        console = get_console()
        console.print(f'[red]Error:[/red] unknown command "{attempted}" for "{ctx.info_name}"')
        console.print()
        if len(suggestions) == 1:
            console.print("[yellow]Did you mean this?[/yellow]")
        else:
            console.print("[yellow]Did you mean one of these?[/yellow]")
        for suggestion in suggestions:
            console.print(f"        {suggestion}")
        raise typer.Exit(2)

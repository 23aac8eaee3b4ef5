"""Main entry point for tempo."""

import typer

from tempo_cli.commands import (
    add_command,
    archive_command,
    check_command,
    complete_command,
    config_command,
    data_command,
    delete_command,
    energy_command,
    list_command,
    note_command,
    profile_command,
    rank_command,
    reopen_command,
    search_command,
    stats_command,
    today_command,
    version_command,
    week_command,
)
from tempo_cli.utils.typer_helpers import SuggestingGroup

app = typer.Typer(
    name="tempo",
    cls=SuggestingGroup,
    help="Energy-aware task manager: plan work around your peaks and dips",
    no_args_is_help=True,
)

# Each module defines its commands on its own Typer; merge them into the top level
for command_module in (
    add_command,
    list_command,
    today_command,
    rank_command,
    week_command,
    search_command,
    complete_command,
    reopen_command,
    archive_command,
    delete_command,
    check_command,
    energy_command,
    stats_command,
    version_command,
):
    app.registered_commands.extend(command_module.app.registered_commands)

app.add_typer(profile_command.app, name="profile", help="Energy profile (peaks, dips, work days)")
app.add_typer(note_command.app, name="note", help="Daily notes: intention and notebook")
app.add_typer(config_command.app, name="config", help="Configuration management")
app.add_typer(data_command.app, name="data", help="Data management (export, import)")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()

"""toxgui-settings – inspect and edit the client's preference file."""

from __future__ import annotations

import json

import click

from toxgui import __version__


def _store(ctx: click.Context):
    """Return the loaded store attached to the click context."""
    return ctx.find_object(dict)["store"]


@click.group()
@click.version_option(__version__, prog_name="toxgui-settings")
@click.option("--config-dir", default=None, type=click.Path(file_okay=False),
              help="Directory holding settings.ini (default: platform config dir)")
@click.pass_context
def main(ctx: click.Context, config_dir: str | None):
    """Command-line access to the toxgui preferences."""
    from toxgui.gui.settings import SettingsStore

    store = SettingsStore(config_dir=config_dir)
    store.load()
    ctx.obj = {"store": store}


# ── path ──────────────────────────────────────────────────────────────

@main.command()
@click.pass_context
def path(ctx: click.Context):
    """Show where preferences are read from and written to."""
    store = _store(ctx)
    click.echo(f"User file: {store.user_path()}")
    click.echo(f"Read from: {store.source_path()}")


# ── show ──────────────────────────────────────────────────────────────

@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print as JSON")
@click.pass_context
def show(ctx: click.Context, as_json: bool):
    """Print every stored preference."""
    store = _store(ctx)
    servers = store.dht_server_list()

    if as_json:
        result = {
            "username": store.username(),
            "status_message": store.status_message(),
            "smooth_animation": store.is_animation_enabled(),
            "smiley_pack": store.smiley_pack().decode("utf-8", errors="replace"),
            "custom_emoji_font": store.is_custom_emoji_font(),
            "emoji_font_family": store.emoji_font_family(),
            "emoji_font_point_size": store.emoji_font_point_size(),
            "dht_servers": [
                {"name": s.name, "user_id": s.user_id, "address": s.address, "port": s.port}
                for s in servers
            ],
            "windows": store.window_names(),
        }
        click.echo(json.dumps(result, indent=2))
        return

    click.echo(f"--- General ---")
    click.echo(f"  username:           {store.username()}")
    click.echo(f"  statusMessage:      {store.status_message()}")

    click.echo(f"\n--- GUI ---")
    click.echo(f"  smoothAnimation:    {store.is_animation_enabled()}")
    click.echo(f"  smileyPack:         {store.smiley_pack().decode('utf-8', errors='replace')}")
    click.echo(f"  customEmojiFont:    {store.is_custom_emoji_font()}")
    click.echo(f"  emojiFontFamily:    {store.emoji_font_family()}")
    click.echo(f"  emojiFontPointSize: {store.emoji_font_point_size()}")

    click.echo(f"\n--- DHT Servers ({len(servers)}) ---")
    for server in servers:
        click.echo(f"  {server.label()}")

    click.echo(f"\n--- Windows ---")
    for name in store.window_names():
        click.echo(f"  {name}")


# ── servers ───────────────────────────────────────────────────────────

@main.command()
@click.pass_context
def servers(ctx: click.Context):
    """List DHT bootstrap servers with their index."""
    for i, server in enumerate(_store(ctx).dht_server_list()):
        click.echo(f"{i}: {server.name} {server.address}:{server.port} {server.user_id}")


@main.command("add-server")
@click.argument("name")
@click.argument("user_id")
@click.argument("address")
@click.argument("port", type=click.IntRange(1, 65535))
@click.pass_context
def add_server(ctx: click.Context, name: str, user_id: str, address: str, port: int):
    """Append a DHT server and save."""
    from toxgui.gui.models import DhtServer

    store = _store(ctx)
    server_list = store.dht_server_list()
    server_list.append(DhtServer(name=name, user_id=user_id, address=address, port=port))
    store.set_dht_server_list(server_list)
    store.save()
    click.echo(f"Added {server_list[-1].label()}")


@main.command("remove-server")
@click.argument("index", type=int)
@click.pass_context
def remove_server(ctx: click.Context, index: int):
    """Remove the DHT server at INDEX (see ``servers``) and save."""
    store = _store(ctx)
    server_list = store.dht_server_list()
    if not 0 <= index < len(server_list):
        raise click.BadParameter(
            f"{index} is out of range (0..{len(server_list) - 1})", param_hint="INDEX")
    removed = server_list.pop(index)
    store.set_dht_server_list(server_list)
    store.save()
    click.echo(f"Removed {removed.label()}")


# ── general ───────────────────────────────────────────────────────────

@main.command("set-username")
@click.argument("name")
@click.pass_context
def set_username(ctx: click.Context, name: str):
    """Change the username and save."""
    store = _store(ctx)
    store.set_username(name)
    store.save()


@main.command("set-status")
@click.argument("message")
@click.pass_context
def set_status(ctx: click.Context, message: str):
    """Change the status message and save."""
    store = _store(ctx)
    store.set_status_message(message)
    store.save()


if __name__ == "__main__":
    main()

"""Main entry point for scrollwise."""

import json
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .compute import compute_scroll_actions
from .config import Config, ScrollConfigError, ScrollOptions
from .layout import SceneError, load_scene
from .models import Box, ScrollAction

USAGE = "Usage: scrollwise [SCENE.json [--json]]"


def render_actions(
    actions: List[ScrollAction],
    console: Console,
    options: Optional[ScrollOptions] = None,
    target_box: Optional[Box] = None,
) -> None:
    """
    Print computed actions as a table.

    Args:
        actions: Actions to list, innermost container first
        console: Console to print to
        options: Options the actions were computed with, printed above the table
        target_box: Where the target ends up once the actions are applied
    """
    if options is not None:
        settings = ", ".join(f"{key}={value}" for key, value in options.to_dict().items())
        console.print(f"[dim]Options: {settings}[/dim]")
    if not actions:
        console.print("[dim]No scrolling needed.[/dim]")
        return

    table = Table(title="Scroll actions (innermost first)")
    table.add_column("#", justify="right")
    table.add_column("Container")
    table.add_column("Top", justify="right")
    table.add_column("Left", justify="right")
    for index, action in enumerate(actions, start=1):
        container = getattr(action.container, "id", action.container)
        table.add_row(str(index), str(container), f"{action.top:g}", f"{action.left:g}")
    console.print(table)
    if target_box is not None:
        console.print(f"Target after scrolling: top={target_box.top:g} left={target_box.left:g}")


def run_scene(scene_path: str, as_json: bool = False, console: Optional[Console] = None) -> int:
    """
    Compute and print the scroll actions for a scene file.

    Returns:
        Process exit code
    """
    console = console or Console()
    try:
        scene = load_scene(scene_path)
        options = Config.load().to_options(**scene.options)
        actions = compute_scroll_actions(scene.target, scene.layout, options)
    except (SceneError, ScrollConfigError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1

    if as_json:
        payload = [action.to_dict(container_id=action.container.id) for action in actions]
        console.print_json(json.dumps(payload))
    else:
        render_actions(actions, console, options=options, target_box=scene.simulate(actions))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv

    if not args:
        # Without a scene, open the interactive playground
        from .app import ScrollPlaygroundApp

        app = ScrollPlaygroundApp(options=Config.load().to_options())
        app.run()
        return 0

    if args[0] in ("-h", "--help"):
        print(USAGE)
        return 0

    scene_path = args[0]
    if not Path(scene_path).exists():
        print(f"Error: File not found: {scene_path}")
        return 1

    unknown = [arg for arg in args[1:] if arg != "--json"]
    if unknown:
        print(f"Error: Unknown arguments: {' '.join(unknown)}")
        print(USAGE)
        return 1

    return run_scene(scene_path, as_json="--json" in args[1:])


if __name__ == "__main__":
    sys.exit(main())

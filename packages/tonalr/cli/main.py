"""Command-line interface for tonalr."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from tonalr.core.color.rgb import Srgb
from tonalr.core.config.loader import configure_logging, load_app_config
from tonalr.core.config.models import AppConfig, TunableParameters
from tonalr.core.export.boot import BOOT_PROPERTY_PREFIX, boot_colors
from tonalr.core.export.overlay import build_overlay
from tonalr.core.theme.models import ColorGroup, Scheme
from tonalr.core.theme.scheme import build_scheme

console = Console()
logger = logging.getLogger(__name__)


def _parse_seed(text: str) -> int:
    """argparse type for #RRGGBB seed colors."""
    try:
        return Srgb.from_hex(text).to_rgb8()
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _resolve_tunables(args: argparse.Namespace, config: AppConfig) -> TunableParameters:
    """Apply command-line overrides on top of the configured tunables."""
    updates = {}
    if args.chroma_factor is not None:
        updates["chroma_factor"] = args.chroma_factor
    if args.white_luminance is not None:
        updates["white_luminance_user"] = args.white_luminance
    if args.fast_shades:
        updates["accurate_shades"] = False
    if args.linear_lightness:
        updates["linear_lightness"] = True

    # Round-trip through validation so overrides get the same clamping
    return TunableParameters.model_validate({**config.tunables.model_dump(), **updates})


def _resolve_seed(args: argparse.Namespace, config: AppConfig, params: TunableParameters) -> int | None:
    wallpaper_color = args.seed if args.seed is not None else config.wallpaper_color
    if wallpaper_color is None:
        return None
    return params.resolve_seed(wallpaper_color)


def _render_table(scheme: Scheme) -> Table:
    table = Table(title=f"Scheme for {scheme.seed.to_hex()}")
    table.add_column("stop", justify="right")
    for group in ColorGroup:
        table.add_column(group.value)

    for stop in scheme.group(ColorGroup.ACCENT1).stops:
        cells = []
        for group in ColorGroup:
            color = scheme.group(group).get(stop)
            cells.append(f"[on {color.to_hex()}]    [/] {color.to_hex()}" if color else "")
        table.add_row(str(stop), *cells)

    return table


def _load_inputs(args: argparse.Namespace) -> tuple[int, TunableParameters] | None:
    config = load_app_config(args.config)
    if args.verbose:
        logging_config = config.logging.model_copy(update={"level": "DEBUG"})
        config = config.model_copy(update={"logging": logging_config})
    configure_logging(config)

    params = _resolve_tunables(args, config)
    seed = _resolve_seed(args, config, params)
    if seed is None:
        console.print("[red]ERROR: No seed color given and none configured[/red]")
        return None

    logger.debug(f"Seed #{seed:06x}, tunables: {params}")
    return seed, params


def run_generate(args: argparse.Namespace) -> int:
    """Generate a scheme and print its overlay entries."""
    inputs = _load_inputs(args)
    if inputs is None:
        return 1

    scheme = build_scheme(*inputs)

    if args.format == "table":
        console.print(_render_table(scheme))
    else:
        overlay = build_overlay(scheme, kind=args.kind)
        console.print_json(
            data={name: f"#{argb:08x}" for name, argb in overlay.items()},
            highlight=False,
        )
    return 0


def run_boot_colors(args: argparse.Namespace) -> int:
    """Print the boot animation color properties."""
    inputs = _load_inputs(args)
    if inputs is None:
        return 1

    scheme = build_scheme(*inputs)
    for i, color in enumerate(boot_colors(scheme), start=1):
        console.print(f"{BOOT_PROPERTY_PREFIX}{i}={color}  [on #{color:06x}]    [/] #{color:06x}")
    return 0


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "seed",
        nargs="?",
        type=_parse_seed,
        help="Seed color as #RRGGBB (default: wallpaper_color from config)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to app config (.yaml/.yml/.json, default: config.yaml if present)",
    )
    parser.add_argument("--chroma-factor", type=float, default=None, help="Chroma multiplier")
    parser.add_argument(
        "--white-luminance",
        type=int,
        default=None,
        help="White luminance slider position (0-1000)",
    )
    parser.add_argument(
        "--fast-shades",
        action="store_true",
        help="Clamp out-of-gamut colors instead of reducing chroma",
    )
    parser.add_argument(
        "--linear-lightness",
        action="store_true",
        help="Use linear lightness instead of CIELAB-matched lightness",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="tonalr",
        description="tonalr - perceptual color scheme generator",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    generate = sub.add_parser("generate", help="Generate a scheme and print it")
    _add_common_arguments(generate)
    generate.add_argument(
        "--format",
        choices=["json", "table"],
        default="json",
        help="Output format (default: json overlay entries)",
    )
    generate.add_argument(
        "--kind",
        choices=["accent", "neutral"],
        default=None,
        help="Only emit the accent or neutral overlay",
    )

    boot = sub.add_parser("boot-colors", help="Print the boot animation colors")
    _add_common_arguments(boot)

    return p


def main(argv: list[str] | None = None) -> None:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    try:
        if args.cmd == "generate":
            exit_code = run_generate(args)
        else:
            exit_code = run_boot_colors(args)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: {e}[/red]")
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    main()

# src/material_tokens/demo.py
import argparse
import json
import logging
import sys
from pathlib import Path


def _parse_custom(raw: str):
    """NAME=#rrggbb[:blend] → CustomColor."""
    from .derivation import CustomColor
    from .derivation.color.codec import color_from_hex

    name, sep, rest = raw.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=#rrggbb[:blend], got {raw!r}")
    hex_part, _, flag = rest.partition(":")
    if flag not in ("", "blend"):
        raise argparse.ArgumentTypeError(f"unknown custom color flag {flag!r}")
    try:
        value = color_from_hex(hex_part)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    return CustomColor(name=name, value=value, blend=flag == "blend")


def _check_overrides(overrides: dict) -> dict:
    """Fail on the config file itself when an override would not merge."""
    from .derivation.color.config import DEFAULT_CONFIG, merge_config

    merge_config(DEFAULT_CONFIG, overrides)
    return overrides


def main(argv=None):
    """CLI demo: derive Material color tokens from one source color and print them as JSON."""
    from .derivation import properties_from_source_color
    from .derivation.general.utils import load_config

    parser = argparse.ArgumentParser(
        prog="md-tokens",
        description="Derive Material color tokens (CSS custom properties) from a source color.",
    )
    parser.add_argument("source", nargs="?", default="#15466e", help="Source color, e.g. #40a673")
    parser.add_argument("--dark", action="store_true", help="Use the dark scheme for unsuffixed tokens")
    parser.add_argument(
        "--no-brightness-suffix",
        action="store_false",
        dest="brightness_suffix",
        help="Do not emit -light/-dark copies",
    )
    parser.add_argument("--no-rgb", action="store_false", dest="rgb", help="Skip -rgb channel tokens")
    parser.add_argument("--separator", choices=[",", " "], default=None, help="RGB channel separator")
    parser.add_argument(
        "--custom",
        action="append",
        default=[],
        type=_parse_custom,
        metavar="NAME=HEX[:blend]",
        help="Custom color (repeatable)",
    )
    parser.add_argument(
        "--config",
        help="Overrides file (.json, or .json5 with comments), resolved under the data dir",
    )
    parser.add_argument("--data-dir", type=Path, default=None, help="Directory holding --config files")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        options = {}
        if args.config:
            options = load_config(args.config, base_dir=args.data_dir, validator=_check_overrides)
        options = {**options, "dark": args.dark or options.get("dark", False)}
        if not args.brightness_suffix:
            options["brightness_suffix"] = False
        rgb = dict(options.get("rgb", {}))
        if not args.rgb:
            rgb["include"] = False
        if args.separator is not None:
            rgb["separator"] = args.separator
        if rgb:
            options["rgb"] = rgb

        result = properties_from_source_color(args.source, args.custom, options)
        print(json.dumps(result, indent=2, ensure_ascii=False))
    except (ValueError, TypeError, OSError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

import argparse
import logging
import sys
from pathlib import Path

# Make the local package importable without installation.
ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT / "src"))

from themerender import ThemeModStore, resolve_theme_render_bundle


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Render theme mods from a JSON file to CSS."
    )
    parser.add_argument(
        "input",
        help="Path to a theme mods JSON object.",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Path to output CSS (default: print to stdout).",
    )
    parser.add_argument(
        "--fonts",
        action="store_true",
        help="Append the font-family rules to the generated CSS.",
    )
    parser.add_argument(
        "--font-request",
        action="store_true",
        help="Print the font stylesheet request URL.",
    )
    parser.add_argument(
        "--body-class",
        action="append",
        default=[],
        metavar="CLASS",
        help="Existing body class; repeat to pass several. Prints the extended list.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log substituted option values.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s [%(name)s] %(message)s",
    )

    input_arg = Path(args.input)
    input_path = input_arg if input_arg.is_absolute() else (ROOT / input_arg)
    if not input_path.exists():
        raise FileNotFoundError(f"Theme mods JSON not found: {input_path}")

    store = ThemeModStore.from_file(input_path)
    bundle = resolve_theme_render_bundle(store, args.body_class)
    css = bundle.stylesheet if args.fonts else bundle.css

    if args.output:
        output_path = Path(args.output)
        if not output_path.is_absolute():
            output_path = ROOT / output_path
        output_path.write_text(css, encoding="utf-8")
        print(f"Rendered: {output_path}")
    else:
        print(css)

    if args.font_request:
        print(bundle.font_request_url)
    if args.body_class:
        print(" ".join(bundle.body_classes))

if __name__ == "__main__":
    main(sys.argv[1:])

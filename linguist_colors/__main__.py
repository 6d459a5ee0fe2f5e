"""linguist-colors — GitHub Linguist language colours, by name and by nearest colour.

Usage: linguist-colors <format> [options]

Formats are auto-discovered from linguist_colors/formats/.
Each format module's docstring is its documentation.
Run `linguist-colors help <format>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, linguist-colors looks for a .env file starting
  from the current directory and walking up, stopping at the nearest .git
  boundary. Use --env-file to override the .env location explicitly.
"""

import argparse
import sys

from linguist_colors import registry
from linguist_colors.core.catalog import CatalogError, color_set, load_catalog
from linguist_colors.core.chain import build_chain
from linguist_colors.core.color import FormatError
from linguist_colors.core.env import load_env, resolve_settings
from linguist_colors.core.types import Report

PROG = 'linguist-colors'


def _short_doc(name: str) -> str:
    doc = (registry.module_for(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else registry.get(name).help


def _build_parser() -> argparse.ArgumentParser:
    formats = registry.all_formats()

    epilog = (
        'Examples:\n'
        f'  {PROG} html > colors.html\n'
        f'  {PROG} text --catalog ./languages.yml\n'
        f'  {PROG} json --cache-dir ~/.cache/linguist-colors\n'
        f'  {PROG} swatch --out colors.png\n'
        f'  {PROG} help html\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  LINGUIST_COLORS_URL        catalog URL or local path\n'
        '  LINGUIST_COLORS_TIMEOUT    HTTP timeout in seconds\n'
        '  LINGUIST_COLORS_CACHE_DIR  cache directory for the download\n'
    )
    parser = argparse.ArgumentParser(
        prog=PROG,
        description='GitHub Linguist language colours, by name and by nearest colour.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='format', help='Output format')

    for name in sorted(formats):
        p = sub.add_parser(name, help=_short_doc(name))
        p.add_argument('-c', '--catalog', help='Catalog URL or local languages.yml (default: GitHub master)')
        p.add_argument('-t', '--timeout', type=float, default=None, help='HTTP timeout in seconds (default: 30)')
        p.add_argument('--cache-dir', metavar='DIR', help='Cache the downloaded catalog here for an hour')
        p.add_argument('-s', '--strict', action='store_true', help='Fail on a malformed colour instead of skipping it')
        p.add_argument('-o', '--out', metavar='PATH', help='Write output to PATH instead of stdout')

    help_parser = sub.add_parser('help', help='Print full docs for a format')
    help_parser.add_argument('command', nargs='?', help='Format name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a format."""
    formats = registry.all_formats()

    if command is None:
        print('Available formats:\n')
        for name in sorted(formats):
            print(f'  {name:<8} {_short_doc(name)}')
        print(f'\nRun: {PROG} help <format> for full docs.')
        return

    if command not in formats:
        print(f'Unknown format: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(formats))}', file=sys.stderr)
        sys.exit(1)

    doc = (registry.module_for(command).__doc__ or '').strip()
    print(doc if doc else f'(No module docs for {command!r})')


def build_report(args: argparse.Namespace) -> Report:
    """Load the catalog named by args/env and compute both orderings."""
    settings = resolve_settings(
        catalog=args.catalog,
        timeout=args.timeout,
        cache_dir=args.cache_dir,
        strict=args.strict,
    )

    print(f'{PROG}: fetching {settings.catalog}', file=sys.stderr)
    catalog = load_catalog(settings.catalog, timeout=settings.timeout, cache_dir=settings.cache_dir)
    colors, skipped = color_set(catalog, strict=settings.strict)
    for name, reason in skipped.items():
        print(f'{PROG}: skipping {name}: {reason}', file=sys.stderr)

    print(f'{PROG}: sorting {len(colors)} colours', file=sys.stderr)
    chain = build_chain(colors)

    return Report(
        source=settings.catalog,
        by_name=list(colors.items()),
        by_nearest=chain,
        total=len(catalog),
        skipped=skipped,
    )


def _write(output: str, out: str | None) -> None:
    if out:
        with open(out, 'w', encoding='utf-8') as f:
            f.write(output + '\n')
        print(f'{PROG}: wrote {out}', file=sys.stderr)
    else:
        print(output)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'{PROG}: loaded {env_path}', file=sys.stderr)

    if not args.format:
        parser.print_help()
        sys.exit(1)

    if args.format == 'help':
        _print_help(getattr(args, 'command', None))
        return

    fmt = registry.get(args.format)
    try:
        report = build_report(args)
        print(f'{PROG}: printing', file=sys.stderr)
        output = fmt.execute(report, args)
        if output is not None:
            _write(output, args.out)
    except (CatalogError, FormatError, ValueError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()

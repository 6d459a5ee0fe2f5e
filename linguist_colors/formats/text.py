"""Plain-text tables for a terminal: by name, then by nearest colour.

The chain table adds the distance from the previous entry (Δ). A summary
line reports how many languages had a usable colour and the total
distance travelled along the chain.

Example:
    linguist-colors text --catalog ./languages.yml
"""

from linguist_colors.core.chain import chain_gaps, chain_length
from linguist_colors.core.types import Format, Report

fmt = Format(
    name='text',
    help='Plain-text tables with per-step distances along the chain.',
)


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    width = max((len(name) for name, _ in report.by_name), default=8)
    lines = [f'linguist-colors: {report.source}', '']

    lines.append(f'── by name ({len(report.by_name)})')
    for name, color in report.by_name:
        lines.append(f'  {name:<{width}}  {color.hex}')
    lines.append('')

    gaps = [None, *chain_gaps(report.by_nearest)]
    lines.append(f'── by nearest colour ({len(report.by_nearest)})')
    for (name, color), gap in zip(report.by_nearest, gaps):
        step = '' if gap is None else f'  Δ={gap:.1f}'
        lines.append(f'  {name:<{width}}  {color.hex}{step}')
    lines.append('')

    if report.skipped:
        lines.append(f'skipped {len(report.skipped)}:')
        for name, reason in report.skipped.items():
            lines.append(f'  {name}: {reason}')
        lines.append('')

    lines.append(
        f'{report.colored}/{report.total} languages coloured  chain length {chain_length(report.by_nearest):.1f}'
    )
    return '\n'.join(lines)


@fmt.render
def render(report: Report, args) -> str:
    return format_text(report)

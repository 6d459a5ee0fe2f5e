"""Both orderings as JSON, for scripts and diffing between catalog versions.

Example:
    linguist-colors json | jq '.by_nearest[:5]'
"""

import json
from typing import Any

from linguist_colors.core.chain import chain_gaps, chain_length
from linguist_colors.core.types import Format, Report

fmt = Format(
    name='json',
    help='Both orderings, step distances and counts as JSON.',
)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    gaps = [None, *chain_gaps(report.by_nearest)]
    obj: dict[str, Any] = {
        'source': report.source,
        'by_name': [{'name': n, 'color': c.hex} for n, c in report.by_name],
        'by_nearest': [
            {'name': n, 'color': c.hex, 'distance': None if g is None else round(g, 3)}
            for (n, c), g in zip(report.by_nearest, gaps)
        ],
        'skipped': report.skipped,
        'summary': {
            'total': report.total,
            'colored': report.colored,
            'skipped': len(report.skipped),
            'chain_length': round(chain_length(report.by_nearest), 3),
        },
    }
    return json.dumps(obj, indent=2)


@fmt.render
def render(report: Report, args) -> str:
    return format_json(report)

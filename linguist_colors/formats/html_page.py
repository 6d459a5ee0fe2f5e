"""Render both orderings as an HTML page: "By Name" and "By Nearest Color".

Each row shows the language name and its web colour, with the colour as
the background of both cells. Text is white with a black outline so it
stays readable on any background.

Example:
    linguist-colors html > colors.html
    linguist-colors html --catalog ./languages.yml -o colors.html
"""

import html

from linguist_colors.core.color import Color
from linguist_colors.core.types import Format, Report

fmt = Format(
    name='html',
    help='HTML page with a by-name table and a by-nearest-colour table.',
)

TITLE = 'Github Programming Language Colors'

_STYLE = """
body {
  font-size: 30px
}

tr {
  line-height: 50px;
}

td {
  padding-left: 15px;
}

table {
  width: 100%;
}

.outline_text {
  color: white;
  text-shadow:
    -1px -1px 0 #000,
    1px -1px 0 #000,
    -1px 1px 0 #000,
    1px 1px 0 #000;
}
"""


def _row(name: str, color: Color) -> str:
    return (
        '<tr class="outline_text">'
        f'<td bgcolor="{color.hex}">{html.escape(name)}</td>'
        f'<td bgcolor="{color.hex}"><code>{color.hex}</code></td>'
        '</tr>'
    )


def _table(heading: str, rows: list[tuple[str, Color]]) -> str:
    lines = [
        f'<h2>{heading}</h2>',
        '<table>',
        '<tr><th>Language</th><th>Color</th></tr>',
    ]
    lines.extend(_row(name, color) for name, color in rows)
    lines.append('</table>')
    return '\n'.join(lines)


def render_html(report: Report) -> str:
    return '\n'.join(
        [
            '<!DOCTYPE html>',
            '<html lang="en">',
            '<head>',
            '<meta charset="utf-8">',
            f'<title>{TITLE}</title>',
            f'<style>{_STYLE}</style>',
            '</head>',
            '<body>',
            f'<h1>{TITLE}</h1>',
            _table('By Name', report.by_name),
            _table('By Nearest Color', report.by_nearest),
            '</body>',
            '</html>',
        ]
    )


@fmt.render
def render(report: Report, args) -> str:
    return render_html(report)

"""
Output formatting for gitqs.

Handles ASCII tables, bar charts, colors, and CLI output formatting.
"""

import math
import os
import re
import sys
from typing import Any, List, Optional, Union

from gitqs.models.entities import RenderMode, RenderSpec, SortOrder
from gitqs.stats.aggregator import AggregateResult, Bucket
from gitqs.utils.timestamps import to_display

# Enable ANSI colors on Windows
if sys.platform == 'win32':
    os.system('')  # Triggers VT100 emulation

BAR_CHAR = '█'
ZERO_BAR = '|'

# A full-width bar (100%) is 80 characters
BAR_WIDTH_DIVISOR = 1.25

ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'

    # Foreground colors
    RED = '\033[91m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'


def colorize(text: str, color: str, enabled: bool = True) -> str:
    """Apply color if enabled."""
    if not enabled:
        return text
    return f"{color}{text}{Colors.RESET}"


def bold(text: str, enabled: bool = True) -> str:
    """Make text bold."""
    if not enabled:
        return text
    return f"{Colors.BOLD}{text}{Colors.RESET}"


def format_number(value: Union[int, float], decimals: int = 0) -> str:
    """Format number with thousands separator."""
    if decimals > 0:
        return f"{value:,.{decimals}f}"
    return f"{int(value):,}"


def format_percentage(value: float, precision: int = 1) -> str:
    """Format as percentage."""
    return f"{value:.{precision}f}%"


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return ANSI_ESCAPE.sub('', text)


def bar_length(count: float, total: float, divisor: float = BAR_WIDTH_DIVISOR) -> int:
    """
    Number of bar characters for count out of total.

    floor(count / total * 100 / divisor); 0 when total is 0.
    """
    if total <= 0 or count <= 0:
        return 0
    return math.floor(count * 100 / (total * divisor))


def create_bar(count: float, total: float, divisor: float = BAR_WIDTH_DIVISOR) -> str:
    """Proportional block bar, or '|' when it would be empty."""
    length = bar_length(count, total, divisor)
    if length == 0:
        return ZERO_BAR
    return BAR_CHAR * length


def format_table(
    headers: List[str],
    rows: List[List[Any]],
    alignments: Optional[List[str]] = None,
    color_enabled: bool = True
) -> str:
    """
    Format data as an ASCII table.

    Args:
        headers: Column headers
        rows: List of row tuples/lists
        alignments: List of 'l', 'r', or 'c' for each column
        color_enabled: Whether to apply colors to headers
    """
    if not rows:
        return "No data to display."

    # Convert all cells to strings
    str_rows = [[str(cell) for cell in row] for row in rows]

    # Calculate column widths
    col_widths = [len(h) for h in headers]
    for row in str_rows:
        for i, cell in enumerate(row):
            # Strip ANSI codes for width calculation
            col_widths[i] = max(col_widths[i], len(strip_ansi(cell)))

    if alignments is None:
        alignments = ['l'] * len(headers)

    def align_cell(text: str, width: int, align: str) -> str:
        padding_needed = width - len(strip_ansi(text))
        if align == 'r':
            return ' ' * padding_needed + text
        elif align == 'c':
            left_pad = padding_needed // 2
            right_pad = padding_needed - left_pad
            return ' ' * left_pad + text + ' ' * right_pad
        else:  # left
            return text + ' ' * padding_needed

    lines = []

    # Header
    header_cells = [
        align_cell(h, col_widths[i], alignments[i])
        for i, h in enumerate(headers)
    ]
    header_line = ' │ '.join(header_cells).rstrip()
    if color_enabled:
        header_line = bold(header_line)
    lines.append(header_line)

    # Separator
    lines.append('─┼─'.join('─' * w for w in col_widths))

    # Rows
    for row in str_rows:
        row_cells = [
            align_cell(cell, col_widths[i], alignments[i])
            for i, cell in enumerate(row)
        ]
        lines.append(' │ '.join(row_cells).rstrip())

    return '\n'.join(lines)


def sort_buckets(buckets: List[Bucket], spec: RenderSpec) -> List[Bucket]:
    """Order buckets by spec.sort_order."""
    if spec.sort_order is SortOrder.BY_COUNT_DESCENDING:
        return sorted(buckets, key=lambda b: (-b.count, b.key))

    if spec.sort_order is SortOrder.BY_KEY_ALPHABETICAL:
        return sorted(buckets, key=lambda b: (b.key.casefold(), b.key))

    # Chronological: fixed calendar order when given, else ISO keys sort naturally
    if spec.key_order:
        position = {key: i for i, key in enumerate(spec.key_order)}
        return sorted(buckets, key=lambda b: (position.get(b.key, len(position)), b.key))
    return sorted(buckets, key=lambda b: b.key)


def _metric_cells(result: AggregateResult, bucket: Bucket, spec: RenderSpec) -> List[str]:
    cells = []
    for metric in spec.metrics:
        cells.append(format_number(bucket.metric(metric)))
        if spec.show_percent:
            if bucket is result.total:
                share = 100.0 if result.total.metric(metric) else 0.0
            else:
                share = result.percentage(bucket.key, metric)
            cells.append(format_percentage(share))
    if spec.show_span:
        cells.extend([to_display(bucket.first_at), to_display(bucket.last_at)])
    return cells


def _render_table(result: AggregateResult, spec: RenderSpec, color_enabled: bool) -> str:
    buckets = sort_buckets(list(result.buckets.values()), spec)
    if spec.limit is not None:
        buckets = buckets[:spec.limit]

    rows = []
    for index, bucket in enumerate(buckets, start=1):
        row = [str(index)] if spec.numbered else []
        row.append(bucket.key)
        row.extend(_metric_cells(result, bucket, spec))
        rows.append(row)

    if spec.show_total:
        total_row = [''] if spec.numbered else []
        total_row.append(bold('TOTAL', color_enabled))
        total_row.extend(bold(cell, color_enabled) for cell in _metric_cells(result, result.total, spec))
        rows.append(total_row)

    alignments = (['r'] if spec.numbered else []) + ['l']
    for _ in spec.metrics:
        alignments.extend(['r', 'r'] if spec.show_percent else ['r'])
    if spec.show_span:
        alignments.extend(['l', 'l'])

    return format_table(spec.columns, rows, alignments, color_enabled)


def _render_bar_chart(
    result: AggregateResult,
    spec: RenderSpec,
    color_enabled: bool,
    divisor: float
) -> str:
    buckets = sort_buckets(list(result.buckets.values()), spec)
    if spec.limit is not None:
        buckets = buckets[:spec.limit]

    total = result.total.count
    key_label = spec.columns[0] if spec.columns else ''
    count_label = spec.columns[1] if len(spec.columns) > 1 else 'Count'
    bar_label = spec.columns[2] if len(spec.columns) > 2 else ''

    key_width = max([len(key_label)] + [len(b.key) for b in buckets])
    count_width = max([len(count_label)] + [len(format_number(b.count)) for b in buckets])

    lines = [bold(f"{key_label:<{key_width}}  {count_label:>{count_width}}  {bar_label}".rstrip(), color_enabled)]
    lines.append('-' * (key_width + count_width + 4 + int(100 / divisor)))
    for bucket in buckets:
        bar = create_bar(bucket.count, total, divisor)
        if bar != ZERO_BAR:
            bar = colorize(bar, Colors.GREEN, color_enabled)
        lines.append(f"{bucket.key:<{key_width}}  {format_number(bucket.count):>{count_width}}  {bar}")

    return '\n'.join(lines)


def render(
    result: AggregateResult,
    spec: RenderSpec,
    color_enabled: bool = True,
    divisor: float = BAR_WIDTH_DIVISOR
) -> str:
    """
    Render an aggregate as a table or a bar chart.

    Args:
        result: Aggregated buckets and total
        spec: Layout, columns and sort order
        color_enabled: Whether to apply colors
        divisor: Bar width divisor for bar charts
    """
    if spec.mode is RenderMode.BAR_CHART:
        return _render_bar_chart(result, spec, color_enabled, divisor)
    return _render_table(result, spec, color_enabled)

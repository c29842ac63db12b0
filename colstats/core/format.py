"""Text formatting for feature statistics."""

import numpy as np
from prettytable import PrettyTable, TableStyle

from .statistics import FeatureDataStatistics

WIDTH = 78
THICK_SEP = "=" * WIDTH
THIN_SEP = "-" * WIDTH

MAX_DISPLAY_FEATURES = 20

_TABLE_HEADERS = ["Feature", "Mean", "Variance", "Min", "Max", "Non-zeros", "L1 Norm", "L2 Norm", "Mean Abs"]


def _make_table(headers, rows, align_map):
    """Create a PrettyTable with SINGLE_BORDER style and per-column alignment."""
    t = PrettyTable()
    t.set_style(TableStyle.SINGLE_BORDER)
    t.field_names = headers
    for row in rows:
        t.add_row(row)
    for h in headers:
        t.align[h] = align_map.get(h, "r")
    return str(t)


def format_title(title, subtitle=None):
    """Return title block lines with thick separators."""
    lines = [THICK_SEP, f" {title}"]
    if subtitle is not None:
        lines.append(f" {subtitle}")
    lines.append(THICK_SEP)
    return lines


def format_section_header(label):
    """Return section header lines with thin separators."""
    return ["", THIN_SEP, f" {label}", THIN_SEP]


def format_footer(note=None):
    """Return footer lines with thick separator and optional note."""
    lines = [THICK_SEP]
    if note is not None:
        lines.append(f" {note}")
    return lines


def format_value(val, fmt=".4f", na_str="NA"):
    """Format a numeric value, returning na_str for None/NaN."""
    if val is None or (isinstance(val, float | np.floating) and np.isnan(val)):
        return na_str
    return f"{val:{fmt}}"


def format_kv_line(key, value, indent=1):
    """Format a key-value pair with indentation."""
    return f"{' ' * indent}{key}: {value}"


def format_feature_table(stats, max_features=MAX_DISPLAY_FEATURES):
    """Build a per-feature statistics table, truncated to ``max_features`` rows."""
    rows = []
    for i in range(min(stats.n_features, max_features)):
        label = f"{i} (intercept)" if stats.intercept_index == i else str(i)
        rows.append(
            [
                label,
                format_value(stats.mean[i]),
                format_value(stats.variance[i]),
                format_value(stats.min[i]),
                format_value(stats.max[i]),
                format_value(stats.num_nonzeros[i], ".0f"),
                format_value(stats.norm_l1[i]),
                format_value(stats.norm_l2[i]),
                format_value(stats.mean_abs[i]),
            ]
        )

    table = _make_table(_TABLE_HEADERS, rows, {"Feature": "l"})
    return ["", *table.split("\n")]


def adjust_separators(lines):
    """Widen separator lines to match the widest content line."""
    max_w = max((len(line) for line in lines), default=WIDTH)
    max_w = max(max_w, WIDTH)
    return [
        "=" * max_w
        if line and all(c == "=" for c in line)
        else "-" * max_w
        if line and all(c == "-" for c in line)
        else line
        for line in lines
    ]


def format_feature_statistics(stats):
    """Format a feature statistics result for display."""
    lines = format_title("Feature Data Statistics")

    lines.append(format_kv_line("Samples", stats.count))
    lines.append(format_kv_line("Features", stats.n_features))
    intercept = "None" if stats.intercept_index is None else stats.intercept_index
    lines.append(format_kv_line("Intercept index", intercept))

    lines.extend(format_section_header("Per-feature statistics"))
    lines.extend(format_feature_table(stats))

    note = None
    if stats.n_features > MAX_DISPLAY_FEATURES:
        note = f"Showing {MAX_DISPLAY_FEATURES} of {stats.n_features} features. Use .to_polars() for all."
    lines.append("")
    lines.extend(format_footer(note))

    return "\n".join(adjust_separators(lines))


def attach_format(result_class, format_func):
    """Monkey-patch ``__repr__`` and ``__str__`` on a result class."""

    def _repr(self):
        return format_func(self)

    def _str(self):
        return format_func(self)

    result_class.__repr__ = _repr
    result_class.__str__ = _str


attach_format(FeatureDataStatistics, format_feature_statistics)

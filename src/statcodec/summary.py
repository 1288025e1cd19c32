"""Plain-text summary table for merged statistics.

Printed by ``statcodec convert`` when no output format is requested.
"""

from statcodec.models import Language, LanguageMap

COLUMNS = ("Files", "Lines", "Code", "Comments", "Blanks")
NAME_WIDTH = 24
COLUMN_WIDTH = 12


def _sort_key(sort: str):
    if sort == "name":
        return lambda item: item[0].lower()
    # Numeric columns list the largest first
    return lambda item: (-getattr(item[1], sort), item[0].lower())


def _row(name: str, language: Language) -> str:
    values = (language.files, language.lines, language.code, language.comments, language.blanks)
    cells = "".join(f"{value:>{COLUMN_WIDTH}}" for value in values)
    marker = "*" if language.inaccurate else ""
    return f" {(name + marker)[:NAME_WIDTH]:<{NAME_WIDTH}}{cells}"


def render_summary(languages: LanguageMap, sort: str = "name") -> str:
    """Render a fixed-width table with one row per language and a total row.

    Languages flagged inaccurate are marked with ``*``.

    Args:
        languages: Statistics to show
        sort: One of name, lines, code, comments, blanks, files
    """
    width = 1 + NAME_WIDTH + COLUMN_WIDTH * len(COLUMNS)
    rule = "=" * width
    header = f" {'Language':<{NAME_WIDTH}}" + "".join(f"{c:>{COLUMN_WIDTH}}" for c in COLUMNS)

    lines = [rule, header, rule]
    for name, language in sorted(languages.items(), key=_sort_key(sort)):
        lines.append(_row(name, language))

    total = languages.total
    total.reports = [report for language in languages.values() for report in language.reports]
    lines.extend(["-" * width, _row("Total", total), rule])
    return "\n".join(lines)

"""Selection and surrounding-context helpers."""


def surrounding_context(file_text: str | None, selected_text: str) -> str:
    """Return the context sent alongside a selection.

    The whole file is the context. When no file text is available the
    selection itself is used.
    """
    if file_text:
        return file_text
    return selected_text


def select_lines(text: str, start_line: int | None = None, end_line: int | None = None) -> str:
    """Return lines ``start_line``..``end_line`` (1-based, inclusive) of ``text``.

    Missing bounds default to the first and last line. Line endings are kept.

    Raises:
        ValueError: If the range is empty or falls outside the text
    """
    # Only "\n" ends a line; form feeds and other Unicode separators do not
    lines = [line + "\n" for line in text.split("\n")]
    lines[-1] = lines[-1][:-1]
    if not lines[-1]:
        lines.pop()
    if not lines:
        raise ValueError("Cannot select from empty text")

    start = 1 if start_line is None else start_line
    end = len(lines) if end_line is None else end_line

    if start < 1 or end > len(lines):
        raise ValueError(f"Line range {start}-{end} is outside 1-{len(lines)}")
    if start > end:
        raise ValueError(f"Start line {start} is after end line {end}")

    return "".join(lines[start - 1:end])

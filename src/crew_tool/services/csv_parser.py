"""Lightweight CSV reader for crew import files

Quoted fields may contain commas. Escaped quotes ("") and quoted fields
spanning several lines are not supported.
"""
import re
from typing import Dict, List

QUOTE_CHARS = "\"'"
BYTE_ORDER_MARK = "\ufeff"
LINE_BREAK = re.compile(r"\r?\n")


def strip_quotes(value: str) -> str:
    value = value.strip()
    if value and value[0] in QUOTE_CHARS:
        value = value[1:]
    if value and value[-1] in QUOTE_CHARS:
        value = value[:-1]
    return value


def normalize_header(name: str) -> str:
    normalized = strip_quotes(name).strip().lower()
    return re.sub(r"\s+", "_", normalized)


def split_line(line: str) -> List[str]:
    values = []
    current = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            values.append(strip_quotes("".join(current)))
            current = []
        else:
            current.append(char)
    values.append(strip_quotes("".join(current)))

    return values


def parse_csv(content: str) -> List[Dict[str, str]]:
    """Return one header-keyed dict per data line; empty when there are no data lines"""
    lines = LINE_BREAK.split(content.lstrip(BYTE_ORDER_MARK).strip())
    if len(lines) < 2:
        return []

    headers = [normalize_header(h) for h in split_line(lines[0])]

    rows = []
    for line in lines[1:]:
        if not line.strip():
            continue
        values = split_line(line)
        rows.append({
            header: values[index] if index < len(values) else ""
            for index, header in enumerate(headers)
        })

    return rows

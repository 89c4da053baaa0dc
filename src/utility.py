import re
from typing import Optional

import global_vars as gv
from tqueue import TQueue

_OPTION_PATTERN = re.compile(r'\s*([+-]?\d+)', re.ASCII)


def pretty_list_of_strings(data: list, col_names: tuple = (), csep: str = '|', rsep: str = '-', align='left') -> list:
    tmp = data + [col_names] if len(col_names) != 0 else data
    col_widths = []
    for i in range(len(tmp[0])):
        col = [str(sub[i]) for sub in tmp]
        col_widths.append(len(max(col, key=len)))

    def justify(value, width: int) -> str:
        if align == 'right':
            return str(value).rjust(width)
        elif align == 'center':
            return str(value).center(width)
        return str(value).ljust(width)

    result = []
    if col_names != ():
        result.append(f' {csep} '.join([justify(col_names[i], col_widths[i]) for i in range(len(col_widths))]))
        if rsep != '':
            result.append(f'{rsep}{csep}{rsep}'.join([width * rsep for width in col_widths]))

    for row in data:
        result.append(f' {csep} '.join([justify(row[col], col_widths[col]) for col in range(len(row))]))
    return result


def render_queue(queue: TQueue, indent: str = '  ') -> str:
    lines = [f'Queue state (capacity {queue.capacity}):']
    if queue.is_empty():
        lines.append(f'{indent}[empty]')
        return '\n'.join(lines)

    rows = [(i, piece.kind, piece.id) for i, piece in enumerate(queue.items())]
    table = pretty_list_of_strings(rows, col_names=('Index', 'Kind', 'ID'), align='right')
    lines.extend(f'{indent}{line}' for line in table)
    return '\n'.join(lines)


def parse_option(line: str) -> Optional[int]:
    """Return the integer a menu line starts with, or None when it has none.

    Only the first ``INPUT_BUFFER - 1`` characters are considered, the rest of an
    over-long line is dropped. Anything after the leading integer is ignored.
    """
    line = line[:gv.INPUT_BUFFER - 1]
    match = _OPTION_PATTERN.match(line)
    if match is None:
        return None
    return int(match.group(1))

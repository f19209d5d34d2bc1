# src/manifest_shell/core/parser.py
from __future__ import annotations

import shlex
from typing import List, Optional, Tuple

# Operators that chain commands on one line
OPERATORS: set[str] = {"&&", "||", ";"}

CommandSegment = Tuple[str, List[str], Optional[str]]


def _tokenize(line: str) -> List[str]:
    lexer = shlex.shlex(line, posix=True, punctuation_chars=";&|")
    lexer.whitespace_split = True
    lexer.commenters = ""
    try:
        return list(lexer)
    except ValueError:
        # Unbalanced quotes: fall back to plain whitespace splitting
        return line.split()


def parse_command_line(line: str) -> List[CommandSegment]:
    """
    Parses the user input into a list of command segments.

    A command segment is (command_name, args, op_before), where op_before is
    the operator that joined it to the previous segment ('&&', '||', ';')
    or None for the first one.

    Args:
        line (str): The raw input string from the shell.

    Returns:
        List[CommandSegment]: The parsed segments, in order.
    """
    s = (line or "").strip()
    if not s:
        return []

    segments: List[CommandSegment] = []
    current: List[str] = []
    op_before: Optional[str] = None

    for token in _tokenize(s):
        if token in OPERATORS:
            if current:
                segments.append((current[0], current[1:], op_before))
            current = []
            op_before = token
            continue
        current.append(token)

    if current:
        segments.append((current[0], current[1:], op_before))
    return segments

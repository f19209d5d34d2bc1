# src/manifest_shell/core/utils/helptext.py
from manifest_shell.core.command_registry import COMMAND_HELP_TEXTS

HEADER_HELP_TEXT = """
Manifest Studio Shell - Help

Converts AI-generated markup artifacts into stateful component modules.

---
OPERATORS
---
  A ; B               Execute B after A, regardless of the outcome.
  A && B              Execute B only if A was successful (exit code 0).
  A || B              Execute B only if A failed (exit code != 0).

---
COMMANDS
---
GENERAL:
  help                Show this help text.
  quit                Exit the shell.
""".strip()


def get_help_text() -> str:
    """
    Assembles the full help text from the header and the help text
    fragments of all discovered command handlers.
    """
    parts = [HEADER_HELP_TEXT]
    parts.extend(COMMAND_HELP_TEXTS[name] for name in sorted(COMMAND_HELP_TEXTS))
    return "\n\n".join(parts)

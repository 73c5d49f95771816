#!/usr/bin/env python3

"""
Terminal rendering of compiled commands.
"""

# Standard Library
import re
import sys

# PIP3 modules
from rich.console import Console
from rich.text import Text

#============================================

NORD_COLORS = {
	'command': "#ECEFF4",
	'flags': "#81A1C1",
	'numbers': "#B48EAD",
	'paths': "#A3BE8C",
	'strings': "#EBCB8B",
	'filters': "#88C0D0",
}

COMMAND_STYLES = [
	(re.compile(r"\bscale=|\bconcat=|\[[A-Za-z0-9:]+\]"), NORD_COLORS['filters']),
	(re.compile(r"(?<!\S)--?[A-Za-z][A-Za-z0-9_:-]*"), NORD_COLORS['flags']),
	(re.compile(r"\b\d+\.\d+\b"), NORD_COLORS['numbers']),
	(re.compile(r"\b\d+M?\b(?!\.\d)"), NORD_COLORS['numbers']),
	(re.compile(r"'[^']*'|\"[^\"]*\""), NORD_COLORS['strings']),
	(re.compile(r"(?:/|~|\./|\.\./)[^\s'\"`]+"), NORD_COLORS['paths']),
]

#============================================

def highlight_command(command: str) -> Text:
	if command is None or command == "":
		return Text("")
	text = Text(command, style=f"bold {NORD_COLORS['command']}")
	for pattern, style in COMMAND_STYLES:
		for match in pattern.finditer(command):
			text.stylize(style, match.start(), match.end())
	return text

#============================================

def print_command(command: str, indent: str = "\t") -> None:
	"""
	Print the command, syntax highlighted when stdout is a terminal.
	"""
	if not sys.stdout.isatty():
		print(f"{indent}{command}")
		return
	console = Console(highlight=False, soft_wrap=True)
	line = Text(indent)
	line.append_text(highlight_command(command))
	console.print(line)

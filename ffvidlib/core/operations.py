#!/usr/bin/env python3

"""
Edit operations produced by the parser and the command they compile to.
"""

# Standard Library
import enum
import re
import shlex
from dataclasses import dataclass
from typing import Tuple

# multi-word fragments the builder emits; the shell must split these as-is
RATE_FRAGMENT_RE = re.compile(r"-crf [0-9]+ -maxrate [0-9.e+]+M -bufsize [0-9.e+]+M")
MAP_FRAGMENT_RE = re.compile(r'(-map "\[[a-z]+\]" )+-vsync 0')

#============================================

class ExecutionKind(enum.Enum):
	DEFAULT = "default"
	PREVIEW = "preview"

#============================================

class EditOperation():
	"""
	Base of the closed set of edit operations.
	"""

#============================================

@dataclass(frozen=True)
class Resize(EditOperation):
	width: int
	height: int

#============================================

@dataclass(frozen=True)
class Quality(EditOperation):
	score: int

#============================================

@dataclass(frozen=True)
class Merge(EditOperation):
	paths: Tuple[str, ...]

#============================================

@dataclass(frozen=True)
class ExecutionType(EditOperation):
	kind: ExecutionKind = ExecutionKind.DEFAULT

#============================================

@dataclass(frozen=True)
class OutFilePath(EditOperation):
	path: str

#============================================

@dataclass(frozen=True)
class Command():
	"""
	Compiled invocation; args are emitted verbatim, one entry per fragment.
	"""
	invocation: str
	args: Tuple[str, ...] = ()

	#============================
	def to_text(self) -> str:
		"""
		Space-joined form shown to the operator.
		"""
		parts = [self.invocation]
		parts.extend(self.args)
		return " ".join(parts)

	#============================
	def to_shell(self) -> str:
		"""
		Form handed to /bin/sh, with filter graphs and paths quoted.
		"""
		parts = [shlex.quote(self.invocation)]
		for fragment in self.args:
			parts.append(shell_fragment(fragment))
		return " ".join(parts)

#============================================

def shell_fragment(fragment: str) -> str:
	if fragment.startswith("-vf "):
		return "-vf " + shlex.quote(fragment[len("-vf "):])
	if RATE_FRAGMENT_RE.fullmatch(fragment) is not None:
		return fragment
	if MAP_FRAGMENT_RE.fullmatch(fragment) is not None:
		return fragment
	return shlex.quote(fragment)

#!/usr/bin/env python3

"""
Recursive-descent parser turning process arguments into edit operations.

Grammar:
	<program> [--resize W:H] [--quality Q] [--preview] [--merge P1 P2 ...] <outpath>

Flags may come in any order; the output path must be the last token.
"""

# Standard Library
import os
import re
from typing import List, Sequence

# local repo modules
from ffvidlib.core import errors
from ffvidlib.core.operations import EditOperation
from ffvidlib.core.operations import ExecutionKind
from ffvidlib.core.operations import ExecutionType
from ffvidlib.core.operations import Merge
from ffvidlib.core.operations import OutFilePath
from ffvidlib.core.operations import Quality
from ffvidlib.core.operations import Resize
from ffvidlib.core.token_cursor import TokenCursor

UNSIGNED_RE = re.compile(r"\+?[0-9]+")
SIGNED_RE = re.compile(r"[+-]?[0-9]+")

U32_MAX = 2 ** 32 - 1
I32_MIN = -(2 ** 31)
I32_MAX = 2 ** 31 - 1

#============================================

def bounded_int(text: str, pattern, low: int, high: int):
	"""
	Parse text as an integer in [low, high], or return None.
	"""
	if pattern.fullmatch(text) is None:
		return None
	# longer than any 32 bit value; also keeps int() under its digit limit
	if len(text.lstrip('+-').lstrip('0')) > 10:
		return None
	value = int(text)
	if value < low or value > high:
		return None
	return value

#============================================

class ArgsParser():
	def __init__(self, tokens: Sequence[str], check_paths: bool = False):
		self.cursor = TokenCursor(tokens)
		self.check_paths = check_paths
		self.parsed_args = []

	#============================
	def parse_args(self) -> List[EditOperation]:
		# first token is the program itself
		self.cursor.next_or(errors.ShouldNotHappenError(
			"Token stream is empty, expected at least the program name."
		))
		flag_table = {
			'--resize': self._parse_arg_resize,
			'--quality': self._parse_arg_quality,
			'--preview': self._parse_arg_preview,
			'--merge': self._parse_arg_merge,
		}
		while True:
			token = self.cursor.next()
			if token is None:
				return list(self.parsed_args)
			handler = flag_table.get(token)
			if handler is None:
				parsed_arg = self._parse_out_pathname(token)
			else:
				parsed_arg = handler()
			self.parsed_args.append(parsed_arg)

	#============================
	def _parse_arg_quality(self) -> Quality:
		value = self.cursor.next_or(errors.QualityError(
			"Expected quality value after filter `quality` "
			"(eg: --quality 50), found nothing."
		))
		score = bounded_int(value, UNSIGNED_RE, 0, U32_MAX)
		if score is None:
			raise errors.QualityError(
				f"Value `{value}` is not a valid positive integer (eg: 50)."
			)
		return Quality(score)

	#============================
	def _parse_arg_resize(self) -> Resize:
		value = self.cursor.next_or(errors.ResizeError(
			"Expected resize dimensions after filter `resize` "
			"(eg: --resize 1920:1080), found nothing."
		))
		dimensions = value.split(':')
		if len(dimensions) != 2:
			raise errors.ResizeError(
				f"Values `{value}` are not valid dimensions (eg: 1920:1080)."
			)
		sizes = [bounded_int(part, SIGNED_RE, I32_MIN, I32_MAX) for part in dimensions]
		if None in sizes:
			raise errors.ResizeError(
				f"Value `{value}` is not valid dimension (eg: 1920:1080)."
			)
		return Resize(sizes[0], sizes[1])

	#============================
	def _parse_arg_preview(self) -> ExecutionType:
		return ExecutionType(ExecutionKind.PREVIEW)

	#============================
	def _parse_arg_merge(self) -> Merge:
		merged_files = []
		# the last token is reserved for the output path
		while self.cursor.tokens_left() != 1:
			filepath = self.cursor.next()
			if filepath is None:
				break
			merged_files.append(self._parse_pathname(filepath))
		if len(merged_files) < 2:
			found = ""
			if len(merged_files) > 0:
				found = f" ({','.join(merged_files)})"
			raise errors.MergeError(
				"Expected at least 2 filenames in filter `merge` "
				f"(eg.: --merge a.mp4 b.mp4), found {len(merged_files)}{found} "
				"filename(s)."
			)
		return Merge(tuple(merged_files))

	#============================
	def _parse_out_pathname(self, pathname: str) -> OutFilePath:
		if self.cursor.tokens_left() > 0:
			raise errors.UnknownArgError(f"Argument `{pathname}` is unrecognized.")
		# the output is allowed not to exist yet
		return OutFilePath(pathname)

	#============================
	def _parse_pathname(self, pathname: str) -> str:
		if self.check_paths and not os.path.exists(pathname):
			raise errors.FilepathError(
				f"Path `{pathname}` is not valid path (eg: video.mp4)."
			)
		return pathname

#============================================

def parse_args(tokens: Sequence[str], check_paths: bool = False) -> List[EditOperation]:
	return ArgsParser(tokens, check_paths=check_paths).parse_args()

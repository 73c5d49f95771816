#!/usr/bin/env python3

"""
Compile parsed edit operations into an ffmpeg/ffplay invocation.

Fragments are emitted in a fixed order regardless of operation order:
filter graph, rate control, stream mapping, then the output path.
"""

# Standard Library
from typing import List, Sequence, Tuple

# local repo modules
from ffvidlib.core import errors
from ffvidlib.core import rate_control
from ffvidlib.core.operations import Command
from ffvidlib.core.operations import EditOperation
from ffvidlib.core.operations import ExecutionKind
from ffvidlib.core.operations import ExecutionType
from ffvidlib.core.operations import Merge
from ffvidlib.core.operations import OutFilePath
from ffvidlib.core.operations import Quality
from ffvidlib.core.operations import Resize

DEFAULT_TRANSCODER = 'ffmpeg'
DEFAULT_PLAYER = 'ffplay'

MERGE_MAP = '-map "[outv]" -map "[outa]" -vsync 0'

#============================================

def build_merge(filepaths: Sequence[str]) -> Tuple[str, str]:
	"""
	Build the concat filter graph and output mapping for N inputs.

	Args:
		filepaths: Merge inputs, in order; only the count is used.

	Returns:
		tuple: (filter_graph, map_flags)
	"""
	passthrough_labels = []
	concat_inputs = []
	for index in range(len(filepaths)):
		passthrough_labels.append(f"[{index}][v{index}]")
		concat_inputs.append(f"[v{index}][{index}:a:0]")
	filter_graph = (
		f"{';'.join(passthrough_labels)};{''.join(concat_inputs)}"
		f"concat=n={len(filepaths)}:v=1:a=1[outv][outa]"
	)
	return (filter_graph, MERGE_MAP)

#============================================

def build_merged_filters(filters: List[str]) -> str:
	return f"-vf {','.join(filters)}"

#============================================

class CommandBuilder():
	def __init__(self, transcoder: str = DEFAULT_TRANSCODER,
		player: str = DEFAULT_PLAYER):
		self.transcoder = transcoder
		self.player = player
		self.invocation = transcoder
		self.preview = False
		self.filters = []
		self.quality_flags = ""
		self.map_flags = ""
		self.out_filepaths = []

	#============================
	def add(self, operation: EditOperation) -> None:
		if isinstance(operation, Resize):
			self.filters.append(f"scale={operation.width}:{operation.height}")
		elif isinstance(operation, Quality):
			rate = rate_control.quality_to_rate(operation.score)
			self.quality_flags = rate_control.format_rate_control(rate)
		elif isinstance(operation, Merge):
			(filter_graph, map_flags) = build_merge(operation.paths)
			self.filters.append(filter_graph)
			self.map_flags = map_flags
		elif isinstance(operation, ExecutionType):
			self.preview = operation.kind == ExecutionKind.PREVIEW
			if self.preview:
				self.invocation = self.player
			else:
				self.invocation = self.transcoder
		elif isinstance(operation, OutFilePath):
			self.out_filepaths.append(operation.path)
		else:
			raise errors.UnrecognizedArgError(
				f"Argument {operation!r} is not recognized."
			)

	#============================
	def build(self) -> Command:
		args = []
		if len(self.filters) > 0:
			args.append(build_merged_filters(self.filters))
		# the player takes filters but no encoder rate control or output mapping
		if self.quality_flags != "" and not self.preview:
			args.append(self.quality_flags)
		if self.map_flags != "" and not self.preview:
			args.append(self.map_flags)
		args.extend(self.out_filepaths)
		return Command(invocation=self.invocation, args=tuple(args))

#============================================

def build_args(operations: Sequence[EditOperation], config=None) -> Command:
	"""
	Fold operations into a Command.

	Args:
		operations: Parser output, in encounter order.
		config: Optional FfvidConfig supplying transcoder/player names.

	Returns:
		Command: invocation plus ordered argument fragments.
	"""
	if config is None:
		builder = CommandBuilder()
	else:
		builder = CommandBuilder(transcoder=config.transcoder, player=config.player)
	for operation in operations:
		builder.add(operation)
	return builder.build()

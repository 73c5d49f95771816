#!/usr/bin/env python3

#============================================

class FfvidError(RuntimeError):
	"""
	Base for every error ffvid reports to the operator.
	"""
	def __init__(self, message: str = ""):
		super().__init__(message)
		self.message = message

#============================================
# parsing

class ParsingError(FfvidError):
	pass

class UnknownArgError(ParsingError):
	pass

class QualityError(ParsingError):
	pass

class ResizeError(ParsingError):
	pass

class FilepathError(ParsingError):
	pass

class MergeError(ParsingError):
	pass

class ShouldNotHappenError(ParsingError):
	pass

#============================================
# building

class BuildingError(FfvidError):
	pass

class UnrecognizedArgError(BuildingError):
	pass

#============================================
# running and config

class RunningError(FfvidError):
	pass

class ConfigError(FfvidError):
	pass

#!/usr/bin/env python3

"""
Map a 0-100 quality score onto x264/x265 rate control settings.
"""

# Standard Library
import math
from dataclasses import dataclass

QUALITY_MAX = 100
CRF_MAX = 51
BITRATE_LOW = 0.5  # megabits at quality 0
BITRATE_QUALITY_CURVE_FACTOR = 2.2
BITRATE_CURVE_DIVISOR = 1000

#============================================

@dataclass(frozen=True)
class RateControl():
	crf: int
	max_rate: float
	buf_size: float

#============================================

def clamp_between(value: int, low: int, high: int) -> int:
	return max(low, min(high, value))

#============================================

def quality_to_crf(quality: int) -> int:
	"""
	Truncated (QUALITY_MAX - quality) / (QUALITY_MAX / CRF_MAX), kept in
	integers so quality 0 lands exactly on CRF_MAX.
	"""
	crf = ((QUALITY_MAX - quality) * CRF_MAX) // QUALITY_MAX
	# quality above QUALITY_MAX would go negative
	return clamp_between(crf, 0, CRF_MAX)

#============================================

def quality_to_bitrate(quality: int) -> float:
	"""
	Maximum bitrate in megabits, rounded half up to a whole number.
	"""
	bitrate = BITRATE_LOW + (quality ** BITRATE_QUALITY_CURVE_FACTOR) / (
		BITRATE_QUALITY_CURVE_FACTOR * BITRATE_CURVE_DIVISOR)
	return float(math.floor(bitrate + 0.5))

#============================================

def quality_to_rate(quality: int) -> RateControl:
	bitrate = quality_to_bitrate(quality)
	return RateControl(
		crf=quality_to_crf(quality),
		max_rate=bitrate,
		buf_size=2.0 * bitrate,
	)

#============================================

def format_megabits(value: float) -> str:
	if float(value).is_integer():
		return f"{int(value)}M"
	return f"{value:g}M"

#============================================

def format_rate_control(rate: RateControl) -> str:
	return (
		f"-crf {rate.crf} -maxrate {format_megabits(rate.max_rate)} "
		f"-bufsize {format_megabits(rate.buf_size)}"
	)

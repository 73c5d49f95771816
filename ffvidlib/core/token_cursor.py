#!/usr/bin/env python3

"""
Forward-only cursor over a token sequence, used by the argument parser.
"""

# Standard Library
from typing import Generic, Optional, Sequence, TypeVar

TokenType = TypeVar('TokenType')

#============================================

class TokenCursor(Generic[TokenType]):
	def __init__(self, tokens: Sequence[TokenType]):
		self._tokens = tokens
		self._position = 0

	#============================
	def next(self) -> Optional[TokenType]:
		"""
		Return the next token and advance, or None when exhausted.
		"""
		if self._position >= len(self._tokens):
			return None
		token = self._tokens[self._position]
		self._position += 1
		return token

	#============================
	def next_or(self, error: Exception) -> TokenType:
		"""
		Return the next token and advance, or raise error when exhausted.
		"""
		if self.tokens_left() == 0:
			raise error
		return self.next()

	#============================
	def peek(self) -> Optional[TokenType]:
		"""
		Return the next token without advancing, or None when exhausted.
		"""
		if self._position >= len(self._tokens):
			return None
		return self._tokens[self._position]

	#============================
	def peek_or(self, error: Exception) -> TokenType:
		"""
		Return the next token without advancing, or raise error when exhausted.
		"""
		if self.tokens_left() == 0:
			raise error
		return self.peek()

	#============================
	def tokens_left(self) -> int:
		return len(self._tokens) - self._position

#!/usr/bin/env python3

import os
import sys
import unittest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

from ffvidlib.core.token_cursor import TokenCursor

#============================================

class TokenCursorTest(unittest.TestCase):
	#============================================
	def test_next(self) -> None:
		"""Ensure next walks the tokens in order and signals exhaustion."""
		cursor = TokenCursor([1, 2, 3])
		self.assertEqual(cursor.next(), 1)
		self.assertEqual(cursor.next_or(ValueError("empty")), 2)
		self.assertEqual(cursor.next(), 3)
		self.assertIsNone(cursor.next())
		with self.assertRaises(ValueError):
			cursor.next_or(ValueError("empty"))

	#============================================
	def test_peek_does_not_advance(self) -> None:
		"""Ensure peek leaves the position alone."""
		cursor = TokenCursor([1, 2, 3])
		self.assertEqual(cursor.peek(), 1)
		self.assertEqual(cursor.peek_or(ValueError("empty")), 1)
		self.assertEqual(cursor.tokens_left(), 3)

		cursor = TokenCursor([1])
		self.assertEqual(cursor.peek(), 1)
		self.assertEqual(cursor.next(), 1)
		self.assertIsNone(cursor.peek())
		with self.assertRaises(ValueError):
			cursor.peek_or(ValueError("empty"))

	#============================================
	def test_tokens_left_tracks_position(self) -> None:
		"""Ensure tokens_left is always length minus position."""
		tokens = ["prog", "--preview", "out.mp4"]
		cursor = TokenCursor(tokens)
		for consumed in range(len(tokens)):
			self.assertEqual(cursor.tokens_left(), len(tokens) - consumed)
			cursor.next()
		self.assertEqual(cursor.tokens_left(), 0)
		cursor.next()
		self.assertEqual(cursor.tokens_left(), 0)

	#============================================
	def test_error_carries_caller_message(self) -> None:
		"""Ensure next_or raises exactly the supplied error."""
		cursor = TokenCursor([])
		error = KeyError("flag-specific")
		with self.assertRaises(KeyError) as context:
			cursor.next_or(error)
		self.assertIs(context.exception, error)

#============================================

def main() -> None:
	"""Run the unit tests."""
	unittest.main()

#============================================

if __name__ == "__main__":
	main()

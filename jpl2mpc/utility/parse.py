"""
Number Parsing
==============

Leading-number parsers for fixed-column text. A field is read from its start offset up
to the first character that cannot continue the number, so whatever follows in the line
(labels, the next field, the calendar date) is ignored.
"""
import re

from typing import Optional


LEADING_FLOAT_PATTERN = re.compile(r'\s*([+\-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+\-]?\d+)?)')
LEADING_INT_PATTERN   = re.compile(r'\s*([+\-]?\d+)')


def parse_leading_float(
  text  : str,
  start : int = 0,
) -> Optional[float]:
  """
  Parse the floating-point number at the start of a text field.

  Input:
  ------
    text : str
      Line to read from.
    start : int
      Character offset of the field. Leading blanks are skipped.

  Output:
  -------
    value : float | None
      Parsed value, or None if no number starts there.
  """
  match = LEADING_FLOAT_PATTERN.match(text, start)
  if match is None:
    return None
  return float(match.group(1))


def parse_leading_int(
  text  : str,
  start : int = 0,
) -> int:
  """
  Parse the integer at the start of a text field; 0 if there is none.

  Input:
  ------
    text : str
      Line to read from.
    start : int
      Character offset of the field. Leading blanks are skipped.

  Output:
  -------
    value : int
      Parsed value, or 0 if no integer starts there.
  """
  match = LEADING_INT_PATTERN.match(text, start)
  if match is None:
    return 0
  return int(match.group(1))

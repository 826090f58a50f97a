"""
Parsers sub-package for simple-nem12.

- base.py defines the BaseParser ABC, ParseResult and Diagnostic.
- fields.py holds the record classification and field-level validators
  for 200 (meter read) and 300 (meter volume) records.
- nem12.py implements SimpleNem12Parser, the record-type dispatch loop
  with one-record lookahead over a LineCursor.
"""

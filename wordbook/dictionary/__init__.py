"""
This module is for dictionaries.

Dictionary is a hash table mapping a word (or a pair of words in two languages)
to its definitions.  Dictionaries are filled from plain text dataset files.
"""

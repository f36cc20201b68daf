"""Domain models and values.

Pure data: the alphabet, its membership filter and the request model. No I/O,
no CLI.
"""

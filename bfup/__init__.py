""" A preprocessor for brainfuck-like languages: macros, repetition and groups, expanded to plain operators. """

__version__ = '0.1.1'

""" A small line-oriented command interpreter. """

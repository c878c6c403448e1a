"""Find the computer room: a small pygame arcade toy, with its vector, random, input and drawing parts."""

__version__ = "0.1.0"
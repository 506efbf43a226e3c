"""Classic sorting algorithms, student-record exercises and a console school registry."""

__version__ = "0.1.0"
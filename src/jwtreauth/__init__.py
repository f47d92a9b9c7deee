__author__ = "NCC Group"
__version__ = "1.0.0"

"""
Test suite for reportpdf.
"""

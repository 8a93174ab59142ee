"""
Test suite for radial-math
"""

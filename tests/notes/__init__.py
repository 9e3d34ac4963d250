"""Notes app used by the test suite"""

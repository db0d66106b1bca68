"""
Command-line interface for ytstreams.
"""

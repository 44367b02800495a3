"""
Transcript alignment for the pronunciation practice pipeline.

This package contains the greedy lookahead aligner that judges each target
word of a paragraph against the words recognized in a spoken attempt:
- transcript_alignment.py: Word-level verdicts and attempt score
"""

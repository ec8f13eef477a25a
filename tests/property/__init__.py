"""
Property-based testing suite for gen-kit.

Uses Hypothesis to drive the generator laws and invariants over many sizes
and seeds.
"""

"""Test doubles for gen-kit tests."""

from .generator_mocks import DrawCounter, create_draw_counter, size_echo, state_echo

__all__ = ["DrawCounter", "create_draw_counter", "size_echo", "state_echo"]

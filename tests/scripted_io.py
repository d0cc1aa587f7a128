"""Scripted prompt input and configuration snapshots shared by the test suites.

Kept in its own module so tests can import it unambiguously
regardless of pytest's conftest resolution order.
"""

import io

from nextplus.config import Configuration
from nextplus.prompts import PromptConfig


def make_config(**values):
    """Configuration snapshot; unset keys keep their defaults (all prompts off)."""
    return Configuration(values)


def scripted_prompts(*answers):
    """PromptConfig that answers prompts in order, then behaves like EOF."""
    output = io.StringIO()
    it = iter(answers)

    def input_fn(prompt_text):
        output.write(prompt_text)
        try:
            return next(it)
        except StopIteration:
            raise EOFError()

    return PromptConfig(input_fn=input_fn, output=output)


def no_prompts():
    """PromptConfig that fails the test if anything is asked."""

    def input_fn(prompt_text):
        raise AssertionError(f"Unexpected prompt: {prompt_text}")

    return PromptConfig(input_fn=input_fn, output=io.StringIO())

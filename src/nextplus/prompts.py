"""Terminal prompts: numbered-option menus and free-text input.

Every prompt returns an outcome instead of raising on dismissal:
``Resolved(value)`` when the user answered, ``CANCELLED`` when input was
closed (EOF / Ctrl-D). Callers thread the outcome through and stop at the
first cancellation.
"""

import sys
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence, TextIO


@dataclass(frozen=True)
class Resolved:
    """A prompt or resolution step that produced a value."""

    value: object


@dataclass(frozen=True)
class Cancelled:
    """The user dismissed a prompt."""


CANCELLED = Cancelled()


def is_cancelled(outcome):
    return isinstance(outcome, Cancelled)


@dataclass
class PromptConfig:
    """I/O configuration for prompt display and input."""

    input_fn: Callable[[str], str] = field(default_factory=lambda: input)
    output: TextIO = field(default_factory=lambda: sys.stderr)


def _option_line(number, label, is_default, description):
    line = f"  {number}) {label}"
    if is_default:
        line = f"{line} [default]"
    if description:
        line = f"{line} - {description}"
    return line


def _render_menu(prompt, options, descriptions, default):
    """Menu block: header, one numbered line per option, blank lines around."""
    descriptions = descriptions or [None] * len(options)
    lines = [
        _option_line(number, label, number == default, description)
        for number, (label, description) in enumerate(zip(options, descriptions), start=1)
    ]
    return "\n".join(["", prompt, *lines, ""])


def _choice_hint(options, default):
    hint = f"Choice 1-{len(options)}"
    if default:
        hint += f", Enter for {options[default - 1]}"
    return hint + ": "


def _read_line(prompt_text, config):
    """Return the raw line, or None when input is closed."""
    try:
        return config.input_fn(prompt_text)
    except EOFError:
        print("", file=config.output)
        return None


def _selected_number(answer, option_count, default):
    """Map an answer to a 1-based option number; None when it names no option."""
    answer = answer.strip()
    if not answer:
        return default or None
    if not answer.isdecimal():
        return None
    number = int(answer)
    return number if 1 <= number <= option_count else None


def choose(
    prompt: str,
    default: int,
    options: Sequence[str],
    *,
    descriptions: Optional[Sequence[str]] = None,
    config: Optional[PromptConfig] = None,
):
    """Display numbered options and return the user's selection.

    Args:
        prompt: Header text displayed above the options.
        default: 1-based index of the default option (0 for none).
        options: Option labels.
        descriptions: Optional per-option descriptions, same length as options.
        config: PromptConfig with input_fn and output stream (defaults apply).

    Returns:
        Resolved(1-based index) or CANCELLED on EOF.
    """
    if config is None:
        config = PromptConfig()

    print(_render_menu(prompt, options, descriptions, default), file=config.output)
    hint = _choice_hint(options, default)
    out_of_range = f"Invalid choice. Please enter a number between 1 and {len(options)}."

    while True:
        answer = _read_line(hint, config)
        if answer is None:
            return CANCELLED
        number = _selected_number(answer, len(options), default)
        if number is not None:
            return Resolved(number)
        print(out_of_range, file=config.output)


def ask_text(
    prompt: str,
    *,
    default: Optional[str] = None,
    validate: Optional[Callable[[str], Optional[str]]] = None,
    config: Optional[PromptConfig] = None,
):
    """Ask for a line of text, re-prompting until *validate* accepts it.

    Empty input selects *default* when one is given. The returned value is
    stripped. *validate* returns an error message, or None when the value is
    acceptable.

    Returns:
        Resolved(text) or CANCELLED on EOF.
    """
    if config is None:
        config = PromptConfig()

    prompt_text = prompt
    if default:
        prompt_text += f" [{default}]"
    prompt_text += ": "

    while True:
        raw = _read_line(prompt_text, config)
        if raw is None:
            return CANCELLED
        value = raw.strip()
        if value == "" and default:
            value = default.strip()
        error = validate(value) if validate else None
        if error is None:
            return Resolved(value)
        print(error, file=config.output)

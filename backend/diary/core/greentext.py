"""Greentext Rules — prompt template and deterministic fallback transform.

Invariants:
    - build_greentext_prompt embeds the TRIMMED journal text exactly once, at the end
    - fallback_greentext never returns an empty string for non-blank input
    - Fallback: one output line per input line, each prefixed with ">";
      lines blank after strip() become ">be me"
    - normalize_generated_text only trims; model output is trusted as-is

Design Decisions:
    - Prompt is a module constant: the model sees the same instruction for every entry
    - Fallback splits on "\\n" only; a trailing "\\r" is removed by the per-line strip()
"""

from diary.core.domain_types import FALLBACK_BLANK_LINE

GREENTEXT_MARKER = ">"

GREENTEXT_PROMPT_TEMPLATE = """Turn this personal journal entry into a classic 4chan-style greentext story.
Keep it short, ironic, self-roasting, use > at the start of every line, end with mfw/tfw if it fits.
Keep the output length directly proportional to your input length.
Occasionally use the format whatthefuck.fileextension to express an emotion.

For example:
> be me
> wake up on xmas day
> mariahCarey24/7.mp3
> immediately regret being awake
> at least the food is good
> mfw christmas dinner is the only thing holding me together

Make it funny and absurd even if the day was bad. Journal entry: {content}"""


def build_greentext_prompt(content: str) -> str:
    """Render the fixed instruction prompt around the trimmed journal text."""
    return GREENTEXT_PROMPT_TEMPLATE.format(content=content.strip())


def fallback_greentext(content: str) -> str:
    """Naive greentext: prefix every line with '>' and fill blank lines.

    >>> fallback_greentext("today was rough\\n\\nstill alive")
    '>today was rough\\n>be me\\n>still alive'
    """
    lines = content.strip().split("\n")
    return "\n".join(
        f"{GREENTEXT_MARKER}{line.strip() or FALLBACK_BLANK_LINE}"
        for line in lines
    )


def normalize_generated_text(text: str | None) -> str | None:
    """Trim model output. Returns None when nothing usable remains."""
    if text is None:
        return None
    text = text.strip()
    return text or None

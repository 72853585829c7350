"""Fake Generators — stand-ins for the text generator and the Anthropic SDK client.

Invariants:
    - FakeGenerator.generate pops queued replies in order; an Exception in the
      queue is raised instead of returned
    - With an empty queue FakeGenerator raises GeneratorAPIError (forced failure)
    - FakeAnthropicClient mirrors client.messages.create(**kwargs) and records calls

Design Decisions:
    - Flat mock classes (no inheritance): simple, explicit, easy to debug
    - SDK reply objects carry only the attributes the wrapper reads
"""

from diary.core.errors import GeneratorAPIError


class FakeGenerator:
    """Replaces AnthropicTextGenerator. Sequences pre-configured replies."""

    def __init__(self, replies=None):
        self.replies = list(replies or [])
        self.prompts = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.replies:
            raise GeneratorAPIError("no reply queued", "connection_error")
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        return reply


# -- Mock Anthropic SDK objects ------------------------------------------------


class _Block:
    def __init__(self, type, text=None):
        self.type = type
        self.text = text


class _Usage:
    def __init__(self, input_tokens=120, output_tokens=40):
        self.input_tokens = input_tokens
        self.output_tokens = output_tokens


class _Message:
    def __init__(self, content):
        self.content = content
        self.usage = _Usage()


def text_message(*texts):
    """Build a Messages API reply with one text block per argument."""
    return _Message([_Block("text", t) for t in texts])


class _Messages:
    def __init__(self, outcome):
        self._outcome = outcome
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if isinstance(self._outcome, BaseException):
            raise self._outcome
        return self._outcome


class FakeAnthropicClient:
    """Replaces anthropic.AsyncAnthropic. Returns or raises one fixed outcome."""

    def __init__(self, outcome):
        self.messages = _Messages(outcome)

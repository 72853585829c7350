"""Greentext Transformer — model path, fallback path, and what the model sees.

Invariants verified:
    - Successful replies are returned trimmed, otherwise verbatim
    - GeneratorAPIError, unexpected exceptions and blank replies use the fallback
    - No generator configured → fallback without any call
    - Exactly one generator attempt per transform (no retries)
"""

from diary.core.errors import GeneratorAPIError
from diary.services.greentext_transformer import GreentextTransformer

from tests.services.fake_generator import FakeGenerator


async def test_model_reply_is_trimmed_and_returned():
    gen = FakeGenerator(["\n  >be me\n>write diary\n>mfw  \n"])
    result = await GreentextTransformer(gen).transform("wrote in my diary")
    assert result == ">be me\n>write diary\n>mfw"


async def test_model_reply_is_not_reshaped():
    # output without markers is trusted as-is
    gen = FakeGenerator(["just a sentence"])
    assert await GreentextTransformer(gen).transform("x") == "just a sentence"


async def test_prompt_contains_trimmed_content():
    gen = FakeGenerator([">ok"])
    await GreentextTransformer(gen).transform("   went outside   ")
    assert gen.prompts[0].endswith("Journal entry: went outside")


async def test_generator_error_uses_fallback():
    gen = FakeGenerator([GeneratorAPIError("503", "status_error")])
    result = await GreentextTransformer(gen).transform("today was rough\n\nstill alive")
    assert result == ">today was rough\n>be me\n>still alive"


async def test_unexpected_exception_uses_fallback():
    gen = FakeGenerator([KeyError("choices")])
    assert await GreentextTransformer(gen).transform("hi") == ">hi"


async def test_blank_reply_uses_fallback():
    gen = FakeGenerator(["   \n  "])
    assert await GreentextTransformer(gen).transform("hi") == ">hi"


async def test_single_attempt_on_failure():
    gen = FakeGenerator([GeneratorAPIError("x", "timeout"), ">never used"])
    await GreentextTransformer(gen).transform("hi")
    assert len(gen.prompts) == 1
    assert gen.replies == [">never used"]


async def test_no_generator_uses_fallback():
    assert await GreentextTransformer(None).transform("a\n\nb") == ">a\n>be me\n>b"

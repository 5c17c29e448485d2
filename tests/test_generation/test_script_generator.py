"""Tests for script generation."""

import pytest

from reelforge.core.exceptions import UpstreamError
from reelforge.generation.script_generator import (
    VARIATION_TONES,
    ScriptGenerator,
    build_script_prompt,
    estimate_script_duration,
)

pytestmark = pytest.mark.asyncio

SCRIPT_TEXT = """HOOK: What if your coffee could charge your phone?

MAIN CONTENT:
Scientists have built batteries from coffee grounds.
They store more energy than you would expect.

CALL TO ACTION: Follow for more weird science!"""


class TestBuildScriptPrompt:
    """Tests for build_script_prompt."""

    async def test_word_count_from_duration(self):
        prompt = build_script_prompt("coffee", 120, "engaging", "general")
        assert "~300 words" in prompt
        assert "120-second" in prompt

    async def test_optional_hook_and_cta(self):
        prompt = build_script_prompt(
            "coffee", 60, "calm", "kids", include_hook=False, include_call_to_action=False
        )
        assert "powerful hook" not in prompt
        assert "clear call-to-action" not in prompt
        assert "Target audience: kids" in prompt


class TestGenerateVideoScript:
    """Tests for ScriptGenerator.generate_video_script."""

    async def test_parses_sections(self, fake_llm):
        generator = ScriptGenerator(llm=fake_llm(SCRIPT_TEXT))

        script = await generator.generate_video_script("coffee batteries", duration=90)

        assert script.topic == "coffee batteries"
        assert script.duration == 90
        assert script.hook == "What if your coffee could charge your phone?"
        assert len(script.main_content) == 2
        assert script.call_to_action == "Follow for more weird science!"
        assert script.full_script == SCRIPT_TEXT
        assert script.metadata.model == "gpt-4o"
        assert script.metadata.tokens == 42

    async def test_uses_script_temperature(self, fake_llm):
        llm = fake_llm(SCRIPT_TEXT)
        await ScriptGenerator(llm=llm).generate_video_script("coffee")

        kwargs = llm.complete.await_args.kwargs
        assert kwargs["temperature"] == 0.8
        assert kwargs["max_tokens"] == 2000

    async def test_unstructured_output_still_returns_script(self, fake_llm):
        script = await ScriptGenerator(llm=fake_llm("Just a paragraph.")).generate_video_script("x")
        assert script.hook == ""
        assert script.main_content == ["Just a paragraph."]

    async def test_llm_failure_raises_upstream_error(self, fake_llm):
        llm = fake_llm("")
        llm.complete.side_effect = RuntimeError("quota exceeded")

        with pytest.raises(UpstreamError, match="Script generation failed: quota exceeded"):
            await ScriptGenerator(llm=llm).generate_video_script("coffee")


class TestGenerateVoiceoverText:
    async def test_returns_model_text(self, fake_llm):
        llm = fake_llm("Coffee. [PAUSE] It's AMAZING.")
        text = await ScriptGenerator(llm=llm).generate_voiceover_text(SCRIPT_TEXT)

        assert text == "Coffee. [PAUSE] It's AMAZING."
        assert llm.complete.await_args.kwargs["temperature"] == 0.5

    async def test_failure(self, fake_llm):
        llm = fake_llm("")
        llm.complete.side_effect = RuntimeError("down")
        with pytest.raises(UpstreamError, match="Voiceover text generation failed"):
            await ScriptGenerator(llm=llm).generate_voiceover_text("script")


class TestGenerateScriptVariations:
    async def test_cycles_tones(self, fake_llm):
        generator = ScriptGenerator(llm=fake_llm(SCRIPT_TEXT))

        variations = await generator.generate_script_variations("coffee", count=6)

        assert [v.tone for v in variations] == VARIATION_TONES + VARIATION_TONES[:1]
        assert all(v.duration == 120 for v in variations)


class TestEstimateScriptDuration:
    async def test_words_per_second(self, fake_llm):
        script = await ScriptGenerator(llm=fake_llm("word " * 50)).generate_video_script("x")
        assert estimate_script_duration(script) == 20.0

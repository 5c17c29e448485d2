"""Tests for the free-text LLM output parsers."""

from reelforge.generation.parsers import (
    parse_bullet_list,
    parse_chapters,
    parse_comma_list,
    parse_hashtags,
    parse_numbered_list,
    parse_script,
    parse_visual_prompts,
)


class TestParseScript:
    """Tests for parse_script."""

    def test_labelled_sections(self):
        text = (
            "HOOK: Stop scrolling!\n"
            "MAIN CONTENT:\n"
            "First point.\n"
            "Second point.\n"
            "CALL TO ACTION: Follow for more."
        )
        script = parse_script(text)
        assert script.hook == "Stop scrolling!"
        assert script.main_content == ["First point.", "Second point."]
        assert script.call_to_action == "Follow for more."
        assert script.full_script == text

    def test_numbered_sections(self):
        text = "1. HOOK: Big news\n2. MAIN CONTENT:\nDetail\n3. CALL TO ACTION: Subscribe"
        script = parse_script(text)
        assert script.hook == "Big news"
        assert script.main_content == ["Detail"]
        assert script.call_to_action == "Subscribe"

    def test_marker_without_text_uses_next_line(self):
        script = parse_script("HOOK:\nWait for it\nCALL TO ACTION:\nLike and share")
        assert script.hook == "Wait for it"
        assert script.call_to_action == "Like and share"

    def test_unstructured_text_is_main_content(self):
        script = parse_script("Just some prose.\nAnother line.")
        assert script.hook == ""
        assert script.call_to_action == ""
        assert script.main_content == ["Just some prose.", "Another line."]

    def test_empty_text(self):
        script = parse_script("")
        assert script.main_content == []
        assert script.full_script == ""


class TestParseVisualPrompts:
    """Tests for parse_visual_prompts."""

    def test_parses_scene_fields(self):
        text = """SCENE 1:
Visual: City skyline at night
Text Overlay: "The future is here" centered
Duration: 8 seconds
Notes: Slow zoom
Color Scheme: Neon blue
Transition Effect: Fade

SCENE 2:
Visual: Circuit board macro
Duration: about 12"""
        scenes = parse_visual_prompts(text)
        assert len(scenes) == 2
        assert scenes[0].visual == "City skyline at night"
        assert scenes[0].text_overlay == '"The future is here" centered'
        assert scenes[0].duration == 8
        assert scenes[0].notes == "Slow zoom"
        assert scenes[0].color_scheme == "Neon blue"
        assert scenes[0].transition == "Fade"
        assert scenes[1].duration == 12

    def test_scene_without_visual_is_dropped(self):
        scenes = parse_visual_prompts("SCENE 1:\nNotes: nothing to see\nSCENE 2:\nVisual: Ocean")
        assert [scene.visual for scene in scenes] == ["Ocean"]

    def test_duration_defaults_to_ten(self):
        scenes = parse_visual_prompts("SCENE 1:\nVisual: Sunrise\nDuration: short")
        assert scenes[0].duration == 10

    def test_no_scenes(self):
        assert parse_visual_prompts("nothing here") == []


class TestListParsers:
    def test_bullet_list_strips_markers(self):
        assert parse_bullet_list("- drone shot\n* typing hands\n\n3. server room") == [
            "drone shot",
            "typing hands",
            "server room",
        ]

    def test_numbered_list(self):
        assert parse_numbered_list("1. First Title\n2. Second Title\n") == [
            "First Title",
            "Second Title",
        ]

    def test_comma_list(self):
        assert parse_comma_list("ai, tech , , gadgets") == ["ai", "tech", "gadgets"]

    def test_chapters_keep_timestamped_lines(self):
        text = "0:00 - Introduction\nno timestamp here\n1:30 - The Apollo Computer"
        assert parse_chapters(text) == ["0:00 - Introduction", "1:30 - The Apollo Computer"]


class TestParseHashtags:
    def test_extracts_hashtags(self):
        assert parse_hashtags("Try #AI and #Tech today") == ["#AI", "#Tech"]

    def test_falls_back_to_words(self):
        assert parse_hashtags("ai, tech gadgets") == ["#ai", "#tech", "#gadgets"]

    def test_fallback_is_capped(self):
        words = " ".join(f"word{i}" for i in range(15))
        assert len(parse_hashtags(words)) == 10

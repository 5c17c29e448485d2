"""
Parsers for free-text LLM output.

Every parser is total: missing or malformed sections keep their defaults and
never raise.

Script grammar (one section marker per line, case-insensitive)::

    HOOK: <text>            or  1. <text>
    MAIN CONTENT:           or  2. ...
    <segment lines>
    CALL TO ACTION: <text>  or  3. <text>

Lines before any marker count as main content. When a marker line carries no
text, the next non-empty line fills that section.

Scene grammar::

    SCENE <n>:
    Visual: <text>
    Text Overlay: <text>
    Duration: <integer seconds, first number on the line>
    Notes: <text>
    Color...: <text>
    Transition...: <text>

Scenes without a Visual line are dropped.
"""

import re

from reelforge.core.text_utils import extract_hashtags
from reelforge.schemas.content import ParsedScript, VisualScene

_SCENE_SPLIT = re.compile(r"SCENE \d+:", re.IGNORECASE)
_LIST_PREFIX = re.compile(r"^(?:[-*•]|\d+[.)])\s*")
_NUMBERED_PREFIX = re.compile(r"^\d+\.\s*")
_FIRST_NUMBER = re.compile(r"(\d+)")


def _strip_label(line: str, label: str) -> str:
    return re.sub(rf"^.*?{label}:\s*", "", line, count=1, flags=re.IGNORECASE).strip()


def parse_script(text: str) -> ParsedScript:
    """Split a generated script into hook, main content segments and CTA."""
    script = ParsedScript(full_script=text)
    section = "main"

    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        lower = line.lower()

        if "hook:" in lower or lower.startswith("1."):
            section = "hook"
            script.hook = re.sub(r"^1\.\s*", "", _strip_label(line, "hook")).strip()
        elif "main content:" in lower or lower.startswith("2."):
            section = "main"
        elif "call to action:" in lower or lower.startswith("3."):
            section = "cta"
            script.call_to_action = re.sub(
                r"^3\.\s*", "", _strip_label(line, "call to action")
            ).strip()
        elif section == "main":
            if "content:" not in lower:
                script.main_content.append(line)
        elif section == "hook" and not script.hook:
            script.hook = line
        elif section == "cta" and not script.call_to_action:
            script.call_to_action = line

    return script


def parse_visual_prompts(text: str) -> list[VisualScene]:
    """Parse SCENE blocks into scene descriptors."""
    scenes = []

    for block in _SCENE_SPLIT.split(text):
        if not block.strip():
            continue
        scene = VisualScene()

        for raw in block.strip().splitlines():
            line = raw.strip()
            lower = line.lower()

            if lower.startswith("visual:"):
                scene.visual = _strip_label(line, "visual")
            elif lower.startswith("text overlay:"):
                scene.text_overlay = _strip_label(line, "text overlay")
            elif lower.startswith("duration:"):
                match = _FIRST_NUMBER.search(line)
                if match:
                    scene.duration = int(match.group(1))
            elif lower.startswith("notes:"):
                scene.notes = _strip_label(line, "notes")
            elif lower.startswith("color"):
                scene.color_scheme = re.sub(r"^color.*?:\s*", "", line, flags=re.IGNORECASE)
            elif lower.startswith("transition"):
                scene.transition = re.sub(r"^transition.*?:\s*", "", line, flags=re.IGNORECASE)

        if scene.visual:
            scenes.append(scene)

    return scenes


def parse_bullet_list(text: str) -> list[str]:
    """One item per non-empty line with a leading bullet or number marker removed."""
    items = []
    for line in text.splitlines():
        if not line.strip():
            continue
        item = _LIST_PREFIX.sub("", line.strip()).strip()
        if item:
            items.append(item)
    return items


def parse_numbered_list(text: str) -> list[str]:
    """One item per non-empty line with a leading "N." removed."""
    return [_NUMBERED_PREFIX.sub("", line.strip()) for line in text.splitlines() if line.strip()]


def parse_comma_list(text: str) -> list[str]:
    """Comma-separated values, stripped, empties dropped."""
    return [part.strip() for part in text.split(",") if part.strip()]


def parse_hashtags(text: str, limit: int = 10) -> list[str]:
    """
    Extract #hashtags; if the text has none, treat each word as a hashtag.

    The fallback is capped at limit words.
    """
    hashtags = extract_hashtags(text)
    if hashtags:
        return hashtags
    words = [word for word in re.split(r"[\s,]+", text) if word]
    return [word if word.startswith("#") else f"#{word}" for word in words][:limit]


def parse_chapters(text: str) -> list[str]:
    """Keep lines that look like "m:ss - Title"."""
    return [line.strip() for line in text.splitlines() if line.strip() and ":" in line]

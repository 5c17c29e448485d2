"""Generation step providers: script, voiceover, visuals and SEO metadata."""

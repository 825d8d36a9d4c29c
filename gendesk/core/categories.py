"""Guess desktop entry categories from keywords in a package description."""

from __future__ import annotations

DEFAULT_CATEGORY = "Application"

# Stripped from both ends of every word before matching.
_PUNCTUATION = ".,;:!?()[]{}\"'"

# First matching rule wins. Specific game genres come before the generic
# game bucket; "emulator" and "player" are only counted as games when no
# other rule claims the description first.
CATEGORY_RULES: tuple[tuple[frozenset[str], str], ...] = (
    (frozenset({"video", "audio", "sound", "graphics", "draw", "demo"}), "Application;Multimedia"),
    (frozenset({"network", "p2p"}), "Application;Network"),
    (frozenset({"synth", "synthesizer"}), "Application;AudioVideo"),
    (frozenset({"editor"}), "Application;Development;TextEditor"),
    (frozenset({"gps", "inspecting"}), "Application;Science"),
    (frozenset({"git"}), "Application;Development;RevisionControl"),
    (frozenset({"combat", "arcade", "racing", "fighting", "fight"}), "Application;Game;ArcadeGame"),
    (frozenset({"roguelike", "rpg"}), "Application;Game;AdventureGame"),
    (frozenset({"shooter", "fps"}), "Application;Game;ActionGame"),
    (frozenset({"game", "rts", "mmorpg", "emulator", "player"}), "Application;Game"),
    (frozenset({"code", "c", "ide", "programming", "develop", "compile"}), "Application;Development"),
)


def description_words(description: str) -> set[str]:
    """Return the lower-cased whole words of a description."""
    words = description.lower().replace("-", " ").split()
    return {w.strip(_PUNCTUATION) for w in words} - {""}


def classify(description: str) -> str:
    """Return the category path for a description, or "" if no rule matches."""
    words = description_words(description)
    for keywords, category in CATEGORY_RULES:
        if words & keywords:
            return category
    return ""

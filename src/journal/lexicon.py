"""Static emotion lexicon and emotion-to-activity suggestions."""

from dataclasses import dataclass

from shared_types import EmotionCategory


@dataclass(frozen=True)
class EmotionWord:
    word: str
    category: EmotionCategory
    intensity: float  # 0 to 1


def _words(category: EmotionCategory, pairs: list[tuple[str, float]]) -> list[EmotionWord]:
    return [EmotionWord(word, category, intensity) for word, intensity in pairs]


EMOTION_LEXICON: tuple[EmotionWord, ...] = tuple(
    _words(
        EmotionCategory.JOY,
        [
            ("happy", 0.8),
            ("excited", 0.9),
            ("grateful", 0.7),
            ("peaceful", 0.6),
            ("wonderful", 0.8),
            ("joyful", 0.9),
            ("delighted", 0.8),
            ("cheerful", 0.7),
            ("thrilled", 0.9),
            ("glad", 0.6),
            ("proud", 0.7),
        ],
    )
    + _words(
        EmotionCategory.SADNESS,
        [
            ("sad", 0.7),
            ("disappointed", 0.6),
            ("lonely", 0.8),
            ("hopeless", 0.9),
            ("missing", 0.5),
            ("depressed", 0.9),
            ("crying", 0.8),
            ("heartbroken", 0.9),
            ("miserable", 0.9),
            ("gloomy", 0.6),
            ("unhappy", 0.7),
        ],
    )
    + _words(
        EmotionCategory.ANGER,
        [
            ("angry", 0.8),
            ("frustrated", 0.6),
            ("annoyed", 0.5),
            ("furious", 0.9),
            ("irritated", 0.4),
            ("mad", 0.7),
            ("resentful", 0.7),
            ("outraged", 0.9),
            ("bitter", 0.6),
            ("enraged", 1.0),
        ],
    )
    + _words(
        EmotionCategory.FEAR,
        [
            ("afraid", 0.7),
            ("worried", 0.6),
            ("anxious", 0.8),
            ("nervous", 0.5),
            ("scared", 0.7),
            ("terrified", 1.0),
            ("panicked", 0.9),
            ("uneasy", 0.4),
            ("stressed", 0.6),
            ("overwhelmed", 0.7),
        ],
    )
    + _words(
        EmotionCategory.SURPRISE,
        [
            ("surprised", 0.7),
            ("amazed", 0.8),
            ("shocked", 0.9),
            ("unexpected", 0.6),
            ("astonished", 0.8),
            ("stunned", 0.8),
            ("startled", 0.6),
            ("speechless", 0.7),
            ("wow", 0.5),
        ],
    )
    + _words(
        EmotionCategory.NEUTRAL,
        [
            ("okay", 0.3),
            ("fine", 0.3),
            ("normal", 0.2),
            ("average", 0.2),
            ("regular", 0.2),
            ("ok", 0.3),
            ("usual", 0.2),
            ("ordinary", 0.2),
            ("alright", 0.3),
            ("routine", 0.2),
        ],
    )
)

# Exact lowercase lookup; first occurrence wins
LEXICON_INDEX: dict[str, EmotionWord] = {}
for _entry in EMOTION_LEXICON:
    LEXICON_INDEX.setdefault(_entry.word, _entry)
del _entry

EMOTION_ACTIVITY_SUGGESTIONS: dict[EmotionCategory, tuple[str, ...]] = {
    EmotionCategory.JOY: ("Exercise", "Friends", "Hobby", "Music", "Nature"),
    EmotionCategory.SADNESS: ("Meditation", "Music", "Reading", "Nature"),
    EmotionCategory.ANGER: ("Exercise", "Meditation", "Music"),
    EmotionCategory.FEAR: ("Meditation", "Friends", "Reading"),
    EmotionCategory.SURPRISE: ("Social", "Travel", "Shopping"),
    EmotionCategory.NEUTRAL: ("Work", "Study", "Food"),
}


def lookup(word: str):
    """Return the EmotionWord for an already-lowercased token, or None."""
    return LEXICON_INDEX.get(word)

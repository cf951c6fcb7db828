# src/social_sense/domain/lexicon.py
# Word lists and compiled patterns shared by the filter, sentiment scorer,
# sampler and bot detector. Built once and never mutated.

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import FrozenSet, Pattern, Tuple

POSITIVE_WORDS = (
    "good", "great", "awesome", "amazing", "love", "loved", "loving",
    "excellent", "fantastic", "wonderful", "beautiful", "perfect",
    "best", "brilliant", "outstanding", "incredible", "impressive",
    "helpful", "useful", "informative", "inspiring", "inspired",
    "enjoy", "enjoyed", "entertaining", "fun", "funny", "hilarious",
    "cool", "nice", "lovely", "superb", "remarkable", "exceptional",
    "recommend", "recommended", "favorite", "favourite", "valuable",
    "thank", "thanks", "grateful", "appreciate", "appreciated",
    "happy", "glad", "pleased", "satisfied", "excited",
    "agree", "agreed", "correct", "right", "true", "accurate",
    "quality", "professional", "clean", "clear", "easy", "simple",
    "worth", "effective", "efficient", "reliable", "solid", "strong",
    "creative", "innovative", "unique", "genius", "smart", "clever",
    "fire", "goat", "legendary", "epic", "dope", "sick", "lit",
    "underrated", "subscribe", "subscribed", "support", "supported",
    "insightful", "powerful", "phenomenal", "stunning", "magnificent",
    "wholesome", "blessed", "masterpiece", "flawless", "pristine",
)

NEGATIVE_WORDS = (
    "bad", "terrible", "awful", "horrible", "worst", "poor", "trash",
    "hate", "hated", "hating", "dislike", "disappointing", "disappointed",
    "boring", "bored", "waste", "wasted", "useless", "pointless",
    "wrong", "incorrect", "false", "fake", "misleading", "clickbait",
    "annoying", "annoyed", "frustrated", "frustrating", "confusing",
    "confused", "unclear", "complicated", "difficult", "hard",
    "ugly", "cheap", "broken", "failed", "failure", "error",
    "problem", "issue", "bug", "glitch", "crash", "crashed",
    "slow", "laggy", "lag", "scam", "ripoff", "overpriced",
    "overrated", "mediocre", "average", "meh", "cringe", "crappy",
    "stupid", "dumb", "ridiculous", "absurd", "nonsense",
    "stop", "quit", "unsubscribe", "unfollowed",
    "disagree", "offensive", "inappropriate", "unprofessional",
    "regret", "refund", "complaint", "lacking", "missing",
    "pathetic", "disgusting", "atrocious", "dreadful", "horrendous",
    "toxic", "garbage", "rubbish", "sucks", "lame",
)

INTENSIFIERS = (
    "very", "really", "extremely", "super", "absolutely", "totally",
    "completely", "incredibly", "amazingly", "truly", "deeply", "highly",
    "so", "insanely", "ridiculously", "unbelievably",
)

NEGATORS = (
    "not", "n't", "no", "never", "neither", "nor", "hardly", "barely",
    "scarcely", "rarely", "don't", "doesn't", "didn't", "won't",
    "wouldn't", "couldn't", "shouldn't", "isn't", "aren't", "wasn't",
)

STOP_WORDS = (
    "this", "that", "with", "from", "your", "they", "have", "will",
    "what", "about", "would", "there", "their", "which", "when",
    "like", "just", "really", "very", "been", "being", "were",
    "much", "many", "some", "more", "also", "only", "such",
    "than", "then", "them", "these", "those", "into", "over",
)

SPAM_PATTERNS = (
    r"http[s]?://",
    r"bit\.ly",
    r"check out my",
    r"subscribe to",
    r"follow me",
    r"dm me",
    r"whatsapp",
    r"telegram",
    r"\bcrypto\b.*\bmoney\b",
    r"100% guaranteed",
    r"make money",
    r"click here",
    r"free gift",
)

GENERIC_PRAISE_PATTERNS = (
    r"^nice$", r"^great$", r"^love it$", r"^amazing$", r"^cool$",
    r"^awesome$", r"^love this$", r"^great video$", r"^nice video$",
    r"^good$", r"^wow$", r"^beautiful$", r"^perfect$", r"^fire$",
    r"^\U0001F525+$", r"^(?:\u2764\ufe0f?)+$", r"^\U0001F44D+$",
)

OFF_TOPIC_PATTERNS = (
    r"^first\s*!*$",
    r"^early$",
    r"who.*here in \d{4}",
    r"anyone.*\d{4}",
    r"notification squad",
    r"roll call",
    r"^hi$",
    r"^hello$",
    r"^sub to me$",
)

# Canned phrases seen in comment farms; trailing punctuation allowed.
BOT_PHRASE_PATTERNS = (
    r"^nice[!.]*$", r"^great[!.]*$", r"^love it[!.]*$", r"^amazing[!.]*$",
    r"^cool[!.]*$", r"^awesome[!.]*$", r"^wow[!.]*$", r"^fire[!.]*$",
    r"^keep it up[!.]*$", r"^great video[!.]*$", r"^love this[!.]*$",
)

BOT_USERNAME_PATTERNS = (
    r"^user\d+$",
    r"^[a-z]+[._-]?\d{5,}$",
    r"^[a-z0-9]{20,}$",
    r"(?:^|[._-])bot(?:$|[._-]|\d)",
    r"^(?:follow|promo|free|cheap|buy)[._-]?",
    r"(.)\1{4,}",
)

OBJECTION_PATTERN = r"\b(but|however|disappointed|issue|problem|wrong|bad|terrible|worst|hate|confused|why|unclear)\b"
PURCHASE_INTENT_PATTERN = r"\b(buy|purchase|order|link|price|cost|where to get|how much)\b"


def _compile(patterns, flags=re.IGNORECASE) -> Tuple[Pattern, ...]:
    return tuple(re.compile(p, flags) for p in patterns)


@dataclass(frozen=True)
class LexiconStore:
    positive: FrozenSet[str]
    negative: FrozenSet[str]
    intensifiers: FrozenSet[str]
    negators: FrozenSet[str]
    stop_words: FrozenSet[str]
    spam: Tuple[Pattern, ...]
    generic_praise: Tuple[Pattern, ...]
    off_topic: Tuple[Pattern, ...]
    bot_phrases: Tuple[Pattern, ...]
    bot_usernames: Tuple[Pattern, ...]
    objection: Pattern
    purchase_intent: Pattern

    def is_spam(self, text: str) -> bool:
        return any(p.search(text) for p in self.spam)

    def is_generic_praise(self, text: str) -> bool:
        return any(p.search(text) for p in self.generic_praise)

    def is_off_topic(self, text: str) -> bool:
        return any(p.search(text) for p in self.off_topic)

    def is_bot_phrase(self, text: str) -> bool:
        return any(p.search(text) for p in self.bot_phrases)

    def is_bot_username(self, username: str) -> bool:
        return any(p.search(username) for p in self.bot_usernames)


@lru_cache(maxsize=1)
def get_lexicon() -> LexiconStore:
    """Return the process-wide lexicon, building it on first use."""
    return LexiconStore(
        positive=frozenset(POSITIVE_WORDS),
        negative=frozenset(NEGATIVE_WORDS),
        intensifiers=frozenset(INTENSIFIERS),
        negators=frozenset(NEGATORS),
        stop_words=frozenset(STOP_WORDS),
        spam=_compile(SPAM_PATTERNS),
        generic_praise=_compile(GENERIC_PRAISE_PATTERNS),
        off_topic=_compile(OFF_TOPIC_PATTERNS),
        bot_phrases=_compile(BOT_PHRASE_PATTERNS),
        bot_usernames=_compile(BOT_USERNAME_PATTERNS),
        objection=re.compile(OBJECTION_PATTERN, re.IGNORECASE),
        purchase_intent=re.compile(PURCHASE_INTENT_PATTERN, re.IGNORECASE),
    )

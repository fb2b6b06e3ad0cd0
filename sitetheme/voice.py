"""
voice.py — Voice-keyed headline and call-to-action copy.

Pure table lookups keyed by voice tone (warm / polished / direct), site type
and sub-type. No randomness, no model calls: the same inputs always give the
same string.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Optional

DEFAULT_TONE = "polished"
DEFAULT_SITE_TYPE = "business"
DEFAULT_GOAL = "contact"

HEADLINES: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "warm": {
        "restaurant": "Welcome to {name} — pull up a chair, stay a while",
        "spa": "{name} — your escape is waiting",
        "photography": "{name} — let's capture something beautiful",
        "business": "Hey, welcome to {name} — we're glad you're here",
        "portfolio": "{name} — Let's create something beautiful together",
        "ecommerce": "{name} — Find something you'll love",
        "booking": "{name} — Your next great experience starts here",
        "blog": "{name} — Pull up a chair, let's talk",
        "personal": "Hey, I'm {name} — nice to meet you",
        "educational": "{name} — Learn at your own pace, your own way",
        "nonprofit": "{name} — Together, we're making it happen",
        "event": "{name} — Come be part of something special",
        "landing": "{name} — We think you'll love this",
    },
    "polished": {
        "restaurant": "{name} — A Culinary Experience Beyond Compare",
        "spa": "{name} — Where Wellness Becomes an Art",
        "photography": "{name} — Timeless Images, Artfully Captured",
        "business": "{name} — Where Excellence Meets Precision",
        "portfolio": "{name} — Refined Creative Vision",
        "ecommerce": "{name} — A Curated Collection Awaits",
        "booking": "{name} — Reserve Your Premium Experience",
        "blog": "{name} — Perspectives Worth Your Attention",
        "personal": "{name} — Crafting Impact Through Expertise",
        "educational": "{name} — Elevating Skills, Transforming Careers",
        "nonprofit": "{name} — Measurable Impact, Meaningful Change",
        "event": "{name} — An Experience Designed to Inspire",
        "landing": "{name} — The Intelligent Choice",
    },
    "direct": {
        "restaurant": "{name}. Exceptional food. No compromise.",
        "spa": "{name}. Real relaxation. Real results.",
        "photography": "{name}. Your story. Beautifully told.",
        "business": "{name}. Better results, less hassle.",
        "portfolio": "{name}. Work that speaks for itself.",
        "ecommerce": "{name}. Quality products. Fair prices. Done.",
        "booking": "{name}. Book it. Show up. Love it.",
        "blog": "{name}. No fluff. Just substance.",
        "personal": "I'm {name}. Let's get to work.",
        "educational": "{name}. Learn what matters. Skip what doesn't.",
        "nonprofit": "{name}. Real impact. Real numbers.",
        "event": "{name}. Show up. Be changed.",
        "landing": "{name}. See why thousands switched.",
    },
})

# Sub-type CTAs win over the general tone × goal table.
SUBTYPE_CTAS: Mapping[str, Mapping[str, Mapping[str, str]]] = MappingProxyType({
    "restaurant": {
        "warm": {"book": "Come dine with us", "contact": "Say hello"},
        "polished": {"book": "Reserve Your Table", "contact": "Make a Reservation"},
        "direct": {"book": "Book a table", "contact": "Reserve now"},
    },
    "spa": {
        "warm": {"book": "Treat yourself", "contact": "Start your journey"},
        "polished": {"book": "Book Your Treatment", "contact": "Schedule Your Session"},
        "direct": {"book": "Book a session", "contact": "Book now"},
    },
    "photography": {
        "warm": {"book": "Let's capture your story", "contact": "Let's talk about your shoot"},
        "polished": {"book": "Book Your Session", "contact": "Schedule a Consultation"},
        "direct": {"book": "Book a shoot", "contact": "Get in touch"},
    },
})

CTAS: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "warm": {
        "contact": "Let's chat",
        "book": "Book your spot",
        "showcase": "Take a look around",
        "sell": "Shop now",
        "hire": "Let's work together",
        "attention": "See the work",
        "audience": "Come along",
        "convert": "Join us",
    },
    "polished": {
        "contact": "Schedule a Consultation",
        "book": "Reserve Your Experience",
        "showcase": "Explore Our Portfolio",
        "sell": "Shop the Collection",
        "hire": "Discuss Your Project",
        "attention": "View Selected Works",
        "audience": "Subscribe",
        "convert": "Get Started",
    },
    "direct": {
        "contact": "Get in touch",
        "book": "Book now",
        "showcase": "See the work",
        "sell": "Shop now",
        "hire": "Hire me",
        "attention": "See portfolio",
        "audience": "Follow",
        "convert": "Sign up",
    },
})

# Softer phrasing when the brand asked not to sound pushy. Warm tone only.
SALESY_CTAS: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "warm": {
        "book": "See what's available",
        "sell": "Browse the collection",
    },
})


def resolve_tone(voice_tone: Optional[str]) -> str:
    return voice_tone if voice_tone in HEADLINES else DEFAULT_TONE


def get_voice_keyed_headline(
    business_name: str,
    site_type: Optional[str],
    voice_tone: Optional[str],
    sub_type: Optional[str] = None,
) -> str:
    """Hero headline: sub-type entry, else site-type entry, else the business entry."""
    table = HEADLINES[resolve_tone(voice_tone)]
    template = (
        (sub_type and table.get(sub_type))
        or (site_type and table.get(site_type))
        or table[DEFAULT_SITE_TYPE]
    )
    return template.format(name=business_name)


def get_voice_keyed_cta_text(
    goal: str,
    voice_tone: Optional[str],
    anti_references: Optional[Iterable[str]] = None,
    sub_type: Optional[str] = None,
) -> str:
    """
    Button / CTA copy for a conversion goal.

    Unlike headlines, an unknown tone is not mapped to polished: any miss on
    tone or goal gives the polished contact CTA.
    """
    tone = voice_tone or ""

    subtype_text = SUBTYPE_CTAS.get(sub_type or "", {}).get(tone, {}).get(goal)
    if subtype_text:
        return subtype_text

    if "salesy" in set(anti_references or ()):
        softened = SALESY_CTAS.get(tone, {}).get(goal)
        if softened:
            return softened

    return CTAS.get(tone, {}).get(goal) or CTAS[DEFAULT_TONE][DEFAULT_GOAL]

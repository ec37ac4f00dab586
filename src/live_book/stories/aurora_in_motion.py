"""Bundled default story: Aurora in Motion."""

from __future__ import annotations

from typing import Any

from live_book.api.contracts import BookConfig

AURORA_IN_MOTION: dict[str, Any] = {
    "title": "Aurora in Motion",
    "theme": "Interdependence and the courage to rewrite inherited destinies",
    "setting": "Ilyrion, a chain of skyborne districts linked by singing light-bridges",
    "mood": "lyrical science fantasy humming with anticipation",
    "chapters_per_act": 3,
    "characters": [
        {
            "name": "Mira Solace",
            "role": "a cartographer of auroral currents",
            "desire": "map a stable path through the storm season before the bridges shear apart",
            "fear": "that a single miscalculation will send an entire district plummeting",
            "secret": "she once erased part of a map to protect her sister from a dangerous expedition",
            "arc": [
                {
                    "title": "Cartographer of Light",
                    "summary": "she charts the shimmering coordinates that keep the archipelago afloat",
                },
                {
                    "title": "Facing the Blank Zones",
                    "summary": (
                        "she confronts the purposeful gaps left by generations who feared "
                        "what the aurora might reveal"
                    ),
                },
                {
                    "title": "Sharing the Atlas",
                    "summary": (
                        "she invites her allies to help draw a living map that responds to "
                        "every heart in the city"
                    ),
                },
            ],
        },
        {
            "name": "Jonas Vale",
            "role": "a conductor of memory threads",
            "desire": "synchronize the city's communal memories into a single guiding melody",
            "fear": "that the discord he hides will fracture his carefully tuned harmonies",
            "secret": "he siphons fragments of forgotten songs to keep his own grief muted",
            "arc": [
                {
                    "title": "Curator of Echoes",
                    "summary": (
                        "he braids together the recollections that keep the populace "
                        "emotionally aligned"
                    ),
                },
                {
                    "title": "Discordant Interruption",
                    "summary": "he admits that his orchestration silences dissent and must be unbound",
                },
                {
                    "title": "Resonant Conductor",
                    "summary": (
                        "he conducts a chorus that includes every fractured voice without "
                        "dissolving the harmony"
                    ),
                },
            ],
        },
        {
            "name": "Eira Quell",
            "role": "an engineer of tether engines",
            "desire": "stabilize the failing core reactor before storm season peaks",
            "fear": "that the system will expose her childhood sabotage meant to free a trapped district",
            "secret": "she once severed a tether to liberate her neighborhood from corporate oversight",
            "arc": [
                {
                    "title": "Guardian of the Tethers",
                    "summary": (
                        "she patches the machinery that anchors each district to the aurora currents"
                    ),
                },
                {
                    "title": "Reckoning with Sabotage",
                    "summary": (
                        "she confronts how her rebellion weakened the very systems she now protects"
                    ),
                },
                {
                    "title": "Architect of Trust",
                    "summary": (
                        "she invites the citizens to co-design the engines, sharing the burden "
                        "of stewardship"
                    ),
                },
            ],
        },
    ],
}


def default_book_config() -> BookConfig:
    """Return a fresh, validated copy of the bundled story."""
    return BookConfig.model_validate(AURORA_IN_MOTION)

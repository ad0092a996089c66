# File: rueda/core/emotions.py
# Project: RuedaEmociones (REM)
# Version: 0.4.0
# Status: stable
# Date: 2026-10-13
# Purpose: Taxonomía de emociones incluida (emoción núcleo -> secundaria -> terciaria).
# Notes: Orden = orden de dibujo en la rueda (horario desde las 12).
from __future__ import annotations

from rueda.core.models import Node

# (núcleo, ((secundaria, (terciarias...)), ...))
EMOTIONS: tuple[tuple[str, tuple[tuple[str, tuple[str, ...]], ...]], ...] = (
    ("Happy", (
        ("Playful", ("Aroused", "Cheeky")),
        ("Content", ("Free", "Joyful")),
        ("Interested", ("Curious", "Inquisitive")),
        ("Proud", ("Successful", "Confident")),
        ("Accepted", ("Respected", "Valued")),
        ("Powerful", ("Courageous", "Creative")),
        ("Peaceful", ("Loving", "Thankful")),
        ("Trusting", ("Sensitive", "Intimate")),
        ("Optimistic", ("Hopeful", "Inspired")),
    )),
    ("Sad", (
        ("Lonely", ("Isolated", "Abandoned")),
        ("Vulnerable", ("Victimised", "Fragile")),
        ("Despair", ("Grief", "Powerless")),
        ("Guilty", ("Ashamed", "Remorseful")),
        ("Depressed", ("Inferior", "Empty")),
        ("Hurt", ("Embarrassed", "Disappointed")),
    )),
    ("Disgusted", (
        ("Disapproving", ("Judgemental", "Embarrassed")),
        ("Disappointed", ("Appalled", "Revolted")),
        ("Awful", ("Nauseated", "Detestable")),
        ("Repelled", ("Horrified", "Hesitant")),
    )),
    ("Angry", (
        ("Let down", ("Betrayed", "Resentful")),
        ("Humiliated", ("Disrespected", "Ridiculed")),
        ("Bitter", ("Indignant", "Violated")),
        ("Mad", ("Furious", "Jealous")),
        ("Aggressive", ("Provoked", "Hostile")),
        ("Frustrated", ("Infuriated", "Annoyed")),
        ("Distant", ("Withdrawn", "Numb")),
        ("Critical", ("Sceptical", "Dismissive")),
    )),
    ("Fearful", (
        ("Scared", ("Helpless", "Frightened")),
        ("Anxious", ("Overwhelmed", "Worried")),
        ("Insecure", ("Inadequate", "Inferior")),
        ("Weak", ("Worthless", "Insignificant")),
        ("Rejected", ("Excluded", "Persecuted")),
        ("Threatened", ("Nervous", "Exposed")),
    )),
    ("Bad", (
        ("Bored", ("Indifferent", "Apathetic")),
        ("Busy", ("Pressured", "Rushed")),
        ("Stressed", ("Overwhelmed", "Out of control")),
        ("Tired", ("Sleepy", "Unfocussed")),
    )),
    ("Surprised", (
        ("Startled", ("Shocked", "Dismayed")),
        ("Confused", ("Disillusioned", "Perplexed")),
        ("Amazed", ("Astonished", "Awe")),
        ("Excited", ("Eager", "Energetic")),
    )),
)


def build_emotion_tree(root_name: str = "Emotions") -> Node:
    """Árbol de 3 niveles listo para la rueda."""
    return Node(
        name=root_name,
        children=tuple(
            Node(core, tuple(
                Node(secondary, tuple(Node(t) for t in tertiary))
                for secondary, tertiary in secondaries
            ))
            for core, secondaries in EMOTIONS
        ),
    )

"""
Tests for the keyword responder.
"""
import random

import pytest

from mindcare.schemas import CrisisReply, ExerciseReply, TechniqueReply, TextReply
from mindcare.services.responder import CRISIS_MESSAGE, ResponseEngine
from mindcare.services.translations import TRANSLATIONS

from .conftest import FixedRandom

EN = TRANSLATIONS["en"]


@pytest.mark.parametrize("message", [
    "hello, I want to kill myself",
    "I'm feeling anxious, please help me",
    "There is an EMERGENCY",
    "i can't go on like this",
])
def test_crisis_phrases_win(responder, message):
    reply = responder.generate_response(message)

    assert isinstance(reply, CrisisReply)
    assert reply.urgent is True
    assert reply.text == CRISIS_MESSAGE


@pytest.mark.parametrize("message, intent", [
    ("Hello there", "greeting"),
    ("I feel anxious", "mood_sharing"),
    ("panic attack again", "anxiety"),
    ("so hopeless lately", "depression"),
    ("burnout at work", "stress"),
    ("insomnia again", "sleep"),
    ("my partner left", "relationships"),
    ("some self-care ideas", "self_care"),
    ("negative thoughts", "cbt_help"),
    ("can we breathe", "breathing"),
    ("meditation", "mindfulness"),
    ("so grateful", "gratitude"),
    ("how to cope", "coping"),
    ("making progress", "progress"),
    ("any resources", "resources"),
    ("bananas", "general"),
])
def test_recognize_intent(responder, message, intent):
    assert responder.recognize_intent(message.lower()) == intent


def test_same_input_same_reply():
    a = ResponseEngine(rng=FixedRandom(0.6))
    b = ResponseEngine(rng=FixedRandom(0.6))
    for message in ("hello", "panic", "bananas", "good mood", "breathe"):
        assert a.generate_response(message) == b.generate_response(message)


def test_seeded_random_is_reproducible():
    a = ResponseEngine(rng=random.Random(42))
    b = ResponseEngine(rng=random.Random(42))
    assert [a.generate_response("hello").text for _ in range(5)] == \
           [b.generate_response("hello").text for _ in range(5)]


def test_rng_picks_from_pool(responder):
    assert responder.generate_response("hello").text == EN["greetings"][0]

    last = ResponseEngine(rng=FixedRandom(0.999))
    assert last.generate_response("hello").text == EN["greetings"][-1]


def test_technique_reply(responder):
    reply = responder.generate_response("panic attack")

    assert isinstance(reply, TechniqueReply)
    assert reply.type == "anxiety_support"
    assert reply.techniques == ["breathing", "grounding"]
    assert reply.text in EN["anxiety"]


def test_text_reply(responder):
    reply = responder.generate_response("my family")
    assert isinstance(reply, TextReply)
    assert reply.type == "relationship_support"


def test_breathing_reply_carries_exercise(responder):
    reply = responder.generate_response("I need to breathe")

    assert isinstance(reply, ExerciseReply)
    assert reply.exercise.name == "4-7-8 Breathing"
    assert reply.text == reply.exercise.instruction


@pytest.mark.parametrize("message, pool", [
    ("good mood today", "mood_positive"),
    ("bad mood today", "mood_negative"),
    ("my mood is ok", "mood_neutral"),
])
def test_mood_sharing_tone(responder, message, pool):
    reply = responder.generate_response(message)
    assert reply.type == "mood_response"
    assert reply.text == EN[pool][0]


def test_general_fallback(responder):
    reply = responder.generate_response("bananas")
    assert reply.type == "general_support"
    assert reply.text == EN["general"][0]


def test_recent_topics_keeps_last_five(responder):
    for i in range(7):
        responder.generate_response(f"message {i}")
    assert responder.recent_topics == [f"message {i}" for i in range(2, 7)]


# --------------------------------------------------
# Localization
# --------------------------------------------------
def test_translation_lookup(responder):
    assert responder.get_translation("welcome") == EN["welcome"]
    assert responder.get_translation("encouragement.5") == EN["encouragement"]["5"]
    assert responder.get_translation("greetings.1") == EN["greetings"][1]


def test_translation_falls_back_to_english_then_key(responder):
    responder.set_language("hi")
    assert responder.get_translation("greetings") == TRANSLATIONS["hi"]["greetings"]
    assert responder.get_translation("anxiety") == EN["anxiety"]
    assert responder.get_translation("no.such.key") == "no.such.key"

    responder.set_language("xx")
    assert responder.get_translation("general") == EN["general"]


def test_replies_follow_language(responder):
    responder.set_language("kn")
    assert responder.generate_response("hello").text == TRANSLATIONS["kn"]["greetings"][0]
    # untranslated pools come from English
    assert responder.generate_response("insomnia").text == EN["sleep"][0]


def test_mood_encouragement(responder):
    assert responder.mood_encouragement(1) == EN["encouragement"]["1"]
    assert responder.mood_encouragement(9) == EN["encouragement"]["default"]


def test_technique_library(responder):
    assert responder.get_cbt_technique("thought_challenging").steps[0] == "Identify the automatic thought"
    assert responder.get_cbt_technique("nope") is None
    assert responder.random_mindfulness_technique().name == "5-4-3-2-1 Grounding"
    assert "us" in responder.crisis_resources()

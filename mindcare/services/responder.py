"""
Keyword responder.

Crisis phrases are checked first and always win. Otherwise the first intent
(in declaration order) with a matching keyword picks the reply pool, and one
reply is drawn from it with the injected random source.
"""
import logging
import random
from collections import deque

from ..schemas import (
    BreathingExercise,
    CBTTechnique,
    CrisisReply,
    ExerciseReply,
    MindfulnessTechnique,
    TechniqueReply,
    TextReply,
)
from .translations import TRANSLATIONS

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"
CONTEXT_SIZE = 5

# Not translated: matched against the lower-cased input in any language
CRISIS_KEYWORDS = [
    "suicide", "kill myself", "end it all", "not worth living",
    "hurt myself", "self harm", "cutting", "overdose",
    "emergency", "crisis", "help me", "can't go on",
]

CRISIS_MESSAGE = (
    "I'm really concerned about what you're sharing with me. Your safety is the most important thing right now. "
    "Please reach out to a crisis helpline immediately:\n\n"
    "🇺🇸 National Suicide Prevention Lifeline: 988\n"
    "🇺🇸 Crisis Text Line: Text HOME to 741741\n"
    "🇬🇧 Samaritans: 116 123\n"
    "🇦🇺 Lifeline: 13 11 14\n\n"
    "You don't have to face this alone. There are people who care and want to help you. "
    "Please reach out to someone you trust or a mental health professional right away."
)

# Order is the match priority
INTENT_KEYWORDS = {
    "greeting": ["hello", "hi", "hey", "good morning", "good afternoon", "good evening"],
    "mood_sharing": ["feeling", "feel", "mood", "sad", "happy", "angry", "anxious", "depressed", "excited", "worried"],
    "anxiety": ["anxious", "anxiety", "worried", "worry", "nervous", "panic", "overwhelmed", "stressed"],
    "depression": ["depressed", "sad", "down", "hopeless", "empty", "worthless", "suicidal"],
    "stress": ["stressed", "stress", "pressure", "overwhelmed", "burnout", "tired"],
    "sleep": ["sleep", "insomnia", "tired", "exhausted", "rest"],
    "relationships": ["relationship", "partner", "family", "friend", "lonely", "isolated"],
    "self_care": ["self care", "self-care", "care for myself", "treat myself"],
    "cbt_help": ["cbt", "cognitive", "thoughts", "thinking", "negative thoughts"],
    "breathing": ["breathing", "breathe", "calm down", "relax"],
    "mindfulness": ["mindful", "mindfulness", "meditation", "present"],
    "gratitude": ["grateful", "gratitude", "thankful", "appreciate"],
    "coping": ["cope", "coping", "deal with", "handle"],
    "progress": ["progress", "improvement", "better", "getting better"],
    "resources": ["help", "resources", "support", "crisis"],
}

POSITIVE_WORDS = ("good", "great", "happy", "excited")
NEGATIVE_WORDS = ("bad", "sad", "terrible", "awful")

# intent -> (translation category, reply type, technique tags)
INTENT_REPLIES = {
    "greeting": ("greetings", "greeting", None),
    "anxiety": ("anxiety", "anxiety_support", ["breathing", "grounding"]),
    "depression": ("depression", "depression_support", ["behavioral_activation", "self_compassion"]),
    "stress": ("stress", "stress_support", ["progressive_relaxation", "mindfulness"]),
    "sleep": ("sleep", "sleep_support", ["sleep_hygiene", "breathing"]),
    "relationships": ("relationships", "relationship_support", None),
    "self_care": ("self_care", "self_care_support", None),
    "cbt_help": ("cbt", "cbt_technique", ["thought_challenging"]),
    "mindfulness": ("mindfulness", "mindfulness_practice", ["grounding"]),
    "gratitude": ("gratitude", "gratitude_practice", None),
    "coping": ("coping", "coping_strategies", None),
    "progress": ("progress", "progress_celebration", None),
    "resources": ("resources", "resources_info", None),
    "general": ("general", "general_support", None),
}

BREATHING_EXERCISES = [
    BreathingExercise(
        name="4-7-8 Breathing",
        instruction="Breathe in for 4 counts, hold for 7, exhale for 8. Repeat 4 times. "
                    "This activates your body's relaxation response.",
        duration="2-3 minutes",
    ),
    BreathingExercise(
        name="Box Breathing",
        instruction="Breathe in for 4, hold for 4, exhale for 4, hold for 4. Imagine drawing a box with your breath.",
        duration="3-5 minutes",
    ),
    BreathingExercise(
        name="Diaphragmatic Breathing",
        instruction="Place one hand on your chest, one on your belly. Breathe so only your belly hand moves. "
                    "This engages your diaphragm for deeper, calmer breathing.",
        duration="5-10 minutes",
    ),
]

MINDFULNESS_TECHNIQUES = [
    MindfulnessTechnique(
        name="5-4-3-2-1 Grounding",
        instruction="Name 5 things you can see, 4 you can touch, 3 you can hear, 2 you can smell, 1 you can taste. "
                    "This brings you back to the present moment.",
    ),
    MindfulnessTechnique(
        name="Body Scan",
        instruction="Slowly scan your body from head to toe, noticing any sensations without judgment. "
                    "This helps you connect with your physical self.",
    ),
    MindfulnessTechnique(
        name="Mindful Breathing",
        instruction="Focus on your breath without changing it. When your mind wanders, gently return to your breath. "
                    "This builds present-moment awareness.",
    ),
]

CBT_TECHNIQUES = {
    "thought_challenging": CBTTechnique(
        name="Thought Challenging",
        steps=[
            "Identify the automatic thought",
            "Rate how much you believe it (0-100%)",
            "Look for evidence for and against the thought",
            "Consider alternative explanations",
            "Rate your belief again",
            "Develop a balanced thought",
        ],
    ),
    "behavioral_activation": CBTTechnique(
        name="Behavioral Activation",
        description="Engaging in activities that bring pleasure or mastery",
        suggestions=[
            "Take a short walk",
            "Call a friend",
            "Listen to music",
            "Do something creative",
            "Practice a hobby",
        ],
    ),
    "cognitive_restructuring": CBTTechnique(
        name="Cognitive Restructuring",
        description="Changing negative thought patterns",
        techniques=[
            "All-or-nothing thinking",
            "Catastrophizing",
            "Mind reading",
            "Fortune telling",
            "Should statements",
        ],
    ),
}

CRISIS_RESOURCES = {
    "us": {
        "suicidePrevention": "988",
        "crisisText": "Text HOME to 741741",
        "nationalLifeline": "1-800-273-8255",
    },
    "uk": {
        "samaritans": "116 123",
        "crisisText": "Text SHOUT to 85258",
    },
    "australia": {
        "lifeline": "13 11 14",
        "crisisText": "Text HOME to 741741",
    },
}


def _lookup(node, parts):
    for part in parts:
        if isinstance(node, dict) and node.get(part):
            node = node[part]
        elif isinstance(node, list) and part.isdigit() and int(part) < len(node):
            node = node[int(part)]
        else:
            return None
    return node


class ResponseEngine:
    """
    ``rng`` is any object with a ``random() -> float`` method in [0, 1);
    a seeded ``random.Random`` or a stub returning fixed values both work.
    """

    def __init__(self, rng=None, language: str = DEFAULT_LANGUAGE, translations: dict = TRANSLATIONS):
        self._rng = rng or random.Random()
        self.translations = translations
        self.current_language = language
        self._recent_topics = deque(maxlen=CONTEXT_SIZE)

    # --------------------------------------------------
    # Localization
    # --------------------------------------------------
    def set_language(self, code: str):
        self.current_language = code

    def get_translation(self, key: str):
        """Current language, then English, then the key itself."""
        parts = key.split(".")
        value = _lookup(self.translations.get(self.current_language), parts)
        if value is None:
            value = _lookup(self.translations.get(DEFAULT_LANGUAGE), parts)
        if value is None:
            return key
        return value

    # --------------------------------------------------
    # Pipeline
    # --------------------------------------------------
    @property
    def recent_topics(self) -> list[str]:
        return list(self._recent_topics)

    def is_crisis_message(self, message: str) -> bool:
        return any(k in message for k in CRISIS_KEYWORDS)

    def recognize_intent(self, message: str) -> str:
        for intent, keywords in INTENT_KEYWORDS.items():
            if any(k in message for k in keywords):
                return intent
        return "general"

    def generate_response(self, user_message: str):
        message = user_message.lower().strip()

        # kept for later multi-turn use; nothing reads it yet
        self._recent_topics.append(user_message)

        if self.is_crisis_message(message):
            logger.warning("Crisis keywords detected, returning crisis resources")
            return CrisisReply(text=CRISIS_MESSAGE)

        intent = self.recognize_intent(message)

        if intent == "mood_sharing":
            return self._mood_sharing(message)
        if intent == "breathing":
            exercise = self.random_breathing_exercise()
            return ExerciseReply(text=exercise.instruction, exercise=exercise)

        category, reply_type, techniques = INTENT_REPLIES[intent]
        text = self._pick(self.get_translation(category))
        if techniques:
            return TechniqueReply(type=reply_type, text=text, techniques=techniques)
        return TextReply(type=reply_type, text=text)

    def _mood_sharing(self, message: str) -> TextReply:
        tone = "neutral"
        if any(w in message for w in POSITIVE_WORDS):
            tone = "positive"
        elif any(w in message for w in NEGATIVE_WORDS):
            tone = "negative"
        return TextReply(type="mood_response", text=self._pick(self.get_translation(f"mood_{tone}")))

    def _pick(self, pool):
        if isinstance(pool, str):
            return pool
        return pool[int(self._rng.random() * len(pool))]

    # --------------------------------------------------
    # Technique library
    # --------------------------------------------------
    def random_breathing_exercise(self) -> BreathingExercise:
        return self._pick(BREATHING_EXERCISES)

    def random_mindfulness_technique(self) -> MindfulnessTechnique:
        return self._pick(MINDFULNESS_TECHNIQUES)

    def get_cbt_technique(self, name: str) -> CBTTechnique | None:
        return CBT_TECHNIQUES.get(name)

    def crisis_resources(self) -> dict:
        return CRISIS_RESOURCES

    # --------------------------------------------------
    # Canned lines for the chat log
    # --------------------------------------------------
    def welcome_message(self) -> str:
        return self._pick(self.get_translation("welcome"))

    def mood_encouragement(self, mood: int) -> str:
        if mood not in range(1, 6):
            return self.get_translation("encouragement.default")
        return self.get_translation(f"encouragement.{mood}")

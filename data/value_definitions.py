"""
Value Definitions
=================

Static card definitions for the exercise. The ``limited`` set is the first
slice of the full list.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValueDefinition:
    """A built-in value card: upper-case name and short description."""

    name: str
    description: str


ALL_VALUE_DEFINITIONS: tuple[ValueDefinition, ...] = (
    ValueDefinition("ACCEPTANCE", "to be accepted as I am"),
    ValueDefinition("ACCURACY", "to be accurate in my opinions and beliefs"),
    ValueDefinition("ACHIEVEMENT", "to have important accomplishments"),
    ValueDefinition("ADVENTURE", "to have new and exciting experiences"),
    ValueDefinition("ATTRACTIVENESS", "to be physically attractive"),
    ValueDefinition("AUTHORITY", "to be in charge of and responsible for others"),
    ValueDefinition("AUTONOMY", "to be self-determined and independent"),
    ValueDefinition("BEAUTY", "to appreciate beauty around me"),
    ValueDefinition("CARING", "to take care of others"),
    ValueDefinition("CHALLENGE", "to take on difficult tasks and problems"),
    ValueDefinition("CHANGE", "to have a life full of change and variety"),
    ValueDefinition("COMFORT", "to have a pleasant and comfortable life"),
    ValueDefinition("COMMITMENT", "to make enduring, meaningful commitments"),
    ValueDefinition("COMPASSION", "to feel and act on concern for others"),
    ValueDefinition("CONTRIBUTION", "to make a lasting contribution in the world"),
    ValueDefinition("COOPERATION", "to work collaboratively with others"),
    ValueDefinition("COURTESY", "to be considerate and polite toward others"),
    ValueDefinition("CREATIVITY", "to have new and original ideas"),
    ValueDefinition("DEPENDABILITY", "to be reliable and trustworthy"),
    ValueDefinition("DUTY", "to carry out my duties and obligations"),
    ValueDefinition("ECOLOGY", "to live in harmony with the environment"),
    ValueDefinition("EXCITEMENT", "to have a life full of thrills and stimulation"),
    ValueDefinition("FAITHFULNESS", "to be loyal and true in relationships"),
    ValueDefinition("FAME", "to be known and recognized"),
    ValueDefinition("FAMILY", "to have a happy, loving family"),
    ValueDefinition("FITNESS", "to be physically fit and strong"),
    ValueDefinition("FLEXIBILITY", "to adjust to new circumstances easily"),
    ValueDefinition("FORGIVENESS", "to be forgiving of others"),
    ValueDefinition("FRIENDSHIP", "to have close, supportive friends"),
    ValueDefinition("FUN", "to play and have fun"),
    ValueDefinition("GENEROSITY", "to give what I have to others"),
    ValueDefinition("GENUINENESS", "to act in a manner that is true to who I am"),
    ValueDefinition("GOD'S WILL", "to seek and obey the will of God"),
    ValueDefinition("GROWTH", "to keep changing and growing"),
    ValueDefinition("HEALTH", "to be physically well and healthy"),
    ValueDefinition("HELPFULNESS", "to be helpful to others"),
    ValueDefinition("HONESTY", "to be honest and truthful"),
    ValueDefinition("HOPE", "to maintain a positive and optimistic outlook"),
    ValueDefinition("HUMILITY", "to be modest and unassuming"),
    ValueDefinition("HUMOR", "to see the humorous side of myself and the world"),
    ValueDefinition("INDEPENDENCE", "to be free from dependence on others"),
    ValueDefinition("INDUSTRY", "to work hard and well at my life tasks"),
    ValueDefinition("INNER PEACE", "to experience personal peace"),
    ValueDefinition("INTIMACY", "to share my innermost experiences with others"),
    ValueDefinition("JUSTICE", "to promote fair and equal treatment for all"),
    ValueDefinition("KNOWLEDGE", "to learn and contribute valuable knowledge"),
    ValueDefinition("LEISURE", "to take time to relax and enjoy"),
    ValueDefinition("LOVED", "to be loved by those close to me"),
    ValueDefinition("LOVING", "to give love to others"),
    ValueDefinition("MASTERY", "to be competent in my everyday activities"),
    ValueDefinition("MINDFULNESS", "to live consciously and mindfully of the present moment"),
    ValueDefinition("MODERATION", "to avoid excesses and find a middle ground"),
    ValueDefinition("MONOGAMY", "to have one close, loving relationship"),
    ValueDefinition("NONCONFORMITY", "to question and challenge authority and norms"),
    ValueDefinition("NURTURANCE", "to take care of and nurture others"),
    ValueDefinition("OPENNESS", "to be open to new experiences, ideas, and options"),
    ValueDefinition("ORDER", "to have a life that is well-ordered and organized"),
    ValueDefinition("PASSION", "to have deep feelings about ideas, activities, or people"),
    ValueDefinition("PLEASURE", "to feel good"),
    ValueDefinition("POPULARITY", "to be well-liked by many people"),
    ValueDefinition("POWER", "to have control over others"),
    ValueDefinition("PURPOSE", "to have meaning and direction in my life"),
    ValueDefinition("RATIONALITY", "to be guided by reason and logic"),
    ValueDefinition("REALISM", "to see and act realistically and practically"),
    ValueDefinition("RESPONSIBILITY", "to make and carry out responsible decisions"),
    ValueDefinition("RISK", "to take risks and chances"),
    ValueDefinition("ROMANCE", "to have intense, exciting love in my life"),
    ValueDefinition("SAFETY", "to be safe and secure"),
    ValueDefinition("SELF-ACCEPTANCE", "to accept myself as I am"),
    ValueDefinition("SELF-CONTROL", "to be disciplined in my own actions"),
    ValueDefinition("SELF-ESTEEM", "to feel good about myself"),
    ValueDefinition("SELF-KNOWLEDGE", "to have a deep and honest understanding of myself"),
    ValueDefinition("SERVICE", "to be of service to others"),
    ValueDefinition("SEXUALITY", "to have an active and satisfying sex life"),
    ValueDefinition("SIMPLICITY", "to live life simply, with minimal needs"),
    ValueDefinition("SOLITUDE", "to have time and space where I can be apart from others"),
    ValueDefinition("SPIRITUALITY", "to grow and mature spiritually"),
    ValueDefinition("STABILITY", "to have a life that stays fairly consistent"),
    ValueDefinition("TOLERANCE", "to accept and respect those who differ from me"),
    ValueDefinition("TRADITION", "to follow respected patterns of the past"),
    ValueDefinition("VIRTUE", "to live a morally pure and excellent life"),
    ValueDefinition("WEALTH", "to have plenty of money"),
    ValueDefinition("WORLD PEACE", "to work to promote peace in the world"),
)

LIMITED_COUNT = 10

VALUE_SETS = ("limited", "all")

_DESCRIPTIONS = {d.name: d.description for d in ALL_VALUE_DEFINITIONS}


def definitions_for(value_set: str, limited_count: int = LIMITED_COUNT) -> tuple[ValueDefinition, ...]:
    """Return the ordered definitions that seed a fresh exercise."""
    if value_set == "all":
        return ALL_VALUE_DEFINITIONS
    if value_set == "limited":
        return ALL_VALUE_DEFINITIONS[:limited_count]
    raise ValueError(f"Unknown value set: {value_set}")


def description_for(name: str) -> str:
    """Look up the built-in description for a card name ("" if none)."""
    return _DESCRIPTIONS.get(name.upper(), "")

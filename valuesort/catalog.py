"""The fixed set of value cards.

Curated from Acceptance and Commitment Therapy values work (Russ Harris,
Kelly Wilson). Order matters: it is the enumeration order for pairing and
the final tie-break for ranking.
"""

from collections.abc import Sequence

from valuesort.models import ValueCard

VALUES: tuple[ValueCard, ...] = (
    ValueCard(
        id="connection",
        name="Connection",
        description="Building and nurturing close relationships with others",
    ),
    ValueCard(
        id="growth",
        name="Growth",
        description="Continuously learning and developing as a person",
    ),
    ValueCard(
        id="health",
        name="Health",
        description="Taking care of your physical and mental wellbeing",
    ),
    ValueCard(
        id="creativity",
        name="Creativity",
        description="Expressing yourself and bringing new ideas to life",
    ),
    ValueCard(
        id="adventure",
        name="Adventure",
        description="Seeking new experiences and embracing the unknown",
    ),
    ValueCard(
        id="compassion",
        name="Compassion",
        description="Showing kindness and care for yourself and others",
    ),
    ValueCard(
        id="achievement",
        name="Achievement",
        description="Setting goals and working hard to accomplish them",
    ),
    ValueCard(
        id="authenticity",
        name="Authenticity",
        description="Being true to yourself and living with integrity",
    ),
    ValueCard(
        id="contribution",
        name="Contribution",
        description="Making a positive difference in the world around you",
    ),
    ValueCard(
        id="freedom",
        name="Freedom",
        description="Having autonomy and independence in your choices",
    ),
    ValueCard(
        id="security",
        name="Security",
        description="Creating stability and safety in your life",
    ),
    ValueCard(
        id="fun",
        name="Fun",
        description="Enjoying life and making time for play and pleasure",
    ),
)


def get_card(card_id: str, items: Sequence[ValueCard] = VALUES) -> ValueCard:
    """Look up a card by id.

    Raises:
        KeyError: If no card has the given id
    """
    for card in items:
        if card.id == card_id:
            return card
    raise KeyError(card_id)

from typing import Dict, Tuple

from env.core.types import CharacterType

# Lines every character sees regardless of archetype.
GENERAL_GUIDANCE: Tuple[str, ...] = (
    "Focus fire: attack the weakest enemy to take threats off the board",
    "Protect the team: heal allies below 30% HP before they go down",
)

# One entry per archetype. Adding an archetype means adding a row here.
ARCHETYPE_GUIDANCE: Dict[CharacterType, Tuple[str, ...]] = {
    CharacterType.WARRIOR: (
        "Tank role: hold the front line and shield weaker allies",
        "Your high defense lets you absorb damage others cannot",
        "Strike the highest-threat enemies to cut incoming team damage",
    ),
    CharacterType.MAGE: (
        "Caster role: stay safe, your survival keeps the team's damage up",
        "Heal when your own HP is low or a teammate is critical",
        "Pressure the powerful enemies that threaten your team",
    ),
    CharacterType.ARCHER: (
        "Ranged role: stay back and keep steady damage on one target",
        "Remove enemies one by one instead of spreading damage",
        "Heal a teammate who drops below 20% HP",
    ),
    CharacterType.ROGUE: (
        "Finesse role: quick strikes on enemies that are already hurt",
        "Finish wounded enemies before they can act again",
        "Support the team with healing when no kill is available and you are safe",
    ),
}


def guidance_for(character_type: CharacterType) -> Tuple[str, ...]:
    """General lines followed by the archetype's own lines."""
    return GENERAL_GUIDANCE + ARCHETYPE_GUIDANCE.get(character_type, ())

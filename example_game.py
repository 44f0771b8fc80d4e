"""
Example script asking agents for one round of commands.

This shows how to:
1. Build two parties of characters
2. Create agents (directly and from an AgentSpec)
3. Ask each agent for a command per character

Without an API key for the configured model the LLM agent falls back to
attacking the weakest enemy, so the script always runs to completion.
"""

from agents import AgentSpec, RuleBasedAgent, create_agent_from_spec
from env import Character, CharacterType, GameState, Stats
from infra import configure_logging, load_settings


def create_parties():
    """Create a small blue party and a red party."""
    heroes = [
        Character("Knight", CharacterType.WARRIOR, Stats(120, 150, 10, 20, 22, 15)),
        Character("Cleric", CharacterType.MAGE, Stats(35, 90, 60, 100, 14, 6)),
        Character("Robin", CharacterType.ARCHER, Stats(70, 90, 20, 30, 20, 8)),
    ]
    monsters = [
        Character("Orc", CharacterType.WARRIOR, Stats(40, 120, 0, 0, 18, 12)),
        Character("Goblin", CharacterType.ROGUE, Stats(15, 60, 0, 0, 12, 4)),
        Character("Shaman", CharacterType.MAGE, Stats(50, 70, 40, 40, 16, 5)),
    ]
    return heroes, monsters


def main():
    """Run one round of decisions."""
    settings = load_settings()
    configure_logging(settings.log_level, json=settings.log_json, logfile=settings.log_file)

    print("Battle Agent - Example Round")
    print("=" * 80)

    heroes, monsters = create_parties()
    game_state = GameState(round_number=1, turn_number=1)

    blue_agent = create_agent_from_spec(AgentSpec(type="llm", name="Blue LLM"))
    red_agent = RuleBasedAgent(name="Red Rules")

    print(f"Blue Agent: {blue_agent} (model: {settings.model})")
    print(f"Red Agent:  {red_agent}")
    print()

    print(f"{'Agent':<12} {'Character':<10} {'Command':<30} {'Fallback':<8}")
    print("-" * 80)
    for character in heroes:
        command, metadata = blue_agent.decide(character, heroes, monsters, game_state)
        print(f"{blue_agent.name:<12} {character.name:<10} {str(command):<30} {metadata['fallback_used']!s:<8}")

    for character in monsters:
        command, metadata = red_agent.decide(character, monsters, heroes, game_state)
        print(f"{red_agent.name:<12} {character.name:<10} {str(command):<30} {metadata['fallback_used']!s:<8}")

    print("\n" + "=" * 80)
    print("Round completed!")
    print("=" * 80)


if __name__ == "__main__":
    main()

from agents.llm_agent.prompt_formatter import PromptConfig, PromptFormatter
from agents.llm_agent.prompts.guidance import ARCHETYPE_GUIDANCE, GENERAL_GUIDANCE
from agents.llm_agent.snapshot import BattleContext
from env import CharacterType

from conftest import make_character


def build(hero, allies, enemies, game_state, **config):
    context = BattleContext.capture(hero, allies, enemies, game_state)
    return PromptFormatter().build_prompt(context=context, config=PromptConfig(**config))


def test_prompt_is_deterministic(hero, allies, enemies, game_state):
    first, first_payload = build(hero, allies, enemies, game_state)
    second, second_payload = build(hero, allies, enemies, game_state)
    assert first == second
    assert first_payload == second_payload


def test_status_block_and_rosters(hero, allies, enemies, game_state):
    prompt, _ = build(hero, allies, enemies, game_state)

    assert prompt.startswith("You are Aria, a MAGE in a tactical RPG battle.")
    assert "- HP: 45/80 (56%)" in prompt
    assert "- Mana: 30/60" in prompt
    assert "- Attack Power: 25" in prompt
    assert "- Defense: 5" in prompt
    assert "- Current Round: 2, Turn: 5" in prompt

    assert "  - Cleric (MAGE): 20/70 HP (29%), 20 ATK, 10 DEF" in prompt
    assert "  - Knight (WARRIOR): 140/150 HP (93%), 20 ATK, 18 DEF" in prompt
    assert "  - Orc (WARRIOR): 40/120 HP (33%), 20 ATK, 12 DEF" in prompt
    assert "  - Goblin (ROGUE): 15/60 HP (25%), 20 ATK, 4 DEF" in prompt


def test_sections_appear_in_fixed_order(hero, allies, enemies, game_state):
    prompt, _ = build(hero, allies, enemies, game_state)
    markers = [
        "You are Aria",
        "YOUR STATUS:",
        "YOUR TEAM (ALLIES):",
        "ENEMIES:",
        "AVAILABLE ACTIONS:",
        "STRATEGIC GUIDANCE:",
        "Valid enemy names:",
        "Valid ally names:",
        "Respond ONLY with a valid JSON object",
    ]
    positions = [prompt.index(marker) for marker in markers]
    assert positions == sorted(positions)


def test_attack_estimate_uses_weakest_enemy(hero, allies, enemies, game_state):
    prompt, payload = build(hero, allies, enemies, game_state, heal_amount=30)

    # 25 attack against the Goblin's 4 defense
    assert payload["actions"]["attack"] == {"estimated_damage": 21, "against": "Goblin"}
    assert "1. attack <enemy_name> - Estimated damage: ~21 (against Goblin, the weakest enemy)" in prompt
    assert "2. heal <ally_name> - Restores 30 HP to an ally" in prompt


def test_custom_estimator_and_heal_amount(hero, allies, enemies, game_state):
    prompt, _ = build(
        hero, allies, enemies, game_state,
        heal_amount=45,
        damage_estimator=lambda attacker, target: 99,
    )
    assert "Estimated damage: ~99" in prompt
    assert "Restores 45 HP" in prompt


def test_valid_name_lists_keep_pool_order(hero, allies, enemies, game_state):
    prompt, _ = build(hero, allies, enemies, game_state)
    assert "Valid enemy names: Orc, Goblin\n" in prompt
    assert "Valid ally names: Cleric, Knight\n" in prompt


def test_guidance_follows_archetype(allies, enemies, game_state):
    for kind in CharacterType:
        me = make_character("Me", kind)
        prompt, payload = build(me, allies, enemies, game_state)
        assert payload["guidance"] == list(GENERAL_GUIDANCE + ARCHETYPE_GUIDANCE[kind])
        for tip in ARCHETYPE_GUIDANCE[kind]:
            assert f"- {tip}" in prompt


def test_every_archetype_has_guidance():
    assert set(ARCHETYPE_GUIDANCE) == set(CharacterType)


def test_empty_ally_roster_is_marked(hero, enemies, game_state):
    prompt, _ = build(hero, [], enemies, game_state)
    assert "YOUR TEAM (ALLIES):\n  - (none)" in prompt


def test_prompt_ends_with_json_instruction(hero, allies, enemies, game_state):
    prompt, _ = build(hero, allies, enemies, game_state)
    assert prompt.rstrip().endswith("}")
    assert '"action": "attack" or "heal"' in prompt
    assert '"reasoning"' in prompt
    assert "no markdown" in prompt

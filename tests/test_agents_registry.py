import pytest

from agents import (
    AGENT_REGISTRY,
    AgentSpec,
    LLMAgent,
    RandomAgent,
    RuleBasedAgent,
    create_agent_from_spec,
    register_agent,
    resolve_agent_class,
)
from env import ActionType


def test_builtin_agents_are_registered():
    assert AGENT_REGISTRY["llm"] is LLMAgent
    assert AGENT_REGISTRY["rule_based"] is RuleBasedAgent
    assert AGENT_REGISTRY["random"] is RandomAgent


def test_resolve_by_import_path():
    assert resolve_agent_class("agents.rule_based_agent.RuleBasedAgent") is RuleBasedAgent


def test_unknown_agent_type():
    with pytest.raises(ValueError):
        resolve_agent_class("telepathic")


def test_import_path_must_be_an_agent():
    with pytest.raises(TypeError):
        resolve_agent_class("env.entities.character.Character")


def test_spec_roundtrip():
    spec = AgentSpec(type="random", name="Red Random", init_params={"seed": 3})
    assert AgentSpec.from_dict(spec.to_dict()) == spec


def test_spec_requires_type():
    with pytest.raises(ValueError):
        AgentSpec.from_dict({"name": "nameless"})


def test_create_agent_from_spec_sets_name():
    agent = create_agent_from_spec(AgentSpec(type="rule_based", name="Red Rules"))
    assert isinstance(agent, RuleBasedAgent)
    assert agent.name == "Red Rules"


def test_llm_agent_builds_without_api_key():
    # The model name is only resolved when a decision is requested
    agent = create_agent_from_spec(AgentSpec(type="llm", init_params={"model": "openai:gpt-4o"}))
    assert isinstance(agent, LLMAgent)
    assert agent.heal_amount == 30


def test_rule_based_agent_attacks_weakest(hero, allies, enemies, game_state):
    command, metadata = RuleBasedAgent().decide(hero, allies, enemies, game_state)
    assert command.type == ActionType.ATTACK
    assert command.target.name == "Goblin"
    assert metadata["policy"] == "rule_based"


def test_random_agent_is_reproducible(hero, allies, enemies, game_state):
    first = RandomAgent(seed=7)
    second = RandomAgent(seed=7)
    for _ in range(5):
        a = first.decide_action(hero, allies, enemies, game_state)
        b = second.decide_action(hero, allies, enemies, game_state)
        assert a == b
        assert a.type == ActionType.ATTACK
        assert a.target in enemies


def test_agent_keys_ignore_case_and_padding():
    assert resolve_agent_class(" LLM ") is LLMAgent
    assert resolve_agent_class("Rule_Based") is RuleBasedAgent


def test_key_cannot_be_reused_for_another_class():
    with pytest.raises(ValueError, match="already taken"):
        register_agent("random", RuleBasedAgent)
    assert AGENT_REGISTRY["random"] is RandomAgent


def test_registering_the_same_class_twice_is_harmless():
    assert register_agent("RANDOM", RandomAgent) is RandomAgent


def test_blank_key_is_rejected():
    with pytest.raises(ValueError):
        register_agent("  ")

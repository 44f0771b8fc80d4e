"""HTTP API entrypoint for asking an agent for a single command."""

from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from agents import AgentSpec, create_agent_from_spec
from env.core.types import CharacterType, Stats
from env.entities.character import Character
from env.world.game_state import GameState
from infra.logger import get_logger
from runtime.logfire_config import configure_logfire

# Configure observability before app/agent imports are used.
configure_logfire()

log = get_logger(__name__)

app = FastAPI()


class StatsModel(BaseModel):
    health: int = Field(ge=0)
    max_health: int = Field(ge=0)
    mana: int = Field(default=0, ge=0)
    max_mana: int = Field(default=0, ge=0)
    attack_power: int = Field(ge=0)
    defense: int = Field(ge=0)


class CharacterModel(BaseModel):
    name: str
    type: str
    stats: StatsModel


class AgentModel(BaseModel):
    type: str = "llm"
    name: Optional[str] = None
    init_params: Dict[str, Any] = Field(default_factory=dict)


class DecideRequest(BaseModel):
    agent: AgentModel = Field(default_factory=AgentModel)
    character: CharacterModel
    allies: List[CharacterModel] = Field(default_factory=list)
    enemies: List[CharacterModel] = Field(min_length=1)
    round_number: int = Field(default=1, ge=0)
    turn_number: int = Field(default=1, ge=0)


def _to_character(model: CharacterModel) -> Character:
    return Character(
        name=model.name,
        type=CharacterType.parse(model.type),
        stats=Stats(**model.stats.model_dump()),
    )


@app.post("/decide")
def decide(request: DecideRequest):
    try:
        agent = create_agent_from_spec(AgentSpec.from_dict(request.agent.model_dump()))
        character = _to_character(request.character)
        allies = [_to_character(c) for c in request.allies]
        enemies = [_to_character(c) for c in request.enemies]
    except (ValueError, TypeError, ImportError, AttributeError) as exc:
        raise HTTPException(400, str(exc)) from exc

    game_state = GameState(round_number=request.round_number, turn_number=request.turn_number)
    command, metadata = agent.decide(character, allies, enemies, game_state)
    log.info("Agent %s decided %s", agent, command)

    # The prompt text is large; callers that want it can read prompt_payload.
    metadata.pop("prompt", None)
    return {"command": command.to_dict(), "metadata": metadata}


@app.get("/health")
def health():
    return {"status": "ok"}

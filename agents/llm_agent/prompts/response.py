RESPONSE_FORMAT = """Respond ONLY with a valid JSON object (no markdown, no code blocks, no extra text):
{
  "action": "attack" or "heal",
  "target": "exact character name",
  "reasoning": "brief tactical explanation"
}"""

SYSTEM_INSTRUCTIONS = (
    "You are the decision module of a character in a turn-based tactical RPG battle. "
    "Choose exactly one action for this turn. "
    "Only use character names that appear in the valid name lists."
)

from .guidance import ARCHETYPE_GUIDANCE, GENERAL_GUIDANCE, guidance_for
from .response import RESPONSE_FORMAT, SYSTEM_INSTRUCTIONS

__all__ = [
    "ARCHETYPE_GUIDANCE",
    "GENERAL_GUIDANCE",
    "guidance_for",
    "RESPONSE_FORMAT",
    "SYSTEM_INSTRUCTIONS",
]

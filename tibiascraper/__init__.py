from .character import parse_character
from .errors import CharacterNotFound, MalformedDocument, ScraperError, StructuralParseError
from .models import (
    AccountInfo,
    Achievement,
    Badge,
    CharacterRecord,
    DeathEvent,
    GuildMembership,
    HouseOwnership,
    Identity,
    KillParticipant,
    OtherCharacterRef,
)

__all__ = [
    "parse_character",
    "CharacterNotFound",
    "MalformedDocument",
    "ScraperError",
    "StructuralParseError",
    "AccountInfo",
    "Achievement",
    "Badge",
    "CharacterRecord",
    "DeathEvent",
    "GuildMembership",
    "HouseOwnership",
    "Identity",
    "KillParticipant",
    "OtherCharacterRef",
]

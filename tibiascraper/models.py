from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class KillParticipant:
    name: str
    player: bool = False
    traded: bool = False
    summon: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "player": self.player,
            "traded": self.traded,
            "summon": self.summon or "",
        }


@dataclass
class DeathEvent:
    time: str
    level: int
    killers: List[KillParticipant] = field(default_factory=list)
    assists: List[KillParticipant] = field(default_factory=list)
    reason: str = ""

    def to_dict(self) -> Dict[str, object]:
        return {
            "time": self.time,
            "level": self.level,
            "killers": [k.to_dict() for k in self.killers],
            "assists": [a.to_dict() for a in self.assists],
            "reason": self.reason,
        }


@dataclass
class HouseOwnership:
    name: str
    town: str
    paid: str
    house_id: int

    def to_dict(self) -> Dict[str, object]:
        return {"name": self.name, "town": self.town, "paid": self.paid, "houseid": self.house_id}


@dataclass
class GuildMembership:
    name: Optional[str] = None
    rank: Optional[str] = None


@dataclass
class Identity:
    name: str = ""
    former_names: List[str] = field(default_factory=list)
    traded: bool = False
    deletion_date: Optional[str] = None
    sex: str = ""
    title: Optional[str] = None
    unlocked_titles: Optional[int] = None
    vocation: str = ""
    level: int = 0
    achievement_points: int = 0
    world: str = ""
    former_worlds: List[str] = field(default_factory=list)
    residence: str = ""
    married_to: Optional[str] = None
    last_login: Optional[str] = None
    account_status: str = ""
    comment: Optional[str] = None
    position: Optional[str] = None


@dataclass
class AccountInfo:
    position: Optional[str] = None
    created: Optional[str] = None
    loyalty_title: Optional[str] = None


@dataclass
class Badge:
    name: str
    icon_url: str
    description: str


@dataclass
class Achievement:
    name: str
    grade: int = 0
    secret: bool = False


@dataclass
class OtherCharacterRef:
    name: str
    world: str
    status: str = "offline"
    deleted: bool = False
    main: bool = False
    traded: bool = False
    position: Optional[str] = None


@dataclass
class CharacterRecord:
    identity: Identity = field(default_factory=Identity)
    guild: GuildMembership = field(default_factory=GuildMembership)
    houses: List[HouseOwnership] = field(default_factory=list)
    account: AccountInfo = field(default_factory=AccountInfo)
    badges: List[Badge] = field(default_factory=list)
    achievements: List[Achievement] = field(default_factory=list)
    deaths: List[DeathEvent] = field(default_factory=list)
    other_characters: List[OtherCharacterRef] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        """
        TibiaData-shaped payload. Optional keys are left out when empty,
        the way the public API omits them.
        """
        ident = self.identity
        character: Dict[str, object] = {"name": ident.name}
        if ident.former_names:
            character["former_names"] = list(ident.former_names)
        if ident.traded:
            character["traded"] = True
        if ident.deletion_date:
            character["deletion_date"] = ident.deletion_date
        character.update({
            "sex": ident.sex,
            "title": ident.title or "",
            "unlocked_titles": ident.unlocked_titles or 0,
            "vocation": ident.vocation,
            "level": ident.level,
            "achievement_points": ident.achievement_points,
            "world": ident.world,
        })
        if ident.former_worlds:
            character["former_worlds"] = list(ident.former_worlds)
        character["residence"] = ident.residence
        if ident.married_to:
            character["married_to"] = ident.married_to
        if self.houses:
            character["houses"] = [h.to_dict() for h in self.houses]
        character["guild"] = {k: v for k, v in (("name", self.guild.name), ("rank", self.guild.rank)) if v}
        for key, val in (("last_login", ident.last_login), ("position", ident.position)):
            if val:
                character[key] = val
        character["account_status"] = ident.account_status
        if ident.comment:
            character["comment"] = ident.comment

        out: Dict[str, object] = {"character": character}
        if self.badges:
            out["account_badges"] = [
                {"name": b.name, "icon_url": b.icon_url, "description": b.description} for b in self.badges
            ]
        if self.achievements:
            out["achievements"] = [
                {"name": a.name, "grade": a.grade, "secret": a.secret} for a in self.achievements
            ]
        if self.deaths:
            out["deaths"] = [d.to_dict() for d in self.deaths]
        # always present, even as {}
        out["account_information"] = {
            k: v for k, v in (
                ("position", self.account.position),
                ("created", self.account.created),
                ("loyalty_title", self.account.loyalty_title),
            ) if v
        }
        if self.other_characters:
            rows = []
            for oc in self.other_characters:
                row = {
                    "name": oc.name, "world": oc.world, "status": oc.status,
                    "deleted": oc.deleted, "main": oc.main, "traded": oc.traded,
                }
                if oc.position:
                    row["position"] = oc.position
                rows.append(row)
            out["other_characters"] = rows
        return out

class ScraperError(Exception):
    """Base class for everything the character parser raises."""


class CharacterNotFound(ScraperError):
    pass


class StructuralParseError(ScraperError):
    """
    An element, attribute or pattern the page layout is assumed to have is missing.
    `section` names the page section and `rule` the extraction rule that failed.
    """

    def __init__(self, message: str, section: str = "", rule: str = ""):
        self.section = section
        self.rule = rule
        prefix = " / ".join(p for p in (section, rule) if p)
        super().__init__(f"[{prefix}] {message}" if prefix else message)


class MalformedDocument(ScraperError):
    pass

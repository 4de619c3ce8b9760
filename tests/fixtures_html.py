"""Small tibia.com-shaped HTML snippets, one builder per page section."""

PROFILE = "https://www.tibia.com/community/?subtopic=characters&amp;name="


def section(heading: str, rows: str) -> str:
    return (
        '<div class="TableContainer">'
        '<div class="CaptionContainer"><div class="CaptionInnerContainer">'
        '<span class="CaptionEdgeLeftTop"></span>'
        f'<div class="Text">{heading}</div>'
        '</div></div>'
        '<table class="Table3"><tr><td><div class="InnerTableContainer">'
        '<table style="width:100%;"><tr><td>'
        '<div class="TableContentContainer">'
        f'<table class="TableContent" width="100%">{rows}</table>'
        '</div>'
        '</td></tr></table>'
        '</div></td></tr></table>'
        '</div>'
    )


def page(*sections: str) -> str:
    return '<html><head><title>Tibia</title></head><body><div class="BoxContent">' + "".join(sections) + "</div></body></html>"


def label_row(label: str, value_html: str) -> str:
    return f'<tr><td class="LabelV175">{label}</td><td style="width:80%;">{value_html}</td></tr>'


def player_link(name: str) -> str:
    return f'<a href="{PROFILE}{name.replace(" ", "+")}">{name}</a>'


CHARACTER_ROWS = "".join([
    label_row("Name:", "Bobeek"),
    label_row("Former Names:", "Bobeek Junior, Bob the Great"),
    label_row("Sex:", "male"),
    label_row("Title:", "Costumed Freak (3 titles unlocked)"),
    label_row("Vocation:", "Elite Knight"),
    label_row("Level:", "1,024"),
    label_row("<nobr>Achievement Points:</nobr>", "<nobr>345</nobr>"),
    label_row("World:", "Antica"),
    label_row("Former World:", "Bona, Calmera"),
    label_row("Residence:", "Thais"),
    label_row("Married To:", player_link("Alice")),
    label_row(
        "House:",
        '<a href="https://www.tibia.com/community/?subtopic=houses&amp;page=view&amp;houseid=1234'
        '&amp;character=Bobeek&amp;world=Antica">Theater Avenue 8b</a> (Rathleton) is paid until Jan&#160;10&#160;2024',
    ),
    label_row(
        "House:",
        '<a href="https://www.tibia.com/community/?subtopic=houses&amp;page=view&amp;houseid=35019'
        '&amp;character=Bobeek&amp;world=Antica">Harbour Place 1</a> (Thais) is paid until Feb&#160;02&#160;2024',
    ),
    label_row(
        "Guild Membership:",
        'Leader of the <a href="https://www.tibia.com/community/?subtopic=guilds&amp;page=view&amp;GuildName=Red+Rose">Red&#160;Rose</a>',
    ),
    label_row("Last Login:", "Jan&#160;10&#160;2024,&#160;12:34:56&#160;CET"),
    label_row("Comment:", "Hello<br />\nWorld"),
    label_row("Account&#160;Status:", "Premium Account"),
])

ACCOUNT_ROWS = "".join([
    label_row("Loyalty Title:", "Warrior of Tibia"),
    label_row("Created:", "Jul&#160;01&#160;2013,&#160;20:00:00&#160;CEST"),
    label_row("Position:", "Gamemaster"),
])


def badge_span(name: str, description: str, icon: str) -> str:
    return (
        '<span style="width: 64px; height: 64px; display: inline-block;">'
        f'<span class="BadgeIcon" onmouseover="ActivateHelperDiv($(this), \'{name}\', \'{description}\', \'\');">'
        f'<img src="{icon}" alt="{name}"/></span></span>'
    )


BADGE_ROWS = (
    "<tr><td>"
    + badge_span("Golden Account", "This account has a golden account.", "https://static.tibia.com/images/badges/badge_golden.png")
    + badge_span("Tibia Veteran", "Played for 15 years.", "https://static.tibia.com/images/badges/badge_veteran.png")
    + "</td></tr>"
)
NO_BADGES_ROWS = (
    '<tr><td><span style="width: 100%;">'
    "There are no account badges set to be displayed for this character."
    "</span></td></tr>"
)

GRADE = '<img src="https://static.tibia.com/images/achievements/achievement-grade-symbol.gif" alt=""/>'
SECRET = '<img src="https://static.tibia.com/images/achievements/achievement-secret-symbol.gif" alt="This is a secret achievement."/>'


def achievement_row(stars: int, name: str, secret: bool = False) -> str:
    return f'<tr><td class="TextCenter">{GRADE * stars}</td><td>{name}{SECRET if secret else ""}</td></tr>'


ACHIEVEMENT_ROWS = (
    achievement_row(2, "Allow Cookies?", secret=True)
    + achievement_row(1, "Bread &amp; Butter")
    + achievement_row(3, "Ship&#39;s Kobold")
)


def death_row(when: str, text: str) -> str:
    return f'<tr><td width="25%" valign="top">{when}</td><td>{text}</td></tr>'


DEATH_ROWS = (
    death_row(
        "Jan&#160;10&#160;2024,&#160;12:34:56&#160;CET",
        f"Killed at Level 250 by {player_link('Tom')}, a dragon lord and a fire elemental of {player_link('Jerry')}."
        f"<br/>Assisted by {player_link('Spike')} (traded) and a lord of the elements.",
    )
    + death_row("Jan&#160;09&#160;2024,&#160;08:00:00&#160;CET", "Died at Level 249 by a demon.")
)


def other_character_row(index: int, name_html: str, world: str, status_html: str) -> str:
    return (
        f'<tr><td style="width: 20%;"><nobr>{index}.&#160;{name_html}</nobr></td>'
        f'<td style="width: 10%;"><nobr>{world}</nobr></td>'
        f'<td style="width: 70%;">{status_html}</td>'
        '<td><a href="https://www.tibia.com/community/?subtopic=characters">View</a></td></tr>'
    )


CHARACTERS_ROWS = (
    '<tr class="LabelH"><td>Name</td><td>World</td><td>Status</td><td>&#160;</td></tr>'
    + other_character_row(1, 'Bobeek<span style="font-weight: normal;"> Main Character</span>', "Antica", '<b class="green">online</b>')
    + other_character_row(2, "Alt Char (traded)", "Bona", '<span class="red">deleted</span>')
    + other_character_row(3, "Staff Member", "Calmera", "CipSoft Member")
)


def full_page() -> str:
    return page(
        section("Character Information", CHARACTER_ROWS),
        section("Account Badges", BADGE_ROWS),
        section("Account Achievements", ACHIEVEMENT_ROWS),
        section("Character Deaths", DEATH_ROWS),
        section("Account Information", ACCOUNT_ROWS),
        section("Characters", CHARACTERS_ROWS),
        section("Search Character", '<tr><td><input type="text" name="name"/></td></tr>'),
    )


NOT_FOUND_PAGE = page(
    section("Could not find character", "<tr><td>Character <b>Nobody</b> does not exist.</td></tr>"),
    section("Character Information", label_row("Name:", "Should Not Parse")),
)

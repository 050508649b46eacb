"""Static vocabulary tables for the job-posting extractor.

Every heuristic in the extractor reads its words, phrases and selectors from
this module. Extending language coverage means extending these tables.
"""

from __future__ import annotations

import re
from enum import Enum


class SectionBucket(str, Enum):
    """Semantic bucket a job-ad heading can belong to."""

    REQUIREMENTS = "requirements"
    RESPONSIBILITIES = "responsibilities"
    BENEFITS = "benefits"
    CONTRACT = "contract"
    APPLICATION = "application"


# Heading synonyms, compared after diacritic/punctuation normalization
REQUIREMENTS_SYNONYMS: tuple[str, ...] = (
    "anforderungen",
    "requirements",
    "qualifications",
    "qualifikationen",
    "was du mitbringst",
    "was sie mitbringen",
    "was wir erwarten",
    "dein profil",
    "ihr profil",
    "das profil",
    "ihr werdegang",
    "voraussetzungen",
    "was erforderlich ist",
    "erwartungen",
    "das solltest du mitbringen",
    "das sollten sie mitbringen",
    "das bringst du mit",
    "das bringen sie mit",
    "must-have",
    "must haves",
    "nice-to-have",
    "nice to haves",
    "hard skills",
    "soft skills",
    "fachliche anforderungen",
    "persönliche anforderungen",
    "fachkenntnisse",
    "kenntnisse",
    "fähigkeiten",
    "kompetenzen",
    "skills",
    "experience",
    "erfahrung",
    "ausbildung",
    "education",
    "studium",
    "abschluss",
    "zertifikate",
    "what we expect",
    "you have",
    "you bring",
    "we are looking for",
    "ideal candidate",
    "profile",
    "background",
    "qualifikation",
)

RESPONSIBILITIES_SYNONYMS: tuple[str, ...] = (
    "aufgaben",
    "tätigkeiten",
    "stellenbeschreibung",
    "responsibilities",
    "what you will do",
    "your role",
    "job duties",
    "ihre aufgaben",
    "was sie erwartet",
    "tätigkeitsprofil",
    "ihre rolle",
    "deine aufgaben",
    "das erwartet dich",
    "das erwartet sie",
    "arbeitsbereich",
    "verantwortlichkeiten",
    "tätigkeitsfeld",
    "arbeitsplatz",
)

BENEFITS_SYNONYMS: tuple[str, ...] = (
    "wir bieten",
    "vorteile",
    "benefits",
    "perks",
    "what we offer",
    "our offer",
    "unser angebot",
    "zusatzleistungen",
    "package",
    "das bieten wir",
    "leistungen",
    "vergütung",
    "sozialleistungen",
)

CONTRACT_SYNONYMS: tuple[str, ...] = (
    "vertrag",
    "anstellung",
    "befristung",
    "unbefristet",
    "befristet",
    "vollzeit",
    "teilzeit",
    "freelance",
    "contract",
    "employment type",
    "arbeitszeit",
    "vertragsart",
    "festanstellung",
)

APPLICATION_SYNONYMS: tuple[str, ...] = (
    "bewerbung",
    "bewerbungsprozess",
    "so bewerben sie sich",
    "application process",
    "how to apply",
    "bewerbungsverfahren",
    "kontakt",
    "ansprechpartner",
    "bewerbungsunterlagen",
)

# Checked in this order; the first bucket whose synonyms match wins
SECTION_VOCABULARIES: tuple[tuple[SectionBucket, tuple[str, ...]], ...] = (
    (SectionBucket.REQUIREMENTS, REQUIREMENTS_SYNONYMS),
    (SectionBucket.RESPONSIBILITIES, RESPONSIBILITIES_SYNONYMS),
    (SectionBucket.BENEFITS, BENEFITS_SYNONYMS),
    (SectionBucket.CONTRACT, CONTRACT_SYNONYMS),
    (SectionBucket.APPLICATION, APPLICATION_SYNONYMS),
)

# Case-insensitive substring matches that disqualify a text fragment
STOP_KEYWORDS: tuple[str, ...] = (
    "cookie",
    "datenschutz",
    "impressum",
    "newsletter",
    "ähnliche jobs",
    "similar jobs",
    "privacy",
    "imprint",
    "einloggen",
    "passwort vergessen",
    "nutzervereinbarung",
    "mitglied werden",
    "linkedin",
    "xing",
    "facebook",
    "twitter",
    "instagram",
    "recommended",
    "empfohlen",
    "ähnliche stellen",
    "weitere jobs",
    "job alert",
    "job-alarm",
    "benachrichtigung",
    "schön dass sie wieder da sind",
    "adresse telefon einblenden",
    "willkommen zurück",
    "profil erstellen",
    "konto erstellen",
)

# Navigation, consent, social and pagination chrome
UI_FILTER_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"\b(?:einloggen|anmelden|passwort|login|sign in|log in)\b",
        r"\bvor \d+ (?:monat|woche|tag|hour|stunde|minute)\w*",
        r"\b(?:nutzervereinbarung|datenschutz\w*|cookies?|privacy|agb|terms)\b",
        r"^(?:zurück|weiter|next|previous|back|continue)(?=\s|$)",
        r"\b(?:mitglied werden|join|become a member|register|registrieren)\b",
        r"\b(?:linkedin|xing|facebook|twitter|instagram|whatsapp)\b",
        r"^(?:teilen|share|folgen|follow|like|gefällt mir)\b"
        r"|\b(?:teilen|share|folgen|follow|gefällt mir)$",
        r"\b(?:ähnliche jobs|similar jobs|recommended|empfohlen|weitere stellen)\b",
        r"\b(?:job alert|job-alarm|benachrichtigung\w*|notifications?|alerts?)\b",
        r"\b(?:schön dass sie wieder da sind|willkommen zurück|welcome back)\b",
        r"\b(?:adresse einblenden|telefon einblenden|show contact|kontakt anzeigen)\b",
        r"\b(?:profil erstellen|konto erstellen|create account|create profile)\b",
        r"\b(?:bewertung\w*|rating|sterne?|stars?|feedback)\b",
        r"\b(?:speichern|bookmark|merken|favorit\w*)\b|^save$",
        r"^(?:metropolregion|vor \d+|back|next|\d+ (?:monat|woche|tag)\w*)$",
        r"^(?:\d+|mehr|less|weniger)$",
        r"\b(?:suchfilter|sortieren|sort by)\b|^filter$",
        r"\b(?:seite \d+|page \d+)\b|^\d+ von \d+$",
    )
)

# Substrings that mark a short fragment as interface text
UI_KEYWORDS: tuple[str, ...] = (
    "einloggen",
    "anmelden",
    "linkedin",
    "xing",
    "ähnliche jobs",
    "empfehlung",
    "cookie",
    "datenschutz",
    "impressum",
    "schön dass sie wieder da sind",
    "willkommen zurück",
    "profil erstellen",
)

# Terms that make a fragment look like job-ad content
JOB_INDICATORS: tuple[str, ...] = (
    "erfahrung",
    "experience",
    "ausbildung",
    "education",
    "degree",
    "kenntnisse",
    "skills",
    "fähigkeiten",
    "abilities",
    "qualifikation",
    "aufgaben",
    "responsibilities",
    "tätigkeiten",
    "duties",
    "anforderungen",
    "requirements",
    "voraussetzungen",
    "benefits",
    "vorteile",
    "leistungen",
    "angebot",
    "gehalt",
    "salary",
    "vergütung",
    "compensation",
    "vollzeit",
    "teilzeit",
    "fulltime",
    "parttime",
    "contract",
    "befristet",
    "unbefristet",
    "permanent",
    "temporary",
)

# Stricter filter for list items harvested without a heading
REQUIREMENT_SIGNAL_KEYWORDS: tuple[str, ...] = (
    "erfahrung",
    "experience",
    "ausbildung",
    "degree",
    "kenntniss",
    "skill",
    "fähigkeit",
    "ability",
    "bachelor",
    "master",
    "jahr",
    "year",
    "sprach",
    "language",
    "studium",
    "certification",
    "zertifikat",
    "qualifikation",
)

# ---------------------------------------------------------------------------
# Raw-text line signals

TEXT_REQUIREMENT_SIGNALS: tuple[str, ...] = (
    "anforderung",
    "qualifikation",
    "requirement",
    "skills",
    "was du mitbringst",
    "was sie mitbringen",
    "das bringst du mit",
    "what you bring",
    "dein profil",
    "ihr profil",
    "your profile",
    "voraussetzungen",
)

TEXT_SECTION_RESET_SIGNALS: tuple[str, ...] = (
    "aufgaben",
    "responsibilities",
    "what you will do",
    "wir bieten",
    "was wir bieten",
    "das bieten wir",
    "benefits",
    "what we offer",
)

APPLICATION_LINE_KEYWORDS: tuple[str, ...] = (
    "bewerbung",
    "bewerben",
    "application",
    "apply",
    "kontakt",
    "contact",
)

TITLE_ROLE_KEYWORDS: tuple[str, ...] = (
    "engineer",
    "developer",
    "entwickler",
    "manager",
    "analyst",
    "specialist",
    "spezialist",
    "consultant",
    "berater",
    "referent",
    "sachbearbeiter",
    "techniker",
    "ingenieur",
    "designer",
    "architect",
    "administrator",
    "leiter",
    "assistent",
    "mitarbeiter",
    "kaufmann",
    "kauffrau",
    "werkstudent",
    "praktikant",
    "trainee",
)

GENDER_TAG_PATTERN = re.compile(
    r"\((?:m|w|d|f|x|div)(?:\s*/\s*(?:m|w|d|f|x|div)){1,2}\)", re.IGNORECASE
)
TITLE_DOMAIN_PATTERN = re.compile(
    r"\b(?:ing|tech|soft|web|data|product|project|sales|marketing|hr|finance)\b",
    re.IGNORECASE,
)
# Legal form closing a company line
LEGAL_ENTITY_PATTERN = re.compile(
    r"(?:\b(?:g?gmbh|ag|se|kg|kgaa|ohg|inc|corp|corporation|ltd|llc|plc|company)\.?"
    r"|\bug(?:\s*\(haftungsbeschränkt\))?|\be\.\s?v\.)$",
    re.IGNORECASE,
)
# Every word capitalized, at most five words
COMPANY_NAME_PATTERN = re.compile(
    r"^[A-ZÄÖÜ][\wÄÖÜäöüß&.'-]*(?:\s+(?:&|[A-ZÄÖÜ0-9][\wÄÖÜäöüß&.'-]*)){0,4}$"
)
CONTRACT_LINE_PATTERN = re.compile(
    r"\b(?:vollzeit|teilzeit|freelance|contract|festanstellung|befristet|unbefristet"
    r"|full.?time|part.?time|remote|hybrid|minijob|werkstudent)\b",
    re.IGNORECASE,
)
LEADING_BULLET_PATTERN = re.compile(r"^[•·●▪*\-–—]+\s*")

# ---------------------------------------------------------------------------
# Locations and addresses

CITY_NAMES: tuple[str, ...] = (
    "münchen",
    "berlin",
    "hamburg",
    "köln",
    "frankfurt",
    "stuttgart",
    "düsseldorf",
    "dortmund",
    "essen",
    "leipzig",
    "dresden",
    "hannover",
    "nürnberg",
    "bremen",
    "bonn",
    "mannheim",
    "karlsruhe",
    "augsburg",
    "wiesbaden",
    "münster",
    "aachen",
    "freiburg",
    "mainz",
    "heidelberg",
    "potsdam",
    "wien",
    "graz",
    "linz",
    "salzburg",
    "innsbruck",
    "zürich",
    "basel",
    "bern",
    "genf",
    "luzern",
    "london",
    "paris",
    "amsterdam",
)

# Regex fragments; matched case-insensitively after the street name
STREET_SUFFIXES: tuple[str, ...] = (
    r"stra(?:ß|ss)e",
    r"str\.",
    r"weg",
    r"platz",
    r"allee",
    r"ring",
    r"gasse",
    r"damm",
    r"berg",
    r"hof",
    r"ufer",
    r"chaussee",
    r"avenue",
)

STREET_PREFIX_WORDS: tuple[str, ...] = (
    "Am",
    "An der",
    "An den",
    "Auf dem",
    "Auf der",
    "Im",
    "In der",
    "Zum",
    "Zur",
    "Alte",
    "Alter",
    "Neue",
    "Neuer",
    "Große",
    "Großer",
    "Kleine",
    "Kleiner",
    "Obere",
    "Untere",
    "Hohe",
    "Lange",
    "Sankt",
)

ADDRESS_CONTEXT_KEYWORDS: tuple[str, ...] = (
    "kontakt",
    "anschrift",
    "adresse",
    "standort",
    "filiale",
    "büro",
)

LOCATION_EXCLUDED_TERMS: tuple[str, ...] = ("remote", "hybrid")

LOCATION_LABEL_PATTERN = re.compile(
    r"^\s*(?:standort|arbeitsort|einsatzort|dienstort|ort|location|city)\s*:\s*",
    re.IGNORECASE,
)

# ---------------------------------------------------------------------------
# Selector cascades, tried in priority order

NOISE_SELECTORS: tuple[str, ...] = (
    "script",
    "style",
    "noscript",
    "template",
    "iframe",
    "nav",
    "header",
    "footer",
    '[class*="cookie"]',
    '[id*="cookie"]',
    '[class*="consent"]',
    '[id*="consent"]',
    '[class*="onetrust"]',
    '[class*="usercentrics"]',
    '[class*="didomi"]',
    '[class*="login"]',
    '[class*="signin"]',
    '[class*="auth"]',
    '[class*="navigation"]',
    '[class*="navbar"]',
    '[class*="menu"]',
    '[class*="breadcrumb"]',
    '[class*="sidebar"]',
    '[class*="aside"]',
    '[class*="recommendation"]',
    '[class*="similar"]',
    '[class*="related"]',
    '[aria-label*="navigation"]',
    '[aria-label*="menu"]',
)

# Company contact details often live in the footer
ADDRESS_NOISE_SELECTORS: tuple[str, ...] = tuple(
    selector for selector in NOISE_SELECTORS if selector != "footer"
)

TITLE_SELECTORS: tuple[str, ...] = (
    'h1[class*="job"]',
    'h1[class*="title"]',
    'h1[class*="position"]',
    '[class*="job-title"]',
    '[class*="position-title"]',
    '[data-testid*="title"]',
    "h1",
    ".title",
    ".job-header h1",
)

COMPANY_SELECTORS: tuple[str, ...] = (
    '[class*="company"]',
    '[class*="employer"]',
    '[data-testid*="company"]',
    ".company-name",
    ".employer-name",
    "h2",
)

LOCATION_SELECTORS: tuple[str, ...] = (
    '[class*="location"]',
    '[class*="address"]',
    '[class*="city"]',
    '[data-testid*="location"]',
    ".job-location",
    '[class*="workplace"]',
    '[class*="standort"]',
    ".location",
    ".address",
    ".workplace-location",
    '[class*="office"]',
    '[class*="region"]',
    '[itemprop="addressLocality"]',
    '[itemprop="addressRegion"]',
    '[itemprop="postalCode"]',
    '[itemprop="streetAddress"]',
)

COMPANY_ADDRESS_SELECTORS: tuple[str, ...] = (
    '[itemprop="streetAddress"]',
    '[itemprop="address"]',
    ".contact-address",
    ".company-address",
    ".office-address",
    ".address",
    ".location-address",
    ".branch-address",
    "footer .address",
    "footer .contact",
    'footer [class*="address"]',
    '[class*="street"]',
    '[class*="address"]',
    '[data-testid*="address"]',
    '[class*="kontakt"]',
    '[class*="standort"]',
    '[class*="filiale"]',
    ".job-details .location",
    ".workplace-location",
)

ADDRESS_SCAN_SELECTOR = "p, div, span, address"

DESCRIPTION_SELECTORS: tuple[str, ...] = (
    '[class*="description"]:not([class*="meta"])',
    '[class*="summary"]:not([class*="company"])',
    '[class*="about"]:not([class*="company"])',
    ".job-description",
    ".job-content",
    'main p:not([class*="nav"])',
)

HEADING_SELECTOR = 'h1, h2, h3, h4, h5, h6, [role="heading"], .section-title, .heading'

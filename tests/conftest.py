"""Shared job-page fixtures."""

import json
from datetime import date

import pytest

TODAY = date(2024, 5, 3)

GERMAN_JOB_PAGE = """<!DOCTYPE html>
<html lang="de">
<head>
  <title>Senior Python Entwickler (m/w/d)</title>
  <style>.job-title { font-size: 2em; }</style>
</head>
<body>
  <nav class="main-nav"><a href="/">Startseite</a><a href="/jobs">Alle Jobs</a></nav>
  <div class="cookie-banner">Wir verwenden Cookies. <button>Akzeptieren</button></div>
  <main>
    <h1 class="job-title">Senior Python Entwickler (m/w/d)</h1>
    <div class="company-name">Muster Software GmbH</div>
    <div class="job-location">80331 München</div>
    <div class="job-description">
      <p>Wir suchen einen erfahrenen Python Entwickler für unser Team in München.
      Du arbeitest an spannenden Projekten rund um Datenverarbeitung und
      Automatisierung mit modernen Technologien.</p>
    </div>
    <h2>Deine Aufgaben</h2>
    <ul>
      <li>Entwicklung von Backend-Services mit Python und FastAPI</li>
      <li>Pflege und Ausbau unserer Datenpipelines</li>
    </ul>
    <h2>Dein Profil</h2>
    <ul>
      <li>Mindestens 3 Jahre Erfahrung in der Python-Entwicklung</li>
      <li>Abgeschlossenes Studium der Informatik oder vergleichbare Ausbildung</li>
      <li>Sehr gute Deutsch- und Englischkenntnisse</li>
    </ul>
    <h2>Was wir bieten</h2>
    <ul>
      <li>Flexible Arbeitszeiten und Homeoffice-Möglichkeiten</li>
    </ul>
    <h2>Vertragsart</h2>
    <p>Vollzeit, unbefristete Festanstellung</p>
    <h2>Bewerbungsprozess</h2>
    <p>Bitte sende deine Bewerbung mit Lebenslauf und Zeugnissen an jobs@muster.de</p>
  </main>
  <footer>
    <div class="contact-address">Muster Software GmbH, Musterstraße 12, 80331 München</div>
  </footer>
</body>
</html>
"""

NOISE_ONLY_PAGE = """<html>
<body>
  <nav><h1>Navigation</h1><a href="/">Startseite</a></nav>
  <div class="cookie-consent">
    <p>Wir verwenden Cookies für Statistik und Marketing. Datenschutzerklärung</p>
    <button>Alle akzeptieren</button>
  </div>
</body>
</html>
"""

JSON_LD_DESCRIPTION = " ".join(
    ["Wir entwickeln robuste Software für Logistik und Industrie."] * 4
)

RAW_JOB_TEXT = """Senior Data Engineer (m/w/d)
Beispiel Analytics GmbH
Musterstraße 12, 80331 München
Vollzeit, unbefristet
Wir bauen eine moderne Datenplattform für unsere Kunden im Handel auf.
Du arbeitest eng mit unserem Produktteam zusammen.
Dein Profil
- Mindestens 3 Jahre Erfahrung mit Python und SQL
- Erfahrung mit Cloud-Plattformen wie AWS oder GCP
- Sehr gute Deutschkenntnisse in Wort und Schrift
Was wir bieten
- Flexible Arbeitszeiten und 30 Tage Urlaub
Bewerbung bitte über unser Karriereportal.
"""


def json_ld_page(data, body: str = '<div id="app"></div>') -> str:
    """Wrap *data* in a JSON-LD script tag inside a minimal page."""
    return (
        "<html><head>"
        f'<script type="application/ld+json">{json.dumps(data, ensure_ascii=False)}</script>'
        f"</head><body>{body}</body></html>"
    )


@pytest.fixture
def german_job_page() -> str:
    return GERMAN_JOB_PAGE


@pytest.fixture
def noise_only_page() -> str:
    return NOISE_ONLY_PAGE


@pytest.fixture
def raw_job_text() -> str:
    return RAW_JOB_TEXT


@pytest.fixture
def json_ld_job_page() -> str:
    return json_ld_page(
        {
            "@context": "https://schema.org",
            "@type": "JobPosting",
            "title": "Software Engineer",
            "hiringOrganization": {"@type": "Organization", "name": "Acme GmbH"},
            "description": f"<p>{JSON_LD_DESCRIPTION}</p>",
        }
    )

"""Tests for HTML heuristic extraction."""

import pytest
from conftest import GERMAN_JOB_PAGE, JSON_LD_DESCRIPTION, TODAY, json_ld_page

from job_extractor.document import DocumentView
from job_extractor.dom_extractor import extract_job_data, extract_section_content
from job_extractor.errors import IncompleteSourceError

JOB_URL = "https://jobs.muster-software.de/stellen/senior-python"


class TestExtractJobData:
    def test_german_job_page(self, german_job_page):
        job = extract_job_data(german_job_page, JOB_URL, today=TODAY)

        assert job.jobtitel == "Senior Python Entwickler (m/w/d)"
        assert job.arbeitgeber == "Muster Software GmbH"
        assert job.ort == "München"
        assert job.plz == "80331"
        assert job.adresse == "Musterstraße 12"
        assert job.datum == "03.05.2024"
        assert job.vertrag == "Vollzeit, unbefristete Festanstellung"
        assert job.bewerbungsprozess == (
            "Bitte sende deine Bewerbung mit Lebenslauf und Zeugnissen an jobs@muster.de"
        )
        assert job.beschreibung.startswith("Wir suchen einen erfahrenen Python Entwickler")
        assert job.anforderungen == [
            "Mindestens 3 Jahre Erfahrung in der Python-Entwicklung",
            "Abgeschlossenes Studium der Informatik oder vergleichbare Ausbildung",
            "Sehr gute Deutsch- und Englischkenntnisse",
        ]

    def test_json_ld_seeds_sparse_page(self, json_ld_job_page):
        job = extract_job_data(json_ld_job_page, "https://acme.example/jobs/1", today=TODAY)

        assert job.jobtitel == "Software Engineer"
        assert job.arbeitgeber == "Acme GmbH"
        assert job.beschreibung == JSON_LD_DESCRIPTION
        assert job.anforderungen == []
        assert job.plz is None

    def test_noise_only_page_is_incomplete(self, noise_only_page):
        with pytest.raises(IncompleteSourceError) as excinfo:
            extract_job_data(noise_only_page, "https://example.com/job", today=TODAY)
        assert excinfo.value.code == "INCOMPLETE_SOURCE"
        assert excinfo.value.status_code == 422

    def test_requirements_are_deduplicated_across_sources(self):
        html = GERMAN_JOB_PAGE.replace(
            "</head>",
            '<script type="application/ld+json">{"@type": "JobPosting", '
            '"qualifications": ["Mindestens 3 Jahre Erfahrung in der Python-Entwicklung"]}'
            "</script></head>",
        )
        job = extract_job_data(html, JOB_URL, today=TODAY)

        assert job.anforderungen.count("Mindestens 3 Jahre Erfahrung in der Python-Entwicklung") == 1
        assert len(job.anforderungen) == 3

    def test_requirement_lists_without_heading_are_scanned(self):
        html = """<html><body><main>
          <h1>Datenbankadministrator (m/w/d)</h1>
          <div class="employer">Beispiel Daten AG</div>
          <div class="job-description">Wir betreiben hochverfügbare Datenbanken für Kunden
          aus Handel und Industrie und suchen Unterstützung für unser Betriebsteam in Leipzig.</div>
          <h2>Über die Stelle</h2>
          <ul>
            <li>Mindestens 2 Jahre Erfahrung mit SQL-Datenbanken</li>
            <li>Gemeinsames Mittagessen jeden Freitag im Büro</li>
          </ul>
        </main></body></html>"""
        job = extract_job_data(html, "https://daten.example/jobs/7", today=TODAY)

        assert job.arbeitgeber == "Beispiel Daten AG"
        assert job.anforderungen == ["Mindestens 2 Jahre Erfahrung mit SQL-Datenbanken"]

    def test_employer_falls_back_to_domain(self):
        html = """<html><body><main>
          <h1>Pflegefachkraft (m/w/d)</h1>
          <p>Für unsere Station suchen wir eine engagierte Pflegefachkraft in Vollzeit,
          die gemeinsam mit einem herzlichen Team Patientinnen und Patienten betreut.</p>
        </main></body></html>"""
        job = extract_job_data(html, "https://www.beispiel-klinik.de/karriere/42", today=TODAY)

        assert job.arbeitgeber == "Beispiel-klinik"
        assert job.jobtitel == "Pflegefachkraft (m/w/d)"
        assert job.beschreibung.startswith("Für unsere Station")

    def test_json_ld_location_with_postal_code(self):
        html = json_ld_page(
            {
                "@type": "JobPosting",
                "title": "Elektroniker (m/w/d)",
                "hiringOrganization": {"name": "Stadtwerke Beispiel AG"},
                "jobLocation": {"address": "04109 Leipzig"},
                "description": JSON_LD_DESCRIPTION,
            }
        )
        job = extract_job_data(html, "https://stadtwerke.example/jobs/3", today=TODAY)

        assert job.ort == "Leipzig"
        assert job.plz == "04109"


class TestSectionContent:
    def test_bulleted_paragraph_is_split(self):
        view = DocumentView.parse(
            """<html><body>
            <h3>Anforderungen</h3>
            <p>• Erfahrung mit Kubernetes und Terraform • Sehr gute Englischkenntnisse</p>
            </body></html>"""
        )
        heading = view.select_one("h3")
        assert extract_section_content(view, heading) == [
            "Erfahrung mit Kubernetes und Terraform",
            "Sehr gute Englischkenntnisse",
        ]

    def test_stops_at_next_known_section(self):
        view = DocumentView.parse(
            """<html><body>
            <h3>Anforderungen</h3>
            <h3>Was wir bieten</h3>
            <ul><li>Betriebliche Altersvorsorge und Jobticket</li></ul>
            </body></html>"""
        )
        heading = view.select_one("h3")
        assert extract_section_content(view, heading) == []


class TestDocumentView:
    def test_noise_is_masked_without_mutating_tree(self, german_job_page):
        view = DocumentView.parse(german_job_page)
        lines = view.lines()

        assert "Senior Python Entwickler (m/w/d)" in lines
        assert not any("Startseite" in line for line in lines)
        assert not any("Cookies" in line for line in lines)
        assert view.soup.find("nav") is not None
        assert view.select_one("footer .contact-address") is None

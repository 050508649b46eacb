"""Tests for text normalization, relevance and heading vocabulary."""

import pytest

from job_extractor.text import (
    classify_heading,
    dedupe_requirements,
    is_job_relevant_content,
    is_page_chrome,
    is_ui_element,
    matches_synonyms,
    normalize_heading,
    strip_html_tags,
)
from job_extractor.vocabulary import LEGAL_ENTITY_PATTERN, REQUIREMENTS_SYNONYMS, SectionBucket


class TestStripHtmlTags:
    def test_removes_tags_and_decodes_entities(self):
        assert strip_html_tags("<p>Hallo &amp; willkommen</p>") == "Hallo & willkommen"

    def test_non_breaking_space_becomes_space(self):
        assert strip_html_tags("Erfahrung&nbsp;mit <b>Python</b>") == "Erfahrung mit Python"

    def test_blanks_interface_phrases(self):
        assert strip_html_tags("Bitte einloggen um fortzufahren") == "Bitte um fortzufahren"

    def test_keeps_words_that_merely_contain_ui_terms(self):
        assert strip_html_tags("Weiterbildung im Backend") == "Weiterbildung im Backend"

    def test_keeps_navigation_words_inside_prose(self):
        assert strip_html_tags("Erfahrung mit Next.js und React") == "Erfahrung mit Next.js und React"
        assert strip_html_tags("Back-End Entwicklung mit Filter-Logik") == (
            "Back-End Entwicklung mit Filter-Logik"
        )

    def test_blanks_standalone_navigation(self):
        assert strip_html_tags("Weiter") == ""
        assert strip_html_tags("Zurück zur Übersicht") == "zur Übersicht"

    def test_empty_input(self):
        assert strip_html_tags("") == ""
        assert strip_html_tags(None) == ""

    @pytest.mark.parametrize(
        "sample",
        [
            "<p>Hallo &amp; willkommen</p>",
            "&amp;lt;b&amp;gt;Text",
            "vor <i>3</i> Tagen veröffentlicht",
            "Login  \n\n Weiter zum Profil",
            "Seite 2",
            "   ",
            "Teilen Sie diese Stelle",
            "<div><ul><li>Punkt</li></ul></div>",
        ],
    )
    def test_idempotent(self, sample):
        once = strip_html_tags(sample)
        assert strip_html_tags(once) == once


class TestRelevance:
    def test_rejects_short_text(self):
        assert not is_job_relevant_content("kurz")
        assert not is_job_relevant_content("Gehalt: 50.000")

    def test_rejects_consent_text_regardless_of_length(self):
        assert not is_job_relevant_content(
            "Cookie-Einstellungen für eine bessere Erfahrung mit unserer Website"
        )
        assert not is_job_relevant_content("Datenschutzhinweise zu Ihrer Bewerbung und Erfahrung")
        assert not is_job_relevant_content("Mehrjährige Erfahrung " * 10 + "cookiebasierte Analyse")

    def test_accepts_requirement_with_indicator(self):
        assert is_job_relevant_content("Erfahrung mit Java")
        assert is_job_relevant_content("Mindestens 3 Jahre Erfahrung in der Softwareentwicklung")

    def test_accepts_prose_with_enough_words(self):
        assert is_job_relevant_content("Wir freuen uns auf dich und dein Team")

    def test_accepts_requirement_naming_a_framework(self):
        assert is_job_relevant_content("Erfahrung mit Next.js und React")

    def test_page_chrome(self):
        assert is_page_chrome("Mit der Nutzung stimmen Sie der Datenschutzerklärung zu.")
        assert is_page_chrome("Stelle teilen")
        assert not is_page_chrome("Wissen teilen und gemeinsam wachsen im Team")

    def test_rejects_overlong_text(self):
        assert not is_job_relevant_content("Erfahrung " * 120)

    def test_dedupe_keeps_first_seen_order(self):
        items = [
            "Erfahrung mit Python und Django",
            "Sehr gute Deutschkenntnisse",
            "Erfahrung mit Python und Django",
            "Login",
        ]
        assert dedupe_requirements(items, 10) == [
            "Erfahrung mit Python und Django",
            "Sehr gute Deutschkenntnisse",
        ]
        assert dedupe_requirements(items, 1) == ["Erfahrung mit Python und Django"]


class TestHeadings:
    def test_normalize_heading_folds_diacritics_and_punctuation(self):
        assert normalize_heading("Tätigkeiten & Größe!") == "tatigkeiten grosse"

    @pytest.mark.parametrize("heading", ["Anforderungen", "anforderungen", "ANFORDERUNGEN"])
    def test_synonym_match_is_case_insensitive(self, heading):
        assert matches_synonyms(heading, REQUIREMENTS_SYNONYMS)

    def test_ui_heading_never_matches(self):
        assert not matches_synonyms("Anforderungen teilen", REQUIREMENTS_SYNONYMS)

    @pytest.mark.parametrize(
        ("heading", "bucket"),
        [
            ("Dein Profil", SectionBucket.REQUIREMENTS),
            ("Was Sie mitbringen:", SectionBucket.REQUIREMENTS),
            ("Ihre Tätigkeiten", SectionBucket.RESPONSIBILITIES),
            ("Was wir bieten", SectionBucket.BENEFITS),
            ("Vertragsart", SectionBucket.CONTRACT),
            ("Ihre Bewerbung", SectionBucket.APPLICATION),
        ],
    )
    def test_classify_heading(self, heading, bucket):
        assert classify_heading(heading) is bucket

    def test_unknown_heading(self):
        assert classify_heading("Über uns") is None


class TestUiElement:
    @pytest.mark.parametrize("text", ["Login", "12", "Job speichern", "Auf LinkedIn ansehen"])
    def test_interface_strings(self, text):
        assert is_ui_element(text)

    def test_real_content(self):
        assert not is_ui_element("Musterstraße 12, 80331 München")


@pytest.mark.parametrize(
    "line",
    ["Beispiel Analytics GmbH", "Stadtwerke Beispiel AG", "Acme Inc.", "Verein Beispiel e.V."],
)
def test_legal_form_closes_company_line(line):
    assert LEGAL_ENTITY_PATTERN.search(line)


@pytest.mark.parametrize(
    "line", ["Die AG ist unser wichtigster Kunde", "Unsere Company Culture lebt vom Austausch"]
)
def test_legal_form_inside_prose_does_not_count(line):
    assert not LEGAL_ENTITY_PATTERN.search(line)


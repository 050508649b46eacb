"""Tests for schema.org JobPosting parsing."""

from conftest import json_ld_page

from job_extractor.jsonld import parse_json_ld


class TestParseJsonLd:
    def test_maps_structured_posting(self):
        html = json_ld_page(
            {
                "@context": "https://schema.org",
                "@type": "JobPosting",
                "title": "Backend Entwickler (m/w/d)",
                "hiringOrganization": {"@type": "Organization", "name": "Acme GmbH"},
                "jobLocation": {
                    "@type": "Place",
                    "address": {
                        "@type": "PostalAddress",
                        "streetAddress": "Musterstraße 12",
                        "addressLocality": "München",
                        "postalCode": "80331",
                        "addressCountry": "DE",
                    },
                },
                "employmentType": ["FULL_TIME", "PART_TIME"],
                "description": "<p>Wir suchen <b>Verstärkung</b> für unser Team.</p>",
                "qualifications": [
                    "Erfahrung mit Python und Django",
                    {"@type": "EducationalOccupationalCredential", "name": "Abgeschlossenes Studium der Informatik"},
                ],
                "experienceRequirements": "Mindestens drei Jahre Berufserfahrung",
                "skills": ["Python", {"name": "Docker"}],
            }
        )

        fields = parse_json_ld(html)

        assert fields["jobtitel"] == "Backend Entwickler (m/w/d)"
        assert fields["arbeitgeber"] == "Acme GmbH"
        assert fields["ort"] == "München DE"
        assert fields["plz"] == "80331"
        assert fields["adresse"] == "Musterstraße 12"
        assert fields["vertrag"] == "FULL_TIME, PART_TIME"
        assert fields["beschreibung"] == "Wir suchen Verstärkung für unser Team."
        assert fields["anforderungen"] == [
            "Erfahrung mit Python und Django",
            "Abgeschlossenes Studium der Informatik",
            "Mindestens drei Jahre Berufserfahrung",
            "Python",
            "Docker",
        ]

    def test_finds_posting_inside_list(self):
        html = json_ld_page(
            [
                {"@type": "Organization", "name": "Acme"},
                {"@type": "JobPosting", "title": "Koch (m/w/d)"},
            ]
        )
        assert parse_json_ld(html) == {"jobtitel": "Koch (m/w/d)"}

    def test_finds_posting_inside_graph_with_type_list(self):
        html = json_ld_page(
            {
                "@context": "https://schema.org",
                "@graph": [
                    {"@type": "WebPage", "name": "Karriere"},
                    {
                        "@type": ["JobPosting"],
                        "title": "Lagerlogistiker (m/w/d)",
                        "hiringOrganization": "Spedition Beispiel GmbH",
                        "jobLocation": [{"address": "Hamburg"}],
                    },
                ],
            }
        )
        fields = parse_json_ld(html)
        assert fields["jobtitel"] == "Lagerlogistiker (m/w/d)"
        assert fields["arbeitgeber"] == "Spedition Beispiel GmbH"
        assert fields["ort"] == "Hamburg"

    def test_malformed_block_is_skipped(self):
        html = (
            "<html><head>"
            '<script type="application/ld+json">{"@type": "JobPosting", "title": }</script>'
            '<script type="application/ld+json">{"@type": "JobPosting", "title": "Pflegefachkraft"}</script>'
            "</head><body></body></html>"
        )
        assert parse_json_ld(html) == {"jobtitel": "Pflegefachkraft"}

    def test_no_posting(self):
        assert parse_json_ld(json_ld_page({"@type": "Organization", "name": "Acme"})) == {}
        assert parse_json_ld("<html><body><p>Kein JSON-LD</p></body></html>") == {}

    def test_description_is_truncated(self):
        html = json_ld_page({"@type": "JobPosting", "description": "Aufgabe " * 300})
        assert len(parse_json_ld(html)["beschreibung"]) == 1000

"""Tests for the Akoma Ntoso statute extractor."""

from kenya_law.ingest.catalog import get_act
from kenya_law.parsing.akn_parser import (
    extract_act,
    extract_chapter,
    extract_section_number,
    extract_section_title,
    parse_kenya_law_html,
    strip_html,
)

DPA = get_act("data-protection-act-2019")
CONSTITUTION = get_act("constitution-of-kenya-2010")


def _section(section_id, heading, body):
    return (f'<section class="akn-section" id="{section_id}" data-eid="{section_id}">'
            f'<h3>{heading}</h3>{body}</section>')


class TestHeadingHelpers:
    def test_section_number_with_letter_suffix(self):
        assert extract_section_number("25A. Data protection impact assessment") == "25A"

    def test_section_number_requires_period_and_space(self):
        assert extract_section_number("27.") is None
        assert extract_section_number("Schedule") is None

    def test_section_title_strips_number(self):
        assert extract_section_title("25. Principles of data protection") == "Principles of data protection"

    def test_chapter_from_id(self):
        assert extract_chapter("part_III__sec_25") == "Part III"
        assert extract_chapter("chp_FOUR__part_1__art_31") == "Chapter FOUR"
        assert extract_chapter("sec_75") is None

    def test_strip_html_decodes_entities_and_collapses_space(self):
        html = "<p>Personal&nbsp;data &amp; <b>privacy</b>\n\n   &lt;rights&gt; &quot;x&quot; &#39;y&#39;</p>"
        assert strip_html(html) == "Personal data & privacy <rights> \"x\" 'y'"


class TestExtractAct:
    def test_section_25_fields(self, dpa_html):
        act = parse_kenya_law_html(dpa_html, DPA)
        by_ref = {p.provision_ref: p for p in act.provisions}
        s25 = by_ref["s25"]
        assert s25.section == "25"
        assert s25.title == "Principles of data protection"
        assert s25.chapter == "Part III"
        assert "processed lawfully, fairly" in s25.content
        assert "<" not in s25.content

    def test_provisions_keep_document_order(self, dpa_html):
        act = parse_kenya_law_html(dpa_html, DPA)
        assert [p.provision_ref for p in act.provisions] == ["s1", "s2", "s3", "s25", "s25A", "s26", "s75"]

    def test_section_outside_part_has_no_chapter(self, dpa_html):
        act = parse_kenya_law_html(dpa_html, DPA)
        assert act.provisions[-1].provision_ref == "s75"
        assert act.provisions[-1].chapter is None

    def test_unusable_sections_are_skipped_not_raised(self, dpa_html):
        result = extract_act(dpa_html, DPA)
        skipped = {s.element_id: s.reason for s in result.skipped}
        assert skipped["part_III__sec_27"] == "unnumbered heading"
        assert skipped["part_III__sec_28"] == "no heading"
        assert skipped["part_III__sec_29"] == "empty content"
        assert len(result.act.provisions) == 7

    def test_definitions_from_interpretation_section(self, dpa_html):
        act = parse_kenya_law_html(dpa_html, DPA)
        terms = [d.term for d in act.definitions]
        assert terms == ["consent", "data subject", "personal data", "processing"]
        assert all(d.source_provision == "s2" for d in act.definitions)
        consent = act.definitions[0]
        assert consent.definition.startswith("any manifestation")
        assert not consent.definition.endswith(";")

    def test_metadata_copied_from_catalog(self, dpa_html):
        act = parse_kenya_law_html(dpa_html, DPA)
        assert act.id == DPA.id
        assert act.type == "statute"
        assert act.short_name == "DPA 2019"
        assert act.status == "in_force"
        assert act.url == DPA.url

    def test_article_prefix_for_constitution(self):
        html = _section("chp_FOUR__part_1__art_31", "31. Privacy",
                        '<span class="akn-p">Every person has the right to privacy.</span>')
        act = parse_kenya_law_html(html, CONSTITUTION)
        assert len(act.provisions) == 1
        art = act.provisions[0]
        assert art.provision_ref == "art31"
        assert art.chapter == "Chapter FOUR"

    def test_content_truncated_at_cap(self):
        body = '<span class="akn-p">' + ("word " * 4000) + '</span>'
        html = _section("sec_1", "1. Long section", body)
        act = parse_kenya_law_html(html, DPA)
        assert len(act.provisions[0].content) == 12000
        short = extract_act(html, DPA, max_chars=50).act
        assert short.provisions[0].content == act.provisions[0].content[:50]

    def test_duplicate_reference_kept_once(self):
        html = (_section("sec_5", "5. First", '<span class="akn-p">The first version of section five.</span>')
                + _section("sec_5_dup", "5. Second", '<span class="akn-p">A repeated section five.</span>'))
        result = extract_act(html, DPA)
        assert [p.title for p in result.act.provisions] == ["First"]
        assert result.skipped[0].reason == "duplicate provision s5"

    def test_definition_section_detected_by_title_keyword(self):
        body = '<span class="akn-p">"regulator" includes the Authority established under section 3;</span>'
        html = _section("sec_2", "2. Definitions", body)
        act = parse_kenya_law_html(html, DPA)
        assert [(d.term, d.source_provision) for d in act.definitions] == [("regulator", "s2")]

    def test_no_definitions_outside_interpretation(self):
        body = '<span class="akn-p">"regulator" means the Authority established under section 3;</span>'
        html = _section("sec_4", "4. Establishment", body)
        assert parse_kenya_law_html(html, DPA).definitions == []

    def test_empty_markup(self):
        result = extract_act("", DPA)
        assert result.act.provisions == []
        assert result.skipped == []

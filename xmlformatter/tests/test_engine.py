#!/usr/bin/env python3
"""
Tests for the formatter engine.
Covers the well-formedness check, tokenizer, indentation engine, minifier
and the validate/format/minify façade.
"""

import os
import sys
import unittest

# Ensure project root is on path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from xmlformatter.engine import (
    is_well_formed, check_well_formed, split_into_lines, indent, classify_line,
    minify, validate, format_document, minify_document, run_operation,
)
from xmlformatter.engine.indenter import iter_depths
from xmlformatter.models import ErrorKind, LineKind, Operation

SAMPLE_NESTED = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<root>\n'
    '  <item id="1">x</item>\n'
    '  <item id="2"/>\n'
    '  <!-- note -->\n'
    '  <group><leaf/><leaf></leaf></group>\n'
    '</root>'
)

SAMPLE_NESTED_FORMATTED = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<root>\n'
    '  <item id="1">x</item>\n'
    '  <item id="2"/>\n'
    '  <!-- note -->\n'
    '  <group>\n'
    '    <leaf/>\n'
    '    <leaf></leaf>\n'
    '  </group>\n'
    '</root>'
)

WELL_FORMED = [
    "<a><b>1</b><c>2</c></a>",
    "<a/>",
    "<a><b></b></a>",
    SAMPLE_NESTED,
    '<a xmlns:x="urn:x"><x:b attr="v">t</x:b><x:c/></a>',
    "<doc>\n\t<p>some   spaced\n text</p>\n\t<p>more</p>\n</doc>",
    "<outer><mid><inner>deep</inner></mid><mid/></outer>",
]

MALFORMED = [
    "not xml at all",
    "",
    "   \n\t ",
    "<a><b></a></b>",
    "<a>&</a>",
    "<a/><b/>",
    "<a>",
]


class TestWellFormedness(unittest.TestCase):
    """Well-formedness checker."""

    def test_accepts_well_formed_documents(self):
        for doc in WELL_FORMED:
            self.assertTrue(is_well_formed(doc), doc)

    def test_rejects_malformed_documents(self):
        for doc in MALFORMED:
            self.assertFalse(is_well_formed(doc), repr(doc))

    def test_diagnostic_carries_position(self):
        err = check_well_formed("<a>\n<b></a>")
        self.assertIsNotNone(err)
        self.assertEqual(err.kind, ErrorKind.NOT_WELL_FORMED)
        self.assertEqual(err.line, 2)
        self.assertTrue(err.detail)

    def test_well_formed_has_no_diagnostic(self):
        self.assertIsNone(check_well_formed("<a/>"))

    def test_unencodable_text_is_not_an_exception(self):
        self.assertFalse(is_well_formed("<a>\ud800</a>"))


class TestTokenizer(unittest.TestCase):
    """Tag-boundary tokenizer."""

    def test_breaks_adjacent_tags(self):
        self.assertEqual(
            split_into_lines("<a><b>1</b><c>2</c></a>"),
            ["<a>", "<b>1</b>", "<c>2</c>", "</a>"],
        )

    def test_keeps_empty_element_together(self):
        self.assertEqual(split_into_lines("<a><b></b></a>"), ["<a>", "<b></b>", "</a>"])

    def test_empty_element_with_attributes(self):
        self.assertEqual(
            split_into_lines('<a><b k="v"></b></a>'),
            ["<a>", '<b k="v"></b>', "</a>"],
        )

    def test_different_names_are_split(self):
        self.assertEqual(split_into_lines("<a><b></c></a>"), ["<a>", "<b>", "</c>", "</a>"])

    def test_self_closing_siblings(self):
        self.assertEqual(split_into_lines("<r><a/><b/></r>"), ["<r>", "<a/>", "<b/>", "</r>"])

    def test_self_closing_child_with_parent_name_is_split(self):
        self.assertEqual(
            split_into_lines('<node><node id="1"/></node>'),
            ["<node>", '<node id="1"/>', "</node>"],
        )
        self.assertEqual(split_into_lines("<a><a /></a>"), ["<a>", "<a />", "</a>"])

    def test_text_between_tags_is_not_split(self):
        self.assertEqual(split_into_lines("<p>a <b>bold</b> c</p>"), ["<p>a <b>bold</b> c</p>"])

    def test_existing_newlines_are_split_on(self):
        self.assertEqual(split_into_lines("<a>\n  <b/>\n</a>"), ["<a>", "  <b/>", "</a>"])

    def test_cdata_boundary_is_split_too(self):
        lines = split_into_lines("<a><![CDATA[x><y]]></a>")
        self.assertEqual(lines, ["<a>", "<![CDATA[x>", "<y]]>", "</a>"])

    def test_order_and_content_preserved(self):
        for doc in WELL_FORMED:
            self.assertEqual("".join(split_into_lines(doc)), doc.replace("\n", ""))


class TestLineClassification(unittest.TestCase):
    """Four-way line classification."""

    def test_leaf(self):
        self.assertEqual(classify_line("<b>1</b>", 0), LineKind.LEAF)
        self.assertEqual(classify_line("<b></b>", 3), LineKind.LEAF)

    def test_close_only_when_depth_positive(self):
        self.assertEqual(classify_line("</a>", 1), LineKind.CLOSE)
        self.assertEqual(classify_line("</a>", 0), LineKind.OTHER)

    def test_open(self):
        self.assertEqual(classify_line("<a>", 0), LineKind.OPEN)
        self.assertEqual(classify_line('<item id="1">', 2), LineKind.OPEN)
        self.assertEqual(classify_line("<p>text", 0), LineKind.OPEN)

    def test_other(self):
        for line in ("<a/>", '<a k="v"/>', "text", '<?xml version="1.0"?>',
                     "<!-- c -->", "<!DOCTYPE a>", ""):
            self.assertEqual(classify_line(line, 1), LineKind.OTHER, line)

    def test_leaf_wins_over_open(self):
        self.assertEqual(classify_line("<p>hello</p>", 0), LineKind.LEAF)


class TestIndentationEngine(unittest.TestCase):
    """Depth tracking and emission."""

    def test_nested_output(self):
        lines = ["<a>", "<b>", "<c/>", "</b>", "</a>"]
        self.assertEqual(indent(lines, 2), "<a>\n  <b>\n    <c/>\n  </b>\n</a>")

    def test_zero_width(self):
        self.assertEqual(indent(["<a>", "<b/>", "</a>"], 0), "<a>\n<b/>\n</a>")

    def test_existing_indentation_is_replaced(self):
        self.assertEqual(indent(["<a>", "        <b/>", "   </a>"], 4), "<a>\n    <b/>\n</a>")

    def test_excess_close_does_not_go_negative(self):
        lines = ["</a>", "</b>", "<c>", "</c>", "</d>", "<e>", "<f/>"]
        depths = [d for d, _ in iter_depths(lines)]
        self.assertEqual(depths, [0, 0, 0, 0, 0, 0, 1])
        self.assertEqual(indent(lines, 2), "</a>\n</b>\n<c>\n</c>\n</d>\n<e>\n  <f/>")

    def test_depth_never_negative_on_junk(self):
        junk = ["</x>"] * 5 + ["<y>", "</y>", "</y>", "text</z>", "<", ">", "</"]
        for depth, _ in iter_depths(junk):
            self.assertGreaterEqual(depth, 0)

    def test_negative_width_rejected(self):
        with self.assertRaises(ValueError):
            indent(["<a/>"], -1)

    def test_non_integer_width_rejected(self):
        for width in (2.0, "2", True):
            with self.assertRaises(ValueError):
                indent(["<a/>"], width)

    def test_large_width_accepted(self):
        self.assertEqual(indent(["<a>", "<b/>", "</a>"], 3), "<a>\n   <b/>\n</a>")


class TestMinifier(unittest.TestCase):
    """Whitespace collapsing."""

    def test_already_minimal(self):
        self.assertEqual(minify("<a><b>1</b><c>2</c></a>"), "<a><b>1</b><c>2</c></a>")

    def test_removes_inter_tag_whitespace(self):
        self.assertEqual(minify("<a>\n  <b>1</b>\n  <c/>\n</a>\n"), "<a><b>1</b><c/></a>")

    def test_collapses_text_whitespace(self):
        self.assertEqual(minify("<a>  hello \n\t world </a>"), "<a> hello world </a>")

    def test_collapses_attribute_whitespace(self):
        self.assertEqual(minify('<a   k="v"\n   j="w"/>'), '<a k="v" j="w"/>')


class TestFacade(unittest.TestCase):
    """validate / format_document / minify_document."""

    def test_scenario_nested_width_two(self):
        result = format_document("<a><b>1</b><c>2</c></a>", 2)
        self.assertTrue(result.is_success)
        self.assertEqual(result.output, "<a>\n  <b>1</b>\n  <c>2</c>\n</a>")
        self.assertEqual(result.operation, Operation.FORMAT)
        self.assertEqual(result.indent_width, 2)

    def test_scenario_minify_unchanged(self):
        result = minify_document("<a><b>1</b><c>2</c></a>")
        self.assertTrue(result.is_success)
        self.assertEqual(result.output, "<a><b>1</b><c>2</c></a>")

    def test_scenario_not_xml(self):
        v = validate("not xml at all")
        f = format_document("not xml at all", 2)
        self.assertFalse(v.is_success)
        self.assertFalse(f.is_success)
        self.assertEqual(v.error.kind, ErrorKind.NOT_WELL_FORMED)
        self.assertEqual(f.error.kind, ErrorKind.NOT_WELL_FORMED)
        self.assertEqual(v.error.message, f.error.message)
        self.assertIsNone(f.output)

    def test_scenario_self_closing(self):
        for width in (0, 2, 4, 8):
            self.assertEqual(format_document("<a/>", width).output, "<a/>")

    def test_scenario_empty_child_width_four(self):
        result = format_document("<a><b></b></a>", 4)
        self.assertEqual(result.output, "<a>\n    <b></b>\n</a>")

    def test_recursive_self_closing_child(self):
        result = format_document('<node><node id="1"/></node>', 2)
        self.assertEqual(result.output, '<node>\n  <node id="1"/>\n</node>')
        self.assertEqual(format_document("<a><a /></a>", 2).output, "<a>\n  <a />\n</a>")

    def test_mixed_document(self):
        self.assertEqual(format_document(SAMPLE_NESTED, 2).output, SAMPLE_NESTED_FORMATTED)

    def test_validate_has_no_output(self):
        result = validate("<a/>")
        self.assertTrue(result.is_success)
        self.assertIsNone(result.output)
        self.assertEqual(result.status, "PASS")

    def test_minify_fails_like_format(self):
        result = minify_document("<a>")
        self.assertFalse(result.is_success)
        self.assertIsNone(result.output)
        self.assertEqual(result.status, "FAIL")

    def test_source_recorded(self):
        self.assertEqual(validate("<a/>", source="doc.xml").source, "doc.xml")

    def test_run_operation_dispatch(self):
        doc = "<a><b/></a>"
        self.assertIsNone(run_operation(Operation.VALIDATE, doc).output)
        self.assertEqual(run_operation(Operation.FORMAT, doc, 4).output, "<a>\n    <b/>\n</a>")
        self.assertEqual(run_operation(Operation.MINIFY, doc).output, doc)

    def test_negative_width_raises_even_for_bad_input(self):
        with self.assertRaises(ValueError):
            format_document("not xml", -2)

    def test_repeated_calls_are_identical(self):
        first = format_document(SAMPLE_NESTED, 4).output
        self.assertEqual(format_document(SAMPLE_NESTED, 4).output, first)

    def test_formatting_formatted_output_is_stable(self):
        once = format_document(SAMPLE_NESTED, 2).output
        self.assertEqual(format_document(once, 2).output, once)


class TestProperties(unittest.TestCase):
    """Properties that hold across many documents."""

    @staticmethod
    def _squash(text):
        return "".join(text.split())

    def test_minify_idempotent(self):
        for doc in WELL_FORMED:
            once = minify_document(doc).output
            self.assertEqual(minify_document(once).output, once, doc)

    def test_indent_width_scaling(self):
        for doc in WELL_FORMED:
            narrow = format_document(doc, 2).output.split("\n")
            wide = format_document(doc, 4).output.split("\n")
            self.assertEqual(len(narrow), len(wide), doc)
            for n, w in zip(narrow, wide):
                n_lead = len(n) - len(n.lstrip(" "))
                w_lead = len(w) - len(w.lstrip(" "))
                self.assertEqual(n.lstrip(" "), w.lstrip(" "))
                self.assertEqual(w_lead, 2 * n_lead)

    def test_content_preserved(self):
        for doc in WELL_FORMED:
            minified = self._squash(minify_document(doc).output)
            for width in (0, 2, 4, 8):
                self.assertEqual(self._squash(format_document(doc, width).output), minified, doc)

    def test_validation_agreement(self):
        for doc in WELL_FORMED + MALFORMED:
            ok = validate(doc).is_success
            for width in (0, 2, 8):
                self.assertEqual(format_document(doc, width).is_success, ok, repr(doc))
            self.assertEqual(minify_document(doc).is_success, ok, repr(doc))


if __name__ == "__main__":
    unittest.main()

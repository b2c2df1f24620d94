import pytest

from domain.extraction import (
    clean_html_lines,
    extract_html_from_response,
    parse_json_from_text,
    strip_meta_commentary,
)
from exceptions import ExtractionError


class TestParseJsonFromText:
    def test_fenced_block_is_parsed(self):
        text = 'Sure, here you go:\n```json\n{"greeting": "Hi Jane"}\n```\nEnjoy!'
        assert parse_json_from_text(text) == {"greeting": "Hi Jane"}

    def test_fenced_array_is_parsed(self):
        text = '```json\n["Renew today", "Your quote is ready", "Save 15%"]\n```'
        assert parse_json_from_text(text) == [
            "Renew today",
            "Your quote is ready",
            "Save 15%",
        ]

    def test_fenced_empty_array(self):
        assert parse_json_from_text("No cancellations found.\n```json\n[]\n```") == []

    def test_fenced_block_wins_over_bare_object(self):
        text = '{"ignored": true}\n```json\n{"used": 1}\n```'
        assert parse_json_from_text(text) == {"used": 1}

    def test_bare_object_inside_prose(self):
        text = 'The data is {"policyNumber": "HO-123", "premium": "$1,200"} as requested.'
        assert parse_json_from_text(text) == {"policyNumber": "HO-123", "premium": "$1,200"}

    def test_nested_object_spans_first_to_last_brace(self):
        text = 'Result: {"holder": {"name": "Ann"}, "items": [1, 2]} done'
        assert parse_json_from_text(text) == {"holder": {"name": "Ann"}, "items": [1, 2]}

    def test_two_separate_objects_do_not_parse(self):
        with pytest.raises(ExtractionError, match="No valid JSON found"):
            parse_json_from_text('{"a": 1} and also {"b": 2}')

    def test_no_braces_and_no_fence_fails(self):
        with pytest.raises(ExtractionError, match="No valid JSON found"):
            parse_json_from_text("I could not read the document, sorry.")

    def test_bare_array_without_fence_fails(self):
        with pytest.raises(ExtractionError):
            parse_json_from_text('["a", "b", "c"]')

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_constants_fail(self, constant):
        with pytest.raises(ExtractionError, match="No valid JSON found"):
            parse_json_from_text(f'{{"premium": {constant}}}')

    def test_fenced_nan_fails(self):
        with pytest.raises(ExtractionError):
            parse_json_from_text('```json\n[1, NaN]\n```')

    def test_invalid_json_in_fence_fails(self):
        with pytest.raises(ExtractionError) as exc_info:
            parse_json_from_text("```json\n{greeting: 'hi'}\n```")
        assert exc_info.value.cause is not None


class TestExtractHtmlFromResponse:
    def test_fenced_html_block(self):
        text = "Here is the email:\n```html\n  <p>Hello Jane</p>\n```\n* Key improvements: tone"
        assert extract_html_from_response(text) == "<p>Hello Jane</p>"

    def test_fenced_block_wins_over_document(self):
        text = "```html\n<p>A</p>\n```\n<html><body>B</body></html>"
        assert extract_html_from_response(text) == "<p>A</p>"

    def test_full_document_returned_unchanged(self):
        document = "<html>\n<body>\n<h1>Welcome</h1><p>Hi</p>\n</body>\n</html>"
        text = f"Here is your email:\n{document}\n\nLet me know if you need changes."
        assert extract_html_from_response(text) == document

    def test_doctype_is_kept_with_document(self):
        document = "<!DOCTYPE html>\n<HTML><body><p>Hi</p></body></HTML>"
        assert extract_html_from_response(f"Output:\n{document}\n") == document

    def test_table_span(self):
        text = "Sure!\n<table><tr><td>Hi</td></tr></table>\n* Uses a table layout"
        assert extract_html_from_response(text) == "<table><tr><td>Hi</td></tr></table>"

    def test_leading_title_heading_is_stripped(self):
        text = "<h2>Auto Insurance Verification</h2>\n<p>Your coverage is active.</p>"
        assert extract_html_from_response(text) == "<p>Your coverage is active.</p>"

    def test_heading_without_title_words_is_kept(self):
        text = "<h2>Hello Jane</h2>\n<p>Thanks for choosing us.</p>"
        assert extract_html_from_response(text) == text

    def test_only_the_first_heading_is_stripped(self):
        text = "<h1>Renewal Notice</h1><h2>Renewal Notice</h2><p>Body</p>"
        assert extract_html_from_response(text) == "<h2>Renewal Notice</h2><p>Body</p>"

    def test_commentary_lines_are_removed_in_order(self):
        text = "\n".join(
            [
                "<p>Dear Jane,</p>",
                "* Key improvements: clearer call to action",
                "<p>Your policy renews on June 1.</p>",
                "Important: set the date before sending",
                "<p>Thank you.</p>",
            ]
        )
        assert extract_html_from_response(text) == (
            "<p>Dear Jane,</p>\n<p>Your policy renews on June 1.</p>\n<p>Thank you.</p>"
        )

    def test_cleanup_drops_known_prefixes(self):
        text = "\n".join(
            [
                "## Email Body",
                "<p>Hi</p>",
                "Key improvements made:",
                "Before sending, check the links.",
                "Please remember to set the sender name.",
                "<p>Bye</p>",
            ]
        )
        assert clean_html_lines(text) == "<p>Hi</p>\n<p>Bye</p>"

    def test_unclosed_fence_markers_are_removed(self):
        assert extract_html_from_response("```html\n<p>Hi</p>") == "<p>Hi</p>"


class TestStripMetaCommentary:
    def test_commentary_lines_are_dropped(self):
        text = "\n".join(
            [
                "Here's a friendly explanation:",
                "Your premium went from $1,000 to $1,150 because repair costs rose.",
                "Note: you may want to mention discounts.",
                "We're here to help if you have questions.",
                "Alternatively, you could call the customer.",
            ]
        )
        assert strip_meta_commentary(text) == (
            "Your premium went from $1,000 to $1,150 because repair costs rose.\n"
            "We're here to help if you have questions."
        )

    def test_prefixes_match_case_insensitively_after_trimming(self):
        text = "   TIP: keep it short\nThanks for being a customer.\nSuggestion: add a link"
        assert strip_meta_commentary(text) == "Thanks for being a customer."

    def test_clean_prose_is_only_trimmed(self):
        assert strip_meta_commentary("\n  Rates changed.  \n") == "Rates changed."

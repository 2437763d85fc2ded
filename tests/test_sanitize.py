"""Tests for the workspace HTML sanitizer."""

from framebase.sanitize import sanitize_workspace_html


class TestSanitizeWorkspaceHtml:

    def test_script_removed_with_content(self):
        result = sanitize_workspace_html("<p>Hello</p><script>alert('x')</script>")
        assert "<script" not in result
        assert "alert" not in result
        assert result == "<p>Hello</p>"

    def test_style_removed_with_content(self):
        assert sanitize_workspace_html("<style>body{}</style><div>x</div>") == "<div>x</div>"

    def test_javascript_href_stripped(self):
        result = sanitize_workspace_html('<a href="javascript:alert(1)">x</a>')
        assert "javascript" not in result
        assert result == "<a>x</a>"

    def test_https_href_preserved(self):
        assert sanitize_workspace_html('<a href="https://x">x</a>') == '<a href="https://x">x</a>'

    def test_mailto_allowed_for_links(self):
        html = '<a href="mailto:hi@example.com">mail</a>'
        assert sanitize_workspace_html(html) == html

    def test_img_src_rejects_data_uri(self):
        result = sanitize_workspace_html('<img src="data:image/png;base64,AAAA" alt="x">')
        assert "data:" not in result
        assert 'alt="x"' in result

    def test_img_src_https(self):
        result = sanitize_workspace_html('<img src="https://cdn.example/a.png" alt="logo">')
        assert 'src="https://cdn.example/a.png"' in result

    def test_event_handlers_dropped(self):
        result = sanitize_workspace_html('<button type="button" onclick="steal()">Go</button>')
        assert result == '<button type="button">Go</button>'

    def test_disallowed_tag_unwrapped_not_escaped(self):
        result = sanitize_workspace_html("<table><tr><td>cell</td></tr></table>")
        assert "&lt;" not in result
        assert "cell" in result
        assert "<table" not in result

    def test_global_attributes_kept(self):
        html = '<section class="hero" aria-label="Hero" data-name="hero">x</section>'
        assert sanitize_workspace_html(html) == html

    def test_empty_input(self):
        assert sanitize_workspace_html("") == ""

    def test_nested_discard_tags_drop_everything_inside(self):
        result = sanitize_workspace_html("<div>a<noscript><p>hidden</p></noscript>b</div>")
        assert result == "<div>ab</div>"

    def test_option_text_discarded(self):
        result = sanitize_workspace_html("<form><select><option>One</option></select></form>")
        assert result == "<form></form>"


# ---------------------------------------------------------------------------
# Full documents
# ---------------------------------------------------------------------------

class TestSanitizeDocument:

    def test_document_keeps_shell(self):
        html = "<html><head></head><body><main><p>Hi</p></main></body></html>"
        assert sanitize_workspace_html(html) == html

    def test_document_body_is_cleaned(self):
        result = sanitize_workspace_html(
            "<!DOCTYPE html><html lang=\"en\"><head><title>T</title><script>x()</script></head>"
            "<body onload=\"x()\"><p onclick=\"y()\">ok</p></body></html>"
        )
        assert result == "<html><head>T</head><body><p>ok</p></body></html>"

    def test_body_without_html_tag(self):
        result = sanitize_workspace_html("<body><div>x</div></body>")
        assert result == "<html><head></head><body><div>x</div></body></html>"

    def test_html_without_body_tag(self):
        result = sanitize_workspace_html("<html><section>x</section></html>")
        assert result == "<html><head></head><body><section>x</section></body></html>"


# ---------------------------------------------------------------------------
# Per-tag attributes
# ---------------------------------------------------------------------------

class TestSanitizeAttributes:

    def test_input_attributes(self):
        result = sanitize_workspace_html(
            '<input type="email" name="email" value="a" placeholder="you" onfocus="x()" size="3">'
        )
        assert 'type="email"' in result
        assert 'name="email"' in result
        assert 'value="a"' in result
        assert 'placeholder="you"' in result
        assert "onfocus" not in result
        assert "size" not in result

    def test_input_boolean_attributes(self):
        result = sanitize_workspace_html('<input type="checkbox" checked disabled>')
        assert "checked" in result
        assert "disabled" in result

    def test_textarea_attributes(self):
        result = sanitize_workspace_html(
            '<textarea name="msg" placeholder="Hi" rows="4" cols="20" maxlength="5">x</textarea>'
        )
        assert result == '<textarea name="msg" placeholder="Hi" rows="4" cols="20">x</textarea>'

    def test_form_attributes(self):
        result = sanitize_workspace_html(
            '<form action="https://example.com/s" method="post" target="_blank">x</form>'
        )
        assert result == '<form action="https://example.com/s" method="post">x</form>'

    def test_label_for(self):
        html = '<label for="email" class="lbl">Email</label>'
        assert sanitize_workspace_html(html) == html

    def test_link_target_and_rel(self):
        html = '<a href="https://x" target="_blank" rel="noopener">x</a>'
        assert sanitize_workspace_html(html) == html

    def test_img_relative_src_kept(self):
        result = sanitize_workspace_html('<img src="/assets/logo.png" width="10" height="20">')
        assert 'src="/assets/logo.png"' in result
        assert 'width="10"' in result
        assert 'height="20"' in result

    def test_img_mailto_src_rejected(self):
        result = sanitize_workspace_html('<img src="mailto:a@b.c" alt="x">')
        assert "src" not in result

    def test_attribute_not_allowed_on_other_tags(self):
        assert sanitize_workspace_html('<div href="https://x" name="n">x</div>') == "<div>x</div>"

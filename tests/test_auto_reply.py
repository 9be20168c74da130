from contactform.core.auto_reply import AutoReplyBranding, build_auto_reply_html


def test_renders_visitor_name_and_subject():
    html = build_auto_reply_html("Jo Smith", "Project enquiry", AutoReplyBranding(owner_name="Ada Lovelace"))

    assert "Hi <strong>Jo Smith</strong>" in html
    assert '"Project enquiry"' in html
    assert "Jo's inbox" in html
    assert ">AL<" in html


def test_missing_subject_falls_back():
    html = build_auto_reply_html("Jo", "", AutoReplyBranding(owner_name="Ada"))

    assert '"your message"' in html


def test_interpolated_values_are_escaped():
    html = build_auto_reply_html("<script>x</script>", "a & b", AutoReplyBranding(owner_name="Ada"))

    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "a &amp; b" in html


def test_social_links_only_when_configured():
    plain = build_auto_reply_html("Jo", None, AutoReplyBranding(owner_name="Ada"))
    linked = build_auto_reply_html(
        "Jo", None,
        AutoReplyBranding(owner_name="Ada", linkedin_url="https://linkedin.com/in/ada", site_url="https://ada.dev"),
    )

    assert "Connect with me" not in plain
    assert "https://linkedin.com/in/ada" in linked
    assert "WhatsApp" not in linked
    assert "https://ada.dev" in linked

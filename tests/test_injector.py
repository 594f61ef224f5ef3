from html2scorm.config import RUNTIME_MARKER
from html2scorm.injector import RUNTIME_SCRIPT, inject, runtime_script


def test_appends_when_no_body_close():
    html = "<p>Fragment without a body tag</p>"
    out = inject(html)
    assert out == html + runtime_script()
    assert out.count(RUNTIME_MARKER) == 1


def test_inserts_before_first_body_close_only():
    html = "<html><body>one</body><!-- </body> --></html>"
    out = inject(html)
    assert out.count("</body>") == html.count("</body>")
    assert out.index(RUNTIME_MARKER) < out.index("</body>")
    assert out == "<html><body>one" + RUNTIME_SCRIPT + "</body><!-- </body> --></html>"


def test_body_match_is_case_sensitive():
    html = "<HTML><BODY>x</BODY></HTML>"
    assert inject(html) == html + RUNTIME_SCRIPT


def test_empty_input():
    assert inject("") == RUNTIME_SCRIPT


def test_script_speaks_scorm_12():
    script = runtime_script()
    for call in (
        'LMSInitialize", ""',
        'LMSGetValue", "cmi.core.lesson_status"',
        'LMSCommit", ""',
        'LMSFinish", ""',
    ):
        assert call in script
    assert '"incomplete"' in script
    assert '"completed"' in script
    assert "var MAX_PARENT_HOPS = 30;" in script
    assert "window.opener" in script
    assert "SCORM_AUTO_COMPLETE" in script
    assert "$" not in script

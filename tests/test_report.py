from qr_phishing_detector import (
    RiskAssessment, analyse_url, escape_attr, escape_html, render_html, render_page, render_text,
)


def test_escape_html_content_rules():
    assert escape_html('<a href="x">&\'</a>') == '&lt;a href="x"&gt;&amp;\'&lt;/a&gt;'


def test_escape_attr_value_rules():
    assert escape_attr('a"b\'c<d>&') == 'a&quot;b&#x27;c&lt;d>&amp;'


def test_text_report_with_indicators():
    a = analyse_url('http://192.168.1.50/login/update?session=999&token=%AF%22%9C')
    assert render_text(a) == (
        'QR Code Phishing Detector Report\n'
        '\n'
        'Analysed URL: http://192.168.1.50/login/update?session=999&token=%AF%22%9C\n'
        'Risk Level: HIGH\n'
        'Score: 75\n'
        '\n'
        'Indicators:\n'
        '- Uses HTTP instead of HTTPS.\n'
        '- IP address used instead of domain name.\n'
        '- Contains sensitive or urgent keywords: login, update.\n'
        '- Encoded characters present in URL.\n'
        '\n'
        'Note: This tool is heuristic and does not guarantee link safety.\n'
    )


def test_text_report_without_indicators():
    a = RiskAssessment('https://www.example.com/', 0, 'LOW', ())
    assert render_text(a) == (
        'QR Code Phishing Detector Report\n\n'
        'Analysed URL: https://www.example.com/\n'
        'Risk Level: LOW\n'
        'Score: 0\n\n'
        'No obvious phishing indicators detected.\n\n'
        'Note: This tool is heuristic and does not guarantee link safety.\n'
    )


def test_text_report_is_reproducible():
    a = analyse_url('http://bit.ly/secure-update-payment?invoice=44882')
    assert render_text(a) == render_text(a)


def test_low_risk_url_is_a_safe_link():
    html = render_html(analyse_url('https://example.com/login?session=123'))
    assert ('<a href="https://example.com/login?session=123" target="_blank" '
            'rel="noopener noreferrer" class="safe-link">') in html
    assert 'risk-low' in html
    assert 'LOW RISK' in html
    assert '<strong>Score:</strong> 20<br>' in html
    assert '<li>Contains sensitive or urgent keywords: login.</li>' in html
    assert 'Treat unexpected links with caution' in html


def test_risky_url_is_not_clickable():
    for url, level in (('http://example.xyz/verify-account', 'MEDIUM'),
                       ('http://192.168.1.50/login/update?session=999&token=%AF%22%9C', 'HIGH')):
        a = analyse_url(url)
        html = render_html(a)
        assert '<a ' not in html
        assert f'<span class="inert-link">{escape_html(a.url)}</span>' in html
        assert f'risk-{level.lower()}' in html
        assert f'{level} RISK' in html
        assert f'<strong>Score:</strong> {a.score}<br>' in html


def test_empty_indicators_fallback():
    html = render_html(RiskAssessment('https://www.example.com/', 0, 'LOW', ()))
    assert 'No obvious phishing indicators detected. This does not guarantee the link is safe.' in html
    assert '<ul>' not in html


def test_markup_is_escaped():
    a = RiskAssessment('https://e.com/"><script>', 0, 'LOW', ('a <b> & c',))
    html = render_html(a)
    assert '<script>' not in html
    assert 'href="https://e.com/&quot;>&lt;script>"' in html
    assert '>https://e.com/"&gt;&lt;script&gt;</a>' in html
    assert '<li>a &lt;b&gt; &amp; c</li>' in html


def test_page_embeds_fragment():
    a = analyse_url('http://bit.ly/secure-update-payment?invoice=44882')
    page = render_page(a)
    assert page.startswith('<!DOCTYPE html>')
    assert render_html(a) in page
    assert 'MEDIUM RISK' in page
